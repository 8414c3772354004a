"""Parser for RFC 5988 ``Link`` response headers.

GitHub advertises pagination like this::

    <https://api.github.com/orgs/foo/repos?page=2>; rel="next",
    <https://api.github.com/orgs/foo/repos?page=5>; rel="last"

A header either parses completely or raises; callers never see a partial
:class:`LinkHeader`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import MalformedLinkError, MissingRelationError

LINK_RE = re.compile(r"<(.+)>")
REL_RE = re.compile(r'rel="?([^"]+)"?')


@dataclass(frozen=True)
class LinkItem:
    target_url: str
    relation: str


@dataclass(frozen=True)
class LinkHeader:
    items: tuple[LinkItem, ...]

    def find_relation(self, name: str) -> LinkItem | None:
        """Return the first item whose relation is exactly ``name``."""
        for item in self.items:
            if item.relation == name:
                return item
        return None


def _only_capture(pattern: re.Pattern[str], value: str) -> str | None:
    match = pattern.search(value)
    if match is None:
        return None
    return match.group(1)


def parse_link_item(raw_item: str) -> LinkItem:
    url_part, *attributes = raw_item.split(";")
    url = _only_capture(LINK_RE, url_part)
    if url is None:
        raise MalformedLinkError(f"Unable to parse link target in {raw_item.strip()!r}")

    for attribute in attributes:
        rel = _only_capture(REL_RE, attribute)
        if rel is not None:
            return LinkItem(target_url=url, relation=rel)
    raise MissingRelationError(f"No rel attribute in {raw_item.strip()!r}")


def parse_link_header(raw: str) -> LinkHeader:
    return LinkHeader(items=tuple(parse_link_item(part) for part in raw.split(",")))
