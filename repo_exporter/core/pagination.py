"""Follow GitHub ``Link: <...>; rel="next"`` pagination to the end of a listing."""

from __future__ import annotations

import base64
import http.client
import logging
import urllib.error
import urllib.request
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import TypeVar
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from .constants import GITHUB_API_ACCEPT, HTTP_TIMEOUT_SEC, USER_AGENT
from .errors import (
    BadPaginationError,
    BadPayloadError,
    HttpStatusError,
    LinkParseError,
    TransportError,
)
from .links import parse_link_header
from .types import Credential

logger = logging.getLogger(__name__)

T = TypeVar("T")

PageDecoder = Callable[[bytes], Sequence[T]]


@dataclass(frozen=True)
class PageResponse:
    url: str
    link_header: str | None
    body: bytes


def with_query_params(url: str, params: Mapping[str, object]) -> str:
    """Merge ``params`` into the query string of ``url``; given keys win."""
    if not params:
        return url
    parts = urlsplit(url)
    query = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k not in params]
    query.extend((k, str(v)) for k, v in params.items())
    return urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(query), parts.fragment))


def basic_auth_header(credential: Credential) -> str:
    raw = f"{credential.identity}:{credential.secret}".encode("utf-8")
    return "Basic " + base64.b64encode(raw).decode("ascii")


def http_get(url: str, credential: Credential) -> PageResponse:
    req = urllib.request.Request(url)
    req.add_header("Accept", GITHUB_API_ACCEPT)
    req.add_header("User-Agent", USER_AGENT)
    req.add_header("Authorization", basic_auth_header(credential))
    try:
        with urllib.request.urlopen(req, timeout=HTTP_TIMEOUT_SEC) as resp:
            link = resp.headers.get("Link")
            body = resp.read()
    except urllib.error.HTTPError as e:
        raise HttpStatusError(e.code, url, str(e.reason)) from e
    except (urllib.error.URLError, http.client.HTTPException, OSError) as e:
        raise TransportError(f"GET {url} failed: {e}") from e
    return PageResponse(url=url, link_header=link, body=body)


def fetch_all(
    start_url: str,
    query_params: Mapping[str, object],
    credential: Credential,
    page_decoder: PageDecoder[T],
    progress: Callable[[str], None] | None = None,
) -> list[T]:
    """Collect every item of a paginated listing, page by page.

    Requests are strictly sequential. Items keep page-arrival order, and
    each page keeps its own order. Pagination ends when the latest response
    carries no ``next`` relation, whether or not it has a Link header.

    Any failure aborts the whole call: transport and HTTP errors, a Link
    header that does not parse (:class:`BadPaginationError`) and a body the
    decoder rejects (:class:`BadPayloadError`). Nothing partial is returned.

    The server's cursors are trusted as-is. A ``next`` link that points back
    at an already visited page is followed again, so a cyclic server would
    make this loop forever.
    """
    current_url = with_query_params(start_url, query_params)
    results: list[T] = []
    has_more = True
    while has_more:
        logger.debug("Fetching %s", current_url)
        if progress is not None:
            progress(current_url)
        response = http_get(current_url, credential)

        has_more = False
        if response.link_header is not None:
            try:
                links = parse_link_header(response.link_header)
            except LinkParseError as e:
                raise BadPaginationError(f"Bad Link header from {response.url}: {e}") from e
            next_link = links.find_relation("next")
            if next_link is not None:
                current_url = next_link.target_url
                has_more = True

        try:
            page = page_decoder(response.body)
        except ValueError as e:
            raise BadPayloadError(f"Could not decode page {response.url}: {e}") from e
        results.extend(page)
        logger.debug("Got %d items from %s (%d so far)", len(page), response.url, len(results))
    return results
