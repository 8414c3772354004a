"""Exceptions raised by repo_exporter."""

from __future__ import annotations


class ExporterError(RuntimeError):
    pass


class LinkParseError(ExporterError):
    """A Link header value is structurally invalid."""


class MalformedLinkError(LinkParseError):
    pass


class MissingRelationError(LinkParseError):
    pass


class FetchError(ExporterError):
    """A (possibly multi-page) fetch was aborted. No partial result exists."""


class TransportError(FetchError):
    pass


class HttpStatusError(FetchError):
    def __init__(self, status: int, url: str, reason: str = "") -> None:
        super().__init__(f"HTTP {status} for {url}" + (f": {reason}" if reason else ""))
        self.status = status
        self.url = url


class BadPaginationError(FetchError):
    pass


class BadPayloadError(FetchError):
    pass


class CloneError(ExporterError):
    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"could not clone {url}: {reason}")
        self.url = url
