"""GitHub API operations used by the exporter."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from pydantic import BaseModel, TypeAdapter

from .constants import API_BASE, DEFAULT_PER_PAGE
from .pagination import PageDecoder, fetch_all
from .types import Credential, Organization, Repository

M = TypeVar("M", bound=BaseModel)


def page_decoder(model: type[M]) -> PageDecoder[M]:
    """JSON array body (raw bytes) -> list of ``model``; raises ``ValueError`` on bad input."""
    return TypeAdapter(list[model]).validate_json


class GitHubClient:
    def __init__(
        self,
        credential: Credential,
        api_base: str = API_BASE,
        per_page: int = DEFAULT_PER_PAGE,
        progress: Callable[[str], None] | None = None,
    ) -> None:
        self.credential = credential
        self.api_base = api_base.rstrip("/")
        self.per_page = per_page
        self.progress = progress

    def list_organizations(self) -> list[Organization]:
        # Normally a single page; a Link header is still honoured.
        return fetch_all(
            f"{self.api_base}/user/orgs",
            {},
            self.credential,
            page_decoder(Organization),
            progress=self.progress,
        )

    def list_repositories(self, list_endpoint: str) -> list[Repository]:
        return fetch_all(
            list_endpoint,
            {"per_page": self.per_page},
            self.credential,
            page_decoder(Repository),
            progress=self.progress,
        )
