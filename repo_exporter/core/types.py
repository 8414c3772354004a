"""Small types used by repo_exporter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field


class Displayable(Protocol):
    """Anything the selection menu can list."""

    def label(self) -> str: ...


@dataclass(frozen=True)
class Credential:
    """Basic-auth pair (GitHub username + personal access token)."""

    identity: str
    secret: str = field(repr=False)


class Organization(BaseModel):
    """One element of ``GET /user/orgs``."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    display_name: str = Field(alias="login")
    repository_list_endpoint: str = Field(alias="repos_url")
    description: str | None = None

    def label(self) -> str:
        return self.display_name


class Repository(BaseModel):
    """One element of an organization's repositories listing."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    clone_url: str
    ssh_url: str | None = None

    def label(self) -> str:
        return self.name

    def url_for(self, use_ssh: bool = False) -> str:
        if use_ssh and self.ssh_url:
            return self.ssh_url
        return self.clone_url
