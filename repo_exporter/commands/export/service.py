"""Services for the export command."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

import typer

from ...core.constants import API_BASE, DEFAULT_PER_PAGE
from ...core.errors import CloneError
from ...core.git_client import Cloner, GitClient
from ...core.github_client import GitHubClient
from ...core.menu import choose
from ...core.prompts import LineReader, prompt_for_credentials, prompt_for_directory

logger = logging.getLogger(__name__)

BANNER = "Repo Exporter v0.1"


@dataclass
class ExportResult:
    directory: Path
    attempted: int = 0
    succeeded: int = 0
    failed: list[str] = field(default_factory=list)


def export_organization(
    client: GitHubClient,
    cloner: Cloner,
    *,
    read_line: LineReader | None = None,
    use_ssh: bool = False,
) -> ExportResult | None:
    """Pick an organization, pick a directory, clone every repository into it.

    Returns ``None`` when the user cancels at the organization menu. A clone
    that fails is reported and skipped; the remaining ones still run.
    """
    orgs = client.list_organizations()
    if not orgs:
        typer.echo("No organizations found for this account.")
        return None
    typer.echo("Choose a GitHub organization")
    index = choose(orgs, read_line=read_line)
    if index is None:
        typer.echo("Cancelled.")
        return None
    org = orgs[index]

    directory = prompt_for_directory(read_line=read_line)
    repos = client.list_repositories(org.repository_list_endpoint)
    result = ExportResult(directory=directory)
    if not repos:
        typer.echo(f"No repositories found for {org.display_name}.")
        return result

    typer.echo(f"Found {len(repos)} repositories. Cloning to '{directory}'...")
    start = time.time()
    for repo in repos:
        result.attempted += 1
        url = repo.url_for(use_ssh)
        try:
            status = cloner.clone(url, directory)
        except CloneError as e:
            typer.secho(f"[fail] {repo.name}: {e}", err=True)
            result.failed.append(repo.name)
            continue
        if status != 0:
            typer.secho(f"[fail] {repo.name}: git exited with status {status}", err=True)
            result.failed.append(repo.name)
            continue
        typer.echo(f"[ok] {repo.name}")
        result.succeeded += 1
    secs = time.time() - start
    typer.echo(f"Done. {result.succeeded}/{result.attempted} succeeded in {secs:.1f}s.")
    return result


def run_export(
    username: str | None,
    token: str | None,
    *,
    api_base: str = API_BASE,
    per_page: int = DEFAULT_PER_PAGE,
    use_ssh: bool = False,
) -> ExportResult | None:
    typer.echo(BANNER)
    credential = prompt_for_credentials(username=username, token=token)
    logger.debug("Using API %s as %s", api_base, credential.identity)
    client = GitHubClient(
        credential,
        api_base=api_base,
        per_page=per_page,
        progress=lambda url: typer.echo(f"Fetching {url}"),
    )
    return export_organization(client, GitClient(), use_ssh=use_ssh)
