"""CLI for exporting every repository of a GitHub organization."""

from __future__ import annotations

import typer

from ...config.settings import get_settings
from ...core.errors import ExporterError
from .service import run_export

app = typer.Typer(add_completion=False)


@app.command()
def export(
    username: str | None = typer.Option(None, "--username", "-u", help="GitHub username"),
    token: str | None = typer.Option(None, "--token", help="GitHub personal access token"),
    api_base: str | None = typer.Option(None, "--api-base", help="GitHub API root URL"),
    per_page: int | None = typer.Option(None, "--per-page", min=1, max=100, help="Repositories per page"),
    ssh: bool | None = typer.Option(None, "--ssh/--https", help="Clone over SSH or HTTPS (default from settings)"),
):
    """Pick one of your organizations and clone all of its repositories."""
    s = get_settings()
    try:
        run_export(
            username or s.github_username,
            token if token is not None else s.github_token,
            api_base=api_base or s.github_api_base,
            per_page=per_page or s.per_page,
            use_ssh=s.use_ssh if ssh is None else ssh,
        )
    except EOFError:
        typer.echo("\nCancelled.")
        raise typer.Exit(code=0)
    except ExporterError as e:
        typer.secho(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
