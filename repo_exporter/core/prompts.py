"""Interactive terminal prompts (credentials, target directory)."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import typer

from .constants import TOKEN_HELP_URL
from .types import Credential

LineReader = Callable[[str], str]


def typer_read_line(prompt: str) -> str:
    """Read one line; Ctrl-D / Ctrl-C surface as ``EOFError``."""
    try:
        return typer.prompt(prompt, default="", show_default=False, prompt_suffix=" ")
    except typer.Abort as e:
        raise EOFError(prompt) from e


def typer_read_secret(prompt: str) -> str:
    try:
        return typer.prompt(prompt, hide_input=True, prompt_suffix=" ")
    except typer.Abort as e:
        raise EOFError(prompt) from e


def prompt_for_credentials(
    username: str | None = None,
    token: str | None = None,
    read_line: LineReader | None = None,
    read_secret: LineReader | None = None,
) -> Credential:
    read_line = read_line or typer_read_line
    read_secret = read_secret or typer_read_secret
    if not token:
        typer.echo(f"Generate a personal access token at {TOKEN_HELP_URL}")
    while not username:
        username = read_line("GitHub username:").strip()
    while not token:
        token = read_secret("Personal access token:").strip()
    return Credential(identity=username, secret=token)


def _is_non_empty_dir(path: Path) -> bool:
    return path.is_dir() and any(path.iterdir())


def prompt_for_directory(read_line: LineReader | None = None) -> Path:
    """Ask until we get a directory that is missing or empty; create it."""
    read_line = read_line or typer_read_line
    while True:
        answer = read_line("Directory to export to:").strip()
        if not answer:
            continue
        path = Path(answer).expanduser()
        if _is_non_empty_dir(path):
            typer.echo("Directory already exists and is not empty.")
            continue
        if path.exists() and not path.is_dir():
            typer.echo(f"{path} exists and is not a directory.")
            continue
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            typer.echo(f"Cannot create {path}: {e}")
            continue
        return path
