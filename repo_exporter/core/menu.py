"""Numbered selection menu over any list of :class:`Displayable` items."""

from __future__ import annotations

from collections.abc import Sequence

import typer

from .prompts import LineReader, typer_read_line
from .types import Displayable


def show_items(items: Sequence[Displayable]) -> None:
    for number, item in enumerate(items, start=1):
        typer.echo(f"{number}. {item.label()}")


def choose(items: Sequence[Displayable], read_line: LineReader | None = None) -> int | None:
    """Return the 0-based index the user picked, or ``None`` if they bailed out."""
    if not items:
        return None
    read_line = read_line or typer_read_line
    show_items(items)
    while True:
        try:
            answer = read_line("Choice ->")
        except (EOFError, KeyboardInterrupt):
            return None
        try:
            number = int(answer.strip())
        except ValueError:
            typer.echo("Please enter a number")
            continue
        if not 1 <= number <= len(items):
            typer.echo(f"Enter a number between 1 and {len(items)}")
            continue
        return number - 1
