"""CLI entrypoint that wires subcommands into a Typer app."""

import logging

import typer

from ..commands.export.cli import app as export_app

app = typer.Typer(add_completion=False, help="Clone every repository of one of your GitHub organizations.")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP pagination details")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


app.add_typer(export_app)
