"""Command-line interface for the term linker."""

from __future__ import annotations

import typer

from .cli_commands import define_commands

app = typer.Typer(
    name="obsidian-term-linker",
    help="Turn selected text into a glossary note and link the term in place.",
    no_args_is_help=True,
)

define_commands.register(app)


def cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
