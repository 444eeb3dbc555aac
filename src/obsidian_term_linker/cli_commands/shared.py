"""Shared utilities for CLI commands."""

from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape

from obsidian_term_linker.config import Config, load_config
from obsidian_term_linker.exceptions import ConfigurationError
from obsidian_term_linker.utils.logging import configure_logging, get_logger

# Shared console for all commands
console = Console()


def get_config_and_logger(
    config_path: Path | None = None,
    log_level: str | None = None,
    verbose: bool = False,
    **overrides: Any,
) -> tuple[Config, Any]:
    """Load configuration and configure logging for a CLI command.

    Args:
        config_path: Optional path to config file
        log_level: Console log level, defaults to the configured one
        verbose: Show all log messages on the terminal
        **overrides: Config values given on the command line

    Returns:
        Tuple of (Config, Logger)
    """
    try:
        config = load_config(config_path, **overrides)
    except ConfigurationError as e:
        print_config_error(e)
        raise typer.Exit(code=2) from e

    configure_logging(
        log_level or config.log_level,
        log_dir=config.log_dir,
        verbose=verbose,
    )
    return config, get_logger("cli")


def to_vault_relative(vault_path: Path, document: Path) -> str:
    """Vault-relative '/' path for a document given on the command line."""
    resolved = document.expanduser().resolve()
    try:
        relative = resolved.relative_to(vault_path)
    except ValueError as e:
        console.print(
            f"[bold red]{escape(str(document))} is not inside the vault {escape(str(vault_path))}[/bold red]"
        )
        raise typer.Exit(code=2) from e
    return relative.as_posix()


def print_config_error(error: ConfigurationError) -> None:
    console.print(f"[bold red]Configuration error:[/bold red] {escape(str(error))}")
