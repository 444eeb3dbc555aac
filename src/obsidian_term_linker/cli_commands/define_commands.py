"""CLI commands: define, route, show-config."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from ..application.services.term_definition_pipeline import (
    PipelineResult,
    TermDefinitionPipeline,
)
from ..config import Config
from ..domain.entities.term import RoutingContext
from ..error_codes import ErrorCode, get_error_description
from ..exceptions import ConfigurationError, TermLinkerError
from ..obsidian.file_editor import FileSelectionEditor, parse_line_range
from ..obsidian.filesystem_vault import FilesystemVault
from ..obsidian.folder_router import resolve_target_folder
from ..providers.chat_completion import OpenAICompatibleChatClient
from ..utils.notifier import ConsoleNotifier
from .shared import (
    console,
    get_config_and_logger,
    print_config_error,
    to_vault_relative,
)

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to config.yaml (or a plugin data.json)"),
]
VaultOption = Annotated[
    Path | None,
    typer.Option("--vault", help="Vault directory (overrides vault_path)"),
]


async def run_definition(
    config: Config, vault_path: Path, document: str, editor: FileSelectionEditor
) -> PipelineResult:
    """Run one definition pipeline against a document in the vault."""
    vault = FilesystemVault(vault_path, active_document=document)
    async with OpenAICompatibleChatClient(
        config.api_endpoint, config.api_key, timeout=config.llm_timeout
    ) as chat_client:
        pipeline = TermDefinitionPipeline(
            editor=editor,
            chat_client=chat_client,
            storage=vault,
            notifier=ConsoleNotifier(console),
            settings=config.to_pipeline_settings(),
        )
        return await pipeline.run()


def register(app: typer.Typer) -> None:
    """Register definition commands on the given Typer app."""

    @app.command()
    def define(
        document: Annotated[
            Path,
            typer.Argument(
                help="Markdown file containing the selection",
                exists=True,
                dir_okay=False,
            ),
        ],
        text: Annotated[
            str | None,
            typer.Option("--text", "-t", help="Selected text (first occurrence is used)"),
        ] = None,
        lines: Annotated[
            str | None,
            typer.Option("--lines", "-l", help="Selected line range, e.g. 12:14"),
        ] = None,
        config_path: ConfigOption = None,
        vault: VaultOption = None,
        log_level: Annotated[
            str | None,
            typer.Option("--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)"),
        ] = None,
        verbose: Annotated[
            bool, typer.Option("--verbose", "-v", help="Show all log messages")
        ] = False,
    ) -> None:
        """Create a definition note from a selection and link the term in place."""
        if (text is None) == (lines is None):
            raise typer.BadParameter("Pass exactly one of --text or --lines")

        line_range = None
        if lines is not None:
            try:
                line_range = parse_line_range(lines)
            except ValueError as e:
                raise typer.BadParameter(str(e), param_hint="--lines") from e

        config, logger = get_config_and_logger(
            config_path, log_level, verbose, vault_path=vault
        )
        try:
            vault_path = config.validate_config()
        except ConfigurationError as e:
            logger.error("config_validation_failed", **e.to_dict())
            print_config_error(e)
            raise typer.Exit(code=2) from e

        relative = to_vault_relative(vault_path, document)
        editor = FileSelectionEditor(document.expanduser().resolve(), text=text, lines=line_range)

        result = asyncio.run(run_definition(config, vault_path, relative, editor))

        if not result.succeeded:
            error = result.error
            if isinstance(error, TermLinkerError) and error.error_code:
                code = ErrorCode(error.error_code)
            else:
                code = ErrorCode.UNEXPECTED
            console.print(
                f"[red]{code.value}[/red] {get_error_description(code)}",
                highlight=False,
            )
            if verbose and error is not None:
                console.print(str(error), style="red", markup=False)
            raise typer.Exit(code=1)

        console.print(f"Note: [cyan]{result.note_id}.md[/cyan]")

    @app.command()
    def route(
        document: Annotated[
            Path, typer.Argument(help="Markdown file a definition would come from")
        ],
        config_path: ConfigOption = None,
        vault: VaultOption = None,
    ) -> None:
        """Show the folder a definition from DOCUMENT would be written to."""
        config, _ = get_config_and_logger(config_path, vault_path=vault)
        if config.vault_path is None:
            console.print("[bold red]vault_path is not set[/bold red]")
            raise typer.Exit(code=2)

        relative = to_vault_relative(config.vault_path, document)
        settings = config.to_pipeline_settings()
        folder = resolve_target_folder(
            RoutingContext(
                active_document_path=relative,
                mappings=settings.folder_mappings,
                default_folder=settings.default_glossary_path,
            )
        )
        console.print(folder, markup=False, highlight=False)

    @app.command(name="show-config")
    def show_config(config_path: ConfigOption = None) -> None:
        """Print the effective configuration (API key redacted)."""
        config, _ = get_config_and_logger(config_path)
        data = config.redacted_dump()
        mappings = data.pop("folder_mappings", [])

        table = Table(title="Configuration")
        table.add_column("Setting", style="cyan")
        table.add_column("Value")
        for key, value in data.items():
            table.add_row(key, "" if value is None else str(value))
        console.print(table)

        if mappings:
            mapping_table = Table(title="Folder mappings (first match wins)")
            mapping_table.add_column("#", justify="right")
            mapping_table.add_column("Source prefix", style="cyan")
            mapping_table.add_column("Target folder", style="green")
            for index, mapping in enumerate(mappings, start=1):
                mapping_table.add_row(
                    str(index), mapping["source_path"], mapping["target_path"]
                )
            console.print(mapping_table)
