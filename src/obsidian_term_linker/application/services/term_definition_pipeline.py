"""Application service turning a selection into a definition note and a link."""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass
from enum import Enum

import structlog

from obsidian_term_linker.config_settings import PipelineSettings
from obsidian_term_linker.domain.entities.term import RoutingContext, TermDefinition
from obsidian_term_linker.domain.interfaces.chat_client import IChatClient
from obsidian_term_linker.domain.interfaces.editor import IEditor
from obsidian_term_linker.domain.interfaces.notifier import INotifier
from obsidian_term_linker.domain.interfaces.vault_storage import IVaultStorage
from obsidian_term_linker.error_codes import ErrorCode
from obsidian_term_linker.exceptions import EmptySelectionError, TermLinkerError
from obsidian_term_linker.obsidian.folder_router import resolve_target_folder
from obsidian_term_linker.obsidian.note_materializer import NoteMaterializer
from obsidian_term_linker.obsidian.smart_linker import create_smart_link
from obsidian_term_linker.prompts.term_extraction import build_chat_request
from obsidian_term_linker.providers.response_parser import parse_term_definition
from obsidian_term_linker.utils.logging import get_logger

logger = get_logger(__name__)

SUCCESS_MESSAGE = "Term definition created successfully"
FAILURE_MESSAGE = "Error creating term definition"
EMPTY_SELECTION_MESSAGE = "No text selected"


class PipelineState(str, Enum):
    """Linear states of a definition run."""

    START = "start"
    PROMPT_BUILT = "prompt_built"
    RESPONSE_RECEIVED = "response_received"
    PARSED = "parsed"
    NOTE_WRITTEN = "note_written"
    LINKED = "linked"
    REPLACED = "replaced"
    DONE = "done"
    ABORTED = "aborted"


@dataclass(frozen=True)
class PipelineResult:
    """Outcome of one run.

    Attributes:
        state: DONE or ABORTED
        failed_at: Step that failed, named by the state it would have reached;
            START when the selection was rejected (aborted runs only)
        definition: Parsed term definition, once available
        note_id: Created note path without extension, once written
        linked_text: Replacement text, once linked
        error: The error that aborted the run
    """

    run_id: str
    state: PipelineState
    failed_at: PipelineState | None = None
    definition: TermDefinition | None = None
    note_id: str | None = None
    linked_text: str | None = None
    error: Exception | None = None

    @property
    def succeeded(self) -> bool:
        return self.state is PipelineState.DONE


class TermDefinitionPipeline:
    """Runs build prompt -> call LLM -> parse -> write note -> link -> replace.

    Steps run strictly in sequence and nothing is retried. Every run ends
    with exactly one notification. Effects of completed steps are kept when
    a later step fails (folders stay when the note write fails; the note
    stays when the replacement fails).
    """

    def __init__(
        self,
        editor: IEditor,
        chat_client: IChatClient,
        storage: IVaultStorage,
        notifier: INotifier,
        settings: PipelineSettings,
    ):
        self.editor = editor
        self.chat_client = chat_client
        self.storage = storage
        self.notifier = notifier
        self.settings = settings
        self.materializer = NoteMaterializer(storage)

    async def run(self) -> PipelineResult:
        """Execute one definition run against the current selection."""
        run_id = uuid.uuid4().hex[:12]
        with structlog.contextvars.bound_contextvars(run_id=run_id):
            return await self._run(run_id)

    async def _run(self, run_id: str) -> PipelineResult:
        start_time = time.perf_counter()
        # Step in progress, named by the state it leads to
        step = PipelineState.START
        definition: TermDefinition | None = None
        note_id: str | None = None
        linked_text: str | None = None

        try:
            selected_text = self.editor.get_selected_text()
            if not selected_text or not selected_text.strip():
                raise EmptySelectionError(EMPTY_SELECTION_MESSAGE)
            logger.debug("term_definition_started", selection_length=len(selected_text))

            step = PipelineState.PROMPT_BUILT
            request = build_chat_request(selected_text, self.settings.llm_model)

            step = PipelineState.RESPONSE_RECEIVED
            raw = await self.chat_client.post_chat_completion(request)

            step = PipelineState.PARSED
            definition = parse_term_definition(raw)

            step = PipelineState.NOTE_WRITTEN
            source_document = self.storage.get_active_document()
            folder = resolve_target_folder(
                RoutingContext(
                    active_document_path=source_document.path if source_document else None,
                    mappings=self.settings.folder_mappings,
                    default_folder=self.settings.default_glossary_path,
                )
            )
            note_id = await self.materializer.materialize(
                folder, definition, source_document
            )

            step = PipelineState.LINKED
            linked_text = create_smart_link(
                selected_text, definition.search_term, target=definition.term
            )

            step = PipelineState.REPLACED
            self.editor.replace_selected_text(linked_text)

        except TermLinkerError as e:
            return self._abort(run_id, step, e, start_time, definition, note_id, linked_text)
        except Exception as e:
            logger.exception(
                "term_definition_unexpected_error",
                failed_at=step.value,
                error_code=ErrorCode.UNEXPECTED.value,
            )
            return self._abort(run_id, step, e, start_time, definition, note_id, linked_text)

        logger.info(
            "term_definition_created",
            term=definition.term,
            category=definition.category,
            note_id=note_id,
            linked=linked_text != selected_text,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        self.notifier.notify(SUCCESS_MESSAGE)
        return PipelineResult(
            run_id=run_id,
            state=PipelineState.DONE,
            definition=definition,
            note_id=note_id,
            linked_text=linked_text,
        )

    def _abort(
        self,
        run_id: str,
        failed_at: PipelineState,
        error: Exception,
        start_time: float,
        definition: TermDefinition | None,
        note_id: str | None,
        linked_text: str | None,
    ) -> PipelineResult:
        details = (
            error.to_dict()
            if isinstance(error, TermLinkerError)
            else {"message": str(error), "type": type(error).__name__}
        )
        logger.error(
            "term_definition_failed",
            failed_at=failed_at.value,
            error=details["message"],
            error_details=details,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        message = (
            EMPTY_SELECTION_MESSAGE
            if isinstance(error, EmptySelectionError)
            else FAILURE_MESSAGE
        )
        self.notifier.notify(message)
        return PipelineResult(
            run_id=run_id,
            state=PipelineState.ABORTED,
            failed_at=failed_at,
            definition=definition,
            note_id=note_id,
            linked_text=linked_text,
            error=error,
        )
