"""Application services."""

from .term_definition_pipeline import (
    PipelineResult,
    PipelineState,
    TermDefinitionPipeline,
)

__all__ = [
    "PipelineResult",
    "PipelineState",
    "TermDefinitionPipeline",
]
