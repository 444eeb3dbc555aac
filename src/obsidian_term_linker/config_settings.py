"""Settings model for the term linker (split from config.py)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .config_models import FolderMapping
from .exceptions import ConfigurationError
from .utils.path_validator import validate_vault_path


@dataclass(frozen=True)
class PipelineSettings:
    """Immutable per-run view of the configuration used by the pipeline."""

    llm_model: str
    default_glossary_path: str = "Glossary"
    folder_mappings: tuple[FolderMapping, ...] = ()


class Config(BaseSettings):
    """Service configuration using pydantic-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # LLM endpoint
    api_endpoint: str = Field(
        default="", description="Chat completions URL of an OpenAI-compatible API"
    )
    api_key: str = Field(default="", description="Bearer token for the API")
    llm_model: str = Field(default="", description="Model name, e.g. deepseek-chat")
    llm_timeout: float = Field(
        default=120.0, gt=0, description="Request timeout in seconds"
    )

    # Vault and routing
    vault_path: Path | None = Field(default=None, description="Path to Obsidian vault")
    default_glossary_path: str = Field(
        default="Glossary", description="Default folder for definition notes"
    )
    folder_mappings: list[FolderMapping] = Field(
        default_factory=list,
        description="Ordered source-prefix to glossary-folder mappings; first match wins",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_dir: Path = Field(default=Path("logs"), description="Directory for log files")

    @field_validator("vault_path", mode="before")
    @classmethod
    def parse_vault_path(cls, v: Any) -> Path | None:
        """Convert string to Path for vault_path."""
        if v is None or v == "":
            return None
        if isinstance(v, (str, Path)):
            return Path(v).expanduser().resolve()
        msg = f"vault_path must be string or Path, got {type(v).__name__}"
        raise ValueError(msg)

    @field_validator("default_glossary_path")
    @classmethod
    def validate_default_glossary_path(cls, v: str) -> str:
        cleaned = v.strip().strip("/")
        if not cleaned:
            msg = "default_glossary_path cannot be empty"
            raise ValueError(msg)
        return cleaned

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            msg = f"Invalid log_level: {v}"
            raise ValueError(msg)
        return level

    def validate_config(self) -> Path:
        """Check that a definition run can actually be performed.

        Returns:
            Resolved vault path

        Raises:
            ConfigurationError: If the endpoint, model or vault is unusable
        """
        if not self.api_endpoint:
            raise ConfigurationError(
                "api_endpoint is not set",
                suggestion="Set api_endpoint in config.yaml or API_ENDPOINT in .env",
            )
        if not self.api_endpoint.startswith(("http://", "https://")):
            raise ConfigurationError(
                f"api_endpoint must be an http(s) URL: {self.api_endpoint}",
            )
        if not self.llm_model:
            raise ConfigurationError(
                "llm_model is not set",
                suggestion="Set llm_model, e.g. 'deepseek-chat' or 'gpt-4o-mini'",
            )
        if self.vault_path is None:
            raise ConfigurationError(
                "vault_path is not set",
                suggestion="Set vault_path or pass --vault",
            )
        return validate_vault_path(self.vault_path)

    def to_pipeline_settings(self) -> PipelineSettings:
        return PipelineSettings(
            llm_model=self.llm_model,
            default_glossary_path=self.default_glossary_path,
            folder_mappings=tuple(self.folder_mappings),
        )

    def redacted_dump(self) -> dict[str, Any]:
        """Config values safe for display and logging."""
        data = self.model_dump(mode="json")
        if data.get("api_key"):
            data["api_key"] = "***REDACTED***"
        return data
