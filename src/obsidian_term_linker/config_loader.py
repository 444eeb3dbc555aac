"""Config loader utilities (split from config.py)."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .config_settings import Config
from .exceptions import ConfigurationError
from .utils.logging import get_logger

CONFIG_ENV_VAR = "TERM_LINKER_CONFIG"

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


def _normalize_keys(data: dict[str, Any]) -> dict[str, Any]:
    """Accept camelCase keys so plugin-style data.json files load too."""
    return {_CAMEL_RE.sub("_", str(key)).lower(): value for key, value in data.items()}


def find_config_file(config_path: Path | None = None) -> Path | None:
    """Return the first existing config file among the candidate locations."""
    candidate_paths: list[Path] = []
    if config_path:
        candidate_paths.append(config_path.expanduser())
    else:
        env_path = os.getenv(CONFIG_ENV_VAR)
        if env_path:
            candidate_paths.append(Path(env_path).expanduser())
        candidate_paths.append(Path.cwd() / "config.yaml")

    for candidate in candidate_paths:
        if candidate.exists():
            return candidate
    return None


def load_config(config_path: Path | None = None, **overrides: Any) -> Config:
    """Load configuration from config.yaml and .env, merged over defaults.

    Args:
        config_path: Explicit config file; otherwise $TERM_LINKER_CONFIG or ./config.yaml
        **overrides: Values taking precedence over the file (e.g. from CLI flags)

    Raises:
        ConfigurationError: If the file cannot be parsed or values are invalid
    """
    logger = get_logger(__name__)

    resolved_config_path = find_config_file(config_path)
    if config_path and resolved_config_path is None:
        raise ConfigurationError(
            f"Config file not found: {config_path}",
            suggestion="Check the --config path",
        )

    yaml_data: dict[str, Any] = {}
    if resolved_config_path:
        logger.info("config_file_found", config_path=str(resolved_config_path))
        try:
            with open(resolved_config_path, encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(
                "config_yaml_load_error",
                config_path=str(resolved_config_path),
                error=str(e),
            )
            raise ConfigurationError(
                f"Failed to parse config file: {resolved_config_path}",
                suggestion=(
                    "Check YAML syntax (indentation, colons, quotes). "
                    f"Original error: {e}"
                ),
            ) from e
        if not isinstance(loaded, dict):
            raise ConfigurationError(
                f"Config file must contain a mapping: {resolved_config_path}"
            )
        yaml_data = _normalize_keys(loaded)
    else:
        logger.debug("config_file_not_found")

    # Unset CLI flags arrive as None and must not mask file values
    cli_values = {key: value for key, value in overrides.items() if value is not None}
    config_kwargs = {
        key: value
        for key, value in {**yaml_data, **cli_values}.items()
        if key in Config.model_fields and value is not None
    }

    try:
        config = Config(**config_kwargs)
    except ValidationError as e:
        logger.error("config_validation_error", error=str(e))
        raise ConfigurationError(
            "Invalid configuration values",
            suggestion=str(e),
            context={
                "config_path": str(resolved_config_path) if resolved_config_path else None
            },
        ) from e

    logger.debug(
        "config_loaded",
        vault_path=str(config.vault_path) if config.vault_path else None,
        llm_model=config.llm_model,
        mapping_count=len(config.folder_mappings),
    )
    return config


__all__ = [
    "CONFIG_ENV_VAR",
    "Config",
    "find_config_file",
    "load_config",
]
