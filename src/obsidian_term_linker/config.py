"""Configuration entrypoint (re-exported from split modules)."""

from .config_loader import load_config
from .config_models import FolderMapping
from .config_settings import Config, PipelineSettings

__all__ = [
    "Config",
    "FolderMapping",
    "PipelineSettings",
    "load_config",
]
