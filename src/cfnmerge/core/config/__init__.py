"""Configuration loading and typed accessors."""
from __future__ import annotations

from .domains import (
    DEFAULT_SECTIONS,
    FORMAT_VERSION_KEY,
    OutputConfig,
    TemplateConfig,
)
from .manager import CONFIG_PATH_ENV, ENV_PREFIX, ConfigManager

__all__ = [
    "ConfigManager",
    "CONFIG_PATH_ENV",
    "ENV_PREFIX",
    "DEFAULT_SECTIONS",
    "FORMAT_VERSION_KEY",
    "OutputConfig",
    "TemplateConfig",
]
