"""Shared CLI utilities."""
from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Any, Dict

from cfnmerge.core.config import ConfigManager
from cfnmerge.core.stdlib_logging import configure_stdlib_logging, suppress_lastresort_in_json_mode


def load_cli_config(args: argparse.Namespace) -> Dict[str, Any]:
    """Load the effective configuration for a command invocation."""
    config_path = getattr(args, "config", None)
    return ConfigManager(Path(config_path) if config_path else None).load_config()


def setup_logging(args: argparse.Namespace, cfg: Dict[str, Any]) -> None:
    """Configure logging from --verbose/--log-file and the ``logging`` config section."""
    verbose = bool(getattr(args, "verbose", False))
    log_file = getattr(args, "log_file", None)
    if getattr(args, "json", False) and not verbose and not log_file:
        suppress_lastresort_in_json_mode()
        return

    level = "DEBUG" if verbose else str((cfg.get("logging") or {}).get("level", "WARNING"))
    configure_stdlib_logging(level=level, log_path=Path(log_file) if log_file else None)


def absolute_template_path(raw: str) -> str:
    """Make a command-line template path absolute against the working directory.

    Blank input is returned unchanged so the merge engine can reject it.
    """
    if not raw.strip():
        return raw
    return os.path.abspath(raw)


__all__ = ["load_cli_config", "setup_logging", "absolute_template_path"]
