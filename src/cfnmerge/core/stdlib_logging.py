from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from cfnmerge.core.utils.io import ensure_parent_dir

_CFNMERGE_HANDLER: logging.Handler | None = None
_JSON_MODE_NULL_HANDLER_INSTALLED: bool = False

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_stdlib_logging(*, level: str = "WARNING", log_path: Optional[Path] = None) -> None:
    """Route stdlib logging to stderr, or to ``log_path`` when given.

    Calling it again replaces the handler installed by the previous call.
    """
    global _CFNMERGE_HANDLER

    root = logging.getLogger()
    root.setLevel(_level_from_name(level))

    if _CFNMERGE_HANDLER is not None:
        root.removeHandler(_CFNMERGE_HANDLER)
        _CFNMERGE_HANDLER.close()
        _CFNMERGE_HANDLER = None

    handler: logging.Handler
    if log_path is not None:
        resolved = Path(log_path).resolve()
        ensure_parent_dir(resolved)
        handler = logging.FileHandler(resolved, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_level_from_name(level))
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    _CFNMERGE_HANDLER = handler


def reset_stdlib_logging_for_tests() -> None:
    """Test-only: remove the handler installed by this module."""
    global _CFNMERGE_HANDLER, _JSON_MODE_NULL_HANDLER_INSTALLED
    root = logging.getLogger()
    if _CFNMERGE_HANDLER is not None:
        root.removeHandler(_CFNMERGE_HANDLER)
        _CFNMERGE_HANDLER.close()
    root.setLevel(logging.WARNING)
    for h in list(root.handlers):
        if isinstance(h, logging.NullHandler):
            root.removeHandler(h)
    _CFNMERGE_HANDLER = None
    _JSON_MODE_NULL_HANDLER_INSTALLED = False


def suppress_lastresort_in_json_mode() -> None:
    """Keep stdlib logging's lastResort handler from writing to stderr.

    With no handlers configured, WARNING+ records go to stderr through the
    implicit ``lastResort`` handler. ``--json`` output must stay machine
    readable, so the root logger gets a NullHandler when it has none.
    """
    global _JSON_MODE_NULL_HANDLER_INSTALLED

    root = logging.getLogger()
    if root.handlers or _JSON_MODE_NULL_HANDLER_INSTALLED:
        return
    root.addHandler(logging.NullHandler())
    _JSON_MODE_NULL_HANDLER_INSTALLED = True


__all__ = ["configure_stdlib_logging", "reset_stdlib_logging_for_tests", "suppress_lastresort_in_json_mode"]
