"""Unified CLI output formatting utilities.

Supports both JSON and text output modes.
"""
from __future__ import annotations

import json
import sys
from typing import Any, Dict, Optional

from cfnmerge.core.exceptions import CfnMergeError


class OutputFormatter:
    """Unified output formatter for CLI commands."""

    def __init__(self, json_mode: bool = False, indent: int = 2):
        self.json_mode = json_mode
        self.indent = indent

    def success(
        self,
        data: Dict[str, Any],
        message: str,
        *,
        status: str = "success",
    ) -> None:
        """Output success result (``message`` in text mode, ``data`` in JSON mode)."""
        if self.json_mode:
            output = {"status": status, **data}
            print(json.dumps(output, indent=self.indent, default=str))
        else:
            print(message)

    def error(
        self,
        error: Exception,
        message: Optional[str] = None,
        *,
        error_code: str = "error",
    ) -> None:
        """Output error result to stderr.

        Args:
            error: The exception that occurred
            message: Optional human-readable message (defaults to str(error))
            error_code: Error code for JSON output
        """
        msg = message or str(error)
        if self.json_mode:
            output: Dict[str, Any] = {
                "error": error_code,
                "message": msg,
            }
            if isinstance(error, CfnMergeError):
                details = error.to_json_error()
                output["code"] = details["code"]
                output["context"] = details["context"]
            print(json.dumps(output, indent=self.indent, default=str), file=sys.stderr)
        else:
            print(f"Error: {msg}", file=sys.stderr)

    def json_output(self, data: Any) -> None:
        print(json.dumps(data, indent=self.indent, default=str))

    def text(self, message: str, *, end: str = "\n") -> None:
        """Output text (suppressed in JSON mode)."""
        if not self.json_mode:
            print(message, end=end)


__all__ = ["OutputFormatter"]
