"""
cfn-merge CLI package.

Commands are auto-discovered from ``cli/commands``. Each command module
exposes ``SUMMARY``, ``register_args(parser)`` and ``main(args) -> int``.

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
- _utils: Config loading, logging setup, path handling
"""
from ._output import OutputFormatter
from ._args import (
    add_config_flag,
    add_json_flag,
    add_log_file_flag,
    add_standard_flags,
    add_template_arg,
    add_verbose_flag,
)
from ._utils import absolute_template_path, load_cli_config, setup_logging

__all__ = [
    # Output formatting
    "OutputFormatter",
    # Argument helpers
    "add_config_flag",
    "add_json_flag",
    "add_log_file_flag",
    "add_standard_flags",
    "add_template_arg",
    "add_verbose_flag",
    # Utilities
    "absolute_template_path",
    "load_cli_config",
    "setup_logging",
]
