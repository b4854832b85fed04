"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse


def add_template_arg(parser: argparse.ArgumentParser) -> None:
    """Add the positional template path."""
    parser.add_argument(
        "file",
        help="Path to a CloudFormation template file",
    )


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_config_flag(parser: argparse.ArgumentParser) -> None:
    """Add --config flag pointing at a YAML configuration file."""
    parser.add_argument(
        "--config",
        type=str,
        help="YAML configuration file (overrides bundled defaults)",
    )


def add_verbose_flag(parser: argparse.ArgumentParser) -> None:
    """Add --verbose flag."""
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )


def add_log_file_flag(parser: argparse.ArgumentParser) -> None:
    """Add --log-file flag."""
    parser.add_argument(
        "--log-file",
        type=str,
        help="Write log records to this file instead of stderr",
    )


def add_standard_flags(parser: argparse.ArgumentParser) -> None:
    """Add flags every command takes: --json, --config, --verbose, --log-file."""
    add_json_flag(parser)
    add_config_flag(parser)
    add_verbose_flag(parser)
    add_log_file_flag(parser)


__all__ = [
    "add_template_arg",
    "add_json_flag",
    "add_config_flag",
    "add_verbose_flag",
    "add_log_file_flag",
    "add_standard_flags",
]
