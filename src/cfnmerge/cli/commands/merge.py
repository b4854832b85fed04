"""
cfn-merge merge command.

SUMMARY: Merge a template with the templates it imports
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from cfnmerge.cli import (
    OutputFormatter,
    absolute_template_path,
    add_standard_flags,
    add_template_arg,
    load_cli_config,
    setup_logging,
)
from cfnmerge.core.config import OutputConfig, TemplateConfig
from cfnmerge.core.exceptions import CfnMergeError
from cfnmerge.core.template import TemplateMerger
from cfnmerge.core.utils.io import write_temp_text, write_text

SUMMARY = "Merge a template with the templates it imports"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_template_arg(parser)
    target = parser.add_mutually_exclusive_group()
    target.add_argument(
        "--output",
        "-o",
        type=str,
        help="Output file (prints to stdout if not specified)",
    )
    target.add_argument(
        "--temp",
        action="store_true",
        help="Write to a generated temporary file and print its path",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    """Merge the template and write the result to the selected destination."""
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        cfg = load_cli_config(args)
        setup_logging(args, cfg)
        template_cfg = TemplateConfig.from_dict(cfg)
        result = TemplateMerger(config=template_cfg).merge(absolute_template_path(args.file))
    except CfnMergeError as e:
        formatter.error(e, error_code="merge_error")
        return 1
    except OSError as e:
        formatter.error(e, error_code="read_error")
        return 1

    payload = result.to_dict()
    try:
        if getattr(args, "output", None):
            target = Path(args.output)
            write_text(target, result.content, encoding=template_cfg.encoding)
            payload["output"] = str(target)
            formatter.success(payload, f"Wrote merged template to {target}")
        elif getattr(args, "temp", False):
            output_cfg = OutputConfig.from_dict(cfg)
            target = write_temp_text(
                result.content,
                prefix=output_cfg.temp_prefix,
                suffix=output_cfg.temp_suffix,
                encoding=template_cfg.encoding,
            )
            payload["output"] = str(target)
            formatter.success(payload, str(target))
        elif formatter.json_mode:
            payload["content"] = result.content
            formatter.success(payload, "")
        else:
            formatter.text(result.content, end="")
    except OSError as e:
        formatter.error(e, error_code="write_error")
        return 1

    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
