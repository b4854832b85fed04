"""
cfn-merge inspect command.

SUMMARY: List the sections and imports of a template without merging
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Dict, List

from cfnmerge.cli import (
    OutputFormatter,
    absolute_template_path,
    add_standard_flags,
    add_template_arg,
    load_cli_config,
    setup_logging,
)
from cfnmerge.core.config import TemplateConfig
from cfnmerge.core.exceptions import CfnMergeError
from cfnmerge.core.template import (
    ImportKind,
    ImportScanner,
    LocalFileAccess,
    SectionScanner,
    Template,
    resolve_import_path,
)

SUMMARY = "List the sections and imports of a template without merging"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_template_arg(parser)
    add_standard_flags(parser)


def _describe_imports(template: Template, scanner: ImportScanner, access: LocalFileAccess) -> List[Dict[str, Any]]:
    entries: List[Dict[str, Any]] = []
    source = str(template.path)
    for ref in scanner.imports(template.body):
        entry: Dict[str, Any] = {
            "line": template.body.count("\n", 0, ref.start) + 1,
            "kind": ref.kind.value,
            "resource": ref.resource,
        }
        try:
            if ref.kind is ImportKind.INLINE:
                file_path, section = scanner.split_inline_resource(ref.resource, source=source)
                entry["section"] = section
            else:
                file_path = scanner.whole_file_path(ref.resource, source=source)
            entry["path"] = str(resolve_import_path(template.path, file_path, access))
        except CfnMergeError as e:
            entry["error"] = str(e)
        entries.append(entry)
    return entries


def main(args: argparse.Namespace) -> int:
    """Print sections and import references of a template."""
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        cfg = load_cli_config(args)
        setup_logging(args, cfg)
        template_cfg = TemplateConfig.from_dict(cfg)
        access = LocalFileAccess(template_cfg.encoding)
        template = Template.from_path(absolute_template_path(args.file), access)
    except CfnMergeError as e:
        formatter.error(e, error_code="inspect_error")
        return 1
    except OSError as e:
        formatter.error(e, error_code="read_error")
        return 1

    sections = SectionScanner(template_cfg.sections).sections(template.body)
    imports = _describe_imports(
        template,
        ImportScanner(template_cfg.import_token, template_cfg.section_delimiter),
        access,
    )
    broken = [entry for entry in imports if "error" in entry]

    if formatter.json_mode:
        formatter.json_output({"path": str(template.path), "sections": sections, "imports": imports})
    else:
        formatter.text(str(template.path))
        formatter.text(f"Sections: {', '.join(sections) if sections else '(none)'}")
        if not imports:
            formatter.text("Imports: (none)")
        for entry in imports:
            target = entry.get("error") or entry["path"]
            formatter.text(f"  line {entry['line']}: [{entry['kind']}] {entry['resource']} -> {target}")

    return 1 if broken else 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
