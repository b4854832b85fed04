"""Typed views over the loaded configuration dictionary."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

DEFAULT_SECTIONS: Tuple[str, ...] = (
    "Description",
    "Metadata",
    "Parameters",
    "Mappings",
    "Conditions",
    "Transform",
    "Resources",
    "Outputs",
)
FORMAT_VERSION_KEY = "AWSTemplateFormatVersion"


@dataclass(frozen=True)
class TemplateConfig:
    """Settings that drive section and import scanning.

    Attributes:
        sections: Recognized top-level section names
        import_token: Marker prefix preceding the resource string
        section_delimiter: Separates a path from a section name in inline imports
        encoding: Encoding used to read templates from disk
    """

    sections: Tuple[str, ...] = DEFAULT_SECTIONS
    import_token: str = "# @import"
    section_delimiter: str = "#"
    encoding: str = "utf-8"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> TemplateConfig:
        section = data.get("template") or {}
        names = list(section.get("sections") or DEFAULT_SECTIONS)
        if section.get("include_format_version"):
            key = section.get("format_version_key") or FORMAT_VERSION_KEY
            if key not in names:
                names.insert(0, key)
        return cls(
            sections=tuple(names),
            import_token=section.get("import_token", cls.import_token),
            section_delimiter=section.get("section_delimiter", cls.section_delimiter),
            encoding=section.get("encoding", cls.encoding),
        )


@dataclass(frozen=True)
class OutputConfig:
    """Settings for the temporary output file written by ``merge --temp``."""

    temp_prefix: str = "cfn-merge-"
    temp_suffix: str = ".yml"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> OutputConfig:
        section = data.get("output") or {}
        return cls(
            temp_prefix=section.get("temp_prefix", cls.temp_prefix),
            temp_suffix=section.get("temp_suffix", cls.temp_suffix),
        )


__all__ = [
    "DEFAULT_SECTIONS",
    "FORMAT_VERSION_KEY",
    "TemplateConfig",
    "OutputConfig",
]
