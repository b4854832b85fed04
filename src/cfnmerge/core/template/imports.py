"""Import marker scanning.

Handles:
- ``# @import ./other.yml`` - merge every section of another template
- ``# @import ./other.yml#Resources`` - splice one section in place of the marker

Markers are YAML comments, so the host format ignores them. Scanning never
fails; malformed resource strings are reported when they are resolved.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from cfnmerge.core.exceptions import MalformedReferenceError


class ImportKind(Enum):
    """How an import reference is applied."""

    WHOLE_FILE = "whole-file"
    INLINE = "inline"


@dataclass(frozen=True)
class ImportReference:
    """An import marker found in a body.

    Attributes:
        marker: Exact marker text as it appears in the body
        resource: Referenced resource (trailing whitespace removed)
        start: Offset of the marker in the scanned body
        end: Offset just past the marker text
        kind: Whole-file or inline
    """

    marker: str
    resource: str
    start: int
    end: int
    kind: ImportKind


class ImportScanner:
    """Find ``<token> <resource>`` markers and classify them."""

    def __init__(self, token: str = "# @import", delimiter: str = "#") -> None:
        self.token = token
        self.delimiter = delimiter
        self.pattern = re.compile(
            rf"{re.escape(token)} (?P<resource>[^\n]+?)(?=[ \t\r]*$)",
            re.MULTILINE,
        )

    def imports(self, body: str) -> List[ImportReference]:
        """Return all import references in document order."""
        refs: List[ImportReference] = []
        for match in self.pattern.finditer(body):
            resource = match.group("resource")
            kind = ImportKind.INLINE if self.delimiter in resource else ImportKind.WHOLE_FILE
            refs.append(
                ImportReference(
                    marker=match.group(0),
                    resource=resource,
                    start=match.start(),
                    end=match.end(),
                    kind=kind,
                )
            )
        return refs

    def whole_file_imports(self, body: str) -> List[ImportReference]:
        return [ref for ref in self.imports(body) if ref.kind is ImportKind.WHOLE_FILE]

    def inline_imports(self, body: str) -> List[ImportReference]:
        return [ref for ref in self.imports(body) if ref.kind is ImportKind.INLINE]

    def whole_file_path(self, resource: str, *, source: Optional[str] = None) -> str:
        """Return the path of a whole-file resource.

        Raises:
            MalformedReferenceError: If the resource is blank.
        """
        path = resource.strip()
        if not path:
            raise MalformedReferenceError(
                f"Import in {source or 'template'} has an empty path",
                resource=resource,
                path=source,
            )
        return path

    def split_inline_resource(self, resource: str, *, source: Optional[str] = None) -> Tuple[str, str]:
        """Split ``path#Section`` into ``(path, section)``.

        Raises:
            MalformedReferenceError: If there is more than one delimiter or
                either side is empty.
        """
        parts = resource.split(self.delimiter)
        if len(parts) != 2:
            raise MalformedReferenceError(
                f"Import '{resource}' in {source or 'template'} must look like "
                f"'path{self.delimiter}Section'",
                resource=resource,
                path=source,
            )
        path, section = parts[0].strip(), parts[1].strip()
        if not path or not section:
            raise MalformedReferenceError(
                f"Import '{resource}' in {source or 'template'} is missing a "
                f"{'path' if not path else 'section name'}",
                resource=resource,
                path=source,
            )
        return path, section


__all__ = ["ImportKind", "ImportReference", "ImportScanner"]
