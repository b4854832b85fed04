"""Section scanning and access for section-structured templates.

A section starts at a header: an allow-listed top-level name at the start of
a line, immediately followed by a colon::

    Parameters:
      Env: ...
    Resources:
      Bucket: ...

Section boundaries are derived from the body text on every call. Merges
change the body, so nothing here caches positions.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from cfnmerge.core.exceptions import InvalidArgumentError, SectionNotFoundError

from ..config.domains import DEFAULT_SECTIONS


@dataclass(frozen=True)
class SectionHeader:
    """A header occurrence inside a body."""

    name: str
    start: int  # offset of the first character of the name
    end: int  # offset just past the colon


class SectionScanner:
    """Locate allow-listed section headers in a body."""

    def __init__(self, section_names: Iterable[str] = DEFAULT_SECTIONS) -> None:
        self.section_names: Tuple[str, ...] = tuple(section_names)
        if not self.section_names:
            raise InvalidArgumentError("Expected at least one section name")
        alternatives = "|".join(re.escape(name) for name in self.section_names)
        self.pattern = re.compile(rf"^({alternatives}):", re.MULTILINE)

    def headers(self, body: str) -> List[SectionHeader]:
        """Return every header occurrence in document order."""
        return [
            SectionHeader(name=m.group(1), start=m.start(), end=m.end())
            for m in self.pattern.finditer(body)
        ]

    def sections(self, body: str) -> List[str]:
        """Return section names in the order they appear (empty when none)."""
        return [header.name for header in self.headers(body)]

    def get_section(self, body: str, name: str, *, source: Optional[str] = None) -> str:
        """Return the raw text of section ``name``.

        The text runs from just after the ``name:`` header token to the start
        of the next header, or to the end of the body for the last section.
        The first header wins when a name occurs more than once.

        Raises:
            SectionNotFoundError: If ``name`` is not among the scanned sections.
        """
        headers = self.headers(body)
        for index, header in enumerate(headers):
            if header.name != name:
                continue
            stop = headers[index + 1].start if index + 1 < len(headers) else len(body)
            return body[header.end:stop]

        where = source or "template"
        raise SectionNotFoundError(
            f"{where} does not have section: {name}",
            section=name,
            path=source,
        )

    def add_to_section(self, body: str, name: str, contents: str) -> str:
        """Insert ``contents`` right after the ``name:`` header and return the new body.

        A bare ``name:`` header is appended first when the section is missing.
        Each call inserts again; callers apply an imported section once.
        """
        if name not in self.sections(body):
            separator = "\n" if body and not body.endswith("\n") else ""
            body = f"{body}{separator}{name}:"

        header = self._first_header(body, name)
        return body[:header.end] + contents + body[header.end:]

    def _first_header(self, body: str, name: str) -> SectionHeader:
        for header in self.headers(body):
            if header.name == name:
                return header
        raise SectionNotFoundError(f"template does not have section: {name}", section=name)


__all__ = ["SectionHeader", "SectionScanner"]
