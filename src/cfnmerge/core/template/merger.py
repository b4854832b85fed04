"""Template merge orchestration.

Processing order:
1. INIT             - load the root template
2. WHOLE_FILE_MERGE - ``# @import path``: add every section of ``path`` to the
                      matching root section (the marker stays in the output)
3. INLINE_MERGE     - ``# @import path#Section``: replace the marker with the
                      raw text of ``Section`` from ``path``
4. DONE             - the root body is the merged output

Any error moves the merger to FAILED and propagates; there is no partial
result. Imports are followed one level deep only: imported text is copied
verbatim, markers included.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ..config.domains import TemplateConfig
from .document import Template
from .imports import ImportKind, ImportReference, ImportScanner
from .paths import FileAccess, LocalFileAccess, PathLike
from .sections import SectionScanner

logger = logging.getLogger(__name__)


class MergeState(Enum):
    INIT = "init"
    WHOLE_FILE_MERGE = "whole-file-merge"
    INLINE_MERGE = "inline-merge"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class ResolvedImport:
    """An import that was applied to the root template."""

    kind: ImportKind
    resource: str
    path: Path
    sections: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "resource": self.resource,
            "path": str(self.path),
            "sections": list(self.sections),
        }


@dataclass
class MergeResult:
    """Merged output plus what went into it."""

    content: str
    root: Path
    imports: List[ResolvedImport] = field(default_factory=list)

    @property
    def dependencies(self) -> List[Path]:
        """Unique imported paths, sorted (the root is not included)."""
        return sorted({imp.path for imp in self.imports})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "root": str(self.root),
            "imports": [imp.to_dict() for imp in self.imports],
            "dependencies": [str(p) for p in self.dependencies],
        }


class TemplateMerger:
    """Merge a root template with the templates it imports.

    A merger keeps per-run state; use one instance per thread.

    Example:
        merger = TemplateMerger(access=LocalFileAccess())
        result = merger.merge("/templates/main.yml")
        print(result.content)
    """

    def __init__(
        self,
        access: Optional[FileAccess] = None,
        config: Optional[TemplateConfig] = None,
    ) -> None:
        self.config = config or TemplateConfig()
        self.access = access or LocalFileAccess(self.config.encoding)
        self.sections = SectionScanner(self.config.sections)
        self.imports = ImportScanner(self.config.import_token, self.config.section_delimiter)
        self.state = MergeState.INIT

    def merge(self, path: PathLike) -> MergeResult:
        """Merge the template at ``path`` and return the result.

        Raises:
            InvalidArgumentError: ``path`` is blank.
            TemplateNotFoundError: The root or an imported file is missing.
            SectionNotFoundError: An imported section does not exist.
            MalformedReferenceError: An import resource cannot be parsed.
            TemplateReadError: A template cannot be decoded.
        """
        self._transition(MergeState.INIT)
        applied: List[ResolvedImport] = []
        try:
            template = Template.from_path(path, self.access)

            self._transition(MergeState.WHOLE_FILE_MERGE)
            applied.extend(self._merge_whole_file_imports(template))

            self._transition(MergeState.INLINE_MERGE)
            applied.extend(self._merge_inline_imports(template))
        except Exception:
            self._transition(MergeState.FAILED)
            raise

        self._transition(MergeState.DONE)
        logger.info("Merged %s (%d imports applied)", template.path, len(applied))
        return MergeResult(content=template.body, root=template.path, imports=applied)

    def _transition(self, state: MergeState) -> None:
        logger.debug("Merge state %s -> %s", self.state.value, state.value)
        self.state = state

    def _merge_whole_file_imports(self, template: Template) -> List[ResolvedImport]:
        applied: List[ResolvedImport] = []
        for ref in self.imports.whole_file_imports(template.body):
            resource = self.imports.whole_file_path(ref.resource, source=str(template.path))
            imported = template.load_import(resource, self.access)

            names = self.sections.sections(imported.body)
            for name in names:
                contents = self.sections.get_section(imported.body, name, source=str(imported.path))
                template.body = self.sections.add_to_section(template.body, name, contents)

            logger.debug("Merged %d sections from %s", len(names), imported.path)
            applied.append(
                ResolvedImport(
                    kind=ImportKind.WHOLE_FILE,
                    resource=ref.resource,
                    path=imported.path,
                    sections=tuple(names),
                )
            )
        return applied

    def _merge_inline_imports(self, template: Template) -> List[ResolvedImport]:
        applied: List[ResolvedImport] = []
        splices: List[Tuple[Tuple[int, int], str]] = []
        body = template.body

        # Resolve everything first so the first failing import aborts the merge.
        for ref in self.imports.inline_imports(body):
            file_path, section = self.imports.split_inline_resource(ref.resource, source=str(template.path))
            imported = template.load_import(file_path, self.access)
            text = self.sections.get_section(imported.body, section, source=str(imported.path))

            splices.append((self._replacement_span(body, ref), text))
            applied.append(
                ResolvedImport(
                    kind=ImportKind.INLINE,
                    resource=ref.resource,
                    path=imported.path,
                    sections=(section,),
                )
            )

        # Splice back to front so earlier offsets stay valid.
        for (start, end), text in reversed(splices):
            body = body[:start] + text + body[end:]
        template.body = body
        return applied

    @staticmethod
    def _replacement_span(body: str, ref: ImportReference) -> Tuple[int, int]:
        """Return the span replaced by an inline import.

        Extracted section text starts with the remainder of its header line,
        line break included. When the marker is alone on its line, that text
        takes the place of the marker's indentation and preceding line break.
        """
        line_start = body.rfind("\n", 0, ref.start) + 1
        if body[line_start:ref.start].strip(" \t"):
            return ref.start, ref.end
        if line_start == 0:
            return 0, ref.end

        start = line_start - 1
        if start > 0 and body[start - 1] == "\r":
            start -= 1
        return start, ref.end


def merge_document(
    path: PathLike,
    *,
    access: Optional[FileAccess] = None,
    config: Optional[TemplateConfig] = None,
) -> str:
    """Merge the template at ``path`` and return the merged text."""
    return TemplateMerger(access=access, config=config).merge(path).content


__all__ = [
    "MergeState",
    "ResolvedImport",
    "MergeResult",
    "TemplateMerger",
    "merge_document",
]
