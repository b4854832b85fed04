"""Template composition engine.

- ``sections``  - header scanning, section extraction and insertion
- ``imports``   - ``# @import`` marker scanning
- ``paths``     - file access and import path resolution
- ``document``  - the ``Template`` value
- ``merger``    - whole-file then inline merge passes
"""
from __future__ import annotations

from .document import Template
from .imports import ImportKind, ImportReference, ImportScanner
from .merger import MergeResult, MergeState, ResolvedImport, TemplateMerger, merge_document
from .paths import FileAccess, LocalFileAccess, normalize_path, resolve_import_path
from .sections import SectionHeader, SectionScanner

__all__ = [
    "Template",
    "ImportKind",
    "ImportReference",
    "ImportScanner",
    "MergeResult",
    "MergeState",
    "ResolvedImport",
    "TemplateMerger",
    "merge_document",
    "FileAccess",
    "LocalFileAccess",
    "normalize_path",
    "resolve_import_path",
    "SectionHeader",
    "SectionScanner",
]
