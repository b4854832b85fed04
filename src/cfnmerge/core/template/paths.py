"""File access and import path resolution.

The merge engine never touches the filesystem directly. It goes through a
``FileAccess`` object passed in by the caller, so tests and embedding tools
can supply their own storage.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Protocol, Union

from cfnmerge.core.exceptions import TemplateNotFoundError, TemplateReadError
from cfnmerge.core.utils.io import read_text

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class FileAccess(Protocol):
    """Read-only file capability used by the merge engine."""

    def exists(self, path: Path) -> bool: ...

    def read_text(self, path: Path) -> str: ...


class LocalFileAccess:
    """``FileAccess`` backed by the local filesystem."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def exists(self, path: Path) -> bool:
        return Path(path).is_file()

    def read_text(self, path: Path) -> str:
        try:
            return read_text(path, encoding=self.encoding)
        except UnicodeDecodeError as exc:
            raise TemplateReadError(
                f"Could not decode {path} as {self.encoding}: {exc.reason} at byte {exc.start}",
                path=str(path),
                encoding=self.encoding,
            ) from exc

    def __repr__(self) -> str:
        return f"LocalFileAccess(encoding={self.encoding!r})"


def normalize_path(path: PathLike) -> Path:
    """Collapse ``.``/``..`` segments and duplicate separators."""
    return Path(os.path.normpath(str(path)))


def resolve_import_path(referencing_path: PathLike, resource: str, access: FileAccess) -> Path:
    """Resolve ``resource`` as seen from the template at ``referencing_path``.

    Absolute resources are only normalized. Relative ones are resolved against
    the directory of the referencing template, not the working directory.

    Raises:
        TemplateNotFoundError: If the resolved path does not exist.
    """
    candidate = Path(resource)
    if candidate.is_absolute():
        resolved = normalize_path(candidate)
    else:
        resolved = normalize_path(Path(referencing_path).parent / candidate)

    if not access.exists(resolved):
        raise TemplateNotFoundError(
            f"Could not find '{resource}' on disk (resolved to {resolved})",
            path=str(resolved),
            resource=resource,
            context={"referenced_from": str(referencing_path)},
        )
    logger.debug("Resolved import %r from %s to %s", resource, referencing_path, resolved)
    return resolved


__all__ = ["FileAccess", "LocalFileAccess", "PathLike", "normalize_path", "resolve_import_path"]
