"""In-memory template documents."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from cfnmerge.core.exceptions import InvalidArgumentError, TemplateNotFoundError

from .paths import FileAccess, PathLike, normalize_path, resolve_import_path


@dataclass
class Template:
    """A template body and the normalized path it was read from.

    The path is only used to resolve relative imports found in ``body``.
    """

    body: str
    path: Path

    def __post_init__(self) -> None:
        self.path = normalize_path(self.path)

    @classmethod
    def from_path(cls, path: PathLike, access: FileAccess) -> Template:
        """Load the root template.

        Raises:
            InvalidArgumentError: If ``path`` is empty or blank (including ``Path("")``).
            TemplateNotFoundError: If the file does not exist.
        """
        # Path("") renders as "."
        if not str(path).strip() or (isinstance(path, Path) and str(path) == "."):
            raise InvalidArgumentError("Expected a template file path")

        normalized = normalize_path(path)
        if not access.exists(normalized):
            raise TemplateNotFoundError(f"Could not find '{path}' on disk", path=str(normalized))
        return cls(body=access.read_text(normalized), path=normalized)

    def load_import(self, resource: str, access: FileAccess) -> Template:
        """Load a template referenced from this one."""
        resolved = resolve_import_path(self.path, resource, access)
        return Template(body=access.read_text(resolved), path=resolved)


__all__ = ["Template"]
