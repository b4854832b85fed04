"""Filesystem helpers for CLI output and configuration files.

The merge engine reads templates through ``FileAccess``; these helpers cover
everything else: writing merged output and reading plain text files.
"""
from __future__ import annotations

import fcntl
import os
import tempfile
from pathlib import Path
from typing import Callable, Optional, TextIO, Union

PathLike = Union[str, Path]


def ensure_parent_dir(path: PathLike) -> None:
    """Create the parent directory of ``path`` if it is missing."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def atomic_write(path: PathLike, write_fn: Callable[[TextIO], None], *, encoding: str = "utf-8") -> None:
    """Write ``path`` through a sibling temp file that replaces it on success.

    Readers never observe a half-written file. When ``write_fn`` raises, the
    target is left untouched and the temp file is removed.
    """
    target = Path(path)
    ensure_parent_dir(target)

    tmp_path: Optional[Path] = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding=encoding,
            dir=str(target.parent),
            prefix=f".{target.name}.",
            delete=False,
        ) as f:
            tmp_path = Path(f.name)
            fcntl.flock(f.fileno(), fcntl.LOCK_EX)
            write_fn(f)
            f.flush()
            os.fsync(f.fileno())
            fcntl.flock(f.fileno(), fcntl.LOCK_UN)
        os.replace(tmp_path, target)
        tmp_path = None
    finally:
        if tmp_path is not None:
            tmp_path.unlink(missing_ok=True)


def read_text(path: PathLike, *, encoding: str = "utf-8") -> str:
    """Read a whole text file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Text file not found: {path}")
    return path.read_text(encoding=encoding)


def write_text(path: PathLike, content: str, *, encoding: str = "utf-8") -> None:
    """Atomically replace ``path`` with ``content``."""
    atomic_write(path, lambda f: f.write(content), encoding=encoding)


def write_temp_text(content: str, *, prefix: str, suffix: str, encoding: str = "utf-8") -> Path:
    """Write ``content`` to a new file in the system temp directory.

    The file is kept after the call; its path is returned.
    """
    fd, name = tempfile.mkstemp(prefix=prefix, suffix=suffix)
    with os.fdopen(fd, "w", encoding=encoding) as f:
        f.write(content)
    return Path(name)


__all__ = [
    "PathLike",
    "ensure_parent_dir",
    "atomic_write",
    "read_text",
    "write_text",
    "write_temp_text",
]
