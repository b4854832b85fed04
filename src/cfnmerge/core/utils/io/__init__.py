"""I/O utilities.

- Core: atomic writes, directory management, text I/O
- YAML: reads with shared locks
"""
from __future__ import annotations

from .core import (
    PathLike,
    atomic_write,
    ensure_parent_dir,
    read_text,
    write_temp_text,
    write_text,
)
from .yaml import read_yaml

__all__ = [
    "PathLike",
    "atomic_write",
    "ensure_parent_dir",
    "read_text",
    "write_text",
    "write_temp_text",
    "read_yaml",
]
