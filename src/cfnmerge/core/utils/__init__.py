"""Shared utilities (I/O, dictionary merging)."""
