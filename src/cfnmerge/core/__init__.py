"""Core library: merge engine, configuration, errors and I/O helpers."""
