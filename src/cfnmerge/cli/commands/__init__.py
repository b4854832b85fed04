"""Top-level commands (one module per command)."""
