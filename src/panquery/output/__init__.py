"""Output formatting for the CLI (Rich, quiet, and JSON modes)."""
