"""Application state shared by the CLI command handlers."""
