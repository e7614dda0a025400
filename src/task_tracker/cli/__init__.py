"""Command-line entry point, bootstrap, command registry and text views."""
