"""Single-user task tracker persisted to a JSON file."""

__version__ = "1.0.0"
