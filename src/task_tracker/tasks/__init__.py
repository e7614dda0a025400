"""
Task subsystem.

Components:
- task_models.py: the Task record and its JSON mapping
- deadlines.py: deadline parsing + "valid and in the future" check
- task_store.py: JSON-file storage, CRUD and the expired/pending queries
- errors.py: errors the CLI maps to messages and exit codes
"""
