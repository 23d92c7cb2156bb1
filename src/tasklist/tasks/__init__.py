"""
Task subsystem.

Components:
- task_models.py: the Task record and its JSON record shape
- task_errors.py: typed errors raised to the shell (+ id parsing)
- task_store.py: JSON-file storage with load / add / complete / delete
"""
