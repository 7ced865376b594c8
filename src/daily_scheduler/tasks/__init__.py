"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority) and the interval overlap rule
- conflicts.py: first-match conflict detection over a task collection
- notifications.py: listener hub fanned out on rejected tasks
- task_registry.py: the in-memory schedule (add/remove/list/edit/complete)
- task_factory.py: strict HH:MM parsing and validation of raw input
- task_api.py: small high-level helpers used by the shells
"""
