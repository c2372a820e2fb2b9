"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskInput, TaskStats, modes)
- task_views.py: pure filter/sort/statistics helpers
- task_store.py: TaskStore, the owner of the collection and its persistence
- task_api.py: gesture-level helpers (form submit, confirmed delete)
"""
