"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority, FilterSpec, ...)
- task_codec.py: validation helpers + JSON text encoding of the collection
- task_store.py: owned, persisted task collection with change notifications
- deadline.py: overdue / due-soon classification
- filters.py: search/status/priority filtering and counters
"""
