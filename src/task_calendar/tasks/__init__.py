"""
Task subsystem.

Components:
- task_models.py: data structures (Task, DayStatus, fallback set)
- task_merge.py: shared-defaults merge rules + day status derivation
- date_keys.py: date key format and month arithmetic
- task_store.py: REST-backed store (httpx)
- task_client.py: shared-defaults fallback/merge on top of the store
- task_cache.py: per-session DateKey -> task list cache
- task_manager.py: composing layer used by the views
"""
