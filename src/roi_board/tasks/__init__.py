"""
Task subsystem.

Components:
- task_models.py: data structures (Task, DerivedTask, Priority)
- metrics.py: ROI calculation and formatting
- ranking.py: ROI / priority / title ordering
- task_store.py: in-memory store implementing the add/update/delete intents
- task_api.py: derive + rank and form-style submit helpers
- task_view.py: plain-text table and details rendering
"""
