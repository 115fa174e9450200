"""
Task subsystem.

Components:
- task_models.py: data structures (Task, completion marker helpers)
- task_manager.py: in-memory ordered task list
"""
