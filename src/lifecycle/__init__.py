"""
Lifecycle subsystem
-------------------

Task tracking & introspection for drivers, chains and playback.

External code should import from:
    from lifecycle import TaskRegistry, create_tracked_task
"""

from .task_registry import TaskRegistry, TaskCategory, TaskInfo, create_tracked_task

__all__ = [
    "TaskRegistry",
    "TaskCategory",
    "TaskInfo",
    "create_tracked_task",
]
