"""
Managers for tasklist.

- TaskStore: ordered, index-addressed task collection
- StorageManager: persistence of the task list to a JSON file
"""

from tasklist.managers.task_store import TaskStore
from tasklist.managers.storage_manager import StorageManager

__all__ = [
    "TaskStore",
    "StorageManager",
]
