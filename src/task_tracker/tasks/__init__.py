"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority)
- task_registry.py: in-memory ordered registry with CRUD + save/load
- task_codec.py: JSON encoding of the task list (on-disk format)
- errors.py: error kinds raised by the registry
"""

from .errors import (
    AlreadyExistsError,
    DeserializationError,
    NotFoundError,
    SerializationError,
    StorageIOError,
    TaskError,
)
from .task_models import Priority, Task
from .task_registry import TaskRegistry

__all__ = [
    "AlreadyExistsError",
    "DeserializationError",
    "NotFoundError",
    "Priority",
    "SerializationError",
    "StorageIOError",
    "Task",
    "TaskError",
    "TaskRegistry",
]
