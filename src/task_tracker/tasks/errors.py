# src/task_tracker/tasks/errors.py

"""
Error kinds raised by the task registry.

Callers branch on the class; messages are for display only.
"""

from __future__ import annotations


class TaskError(Exception):
    """Base class for every registry failure."""


class NotFoundError(TaskError):
    """No task with the given name, or no file at the given path."""


class AlreadyExistsError(TaskError):
    """Save target already exists (saves never overwrite)."""


class StorageIOError(TaskError):
    """Open/create/read/write failure; the OSError is kept as __cause__."""


class SerializationError(TaskError):
    pass


class DeserializationError(TaskError):
    pass
