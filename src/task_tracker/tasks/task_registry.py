# src/task_tracker/tasks/task_registry.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import replace
from pathlib import Path

from .errors import AlreadyExistsError, DeserializationError, NotFoundError, StorageIOError
from .task_codec import dump_tasks, load_tasks
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskRegistry:
    """
    In-memory ordered task collection.

    Lookup is by exact (case-sensitive) name. Names are not required to be
    unique: find/edit/remove always act on the first match in insertion order.

    Persistence is explicit:
    - save_to_file never overwrites an existing file
    - load_from_file replaces the whole collection, only after the file parsed cleanly
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = [replace(t) for t in tasks or []]

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    # ---- CRUD ----

    def add(self, task: Task) -> None:
        # The registry owns its records; keep a copy, not the caller's object.
        self._tasks.append(replace(task))
        logger.debug("Task added name=%r priority=%s total=%d", task.name, task.priority, len(self))

    def find_index(self, name: str) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.name == name:
                return i
        return None

    def find(self, name: str) -> Task | None:
        idx = self.find_index(name)
        return self._tasks[idx] if idx is not None else None

    def edit(self, name: str, replacement: Task) -> str:
        """
        Overwrite name, description and priority of the first task called `name`.

        created_at of the stored task is kept.
        """
        idx = self.find_index(name)
        if idx is None:
            raise NotFoundError(f'Task "{name}" not found.')

        stored = self._tasks[idx]
        stored.name = replacement.name
        stored.description = replacement.description
        stored.priority = replacement.priority
        logger.debug("Task edited old=%r new=%r index=%d", name, stored.name, idx)
        return f'Task "{stored.name}" updated.'

    def remove(self, name: str) -> str:
        idx = self.find_index(name)
        if idx is None:
            raise NotFoundError(f'Task "{name}" not found.')

        del self._tasks[idx]
        logger.debug("Task removed name=%r index=%d total=%d", name, idx, len(self))
        return f'Task "{name}" removed.'

    def list_all(self) -> list[Task]:
        return list(self._tasks)

    # ---- persistence ----

    def save_to_file(self, path: str | Path) -> str:
        path = Path(path)
        if path.exists():
            raise AlreadyExistsError(f"File {path} already exists; refusing to overwrite.")

        # Encode first so a serialization failure never leaves a file behind.
        payload = dump_tasks(self._tasks)

        try:
            f = path.open("xb")
        except FileExistsError as e:
            raise AlreadyExistsError(f"File {path} already exists; refusing to overwrite.") from e
        except OSError as e:
            logger.warning("Failed to create %s: %s", path, e)
            raise StorageIOError(f"Cannot create {path}: {e}") from e

        try:
            with f:
                f.write(payload)
        except OSError as e:
            logger.warning("Failed to write tasks to %s: %s", path, e)
            path.unlink(missing_ok=True)
            raise StorageIOError(f"Cannot write {path}: {e}") from e

        logger.info("Saved %d tasks to %s", len(self), path)
        return f"Saved {len(self)} task(s) to {path}."

    def load_from_file(self, path: str | Path) -> str:
        path = Path(path)
        if not path.exists():
            raise NotFoundError(f"File {path} not found.")

        try:
            text = path.read_text("utf-8")
        except UnicodeDecodeError as e:
            raise DeserializationError(f"{path} is not valid UTF-8: {e}") from e
        except OSError as e:
            logger.warning("Failed to read tasks from %s: %s", path, e)
            raise StorageIOError(f"Cannot read {path}: {e}") from e

        loaded = load_tasks(text)
        self._tasks = loaded
        logger.info("Loaded %d tasks from %s", len(loaded), path)
        return f"Loaded {len(loaded)} task(s) from {path}."
