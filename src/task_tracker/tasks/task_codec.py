# src/task_tracker/tasks/task_codec.py

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from datetime import datetime
from typing import Any

from .errors import DeserializationError, SerializationError
from .task_models import Priority, Task

logger = logging.getLogger(__name__)

# On-disk keys. The timestamp key is "add_time" in existing task files.
KEY_NAME = "name"
KEY_DESCRIPTION = "description"
KEY_PRIORITY = "priority"
KEY_ADD_TIME = "add_time"


def task_to_dict(task: Task) -> dict[str, Any]:
    return {
        KEY_NAME: task.name,
        KEY_DESCRIPTION: task.description,
        KEY_PRIORITY: task.priority.value,
        KEY_ADD_TIME: task.created_at.isoformat(),
    }


def _require_str(raw: dict[str, Any], key: str, index: int) -> str:
    if key not in raw:
        raise DeserializationError(f"task #{index}: missing field {key!r}")
    val = raw[key]
    if not isinstance(val, str):
        raise DeserializationError(
            f"task #{index}: field {key!r} must be a string, got {type(val).__name__}"
        )
    return val


def task_from_dict(raw: Any, index: int = 0) -> Task:
    if not isinstance(raw, dict):
        raise DeserializationError(f"task #{index}: expected an object, got {type(raw).__name__}")

    name = _require_str(raw, KEY_NAME, index)
    description = _require_str(raw, KEY_DESCRIPTION, index)
    tag = _require_str(raw, KEY_PRIORITY, index)
    add_time = _require_str(raw, KEY_ADD_TIME, index)

    try:
        priority = Priority.from_tag(tag)
    except ValueError as e:
        raise DeserializationError(f"task #{index}: unknown priority {tag!r}") from e

    try:
        created_at = datetime.fromisoformat(add_time)
    except ValueError as e:
        raise DeserializationError(f"task #{index}: bad timestamp {add_time!r}") from e
    if created_at.utcoffset() is None:
        raise DeserializationError(f"task #{index}: timestamp {add_time!r} has no UTC offset")

    return Task(name=name, description=description, priority=priority, created_at=created_at)


def dump_tasks(tasks: Iterable[Task]) -> bytes:
    """Encode tasks as a pretty-printed UTF-8 JSON array."""
    try:
        text = json.dumps([task_to_dict(t) for t in tasks], ensure_ascii=False, indent=2)
        # Lone surrogates survive json.dumps and only fail here.
        return text.encode("utf-8")
    except (TypeError, ValueError, AttributeError) as e:
        raise SerializationError(f"cannot encode tasks: {e}") from e


def load_tasks(text: str) -> list[Task]:
    """Decode a JSON array of tasks. Either every element decodes or nothing is returned."""
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError, the int digit limit, and over-deep nesting.
        raise DeserializationError(f"invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise DeserializationError(f"expected a JSON array, got {type(data).__name__}")

    out = [task_from_dict(item, i) for i, item in enumerate(data)]
    logger.debug("Decoded %d tasks", len(out))
    return out
