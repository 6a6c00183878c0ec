# src/task_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_registry import TaskRegistry


@dataclass
class AppState:
    """
    Everything a command handler may touch.

    One instance per session, created in bootstrap and passed explicitly.
    `settings` is typed loosely so tests can hand in a SimpleNamespace.
    """

    settings: Any
    registry: TaskRegistry = field(default_factory=TaskRegistry)
