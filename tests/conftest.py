# tests/conftest.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path
from types import SimpleNamespace

import pytest

from task_tracker.core.state import AppState
from task_tracker.tasks.task_models import Priority, Task
from task_tracker.tasks.task_registry import TaskRegistry

from .fakes import RecordingEmitter

FIXED_TZ = timezone(timedelta(hours=2))


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the command layer.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="tasks-test",
        log_level="WARNING",
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.json",
        autoload=False,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    return AppState(settings=settings, registry=TaskRegistry())


@pytest.fixture()
def emitter() -> RecordingEmitter:
    return RecordingEmitter()


@pytest.fixture()
def make_task():
    """Factory for tasks with a fixed, timezone-aware creation time."""

    def _make(
        name: str = "Write report",
        description: str = "Quarterly numbers",
        priority: Priority = Priority.MEDIUM,
        minutes: int = 0,
    ) -> Task:
        created = datetime(2024, 5, 1, 9, 30, 15, 123456, tzinfo=FIXED_TZ) + timedelta(minutes=minutes)
        return Task(name=name, description=description, priority=priority, created_at=created)

    return _make
