# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- builds AppState with an empty TaskRegistry,
- optionally preloads the default tasks file.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.errors import TaskError
from ..tasks.task_registry import TaskRegistry

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    state = AppState(settings=settings, registry=TaskRegistry())

    if getattr(settings, "autoload", False):
        preload_tasks(state)

    return state


def preload_tasks(state: AppState) -> bool:
    """Best-effort load of the default tasks file. Returns True if it loaded."""
    path = state.settings.tasks_path
    if not path.exists():
        logger.info("Autoload skipped: %s does not exist", path)
        return False
    try:
        state.registry.load_from_file(path)
    except TaskError as e:
        logger.warning("Autoload of %s failed: %s", path, e)
        return False
    return True
