# src/task_tracker/cli/commands.py

from __future__ import annotations

import inspect
import logging
import shlex
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks.errors import TaskError
from ..tasks.task_models import Priority, Task

CommandEmitter = Callable[[str], None]
CommandPrompt = Callable[[str], str]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler4 = Callable[[AppState, list[str], CommandPrompt, CommandEmitter], str]
CommandHandler = CommandHandler2 | CommandHandler4

logger = logging.getLogger(__name__)

PROMPT_NAME = "Task name"
PROMPT_DESCRIPTION = "Description"
PROMPT_PRIORITY = "Priority (Low/Medium/High)"


def _no_prompt(label: str) -> str:
    raise EOFError(f"no input available for {label!r}")


def _no_emit(text: str) -> None:
    return None


class CommandRegistry:
    """Command-word registry used by the console loop (help, add, list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        ask: CommandPrompt | None = None,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a line like "add groceries" or "/list".
        Returns a reply string, or None for a blank line.
        """
        line = line.strip()
        if line.startswith("/"):
            line = line[1:]
        if not line:
            return None

        try:
            parts = shlex.split(line)
        except ValueError as e:
            return f"Could not parse command: {e}."
        if not parts:
            return None

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: {name}. Use help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 4

        if nparams >= 4:
            h4 = cast(CommandHandler4, handler)
            return h4(state, args, ask or _no_prompt, emit or _no_emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        lines.append("  exit - Leave the tracker (unsaved tasks are lost).")
        return "\n".join(lines)


registry = CommandRegistry()


def _name_from(args: list[str], ask: CommandPrompt) -> str:
    if args:
        return " ".join(args).strip()
    return ask(PROMPT_NAME).strip()


def _read_priority(raw: str, emit: CommandEmitter) -> Priority:
    priority, recognized = Priority.parse(raw)
    if not recognized:
        logger.debug("Unrecognized priority %r, defaulting to %s", raw, priority)
        emit(f'Unknown priority "{raw}", using {priority.label}.')
    return priority


def _collect_task(args: list[str], ask: CommandPrompt, emit: CommandEmitter) -> Task | None:
    """
    Build a Task from command args and prompts.

    - three or more args: name, description, priority (quote multi-word values)
    - fewer args: they form the name; the rest is prompted
    Returns None when the name is empty.
    """
    if len(args) >= 3:
        name, description, priority_text = args[0], args[1], " ".join(args[2:])
    else:
        name = _name_from(args, ask)
        if not name:
            return None
        description = ask(PROMPT_DESCRIPTION).strip()
        priority_text = ask(PROMPT_PRIORITY).strip()

    name = name.strip()
    if not name:
        return None
    return Task.create(name, description, _read_priority(priority_text, emit))


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(
    state: AppState,
    args: list[str],
    ask: CommandPrompt,
    emit: CommandEmitter,
) -> str:
    """
    add                            -> prompt for every field
    add <name...>                  -> prompt for description and priority
    add <name> <description> <pri> -> no prompts
    """
    task = _collect_task(args, ask, emit)
    if task is None:
        return "Task name is required."
    state.registry.add(task)
    return f'Task "{task.name}" added.'


def cmd_find(
    state: AppState,
    args: list[str],
    ask: CommandPrompt,
    emit: CommandEmitter,
) -> str:
    name = _name_from(args, ask)
    if not name:
        return "Task name is required."
    task = state.registry.find(name)
    if task is None:
        return f'Task "{name}" not found.'
    return task.render()


def cmd_edit(
    state: AppState,
    args: list[str],
    ask: CommandPrompt,
    emit: CommandEmitter,
) -> str:
    name = _name_from(args, ask)
    if not name:
        return "Task name is required."
    # Check before prompting for the replacement fields.
    if state.registry.find(name) is None:
        return f'Task "{name}" not found.'

    emit(f'Editing "{name}". Enter the new values.')
    replacement = _collect_task([], ask, emit)
    if replacement is None:
        return "Task name is required."
    try:
        return state.registry.edit(name, replacement)
    except TaskError as e:
        return str(e)


def cmd_remove(
    state: AppState,
    args: list[str],
    ask: CommandPrompt,
    emit: CommandEmitter,
) -> str:
    name = _name_from(args, ask)
    if not name:
        return "Task name is required."
    try:
        return state.registry.remove(name)
    except TaskError as e:
        return str(e)


def cmd_list(state: AppState, args: list[str]) -> str:
    tasks = state.registry.list_all()
    if not tasks:
        return "No tasks."
    lines = [f"Tasks ({len(tasks)}):"]
    lines.extend(t.render() for t in tasks)
    return "\n".join(lines)


def cmd_save(state: AppState, args: list[str]) -> str:
    path = " ".join(args).strip() or str(state.settings.tasks_path)
    try:
        return state.registry.save_to_file(path)
    except TaskError as e:
        return f"Save failed: {e}"


def cmd_load(state: AppState, args: list[str]) -> str:
    path = " ".join(args).strip() or str(state.settings.tasks_path)
    try:
        return state.registry.load_from_file(path)
    except TaskError as e:
        return f"Load failed: {e}"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "add",
    cmd_add,
    help_text='Add a task: add | add <name> | add "<name>" "<description>" <priority>.',
)
registry.register("find", cmd_find, help_text="Show the first task with this exact name: find <name>.")
registry.register("edit", cmd_edit, help_text="Change name/description/priority: edit <name>.")
registry.register(
    "remove", cmd_remove, help_text="Remove a task: remove <name>.", aliases=["rm", "delete"]
)
registry.register("list", cmd_list, help_text="List all tasks in insertion order.", aliases=["ls"])
registry.register(
    "save", cmd_save, help_text="Save tasks to a new file: save [path]. Never overwrites."
)
registry.register(
    "load", cmd_load, help_text="Replace current tasks with a file's contents: load [path]."
)
