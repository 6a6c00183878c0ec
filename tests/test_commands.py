# tests/test_commands.py

from __future__ import annotations

from task_tracker.cli.commands import CommandRegistry, registry
from task_tracker.tasks.task_models import Priority

from .fakes import ScriptedPrompt


def test_command_registry_routes_2_and_4_params(state) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h4": 0}

    def h2(state, args):
        called["h2"] += 1
        return "h2:" + ",".join(args)

    def h4(state, args, ask, emit):
        called["h4"] += 1
        emit("note")
        return "h4:" + ask("label")

    reg.register("a", h2, "a")
    reg.register("b", h4, "b", aliases=["bee"])

    notes: list[str] = []
    assert reg.handle(state, "a x 'y z'") == "h2:x,y z"
    assert reg.handle(state, "/BEE", ask=lambda _: "answer", emit=notes.append) == "h4:answer"
    assert called == {"h2": 1, "h4": 1}
    assert notes == ["note"]


def test_command_registry_unknown_blank_and_bad_quotes(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "   ") is None
    assert reg.handle(state, "/") is None
    assert "Unknown command" in (reg.handle(state, "nope") or "")
    assert "Could not parse" in (reg.handle(state, 'add "unclosed') or "")


def test_help_lists_commands(state) -> None:
    text = registry.handle(state, "help") or ""
    for word in ("add", "find", "edit", "remove", "list", "save", "load", "exit"):
        assert word in text


def test_add_with_inline_fields(state, emitter) -> None:
    reply = registry.handle(state, 'add "Buy milk" "2 liters" high', emit=emitter)

    assert reply == 'Task "Buy milk" added.'
    task = state.registry.find("Buy milk")
    assert task is not None
    assert task.description == "2 liters"
    assert task.priority is Priority.HIGH
    assert emitter.notes == []


def test_add_prompts_for_missing_fields(state, emitter) -> None:
    ask = ScriptedPrompt(["Write report", "Quarterly numbers", "medium"])
    reply = registry.handle(state, "add", ask=ask, emit=emitter)

    assert reply == 'Task "Write report" added.'
    assert len(ask.labels) == 3
    assert state.registry.find("Write report").priority is Priority.MEDIUM


def test_add_name_from_args_prompts_the_rest(state, emitter) -> None:
    ask = ScriptedPrompt(["desc", "low"])
    registry.handle(state, "add Call Bob", ask=ask, emit=emitter)

    assert state.registry.find("Call Bob") is not None
    assert ask.remaining == 0


def test_add_unknown_priority_warns_and_defaults_low(state, emitter) -> None:
    ask = ScriptedPrompt(["Water plants", "", "urgent"])
    registry.handle(state, "add", ask=ask, emit=emitter)

    assert state.registry.find("Water plants").priority is Priority.LOW
    assert len(emitter.notes) == 1
    assert "urgent" in emitter.notes[0]


def test_add_requires_name(state, emitter) -> None:
    ask = ScriptedPrompt(["   "])
    assert registry.handle(state, "add", ask=ask, emit=emitter) == "Task name is required."
    assert len(state.registry) == 0


def test_find_renders_or_reports_missing(state, make_task) -> None:
    state.registry.add(make_task(name="Write report"))

    assert (registry.handle(state, "find Write report") or "").startswith("Task Name: Write report")
    assert registry.handle(state, "find Write Report") == 'Task "Write Report" not found.'


def test_edit_flow(state, emitter, make_task) -> None:
    state.registry.add(make_task(name="Write report"))

    ask = ScriptedPrompt(["Write final report", "With charts", "High"])
    reply = registry.handle(state, "edit Write report", ask=ask, emit=emitter)

    assert reply == 'Task "Write final report" updated.'
    edited = state.registry.find("Write final report")
    assert edited.priority is Priority.HIGH
    assert edited.created_at == make_task().created_at


def test_edit_missing_does_not_prompt(state, emitter) -> None:
    ask = ScriptedPrompt(["should not be read"])
    reply = registry.handle(state, "edit ghost", ask=ask, emit=emitter)

    assert reply == 'Task "ghost" not found.'
    assert ask.labels == []


def test_remove_and_aliases(state, make_task) -> None:
    state.registry.add(make_task(name="a"))
    state.registry.add(make_task(name="b"))

    assert registry.handle(state, "remove a") == 'Task "a" removed.'
    assert registry.handle(state, "rm a") == 'Task "a" not found.'
    assert registry.handle(state, "delete b") == 'Task "b" removed.'
    assert len(state.registry) == 0


def test_list_empty_and_filled(state, make_task) -> None:
    assert registry.handle(state, "list") == "No tasks."

    state.registry.add(make_task(name="one"))
    state.registry.add(make_task(name="two"))
    text = registry.handle(state, "ls") or ""

    assert text.startswith("Tasks (2):")
    assert text.index("Task Name: one") < text.index("Task Name: two")


def test_save_and_load_use_default_path(state, make_task) -> None:
    state.registry.add(make_task(name="persist me"))

    reply = registry.handle(state, "save") or ""
    assert reply.startswith("Saved 1 task(s)")
    assert state.settings.tasks_path.exists()

    assert (registry.handle(state, "save") or "").startswith("Save failed:")

    state.registry.remove("persist me")
    assert (registry.handle(state, "load") or "").startswith("Loaded 1 task(s)")
    assert state.registry.find("persist me") is not None


def test_save_and_load_explicit_path(state, make_task, tmp_path) -> None:
    target = tmp_path / "my tasks.json"
    state.registry.add(make_task(name="x"))

    assert (registry.handle(state, f'save "{target}"') or "").startswith("Saved")
    assert target.exists()
    assert (registry.handle(state, f"load {tmp_path / 'missing.json'}") or "").startswith(
        "Load failed:"
    )
    assert len(state.registry) == 1
