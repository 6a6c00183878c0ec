# src/task_tracker/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

EXIT_WORDS = ("exit", "quit", "/exit", "/quit")


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def run_console_loop(state: AppState, *, read_line: Callable[[str], str] = input) -> None:
    """
    Read commands until exit/EOF and print each reply.

    EOF or Ctrl+C (also in the middle of a prompt) ends the session.
    """
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "tasks"))
    logger.info("Console connector started (tasks=%d).", len(state.registry))
    _print_ts(f"[{app_name}] Type a command. Use help for commands. Use exit to quit.\n")

    def ask(label: str) -> str:
        return read_line(f"{label}: ")

    def emit(text: str) -> None:
        print(f"[{_ts_local()}] {text}", flush=True)

    while True:
        try:
            user_input = read_line(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in EXIT_WORDS:
            logger.info("Console exit command received.")
            break

        try:
            response = command_registry.handle(state, user_input, ask=ask, emit=emit)
        except EOFError:
            logger.info("Input closed during a prompt, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Prompt interrupted, exiting.")
            print()
            break
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        if response is not None:
            print(response)

    logger.info("Console connector finished (tasks=%d).", len(state.registry))
