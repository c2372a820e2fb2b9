# src/taskpad/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from .render import render_board

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _clear_screen() -> None:
    """Best-effort: only clear when attached to a terminal."""
    if sys.stdout.isatty():
        print("\033[H\033[2J", end="", flush=True)


def console_confirm(prompt: str) -> bool:
    """Confirmation gate used by /rm in the console."""
    try:
        answer = input(f"{prompt} [y/N] ").strip().lower()
    except EOFError:
        return False
    return answer in {"y", "yes"}


def _draw(state: AppState) -> None:
    app_name = str(getattr(state.settings, "app_name", "Task Manager Pro"))
    _clear_screen()
    print(render_board(state.store, state.theme, app_name=app_name))
    print()


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (tasks=%s).", len(state.store.tasks))

    def emit(text: str) -> None:
        print(f"[{_ts_local()}] {text}", flush=True)

    _draw(state)
    print("Type /help for commands, /exit to quit.\n")

    while True:
        try:
            user_input = input(f"{state.store.submit_label} > ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        # Bare text is shorthand for "/add <text>".
        line = user_input if user_input.startswith("/") else f"/add {user_input}"

        try:
            reply = command_registry.handle(state, line, emit=emit)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        _draw(state)
        if reply:
            print(f"[{_ts_local()}] {reply}\n")

    logger.info("Console connector finished.")
