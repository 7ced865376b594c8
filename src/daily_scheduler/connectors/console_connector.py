# src/daily_scheduler/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.ports import OutputSink
from ..core.state import AppState
from ..tasks.errors import conflict_message
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("/exit", "/quit")


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}", flush=True)


def conflict_printer(out: OutputSink = _print_ts) -> Callable[[Task], None]:
    """Listener that announces every rejected task on the console."""

    def _on_conflict(task: Task) -> None:
        out(conflict_message(task))

    return _on_conflict


def run_console_loop(
    state: AppState,
    *,
    read_line: Callable[[str], str] = input,
    out: OutputSink = _print_ts,
) -> None:
    """
    Read commands until /exit, EOF or Ctrl+C.

    read_line/out are injectable so the loop can be driven from tests.
    """
    logger.info("Console connector started.")
    out("[CONSOLE] Daily scheduler. Use /help for commands. Use /exit to quit.")

    while True:
        try:
            user_input = read_line(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            break

        if not user_input:
            continue

        if user_input.lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        if not user_input.startswith("/"):
            out("Commands start with '/'. Use /help to list available commands.")
            continue

        try:
            reply = command_registry.handle(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is not None:
            out(reply)

    logger.info("Console connector finished.")
