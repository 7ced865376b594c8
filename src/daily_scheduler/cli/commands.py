# src/daily_scheduler/cli/commands.py

from __future__ import annotations

import logging
import shlex
from collections.abc import Callable

from ..core.state import AppState
from ..tasks import task_api
from ..tasks.errors import ConflictError, SchedulerError

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Slash-command registry used by the console shell (/add, /list, ...)."""

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
    ) -> str | None:
        """
        Handle a string like '/command args'. Arguments follow shell quoting,
        so '/add "Team Meeting" 09:00 10:00 Medium' has four arguments.

        Returns a reply string or None if not a command.
        Scheduling failures come back as a reply; anything else propagates.
        """
        if not line.startswith("/"):
            return None

        try:
            parts = shlex.split(line[1:])
        except ValueError as e:
            return f"Cannot parse command: {e}."
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return handler(state, args)
        except SchedulerError as e:
            logger.debug("/%s rejected: %s", name, e)
            return f"Error: {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add "<description>" HH:MM HH:MM <priority>
    """
    if len(args) != 4:
        return 'Usage: /add "<description>" <start HH:MM> <end HH:MM> <Low|Medium|High>'

    description, start, end, priority = args
    try:
        task = task_api.schedule_task(state, description, start, end, priority)
    except ConflictError as e:
        # The conflict itself was already announced through the listeners.
        return f"Not scheduled; overlaps: {e.existing.format_line()}"
    return f"Task added successfully. No conflicts. {task.format_line()}"


def cmd_remove(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return 'Usage: /remove "<description>"'
    task_api.remove_task(state, args[0])
    return "Task removed successfully."


def cmd_list(state: AppState, args: list[str]) -> str:
    """
    /list            -> all tasks by start time
    /list <priority> -> only tasks with that priority
    """
    priority = args[0] if args else None
    return "\n".join(task_api.render_tasks(task_api.list_tasks(state, priority=priority)))


_EDIT_FIELDS = {
    "description": "new_description",
    "desc": "new_description",
    "start": "start",
    "end": "end",
    "priority": "priority",
}


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit "<description>" start=HH:MM end=HH:MM priority=<p> description="<new>"
    Any subset of the fields may be given.
    """
    usage = (
        'Usage: /edit "<description>" [start=HH:MM] [end=HH:MM] '
        '[priority=<p>] [description="<new description>"]'
    )
    if len(args) < 2:
        return usage

    changes: dict[str, str] = {}
    for item in args[1:]:
        key, sep, value = item.partition("=")
        field = _EDIT_FIELDS.get(key.strip().lower())
        if not sep or field is None:
            return usage
        changes[field] = value

    try:
        task = task_api.edit_task(state, args[0], **changes)
    except ConflictError as e:
        return f"Not updated; overlaps: {e.existing.format_line()}"
    return f"Task updated. {task.format_line()}"


def cmd_done(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return 'Usage: /done "<description>"'
    task = task_api.complete_task(state, args[0])
    return f"Marked as completed. {task.format_line()}"


def cmd_status(state: AppState, args: list[str]) -> str:
    strict = bool(getattr(state.settings, "strict_priority", False))
    return (
        "Status:\n"
        f"  Tasks scheduled: {len(state.registry)}\n"
        f"  Conflict listeners: {len(state.registry.hub)}\n"
        f"  Priority check: {'STRICT' if strict else 'OFF'}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "add", cmd_add, help_text='Add a task: /add "<description>" HH:MM HH:MM <priority>.'
)
registry.register(
    "remove", cmd_remove, help_text='Remove a task: /remove "<description>".', aliases=["rm"]
)
registry.register(
    "list", cmd_list, help_text="View tasks by start time: /list [priority].", aliases=["ls"]
)
registry.register(
    "edit", cmd_edit, help_text='Edit a task: /edit "<description>" start=HH:MM end=HH:MM ...'
)
registry.register("done", cmd_done, help_text='Mark a task completed: /done "<description>".')
registry.register("status", cmd_status, help_text="Show task count and settings.")
