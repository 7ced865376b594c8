# src/daily_scheduler/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The registry depends on Protocols instead of concrete shells, so a console
printer, a test recorder or any other callable can observe it.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task


class ConflictListener(Protocol):
    """Called once per rejected task with the candidate that was turned away."""

    def __call__(self, task: Task) -> None: ...


class OutputSink(Protocol):
    """Where the console shell writes user-facing lines."""

    def __call__(self, text: str) -> None: ...
