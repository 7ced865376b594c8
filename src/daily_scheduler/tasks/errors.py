# src/daily_scheduler/tasks/errors.py

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .task_models import Task


class SchedulerError(Exception):
    """Base class for every recoverable scheduling failure."""


class InvalidTimeFormatError(SchedulerError, ValueError):
    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid time format: {text!r} (expected HH:MM, 24-hour)")
        self.text = text


class InvalidTaskError(SchedulerError, ValueError):
    pass


class DuplicateTaskError(SchedulerError):
    def __init__(self, description: str) -> None:
        super().__init__(f"Task already exists - {description}")
        self.description = description


class ConflictError(SchedulerError):
    """
    Raised when a candidate task overlaps an existing one.

    The message names the candidate, not the task it collided with.
    """

    def __init__(self, candidate: Task, existing: Task) -> None:
        super().__init__(conflict_message(candidate))
        self.candidate = candidate
        self.existing = existing

    @property
    def description(self) -> str:
        return self.candidate.description


class NotFoundError(SchedulerError, LookupError):
    def __init__(self, description: str) -> None:
        super().__init__(f"Task not found - {description}")
        self.description = description


def conflict_message(task: Task) -> str:
    return f"Task conflicts with existing schedule - {task.description}"
