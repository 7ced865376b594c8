# src/daily_scheduler/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from enum import StrEnum

from .errors import InvalidTaskError

TIME_FORMAT = "%H:%M"


class Priority(StrEnum):
    """
    Task priority.

    Informational only: nothing in the scheduler orders or decides by it.
    """

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @classmethod
    def parse(cls, raw: str | None) -> Priority | None:
        """Case-insensitive lookup; None for anything outside the enumerated set."""
        if not raw:
            return None
        key = raw.strip().lower()
        for member in cls:
            if member.value.lower() == key:
                return member
        return None


@dataclass(slots=True, frozen=True)
class Task:
    description: str
    start_time: time
    end_time: time
    priority: str

    completed: bool = False

    def __post_init__(self) -> None:
        if not self.description or not self.description.strip():
            raise InvalidTaskError("description is required")
        if not self.start_time < self.end_time:
            raise InvalidTaskError(
                f"Start time {self.start_time.strftime(TIME_FORMAT)} must be before "
                f"end time {self.end_time.strftime(TIME_FORMAT)}"
            )

    def overlaps(self, other: Task) -> bool:
        # Inclusive on both bounds: tasks that only touch (08:00 end / 08:00 start) overlap.
        return not (self.end_time < other.start_time or self.start_time > other.end_time)

    def format_line(self) -> str:
        line = (
            f"{self.start_time.strftime(TIME_FORMAT)} - {self.end_time.strftime(TIME_FORMAT)}: "
            f"{self.description} [{self.priority}]"
        )
        if self.completed:
            line += " (completed)"
        return line
