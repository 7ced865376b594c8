# src/daily_scheduler/tasks/task_factory.py

from __future__ import annotations

import logging
import re
from datetime import time

from .errors import InvalidTaskError, InvalidTimeFormatError
from .task_models import Priority, Task

logger = logging.getLogger(__name__)

_HHMM = re.compile(r"([0-9]{2}):([0-9]{2})")


def parse_time(text: str | None) -> time:
    """
    Parse a strict 24-hour "HH:MM" string.

    Both fields must be two digits; hour 00-23, minute 00-59.
    Surrounding whitespace is ignored, nothing else is.
    """
    raw = (text or "").strip()
    m = _HHMM.fullmatch(raw)
    if not m:
        raise InvalidTimeFormatError(raw)
    hour, minute = int(m.group(1)), int(m.group(2))
    if hour > 23 or minute > 59:
        raise InvalidTimeFormatError(raw)
    return time(hour, minute)


class TaskFactory:
    """
    Validation boundary between raw user input and Task.

    strict_priority=False keeps the permissive behaviour: any priority text is
    stored (known names are normalised to Priority). With strict_priority=True
    unknown priorities are rejected with InvalidTaskError.
    """

    def __init__(self, *, strict_priority: bool = False) -> None:
        self.strict_priority = strict_priority

    def _priority(self, raw: str | None) -> str:
        known = Priority.parse(raw)
        if known is not None:
            return known
        if self.strict_priority:
            allowed = ", ".join(p.value for p in Priority)
            raise InvalidTaskError(f"Unknown priority {raw!r} (expected one of: {allowed})")
        return (raw or "").strip()

    def create(
        self,
        description: str,
        start_text: str,
        end_text: str,
        priority: str | None,
    ) -> Task:
        # Both times are parsed before anything else is checked.
        start = parse_time(start_text)
        end = parse_time(end_text)

        task = Task(
            description=(description or "").strip(),
            start_time=start,
            end_time=end,
            priority=self._priority(priority),
        )
        logger.debug("Task created %s", task.format_line())
        return task
