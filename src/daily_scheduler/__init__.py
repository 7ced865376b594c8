"""Single-user daily task scheduler with interval-conflict detection."""

from .tasks.conflicts import find_conflict
from .tasks.errors import (
    ConflictError,
    DuplicateTaskError,
    InvalidTaskError,
    InvalidTimeFormatError,
    NotFoundError,
    SchedulerError,
)
from .tasks.notifications import NotificationHub
from .tasks.task_factory import TaskFactory, parse_time
from .tasks.task_models import Priority, Task
from .tasks.task_registry import TaskRegistry

__all__ = [
    "ConflictError",
    "DuplicateTaskError",
    "InvalidTaskError",
    "InvalidTimeFormatError",
    "NotFoundError",
    "NotificationHub",
    "Priority",
    "SchedulerError",
    "Task",
    "TaskFactory",
    "TaskRegistry",
    "find_conflict",
    "parse_time",
]
