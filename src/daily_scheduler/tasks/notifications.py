# src/daily_scheduler/tasks/notifications.py

from __future__ import annotations

import logging

from ..core.ports import ConflictListener
from .task_models import Task

logger = logging.getLogger(__name__)


class NotificationHub:
    """
    Synchronous fan-out of conflict events.

    - listeners are called in subscription order
    - the same listener may be subscribed twice (and is then called twice)
    - there is no unsubscribe
    - a listener that raises is logged and skipped; the rest still run
    """

    def __init__(self) -> None:
        self._listeners: list[ConflictListener] = []

    def __len__(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: ConflictListener) -> None:
        if not callable(listener):
            raise TypeError("listener must be callable")
        self._listeners.append(listener)
        logger.debug("Listener subscribed total=%d", len(self._listeners))

    def publish(self, task: Task) -> None:
        # Snapshot: a listener subscribing another one mid-publish does not see this event twice.
        for listener in list(self._listeners):
            try:
                listener(task)
            except Exception:
                logger.exception(
                    "Conflict listener %r failed for task=%r", listener, task.description
                )
