# src/daily_scheduler/tasks/task_registry.py

from __future__ import annotations

import dataclasses
import logging
import threading

from ..core.ports import ConflictListener
from .conflicts import find_conflict
from .errors import ConflictError, DuplicateTaskError, NotFoundError
from .notifications import NotificationHub
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskRegistry:
    """
    In-memory daily schedule.

    Invariants:
    - descriptions are unique (removal and edits are keyed by description)
    - no two stored tasks overlap (Task.overlaps, inclusive bounds)
    - a failed mutation leaves the collection unchanged

    Thread-safety:
    - one RLock guards the collection; the duplicate/conflict scan and the
      insert happen under the same acquisition
    - conflict listeners run after the lock is released
    """

    def __init__(self, hub: NotificationHub | None = None) -> None:
        self._tasks: list[Task] = []
        self._hub = hub if hub is not None else NotificationHub()
        self._lock = threading.RLock()

    @property
    def hub(self) -> NotificationHub:
        return self._hub

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def __contains__(self, description: object) -> bool:
        with self._lock:
            return self._index_of(description) is not None

    # ---- helpers ----

    def _index_of(self, description: object) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.description == description:
                return i
        return None

    def _reject(self, candidate: Task, existing: Task) -> ConflictError:
        logger.info(
            "Conflict: %r overlaps %r; not scheduled",
            candidate.description,
            existing.description,
        )
        self._hub.publish(candidate)
        return ConflictError(candidate, existing)

    # ---- public API ----

    def subscribe(self, listener: ConflictListener) -> None:
        self._hub.subscribe(listener)

    def add(self, task: Task) -> None:
        with self._lock:
            if self._index_of(task.description) is not None:
                raise DuplicateTaskError(task.description)

            existing = find_conflict(self._tasks, task)
            if existing is None:
                self._tasks.append(task)
                logger.info("Task added %s", task.format_line())
                return

        raise self._reject(task, existing)

    def get(self, description: str) -> Task:
        with self._lock:
            idx = self._index_of(description)
            if idx is None:
                raise NotFoundError(description)
            return self._tasks[idx]

    def remove(self, description: str) -> Task:
        with self._lock:
            idx = self._index_of(description)
            if idx is None:
                raise NotFoundError(description)
            task = self._tasks.pop(idx)
        logger.info("Task removed %r", description)
        return task

    def list(self, priority: str | None = None) -> list[Task]:
        """
        Tasks sorted by start time; equal starts keep insertion order.

        priority filters case-insensitively when given.
        """
        with self._lock:
            tasks = list(self._tasks)
        if priority:
            key = priority.strip().lower()
            tasks = [t for t in tasks if str(t.priority).lower() == key]
        return sorted(tasks, key=lambda t: t.start_time)

    def replace(self, description: str, task: Task) -> None:
        """
        Swap the task stored under `description` for `task`, keeping its slot
        in insertion order.

        The old task is ignored for the conflict check; the new description
        must not belong to any other task.
        """
        with self._lock:
            idx = self._index_of(description)
            if idx is None:
                raise NotFoundError(description)

            other_idx = self._index_of(task.description)
            if other_idx is not None and other_idx != idx:
                raise DuplicateTaskError(task.description)

            others = self._tasks[:idx] + self._tasks[idx + 1 :]
            existing = find_conflict(others, task)
            if existing is None:
                self._tasks[idx] = task
                logger.info("Task %r replaced with %s", description, task.format_line())
                return

        raise self._reject(task, existing)

    def mark_completed(self, description: str) -> Task:
        with self._lock:
            idx = self._index_of(description)
            if idx is None:
                raise NotFoundError(description)
            done = dataclasses.replace(self._tasks[idx], completed=True)
            self._tasks[idx] = done
        logger.info("Task completed %r", description)
        return done
