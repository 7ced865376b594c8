# src/daily_scheduler/tasks/conflicts.py

from __future__ import annotations

from collections.abc import Iterable

from .task_models import Task


def find_conflict(existing: Iterable[Task], candidate: Task) -> Task | None:
    """
    Return the first existing task that overlaps the candidate, or None.

    Scans in iteration order, so with several overlapping tasks the earliest
    inserted one is reported.
    """
    for task in existing:
        if task.overlaps(candidate):
            return task
    return None
