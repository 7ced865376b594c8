# src/daily_scheduler/tasks/task_api.py

"""
High-level helpers used by shells (console, tests, embedders).

Each helper maps to one user-facing operation and works on an AppState, so the
caller never touches TaskFactory/TaskRegistry wiring directly. Failures are
raised as SchedulerError subclasses; formatting them is the shell's job.
"""

from __future__ import annotations

import dataclasses
import logging

from ..core.state import AppState
from .task_models import TIME_FORMAT, Task

logger = logging.getLogger(__name__)

NO_TASKS_MESSAGE = "No tasks scheduled for the day."


def create_task(
    state: AppState,
    description: str,
    start: str,
    end: str,
    priority: str | None,
) -> Task:
    return state.factory.create(description, start, end, priority)


def schedule_task(
    state: AppState,
    description: str,
    start: str,
    end: str,
    priority: str | None,
) -> Task:
    """Create + add in one step. Raises on invalid input, duplicates and conflicts."""
    task = create_task(state, description, start, end, priority)
    logger.debug("Scheduling %r (%s-%s)", task.description, start, end)
    state.registry.add(task)
    return task


def remove_task(state: AppState, description: str) -> Task:
    return state.registry.remove(description.strip())


def list_tasks(state: AppState, priority: str | None = None) -> list[Task]:
    return state.registry.list(priority=priority)


def edit_task(
    state: AppState,
    description: str,
    *,
    new_description: str | None = None,
    start: str | None = None,
    end: str | None = None,
    priority: str | None = None,
) -> Task:
    """
    Rebuild the task stored under `description` with any fields overridden.

    Omitted fields keep their current values. The result goes through the same
    validation as a fresh task.
    """
    key = description.strip()
    current = state.registry.get(key)

    task = state.factory.create(
        new_description if new_description is not None else current.description,
        start if start is not None else current.start_time.strftime(TIME_FORMAT),
        end if end is not None else current.end_time.strftime(TIME_FORMAT),
        priority if priority is not None else str(current.priority),
    )
    if current.completed:
        task = dataclasses.replace(task, completed=True)
    state.registry.replace(key, task)
    return task


def complete_task(state: AppState, description: str) -> Task:
    return state.registry.mark_completed(description.strip())


def render_tasks(tasks: list[Task]) -> list[str]:
    """Lines as shown to the user; a single placeholder line when there is nothing to show."""
    if not tasks:
        return [NO_TASKS_MESSAGE]
    return [t.format_line() for t in tasks]
