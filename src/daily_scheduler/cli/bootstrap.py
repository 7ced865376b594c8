# src/daily_scheduler/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it takes the settings once and wires a
fresh TaskFactory/TaskRegistry pair into an AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.notifications import NotificationHub
from ..tasks.task_factory import TaskFactory
from ..tasks.task_registry import TaskRegistry

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    strict = bool(getattr(settings, "strict_priority", False))
    state = AppState(
        settings=settings,
        registry=TaskRegistry(NotificationHub()),
        factory=TaskFactory(strict_priority=strict),
    )
    logger.debug("AppState ready strict_priority=%s", strict)
    return state
