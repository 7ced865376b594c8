# src/daily_scheduler/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_factory import TaskFactory
from ..tasks.task_registry import TaskRegistry


@dataclass
class AppState:
    """
    Everything one scheduling session owns.

    There is no process-wide registry: each AppState carries its own, so tests
    and embedders can run several side by side.
    """

    settings: Any
    registry: TaskRegistry
    factory: TaskFactory
