# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from daily_scheduler.cli.bootstrap import create_initial_state
from daily_scheduler.core.state import AppState
from daily_scheduler.tasks.task_factory import TaskFactory
from daily_scheduler.tasks.task_registry import TaskRegistry

from .fakes import RecordingListener


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="daily-scheduler-test",
        log_level="DEBUG",
        log_dir=tmp_path / "logs",
        log_to_file=False,
        strict_priority=False,
        notify_on_console=True,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return create_initial_state(settings=settings)


@pytest.fixture()
def factory() -> TaskFactory:
    return TaskFactory()


@pytest.fixture()
def registry() -> TaskRegistry:
    return TaskRegistry()


@pytest.fixture()
def listener(registry: TaskRegistry) -> RecordingListener:
    rec = RecordingListener()
    registry.subscribe(rec)
    return rec
