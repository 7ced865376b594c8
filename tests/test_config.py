# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from daily_scheduler.config import Settings

_VARS = (
    "SCHED_APP_NAME",
    "SCHED_LOG_LEVEL",
    "SCHED_LOG_DIR",
    "SCHED_LOG_TO_FILE",
    "SCHED_STRICT_PRIORITY",
    "SCHED_NOTIFY_ON_CONSOLE",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()

    assert s.app_name == "daily-scheduler"
    assert s.log_level == "WARNING"
    assert s.log_dir == Path(".local/scheduler")
    assert s.log_to_file is True
    assert s.strict_priority is False
    assert s.notify_on_console is True


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("SCHED_APP_NAME", "planner")
    monkeypatch.setenv("SCHED_LOG_LEVEL", "debug")
    monkeypatch.setenv("SCHED_LOG_DIR", str(tmp_path))
    monkeypatch.setenv("SCHED_LOG_TO_FILE", "no")
    monkeypatch.setenv("SCHED_STRICT_PRIORITY", "yes")
    monkeypatch.setenv("SCHED_NOTIFY_ON_CONSOLE", "0")

    s = Settings.from_env()

    assert s.app_name == "planner"
    assert s.log_level == "DEBUG"
    assert s.log_dir == tmp_path
    assert s.log_to_file is False
    assert s.strict_priority is True
    assert s.notify_on_console is False


def test_blank_values_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SCHED_APP_NAME", "  ")
    monkeypatch.setenv("SCHED_LOG_DIR", "")
    monkeypatch.setenv("SCHED_STRICT_PRIORITY", "")

    s = Settings.from_env()

    assert s.app_name == "daily-scheduler"
    assert s.log_dir == Path(".local/scheduler")
    assert s.strict_priority is False


def test_settings_are_frozen() -> None:
    s = Settings.from_env()
    with pytest.raises(AttributeError):
        s.strict_priority = True  # type: ignore[misc]


@pytest.mark.parametrize("typo", ["ture", "yse", "maybe", "2"])
def test_malformed_bools_keep_their_default(monkeypatch: pytest.MonkeyPatch, typo: str) -> None:
    monkeypatch.setenv("SCHED_LOG_TO_FILE", typo)
    monkeypatch.setenv("SCHED_NOTIFY_ON_CONSOLE", typo)
    monkeypatch.setenv("SCHED_STRICT_PRIORITY", typo)

    s = Settings.from_env()

    assert s.log_to_file is True
    assert s.notify_on_console is True
    assert s.strict_priority is False


@pytest.mark.parametrize("raw", ["false", "No", " off ", "0", "n"])
def test_explicit_false_values(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("SCHED_LOG_TO_FILE", raw)

    assert Settings.from_env().log_to_file is False
