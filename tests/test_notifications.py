# tests/test_notifications.py

from __future__ import annotations

import logging

import pytest

from daily_scheduler.tasks.notifications import NotificationHub

from .fakes import FailingListener, RecordingListener, make_task


def test_publish_calls_listeners_in_subscription_order() -> None:
    hub = NotificationHub()
    order: list[str] = []
    hub.subscribe(lambda t: order.append("first:" + t.description))
    hub.subscribe(lambda t: order.append("second:" + t.description))

    hub.publish(make_task("Training Session", "09:30", "10:30", "High"))

    assert order == ["first:Training Session", "second:Training Session"]


def test_same_listener_twice_is_called_twice() -> None:
    hub = NotificationHub()
    rec = RecordingListener()
    hub.subscribe(rec)
    hub.subscribe(rec)

    hub.publish(make_task("X", "07:00", "08:00"))

    assert len(hub) == 2
    assert [t.description for t in rec.received] == ["X", "X"]


def test_failing_listener_does_not_stop_the_rest(caplog: pytest.LogCaptureFixture) -> None:
    hub = NotificationHub()
    bad = FailingListener()
    rec = RecordingListener()
    hub.subscribe(bad)
    hub.subscribe(rec)

    with caplog.at_level(logging.ERROR, logger="daily_scheduler.tasks.notifications"):
        hub.publish(make_task("X", "07:00", "08:00"))

    assert bad.calls == 1
    assert len(rec.received) == 1
    assert "Conflict listener" in caplog.text


def test_publish_without_listeners_is_a_noop() -> None:
    NotificationHub().publish(make_task("X", "07:00", "08:00"))


def test_subscribe_rejects_non_callables() -> None:
    with pytest.raises(TypeError):
        NotificationHub().subscribe("not a function")  # type: ignore[arg-type]
