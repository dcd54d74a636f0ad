from datetime import datetime, timedelta, timezone

import pytest

from anniversary_widget.config import ConfigStore
from anniversary_widget.countdown import (
    FINISHED_TEXT,
    TARGET,
    CountdownController,
    countdown_state,
    format_remaining,
    notification_message,
)


@pytest.fixture
def store(tmp_path):
    return ConfigStore(tmp_path / "config.json")


@pytest.fixture
def messages():
    return []


@pytest.fixture
def controller(store, messages):
    return CountdownController(store, TARGET, messages.append)


def test_format_under_a_day():
    assert format_remaining(0) == "00:00:00"


def test_format_whole_day():
    assert format_remaining(86_400) == "1 días, 00:00:00"


@pytest.mark.parametrize("seconds", [1, 59, 3600, 86_399])
def test_format_without_days_has_clock_only(seconds):
    text = format_remaining(seconds)
    assert "días" not in text
    assert len(text.split(":")) == 3


@pytest.mark.parametrize("days", [1, 7, 30, 365])
def test_format_leads_with_days(days):
    assert format_remaining(days * 86_400 + 5).startswith(f"{days} días, ")


def test_state_after_target_is_finished():
    state = countdown_state(TARGET, TARGET + timedelta(seconds=1))
    assert state.finished
    assert state.text == FINISHED_TEXT
    assert state.days is None


def test_state_at_target_is_not_finished():
    state = countdown_state(TARGET, TARGET)
    assert not state.finished
    assert state.days == 0
    assert state.text == format_remaining(0)


def test_state_days_match_remaining():
    state = countdown_state(TARGET, TARGET - timedelta(days=30, seconds=5))
    assert state.days == 30


def test_state_truncates_fractional_seconds():
    state = countdown_state(TARGET, TARGET - timedelta(seconds=10.7))
    assert state.text == format_remaining(10)


def test_state_compares_across_time_zones():
    now_utc = TARGET.astimezone(timezone.utc) - timedelta(hours=2)
    state = countdown_state(TARGET, now_utc)
    assert state.text == format_remaining(2 * 3600)


@pytest.mark.parametrize(
    "milestone, message",
    [
        (30, "🎉¡Queda un mes para el gran aniversario!🎉"),
        (7, "⏳¡Queda solo 1 semana para celebrar los 100 años!⏳"),
        (0, "🎊¡Mañana es el gran aniversario de los 100 años! 🎊"),
        (100, "🎉 ¡Feliz Aniversario de 100 AÑOS! 🥳"),
    ],
)
def test_notification_messages(milestone, message):
    assert notification_message(milestone) == message


def test_unknown_milestone_raises():
    with pytest.raises(ValueError):
        notification_message(15)


def test_milestone_notified_once(controller, store, messages):
    now = TARGET - timedelta(days=30, hours=1)
    controller.update(now)
    controller.update(now + timedelta(seconds=1))
    assert messages == [notification_message(30)]
    assert store.is_notified(30)


def test_ordinary_day_sends_nothing(controller, store, messages):
    state = controller.update(TARGET - timedelta(days=15))
    assert state.days == 15
    assert messages == []
    assert not store.is_notified(15)


def test_finished_sends_anniversary_once(controller, store, messages):
    for offset in (1, 2):
        state = controller.update(TARGET + timedelta(seconds=offset))
        assert state.text == FINISHED_TEXT
    assert messages == [notification_message(100)]
    assert store.is_notified(100)


def test_previously_recorded_notification_is_skipped(store, messages):
    store.save_notification(7)
    controller = CountdownController(store, TARGET, messages.append)
    controller.update(TARGET - timedelta(days=7, minutes=1))
    assert messages == []


def test_update_defaults_to_current_time(store):
    target = datetime.now(timezone.utc) + timedelta(days=2, hours=1)
    state = CountdownController(store, target).update()
    assert state.days == 2