"""Countdown to the anniversary and the notifications shown along the way."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Protocol

MONTEVIDEO = timezone(timedelta(hours=-3), "America/Montevideo")
TARGET = datetime(2026, 7, 4, 0, 0, 0, tzinfo=MONTEVIDEO)

FINISHED_TEXT = "Esperanza en la Ciudad"
CELEBRATION_HEADLINE = "¡Feliz Aniversario!"
NOTIFICATION_TITLE = "Aniversario 100 años - Esperanza en la Ciudad"

MILESTONE_DAYS = (30, 7, 0)
ANNIVERSARY_ID = 100

_MESSAGES = {
    30: "🎉¡Queda un mes para el gran aniversario!🎉",
    7: "⏳¡Queda solo 1 semana para celebrar los 100 años!⏳",
    0: "🎊¡Mañana es el gran aniversario de los 100 años! 🎊",
    ANNIVERSARY_ID: "🎉 ¡Feliz Aniversario de 100 AÑOS! 🥳",
}


class NotificationStore(Protocol):
    def is_notified(self, notification_id: int) -> bool: ...

    def save_notification(self, notification_id: int) -> None: ...


@dataclass(frozen=True)
class CountdownState:
    """What the countdown shows; ``days`` is None once the target has passed."""

    text: str
    days: int | None

    @property
    def finished(self) -> bool:
        return self.days is None


def format_remaining(total_seconds: int) -> str:
    days, rest = divmod(total_seconds, 86_400)
    hours, rest = divmod(rest, 3600)
    minutes, seconds = divmod(rest, 60)
    clock = f"{hours:02}:{minutes:02}:{seconds:02}"
    return f"{days} días, {clock}" if days > 0 else clock


def countdown_state(target: datetime, now: datetime) -> CountdownState:
    remaining = target - now
    if remaining < timedelta(0):
        return CountdownState(FINISHED_TEXT, None)
    total_seconds = int(remaining.total_seconds())
    return CountdownState(format_remaining(total_seconds), total_seconds // 86_400)


def notification_message(milestone: int) -> str:
    try:
        return _MESSAGES[milestone]
    except KeyError:
        raise ValueError(f"no notification for milestone {milestone}") from None


class CountdownController:
    """Computes the countdown and fires each milestone notification once."""

    def __init__(
        self,
        store: NotificationStore,
        target: datetime = TARGET,
        notify: Callable[[str], None] | None = None,
    ) -> None:
        self.store = store
        self.target = target
        self.notify = notify if notify is not None else (lambda message: None)

    def _notify_once(self, milestone: int) -> None:
        if not self.store.is_notified(milestone):
            self.store.save_notification(milestone)
            self.notify(notification_message(milestone))

    def update(self, now: datetime | None = None) -> CountdownState:
        if now is None:
            now = datetime.now(timezone.utc)
        state = countdown_state(self.target, now)
        if state.finished:
            self._notify_once(ANNIVERSARY_ID)
        elif state.days in MILESTONE_DAYS:
            self._notify_once(state.days)
        return state