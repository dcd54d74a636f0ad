"""Persistent widget settings: window position and notifications already shown."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

CONFIG_PATH = Path("config.json")
WIDGET_OFFSET = (285, 150)


def _checked_int(value: Any, bits: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected an integer, got {value!r}")
    limit = 1 << (bits - 1)
    if not -limit <= value < limit:
        raise ValueError(f"integer {value} does not fit in {bits} bits")
    return value


@dataclass
class Config:
    """The contents of the configuration file."""

    notified: list[int] = field(default_factory=list)
    position: tuple[int, int] = (0, 0)

    @classmethod
    def load(cls, path: str | Path = CONFIG_PATH) -> Config:
        """Read the file at ``path``; a missing or malformed file gives defaults."""
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
            return cls._from_dict(data)
        except (OSError, ValueError, KeyError, TypeError):
            return cls()

    @classmethod
    def _from_dict(cls, data: Any) -> Config:
        if not isinstance(data, dict):
            raise ValueError("configuration must be an object")
        notification = data["notification"]
        position = data["position"]
        if not isinstance(notification, dict) or not isinstance(position, dict):
            raise ValueError("malformed configuration")
        notified = notification["notified"]
        if not isinstance(notified, list):
            raise ValueError("notified must be a list")
        return cls(
            notified=[_checked_int(item, 64) for item in notified],
            position=(_checked_int(position["x"], 32), _checked_int(position["y"], 32)),
        )

    def to_dict(self) -> dict[str, Any]:
        x, y = self.position
        return {
            "notification": {"notified": list(self.notified)},
            "position": {"x": x, "y": y},
        }

    def save(self, path: str | Path = CONFIG_PATH) -> None:
        """Write the configuration as pretty JSON; write failures are ignored."""
        text = json.dumps(self.to_dict(), indent=2, ensure_ascii=False)
        try:
            Path(path).write_text(text, encoding="utf-8")
        except OSError:
            pass


class ConfigStore:
    """Access to the configuration file with a cached set of shown notifications."""

    def __init__(self, path: str | Path = CONFIG_PATH) -> None:
        self.path = Path(path)
        self._notified: set[int] | None = None

    def _notified_ids(self) -> set[int]:
        if self._notified is None:
            self._notified = set(Config.load(self.path).notified)
        return self._notified

    def load_position(self, screen_size: tuple[int, int]) -> tuple[int, int]:
        """Return the saved position, or a spot near the bottom-right corner."""
        x, y = Config.load(self.path).position
        if x != 0 or y != 0:
            return (x, y)
        width, height = screen_size
        return (width - WIDGET_OFFSET[0], height - WIDGET_OFFSET[1])

    def save_position(self, position: tuple[int, int]) -> None:
        config = Config.load(self.path)
        x, y = position
        config.position = (x, y)
        config.save(self.path)

    def is_notified(self, notification_id: int) -> bool:
        return notification_id in self._notified_ids()

    def save_notification(self, notification_id: int) -> None:
        config = Config.load(self.path)
        config.notified.append(notification_id)
        self._notified_ids().add(notification_id)
        config.save(self.path)