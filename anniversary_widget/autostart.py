"""Starting the widget at log-in through the user's registry Run key."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Protocol

try:
    import winreg
except ImportError:
    winreg = None

APP_REG_NAME = "Aniversario100-EELC"
RUN_KEY_PATH = r"Software\Microsoft\Windows\CurrentVersion\Run"


class RunKeyLike(Protocol):
    def get(self, name: str) -> str | None: ...

    def set(self, name: str, value: str) -> None: ...

    def delete(self, name: str) -> None: ...


class RunKey:
    """The current user's Run key; every method raises OSError on failure."""

    def __init__(self, subkey: str = RUN_KEY_PATH) -> None:
        self.subkey = subkey

    def _open(self, write: bool):
        if winreg is None:
            raise OSError("the Windows registry is not available")
        access = winreg.KEY_READ | (winreg.KEY_WRITE if write else 0)
        return winreg.OpenKey(winreg.HKEY_CURRENT_USER, self.subkey, 0, access)

    def get(self, name: str) -> str | None:
        """Return the string stored under ``name``, or None when there is none."""
        with self._open(write=False) as key:
            try:
                value, kind = winreg.QueryValueEx(key, name)
            except FileNotFoundError:
                return None
        if kind in (winreg.REG_SZ, winreg.REG_EXPAND_SZ):
            return value
        return None

    def set(self, name: str, value: str) -> None:
        with self._open(write=True) as key:
            winreg.SetValueEx(key, name, 0, winreg.REG_SZ, value)

    def delete(self, name: str) -> None:
        with self._open(write=True) as key:
            try:
                winreg.DeleteValue(key, name)
            except FileNotFoundError:
                pass


def _current_command() -> str:
    return str(Path(sys.argv[0]).resolve())


class Autostart:
    """Turns start-at-log-in on and off; registry failures are silently ignored."""

    def __init__(
        self,
        name: str = APP_REG_NAME,
        command: str | None = None,
        run_key: RunKeyLike | None = None,
    ) -> None:
        self.name = name
        self.command = command if command is not None else _current_command()
        self.run_key = run_key if run_key is not None else RunKey()

    def is_enabled(self) -> bool:
        try:
            return self.run_key.get(self.name) is not None
        except OSError:
            return False

    def set_enabled(self, enable: bool) -> None:
        try:
            if enable:
                self.run_key.set(self.name, self.command)
            else:
                self.run_key.delete(self.name)
        except OSError:
            pass

    def toggle(self) -> bool:
        """Flip the setting and return the new state."""
        enabled = not self.is_enabled()
        self.set_enabled(enabled)
        return enabled