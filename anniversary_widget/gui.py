"""The countdown widget window, its context menu and the program entry point."""

from __future__ import annotations

import argparse
import sys
import tkinter as tk
from datetime import datetime
from pathlib import Path
from typing import Any

from .autostart import Autostart
from .config import CONFIG_PATH, WIDGET_OFFSET, ConfigStore
from .countdown import (
    CELEBRATION_HEADLINE,
    NOTIFICATION_TITLE,
    TARGET,
    CountdownController,
    CountdownState,
)

WINDOW_TITLE = "Aniversario 100 - EELC"
WIDGET_SIZE = (250, 75)
BACKGROUND = "#98fb98"
FONT = ("Segoe UI", -21, "bold")
HEADLINE = "Aniversario 100 años"
LOADING_TEXT = "Loading ..."
TICK_MS = 1000
NOTIFICATION_MS = 8000

MENU_TOGGLE = "Mostrar/Ocultar"
MENU_AUTOSTART = "Iniciar con Windows"
MENU_CLOSE = "Cerrar"


def default_position(screen_size: tuple[int, int]) -> tuple[int, int]:
    """Place the widget near the bottom-right corner of the screen."""
    width, height = screen_size
    return (width - WIDGET_OFFSET[0], height - WIDGET_OFFSET[1])


class Widget:
    """A small borderless window that counts down to the anniversary."""

    def __init__(
        self,
        root: Any,
        store: ConfigStore,
        autostart: Autostart,
        target: datetime = TARGET,
    ) -> None:
        self.root = root
        self.store = store
        self.autostart = autostart
        self.controller = CountdownController(store, target, self._show_notification)
        self.notifications: list[str] = []
        self.visible = True
        self.autostart_enabled = autostart.is_enabled()
        self._headline = HEADLINE
        self._countdown_text = LOADING_TEXT
        self._timer: Any = None
        self._timer_active = False
        self._drag_offset: tuple[int, int] | None = None
        self._headline_label: tk.Label | None = None
        self._countdown_label: tk.Label | None = None
        self._autostart_var: tk.BooleanVar | None = None
        if isinstance(root, tk.Misc):
            self._build_view()
        self._set_timer(True)

    @property
    def headline(self) -> str:
        return self._headline

    @headline.setter
    def headline(self, text: str) -> None:
        self._headline = text
        if self._headline_label is not None:
            self._headline_label.configure(text=text)

    @property
    def countdown_text(self) -> str:
        return self._countdown_text

    @countdown_text.setter
    def countdown_text(self, text: str) -> None:
        self._countdown_text = text
        if self._countdown_label is not None:
            self._countdown_label.configure(text=text)

    @property
    def timer_running(self) -> bool:
        return self._timer is not None

    def _build_view(self) -> None:
        root = self.root
        root.title(WINDOW_TITLE)
        root.overrideredirect(True)
        root.configure(background=BACKGROUND)

        frame = tk.Frame(root, background=BACKGROUND, width=WIDGET_SIZE[0], height=WIDGET_SIZE[1])
        frame.place(x=0, y=0, width=WIDGET_SIZE[0], height=WIDGET_SIZE[1])

        self._headline_label = tk.Label(
            frame, text=self._headline, font=FONT, background=BACKGROUND, anchor="w"
        )
        self._headline_label.place(x=70, y=14, width=160, height=25)
        self._countdown_label = tk.Label(
            frame, text=self._countdown_text, font=FONT, background=BACKGROUND, anchor="w"
        )
        self._countdown_label.place(x=70, y=38, width=160, height=25)

        self._autostart_var = tk.BooleanVar(root, value=self.autostart_enabled)
        menu = tk.Menu(root, tearoff=0)
        menu.add_command(label=MENU_TOGGLE, command=self.toggle_visible)
        menu.add_checkbutton(
            label=MENU_AUTOSTART, variable=self._autostart_var, command=self.toggle_autostart
        )
        menu.add_command(label=MENU_CLOSE, command=self.close)
        self._menu = menu

        root.bind("<ButtonPress-1>", self._start_drag)
        root.bind("<B1-Motion>", self._drag)
        root.bind("<ButtonRelease-1>", self._end_drag)
        root.bind("<Button-3>", self._popup_menu)
        root.protocol("WM_DELETE_WINDOW", self._on_window_close)

    def _popup_menu(self, event: Any) -> None:
        try:
            self._menu.tk_popup(event.x_root, event.y_root)
        finally:
            self._menu.grab_release()

    def _start_drag(self, event: Any) -> None:
        self._drag_offset = (
            event.x_root - self.root.winfo_x(),
            event.y_root - self.root.winfo_y(),
        )

    def _drag(self, event: Any) -> None:
        if self._drag_offset is None:
            return
        dx, dy = self._drag_offset
        self.root.geometry(f"+{event.x_root - dx}+{event.y_root - dy}")

    def _end_drag(self, event: Any) -> None:
        if self._drag_offset is None:
            return
        self._drag_offset = None
        self._save_position()

    def _save_position(self) -> None:
        self.store.save_position((self.root.winfo_x(), self.root.winfo_y()))

    def _on_window_close(self) -> None:
        self._save_position()
        self.close()

    def _show_notification(self, message: str) -> None:
        self.notifications.append(message)
        if not isinstance(self.root, tk.Misc):
            return
        popup = tk.Toplevel(self.root)
        popup.title(NOTIFICATION_TITLE)
        tk.Label(popup, text=NOTIFICATION_TITLE, font=("Segoe UI", 11, "bold")).pack(
            padx=16, pady=(12, 4)
        )
        tk.Label(popup, text=message, font=("Segoe UI", 11)).pack(padx=16, pady=(0, 12))
        popup.after(NOTIFICATION_MS, popup.destroy)

    def _set_timer(self, start: bool) -> None:
        self._timer_active = start
        if start and self._timer is None:
            self._timer = self.root.after(TICK_MS, self._on_timer)
        elif not start and self._timer is not None:
            self.root.after_cancel(self._timer)
            self._timer = None

    def _on_timer(self) -> None:
        self._timer = None
        self.tick()
        if self._timer_active:
            self._set_timer(True)

    def tick(self) -> CountdownState:
        """Refresh the countdown; once the date has come, celebrate and stop."""
        state = self.controller.update()
        self.countdown_text = state.text
        if state.finished:
            self.headline = CELEBRATION_HEADLINE
            self._set_timer(False)
        return state

    def toggle_visible(self) -> bool:
        """Hide or show the window; the timer runs only while it is shown."""
        self.visible = not self.visible
        if self.visible:
            self.root.deiconify()
            self.root.overrideredirect(True)
        else:
            self.root.overrideredirect(False)
            self.root.iconify()
        self._set_timer(self.visible)
        return self.visible

    def toggle_autostart(self) -> bool:
        """Flip start-at-log-in and return the new state."""
        enabled = self.autostart.toggle()
        self.autostart_enabled = enabled
        if self._autostart_var is not None:
            self._autostart_var.set(enabled)
        return enabled

    def close(self) -> None:
        self._set_timer(False)
        self.root.destroy()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="anniversary-widget", description="Desktop countdown to the anniversary."
    )
    parser.add_argument(
        "--config", type=Path, default=CONFIG_PATH, help="path of the settings file"
    )
    args = parser.parse_args(argv)

    try:
        root = tk.Tk()
    except tk.TclError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    store = ConfigStore(args.config)
    x, y = store.load_position((root.winfo_screenwidth(), root.winfo_screenheight()))
    width, height = WIDGET_SIZE
    root.geometry(f"{width}x{height}+{x}+{y}")
    Widget(root, store, Autostart())
    root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())