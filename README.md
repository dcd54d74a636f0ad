# anniversary_widget

This is a small borderless desktop widget built with Tkinter. It counts down to
the 100th anniversary on 4 July 2026 at 00:00 in Montevideo, which is UTC-3.

It shows the time left as `N días, HH:MM:SS`. When less than a day remains, it
shows only `HH:MM:SS`. When the date has passed, the countdown reads
"Esperanza en la Ciudad", the headline changes to "¡Feliz Aniversario!" and
the timer stops.

The widget shows a notification once for each of these milestones:

- 30 whole days left
- 7 whole days left
- less than one day left
- the anniversary itself

The program records each milestone it has notified, so it does not repeat one
after a restart.

## Installation

```
pip install .
```

The widget needs only the standard library, including Tkinter.

## Usage

```
anniversary-widget [--config PATH]
```

`--config` sets the settings file. The default is `config.json` in the working
directory.

- To move the widget, drag it with the left mouse button. When you release the
  button, the program saves the new position. It also saves the position when
  the window manager closes the window.
- Right-click the widget to open its menu:
  - **Mostrar/Ocultar** minimises the widget or restores it. The countdown
    timer runs only while the widget is shown.
  - **Iniciar con Windows** turns start-at-log-in on or off.
  - **Cerrar** stops the timer and quits.

The settings file looks like this:

```json
{
  "notification": {
    "notified": [30, 7]
  },
  "position": {
    "x": 1635,
    "y": 930
  }
}
```

A position of `0, 0` means the position is not set. The widget then places
itself 285 pixels from the right edge of the screen and 150 pixels from the
bottom edge. If the file is missing or malformed, the defaults are used.

## Library use

The countdown logic does not need the GUI:

```python
from datetime import datetime, timezone
from anniversary_widget.countdown import TARGET, countdown_state, format_remaining

state = countdown_state(TARGET, datetime.now(timezone.utc))
print(state.text, state.days, state.finished)
print(format_remaining(90061))   # "1 días, 01:01:01"
```

The package has these parts:

- `anniversary_widget.countdown`
  - `CountdownController` computes the state on each `update()`. It calls a
    `notify` callback once per milestone and records the milestone in its
    store.
  - `notification_message()` returns the text for a milestone. It raises
    `ValueError` for an unknown milestone.
- `anniversary_widget.config`
  - `Config` reads and writes the settings file.
  - `ConfigStore` provides `load_position`, `save_position`, `is_notified` and
    `save_notification`.
- `anniversary_widget.autostart`
  - `Autostart` (`is_enabled`, `set_enabled`, `toggle`) keeps the start-at-log-in
    setting. It uses a `RunKey`, which is the current user's registry Run key.
    You can pass any object with `get`, `set` and `delete` methods instead.
- `anniversary_widget.gui`
  - `Widget` is the window.
  - `default_position()` computes the bottom-right placement.
  - `main()` is the command above.

## What it does not do

- It has no system tray icon. The menu opens from a right-click on the widget
  itself.
- Notifications are not system notifications. Each one is a small Tkinter
  window that closes itself after eight seconds.
- Start-at-log-in works only on Windows, through the registry. On other
  systems the setting stays off, and turning it on has no effect.
- The widget is not kept above other windows.

## Tests

```
pip install .[test]
pytest
```