"""Tkinter desktop widget counting down to an anniversary, with settings and autostart helpers."""

__version__ = "0.1.0"