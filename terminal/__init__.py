"""
Terminal package — curses plumbing around the sky scene.

Main exports:
    TerminalScreen — curses session, input poll, frame drawing
    TerminalError  — any terminal failure
    ColorTable     — RGB → curses colour/pair allocation
"""
from .colors import ColorMode, ColorTable
from .screen import EventKind, InputEvent, TerminalError, TerminalScreen

__all__ = [
    "ColorMode",
    "ColorTable",
    "EventKind",
    "InputEvent",
    "TerminalError",
    "TerminalScreen",
]
