"""Save window contents to a file and load them back."""

from __future__ import annotations

import curses
import os


def dump_window(window, path: str | os.PathLike) -> None:
    """Write the window's contents to the file at path."""
    with open(path, "wb") as stream:
        window.putwin(stream)


def load_window(path: str | os.PathLike):
    """Read a window previously written by dump_window."""
    with open(path, "rb") as stream:
        return curses.getwin(stream)


def run_screen_dump(stdscr, path: str | os.PathLike):
    """Dump the whole screen, clear it, then restore it from the file."""
    stdscr.clear()
    stdscr.addstr(20, 20, "Scene 1")
    stdscr.refresh()

    dump_window(stdscr, path)
    stdscr.clear()

    stdscr.getch()

    restored = load_window(path)
    restored.addstr(0, 0, "<loaded dump>")
    restored.refresh()

    restored.getch()
    return restored


def run_window_dump(stdscr, path: str | os.PathLike):
    """Dump a boxed window to a file and show the copy loaded from it."""
    stdscr.clear()
    stdscr.refresh()

    win = curses.newwin(20, 20, 5, 5)
    win.box()
    win.addstr(2, 2, "Win Content")
    win.refresh()

    stdscr.addstr("<press a key to clear and reload window content>")
    stdscr.getch()

    dump_window(win, path)
    stdscr.clear()

    stdscr.addstr("<press a key to load the win content>")
    stdscr.getch()

    stdscr.refresh()
    loaded = load_window(path)
    loaded.refresh()
    stdscr.refresh()

    stdscr.getch()
    return loaded