"""Stacked panels: creation, user values, moving, resizing and hiding."""

from __future__ import annotations

import contextlib
import curses
import curses.panel
from dataclasses import dataclass

HEIGHT = 5
WIDTH = 10
ORIGIN_Y = 2
ORIGIN_X = 2
QUIT = ord("q")


@dataclass
class PanelPosition:
    """Panel origin that arrow keys move; up and left stop at 1."""

    y: int = ORIGIN_Y
    x: int = ORIGIN_X

    def move(self, key: int) -> tuple[int, int]:
        """Apply an arrow key and return the new (y, x)."""
        if key == curses.KEY_UP:
            if self.y > 1:
                self.y -= 1
        elif key == curses.KEY_DOWN:
            self.y += 1
        elif key == curses.KEY_LEFT:
            if self.x > 1:
                self.x -= 1
        elif key == curses.KEY_RIGHT:
            self.x += 1
        return self.y, self.x


def resized_size(height: int, width: int, multiple: int) -> tuple[int, int]:
    """Return the (height, width) grown by multiple in both directions."""
    return height + multiple, width + multiple


def _boxed_window(height: int, width: int, y: int, x: int):
    win = curses.newwin(height, width, y, x)
    win.box()
    return win


def _show_panels() -> None:
    curses.panel.update_panels()
    curses.doupdate()


def stacked_panels(stdscr) -> list:
    """Show two overlapping boxed panels and wait for a key."""
    stdscr.clear()
    windows = [_boxed_window(HEIGHT, WIDTH, ORIGIN_Y + i, ORIGIN_X + i) for i in range(2)]
    panels = [curses.panel.new_panel(win) for win in windows]
    _show_panels()
    stdscr.getch()
    return panels


def panel_user_value(stdscr) -> str:
    """Store a value on a panel, read it back and display it."""
    stdscr.clear()
    win = curses.newwin(HEIGHT, WIDTH, ORIGIN_Y, ORIGIN_X)
    panel = curses.panel.new_panel(win)

    panel.set_userptr("stored panel value")
    received = panel.userptr()

    stdscr.addstr(2, 2, received)
    stdscr.getch()
    return received


def run_panel_move(stdscr) -> PanelPosition:
    """Move a panel with the arrow keys until 'q'; return its position."""
    stdscr.keypad(True)
    stdscr.clear()

    win = _boxed_window(HEIGHT, WIDTH, ORIGIN_Y, ORIGIN_X)
    panel = curses.panel.new_panel(win)

    stdscr.addstr("<use the arrow keys to move the panel>")
    stdscr.refresh()
    _show_panels()

    position = PanelPosition()
    while (ch := stdscr.getch()) != QUIT:
        position.move(ch)
        stdscr.clear()
        stdscr.addstr(0, 0, f"Panel Position: x: {position.x} y: {position.y}")
        with contextlib.suppress(curses.error):
            panel.move(position.y, position.x)
        stdscr.refresh()
        _show_panels()
    return position


def run_panel_resize(stdscr) -> tuple[int, int]:
    """Grow or shrink a panel with up and down until 'q'; return its size."""
    stdscr.clear()
    stdscr.refresh()
    stdscr.keypad(True)

    win = _boxed_window(HEIGHT, WIDTH, ORIGIN_Y, ORIGIN_X)
    panel = curses.panel.new_panel(win)
    win.refresh()
    stdscr.addstr("<press up and down to scale the panel>")

    multiple = 0
    while (ch := stdscr.getch()) != QUIT:
        if ch == curses.KEY_UP:
            multiple += 1
        elif ch == curses.KEY_DOWN:
            multiple -= 1

        height, width = resized_size(HEIGHT, WIDTH, multiple)
        win = _boxed_window(height, width, ORIGIN_Y, ORIGIN_X)
        panel.replace(win)

        stdscr.refresh()
        _show_panels()
        win.refresh()
    return resized_size(HEIGHT, WIDTH, multiple)


def run_panel_visibility(stdscr) -> bool:
    """Show with 's' and hide with 'h' until 'q'; return whether it is hidden."""
    stdscr.clear()

    win = _boxed_window(HEIGHT, WIDTH, ORIGIN_Y, ORIGIN_X)
    panel = curses.panel.new_panel(win)

    _show_panels()
    win.refresh()
    stdscr.addstr("<use the key s for show panel and h for hidding panel>")

    while (ch := stdscr.getch()) != QUIT:
        if ch == ord("s"):
            panel.show()
        elif ch == ord("h"):
            panel.hide()
        _show_panels()
    return panel.hidden()