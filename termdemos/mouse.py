"""Place a mark wherever the mouse is clicked."""

from __future__ import annotations

import contextlib
import curses


def mouse_report(x: int, y: int) -> str:
    """Return the status line shown for a click at (x, y)."""
    return f"Mouse press: x:{x} y:{y}"


def run_mouse(stdscr) -> list[tuple[int, int]]:
    """Mark clicks with 'X' until 'q' is pressed; return the (x, y) clicks."""
    stdscr.clear()
    stdscr.keypad(True)
    curses.mousemask(curses.ALL_MOUSE_EVENTS)

    stdscr.addstr(0, 1, "<click somewhere to place a 'X', press q to quit>")

    clicks = []
    while True:
        ch = stdscr.getch()
        if ch == curses.KEY_MOUSE:
            try:
                _id, x, y, _z, _bstate = curses.getmouse()
            except curses.error:
                pass
            else:
                clicks.append((x, y))
                stdscr.addstr(1, 1, mouse_report(x, y))
                with contextlib.suppress(curses.error):
                    stdscr.addstr(y, x, "X")
        elif ch == ord("q"):
            break
        stdscr.refresh()
    return clicks