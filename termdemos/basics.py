"""Small screen demonstrations: text, cursor, windows, colours and keys."""

from __future__ import annotations

import contextlib
import curses

WINDOW_HEIGHT = 10
WINDOW_WIDTH = 10


class ColorUnsupportedError(RuntimeError):
    """Raised when the terminal cannot display colours."""


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division that truncates toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def hello_world(stdscr) -> int:
    """Print a greeting and wait for a key; return the key."""
    stdscr.addstr("Hello World")
    stdscr.refresh()
    return stdscr.getch()


def move_and_add(stdscr) -> int:
    """Place 'A' at (5, 5) and 'B' at (10, 10), then wait for a key."""
    stdscr.move(5, 5)
    stdscr.addch("A")
    stdscr.addch(10, 10, "B")
    stdscr.refresh()
    return stdscr.getch()


def wait_for_key(stdscr) -> int:
    """Refresh the screen and block until a key is pressed."""
    stdscr.refresh()
    return stdscr.getch()


def centre_origin(lines: int, cols: int, height: int, width: int) -> tuple[int, int]:
    """Return the (y, x) origin that centres a box of the given size."""
    return _trunc_div(lines - height, 2), _trunc_div(cols - width, 2)


def centered_window(stdscr) -> tuple[int, int]:
    """Draw a boxed window in the middle of the screen; return its origin."""
    lines, cols = stdscr.getmaxyx()
    y, x = centre_origin(lines, cols, WINDOW_HEIGHT, WINDOW_WIDTH)
    stdscr.refresh()

    win = curses.newwin(WINDOW_HEIGHT, WINDOW_WIDTH, y, x)
    win.box()
    win.addch(2, 2, "X")
    win.refresh()

    stdscr.getch()
    return y, x


def colors(stdscr) -> int:
    """Write text in two colour pairs and wait for a key."""
    if not curses.has_colors():
        raise ColorUnsupportedError("Your terminal does not support color")

    curses.start_color()
    curses.init_pair(1, curses.COLOR_RED, curses.COLOR_BLACK)
    curses.init_pair(2, curses.COLOR_BLUE, curses.COLOR_BLACK)

    stdscr.attron(curses.color_pair(1))
    stdscr.addstr(2, 2, "Hello World")
    stdscr.attrset(curses.color_pair(2))
    stdscr.addstr(" in color.")
    stdscr.attroff(curses.color_pair(1))
    stdscr.addstr(" None colored")
    return stdscr.getch()


def key_codes(stdscr) -> list[int]:
    """Show the code of every key until KEY_EXIT; return the codes seen."""
    stdscr.keypad(True)
    pressed = []
    while (ch := stdscr.getch()) != curses.KEY_EXIT:
        pressed.append(ch)
        stdscr.clear()
        stdscr.addstr(f"Key pressed: {ch} (keycode)")
        stdscr.refresh()
    return pressed


def cursor_position(stdscr) -> tuple[int, int]:
    """Write at (10, 10) and report where the cursor ended up as (y, x)."""
    stdscr.addstr(10, 10, "X")
    stdscr.refresh()

    y, x = stdscr.getyx()
    stdscr.addstr(0, 0, f"<Stored position X: {x}, Y: {y}>")
    stdscr.refresh()

    stdscr.getch()
    return y, x


def window_geometry(stdscr) -> tuple[tuple[int, int], tuple[int, int]]:
    """Create a window and report its begin (y, x) and size (rows, cols)."""
    stdscr.clear()
    stdscr.refresh()

    win = curses.newwin(10, 7, 5, 3)
    win.box()
    win.refresh()

    beg_y, beg_x = win.getbegyx()
    max_y, max_x = win.getmaxyx()

    stdscr.addstr(0, 0, f"<begin windows pos x:{beg_x} y:{beg_y}>")
    stdscr.addstr(1, 0, f"<max windows pos x:{max_x} y:{max_y}>")

    stdscr.getch()
    return (beg_y, beg_x), (max_y, max_x)


def hidden_cursor(stdscr) -> int:
    """Hide the cursor, print a line and wait for a key."""
    stdscr.clear()
    with contextlib.suppress(curses.error):
        curses.curs_set(0)
    stdscr.addstr("Hello this is a text.")
    return stdscr.getch()