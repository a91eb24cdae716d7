"""A hand-drawn menu that is navigated with the arrow keys."""

from __future__ import annotations

import contextlib
import curses
from dataclasses import dataclass

OPTIONS = ("Sword", "Bow", "Magic", "Exit")
WIDTH = 30
HEIGHT = 10
ENTER = 10


@dataclass
class SimpleMenu:
    """Selection state of a wrapping menu; the last option ends it."""

    options: tuple[str, ...] = OPTIONS
    highlight: int = 0
    chosen: int | None = None

    def __post_init__(self) -> None:
        if not self.options:
            raise ValueError("a menu needs at least one option")
        self.options = tuple(self.options)

    @property
    def highlighted(self) -> str:
        return self.options[self.highlight]

    @property
    def finished(self) -> bool:
        return self.chosen == len(self.options) - 1

    def up(self) -> None:
        """Move the highlight up, wrapping from the first to the last."""
        self.highlight = (self.highlight - 1) % len(self.options)

    def down(self) -> None:
        """Move the highlight down, wrapping from the last to the first."""
        self.highlight = (self.highlight + 1) % len(self.options)

    def select(self) -> str:
        """Choose the highlighted option and return its name."""
        self.chosen = self.highlight
        return self.options[self.chosen]


def draw_menu(window, menu: SimpleMenu) -> None:
    """Draw the menu in a boxed window, highlighting the current option."""
    window.box()
    for row, (index, option) in enumerate(enumerate(menu.options), start=2):
        attr = curses.A_REVERSE if index == menu.highlight else curses.A_NORMAL
        window.addstr(row, 2, option, attr)
    window.refresh()


def run_simple_menu(stdscr) -> SimpleMenu:
    """Run the menu until its last option is chosen; return the final state."""
    stdscr.clear()
    x = (80 - WIDTH) // 2
    y = (24 - HEIGHT) // 2

    win = curses.newwin(HEIGHT, WIDTH, y, x)
    win.keypad(True)

    stdscr.addstr(0, 0, "Use arrow keys to go up and down, Press enter to select a option")
    stdscr.refresh()

    menu = SimpleMenu()
    draw_menu(win, menu)

    while True:
        ch = win.getch()
        if ch == curses.KEY_UP:
            menu.up()
        elif ch == curses.KEY_DOWN:
            menu.down()
        elif ch == ENTER:
            name = menu.select()
            with contextlib.suppress(curses.error):
                stdscr.addstr(23, 0, f"You choose option {name}\n")
            stdscr.refresh()
        else:
            with contextlib.suppress(curses.error):
                stdscr.addstr(24, 0, f"Character pressed is = {ch:3d} '{chr(ch & 0xFF)}'")
            stdscr.refresh()

        draw_menu(win, menu)
        if menu.finished:
            break

    stdscr.clrtoeol()
    stdscr.refresh()
    return menu