"""Screen demonstrations of the grid menu."""

from __future__ import annotations

import contextlib
import curses
import functools
from collections.abc import Callable, Mapping

from termdemos.menu import Menu, MenuError, MenuItem, MenuRequest

QUIT = ord("q")
ENTER = 10
MARK = "-"

_KEY_REQUESTS = {
    curses.KEY_UP: MenuRequest.UP_ITEM,
    curses.KEY_DOWN: MenuRequest.DOWN_ITEM,
    curses.KEY_LEFT: MenuRequest.LEFT_ITEM,
    curses.KEY_RIGHT: MenuRequest.RIGHT_ITEM,
    curses.KEY_NPAGE: MenuRequest.SCR_DPAGE,
    curses.KEY_PPAGE: MenuRequest.SCR_UPAGE,
    ord(" "): MenuRequest.TOGGLE_ITEM,
}

_VERTICAL = frozenset({MenuRequest.UP_ITEM, MenuRequest.DOWN_ITEM})
_PAGES = frozenset({MenuRequest.SCR_UPAGE, MenuRequest.SCR_DPAGE})
_HORIZONTAL = frozenset({MenuRequest.LEFT_ITEM, MenuRequest.RIGHT_ITEM})


def request_for_key(key: int) -> MenuRequest | None:
    """Return the menu request bound to a key, or None."""
    return _KEY_REQUESTS.get(key)


def draw_menu(window, menu: Menu) -> None:
    """Draw the visible part of the menu at the window's top left corner."""
    name_width = max(len(item.name) for item in menu.items)
    desc_width = max(len(item.description) for item in menu.items)
    text_width = name_width + (1 + desc_width if menu.show_desc else 0)
    cell_width = len(MARK) + text_width

    for y, row in enumerate(menu.visible_grid()):
        for col, item in enumerate(row):
            x = col * (cell_width + 1)
            with contextlib.suppress(curses.error):
                if item is None:
                    window.addstr(y, x, " " * cell_width)
                    continue
                marked = item.value if not menu.one_value else item is menu.current
                window.addstr(y, x, MARK if marked else " " * len(MARK))
                text = item.name.ljust(name_width)
                if menu.show_desc:
                    text += " " + item.description.ljust(desc_width)
                if item is menu.current:
                    attr = curses.A_REVERSE
                elif not item.selectable:
                    attr = curses.A_UNDERLINE
                else:
                    attr = curses.A_NORMAL
                window.addstr(y, x + len(MARK), text, attr)


def _run(
    keys,
    canvas,
    menu: Menu,
    requests: frozenset[MenuRequest],
    actions: Mapping[int, Callable[[], None]] | None = None,
    screen=None,
) -> Menu:
    """Read keys from `keys`, drive the menu and redraw it on `canvas` until 'q'."""
    actions = actions or {}
    screen = screen or keys
    draw_menu(canvas, menu)
    screen.refresh()
    while (ch := keys.getch()) != QUIT:
        request = request_for_key(ch)
        if request in requests:
            with contextlib.suppress(MenuError):
                menu.drive(request)
        elif ch in actions:
            actions[ch]()
        draw_menu(canvas, menu)
        screen.refresh()
    return menu


def _boxed_menu_window(height: int, width: int, y: int, x: int, sub: tuple[int, int, int, int]):
    win = curses.newwin(height, width, y, x)
    win.keypad(True)
    canvas = win.derwin(*sub)
    win.box()
    return win, canvas


def run_menu(stdscr) -> Menu:
    """Plain menu moved with up and down until 'q'."""
    stdscr.keypad(True)
    menu = Menu(["Bow", "Sword", "Magic", "Shield", "Helm", "Armor"])
    return _run(stdscr, stdscr, menu, _VERTICAL)


def run_multi_select(stdscr) -> Menu:
    """Toggle items with space, list the selection with enter, quit with 'q'."""
    stdscr.keypad(True)
    stdscr.clear()
    menu = Menu(["Sword", "Bow", "Magic", "Shield", "Armor"], one_value=False)

    def show_selection() -> None:
        with contextlib.suppress(curses.error):
            stdscr.addstr(20, 2, "Your selected items:")
            for count, item in enumerate(menu.selected_items(), start=1):
                stdscr.addstr(20 + count, 2, f"+ {item.name}")
        stdscr.refresh()

    requests = _VERTICAL | {MenuRequest.TOGGLE_ITEM}
    return _run(stdscr, stdscr, menu, requests, {ENTER: show_selection})


def run_menu_window(stdscr) -> Menu:
    """Menu inside a boxed window."""
    stdscr.clear()
    menu = Menu(["Sword", "Bow", "Magic", "Armor", "Shield"])
    win, canvas = _boxed_menu_window(10, 40, 4, 4, (6, 38, 1, 1))
    stdscr.refresh()
    return _run(win, canvas, menu, _VERTICAL)


def run_menu_scrolling(stdscr) -> Menu:
    """Two-row menu that scrolls by line and by page."""
    stdscr.clear()
    menu = Menu(["Sword", "Bow", "Magic", "Armor", "Shield", "Health", "Mana", "Quest"])
    menu.set_format(2, 1)
    win, canvas = _boxed_menu_window(10, 40, 4, 4, (6, 38, 1, 1))
    return _run(win, canvas, menu, _VERTICAL | _PAGES)


def run_menu_columns(stdscr) -> Menu:
    """Menu laid out in three columns."""
    stdscr.clear()
    menu = Menu(["Sword", "Bow", "Magic", "Armor", "Shield", "Health", "Quest"], show_desc=False)
    menu.set_format(5, 3)
    win, canvas = _boxed_menu_window(20, 70, 2, 2, (8, 68, 3, 1))
    stdscr.refresh()
    return _run(win, canvas, menu, _VERTICAL | _HORIZONTAL | _PAGES)


def run_menu_row_major(stdscr) -> Menu:
    """Two-column menu filled column by column, moved left and right."""
    stdscr.clear()
    menu = Menu(["Sword", "Bow", "Magic"], row_major=False, show_desc=False)
    menu.set_format(6, 2)
    win, canvas = _boxed_menu_window(20, 70, 2, 2, (6, 68, 6, 1))
    stdscr.refresh()
    return _run(win, canvas, menu, _HORIZONTAL)


def run_menu_selectable(stdscr) -> Menu:
    """Menu whose second item cannot be selected."""
    stdscr.clear()
    stdscr.keypad(True)
    items = [MenuItem(name, name) for name in ("Sword", "Bow", "Magic", "Shield")]
    items[1].selectable = False
    return _run(stdscr, stdscr, Menu(items), _VERTICAL)


def _print_name_from_func(stdscr, name: str) -> None:
    stdscr.move(20, 0)
    stdscr.clrtoeol()
    stdscr.addstr(20, 2, f"Item selected (from func): {name}")
    stdscr.refresh()


def run_menu_user_pointer(stdscr) -> Menu:
    """Each item carries a function; 's' calls it with the current item's name."""
    stdscr.clear()
    stdscr.keypad(True)
    callback = functools.partial(_print_name_from_func, stdscr)
    items = [
        MenuItem(name, name, user_data=callback) for name in ("Sword", "Bow", "Magic", "Shield")
    ]
    menu = Menu(items)

    def call_current() -> None:
        item = menu.current
        item.user_data(item.name)

    return _run(stdscr, stdscr, menu, _VERTICAL, {ord("s"): call_current})