import curses

import pytest

from termdemos.menu import Menu, MenuItem, MenuRequest
from termdemos.menu_demos import (
    draw_menu,
    request_for_key,
    run_menu,
    run_menu_selectable,
    run_menu_user_pointer,
    run_multi_select,
)


class FakeWindow:
    def __init__(self, keys=()):
        self.keys = list(keys)
        self.writes = []

    def getch(self):
        return self.keys.pop(0) if self.keys else ord("q")

    def addstr(self, *args):
        if len(args) <= 2:
            y = x = None
            text = args[0]
            attr = args[1] if len(args) == 2 else 0
        else:
            y, x, text, *rest = args
            attr = rest[0] if rest else 0
        self.writes.append((y, x, text, attr))

    def keypad(self, flag):
        pass

    def refresh(self):
        pass

    def clear(self):
        pass

    def move(self, y, x):
        pass

    def clrtoeol(self):
        pass

    def box(self):
        pass


def _write_for(window, name):
    return [w for w in window.writes if w[2].strip().startswith(name)][-1]


@pytest.mark.parametrize(
    "key, request_",
    [
        (curses.KEY_UP, MenuRequest.UP_ITEM),
        (curses.KEY_DOWN, MenuRequest.DOWN_ITEM),
        (curses.KEY_LEFT, MenuRequest.LEFT_ITEM),
        (curses.KEY_RIGHT, MenuRequest.RIGHT_ITEM),
        (curses.KEY_NPAGE, MenuRequest.SCR_DPAGE),
        (curses.KEY_PPAGE, MenuRequest.SCR_UPAGE),
        (ord(" "), MenuRequest.TOGGLE_ITEM),
    ],
)
def test_request_for_key(key, request_):
    assert request_for_key(key) is request_


def test_request_for_unbound_key():
    assert request_for_key(ord("x")) is None


def test_draw_menu_highlights_current():
    window = FakeWindow()
    menu = Menu(["Sword", "Bow"])
    menu.drive(MenuRequest.DOWN_ITEM)
    draw_menu(window, menu)
    bow = _write_for(window, "Bow")
    sword = _write_for(window, "Sword")
    assert bow[3] == curses.A_REVERSE
    assert sword[3] == curses.A_NORMAL
    assert (bow[0], bow[1] - 1, "-", 0) in window.writes


def test_draw_menu_underlines_unselectable():
    window = FakeWindow()
    menu = Menu([MenuItem("Sword"), MenuItem("Bow", selectable=False)])
    draw_menu(window, menu)
    assert _write_for(window, "Bow")[3] == curses.A_UNDERLINE


@pytest.mark.parametrize("show_desc", [True, False])
def test_draw_menu_description(show_desc):
    window = FakeWindow()
    menu = Menu([MenuItem("Sword", "blade")], show_desc=show_desc)
    draw_menu(window, menu)
    assert ("blade" in _write_for(window, "Sword")[2]) is show_desc


def test_run_menu_moves_down():
    screen = FakeWindow([curses.KEY_DOWN, curses.KEY_DOWN, ord("q")])
    menu = run_menu(screen)
    assert menu.current.name == "Magic"


def test_run_menu_ignores_horizontal_keys():
    screen = FakeWindow([curses.KEY_RIGHT, ord("q")])
    menu = run_menu(screen)
    assert menu.current.name == "Bow"


def test_run_menu_selectable_lands_on_unselectable():
    screen = FakeWindow([curses.KEY_DOWN, ord("q")])
    menu = run_menu_selectable(screen)
    assert menu.current.name == "Bow"
    assert menu.current.selectable is False


def test_run_multi_select_lists_selection():
    keys = [ord(" "), curses.KEY_DOWN, curses.KEY_DOWN, ord(" "), 10, ord("q")]
    screen = FakeWindow(keys)
    menu = run_multi_select(screen)
    assert [item.name for item in menu.selected_items()] == ["Sword", "Magic"]
    assert (20, 2, "Your selected items:", 0) in screen.writes
    assert (21, 2, "+ Sword", 0) in screen.writes
    assert (22, 2, "+ Magic", 0) in screen.writes


def test_run_menu_user_pointer_calls_item_function():
    screen = FakeWindow([curses.KEY_DOWN, ord("s"), ord("q")])
    menu = run_menu_user_pointer(screen)
    assert menu.current.name == "Bow"
    assert (20, 2, "Item selected (from func): Bow", 0) in screen.writes