import curses
from unittest import mock

import pytest

from termdemos.basics import (
    ColorUnsupportedError,
    centered_window,
    centre_origin,
    colors,
    cursor_position,
    hello_world,
    hidden_cursor,
    key_codes,
    move_and_add,
    wait_for_key,
    window_geometry,
)


class FakeWindow:
    def __init__(self, height=24, width=80, begin_y=0, begin_x=0, keys=()):
        self.height = height
        self.width = width
        self.begin = (begin_y, begin_x)
        self.cells = {}
        self.attrs = {}
        self.cursor = (0, 0)
        self.keys = list(keys)
        self.calls = []

    def _put(self, text, attr=0):
        y, x = self.cursor
        for ch in text:
            if ch == "\n":
                y, x = y + 1, 0
                continue
            self.cells[(y, x)] = ch
            self.attrs[(y, x)] = attr
            x += 1
        self.cursor = (y, x)

    def addstr(self, *args):
        if len(args) >= 3:
            self.cursor = (args[0], args[1])
            args = args[2:]
        self._put(args[0], args[1] if len(args) > 1 else 0)

    def addch(self, *args):
        if len(args) >= 3:
            self.cursor = (args[0], args[1])
            args = args[2:]
        ch = args[0]
        self._put(ch if isinstance(ch, str) else chr(ch))

    def move(self, y, x):
        self.cursor = (y, x)

    def getch(self):
        return self.keys.pop(0)

    def getyx(self):
        return self.cursor

    def getmaxyx(self):
        return (self.height, self.width)

    def getbegyx(self):
        return self.begin

    def clear(self):
        self.cells.clear()
        self.cursor = (0, 0)
        self.calls.append("clear")

    def row(self, y):
        return "".join(self.cells.get((y, x), " ") for x in range(self.width)).rstrip()

    def __getattr__(self, name):
        def record(*args):
            self.calls.append(name)

        return record


def test_hello_world_prints_and_returns_key():
    screen = FakeWindow(keys=[ord("k")])
    assert hello_world(screen) == ord("k")
    assert screen.row(0) == "Hello World"


def test_move_and_add_places_both_characters():
    screen = FakeWindow(keys=[32])
    assert move_and_add(screen) == 32
    assert screen.cells[(5, 5)] == "A"
    assert screen.cells[(10, 10)] == "B"


def test_wait_for_key_refreshes_first():
    screen = FakeWindow(keys=[ord("x")])
    assert wait_for_key(screen) == ord("x")
    assert screen.calls == ["refresh"]


def test_centre_origin_standard_screen():
    assert centre_origin(24, 80, 10, 10) == (7, 35)


def test_centre_origin_truncates_toward_zero():
    assert centre_origin(5, 5, 10, 10) == (-2, -2)


@pytest.mark.parametrize("lines,cols,height,width", [(24, 80, 10, 10), (30, 100, 6, 20), (11, 11, 10, 10)])
def test_centre_origin_margins_balance(lines, cols, height, width):
    y, x = centre_origin(lines, cols, height, width)
    bottom = lines - height - y
    right = cols - width - x
    assert 0 <= bottom - y <= 1
    assert 0 <= right - x <= 1


def test_centered_window_creates_window_at_centre():
    screen = FakeWindow(24, 80, keys=[1])
    created = []

    def newwin(h, w, y, x):
        win = FakeWindow(h, w, y, x)
        created.append(win)
        return win

    with mock.patch("curses.newwin", side_effect=newwin) as fake_newwin:
        origin = centered_window(screen)
    fake_newwin.assert_called_once_with(10, 10, *origin)
    assert origin == centre_origin(24, 80, 10, 10)
    assert created[0].cells[(2, 2)] == "X"
    assert "box" in created[0].calls


def test_colors_without_support_raises():
    with mock.patch("curses.has_colors", return_value=False):
        with pytest.raises(ColorUnsupportedError, match="does not support color"):
            colors(FakeWindow(keys=[1]))


def test_colors_writes_coloured_text():
    screen = FakeWindow(keys=[ord("q")])
    with mock.patch("curses.has_colors", return_value=True), mock.patch(
        "curses.start_color"
    ) as start, mock.patch("curses.init_pair") as init_pair, mock.patch(
        "curses.color_pair", side_effect=lambda n: n << 8
    ):
        assert colors(screen) == ord("q")
    start.assert_called_once_with()
    init_pair.assert_any_call(1, curses.COLOR_RED, curses.COLOR_BLACK)
    init_pair.assert_any_call(2, curses.COLOR_BLUE, curses.COLOR_BLACK)
    assert screen.row(2) == "  Hello World in color. None colored"
    assert screen.calls == ["attron", "attrset", "attroff"]


def test_key_codes_until_exit():
    screen = FakeWindow(keys=[65, 66, curses.KEY_EXIT, 67])
    assert key_codes(screen) == [65, 66]
    assert screen.row(0) == "Key pressed: 66 (keycode)"
    assert screen.keys == [67]


def test_cursor_position_reports_after_write():
    screen = FakeWindow(keys=[1])
    y, x = cursor_position(screen)
    assert (y, x) == (10, 11)
    assert screen.row(0) == f"<Stored position X: {x}, Y: {y}>"


def test_window_geometry_reports_window_values():
    screen = FakeWindow(keys=[1])
    with mock.patch("curses.newwin", side_effect=lambda h, w, y, x: FakeWindow(h, w, y, x)):
        begin, size = window_geometry(screen)
    assert begin == (5, 3)
    assert size == (10, 7)
    assert screen.row(0) == "<begin windows pos x:3 y:5>"
    assert screen.row(1) == "<max windows pos x:7 y:10>"


def test_hidden_cursor_sets_invisible():
    screen = FakeWindow(keys=[ord("z")])
    with mock.patch("curses.curs_set") as curs_set:
        assert hidden_cursor(screen) == ord("z")
    curs_set.assert_called_once_with(0)
    assert screen.row(0) == "Hello this is a text."


def test_hidden_cursor_tolerates_unsupported_terminal():
    screen = FakeWindow(keys=[5])
    with mock.patch("curses.curs_set", side_effect=curses.error):
        assert hidden_cursor(screen) == 5
    assert screen.row(0) == "Hello this is a text."