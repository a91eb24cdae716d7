import json
from unittest import mock

import pytest

from termdemos.dumps import dump_window, load_window, run_screen_dump, run_window_dump


class FakeWindow:
    def __init__(self, height=24, width=80, begin_y=0, begin_x=0, keys=(), cells=None):
        self.height = height
        self.width = width
        self.begin = (begin_y, begin_x)
        self.cells = dict(cells or {})
        self.cursor = (0, 0)
        self.keys = list(keys)
        self.calls = []

    def addstr(self, *args):
        if len(args) >= 3:
            self.cursor = (args[0], args[1])
            args = args[2:]
        y, x = self.cursor
        for ch in args[0]:
            self.cells[(y, x)] = ch
            x += 1
        self.cursor = (y, x)

    def getch(self):
        return self.keys.pop(0) if self.keys else ord("q")

    def clear(self):
        self.cells.clear()
        self.cursor = (0, 0)

    def putwin(self, stream):
        payload = {
            "size": [self.height, self.width],
            "begin": list(self.begin),
            "cells": [[y, x, ch] for (y, x), ch in self.cells.items()],
        }
        stream.write(json.dumps(payload).encode())

    def row(self, y):
        return "".join(self.cells.get((y, x), " ") for x in range(self.width)).rstrip()

    def __getattr__(self, name):
        def record(*args):
            self.calls.append(name)

        return record


def fake_getwin(stream):
    payload = json.loads(stream.read().decode())
    cells = {(y, x): ch for y, x, ch in payload["cells"]}
    return FakeWindow(*payload["size"], *payload["begin"], cells=cells)


def test_dump_and_load_round_trip(tmp_path):
    source = FakeWindow(6, 12, 1, 2)
    source.addstr(3, 4, "saved")
    path = tmp_path / "win.out"
    dump_window(source, path)
    with mock.patch("curses.getwin", side_effect=fake_getwin):
        loaded = load_window(path)
    assert loaded.cells == source.cells
    assert loaded.begin == source.begin
    assert loaded.row(3) == "    saved"


def test_dump_into_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        dump_window(FakeWindow(), tmp_path / "missing" / "win.out")


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_window(tmp_path / "absent.out")


def test_run_screen_dump_restores_scene(tmp_path):
    screen = FakeWindow(keys=[1])
    path = tmp_path / "scene1.out"
    with mock.patch("curses.getwin", side_effect=fake_getwin):
        restored = run_screen_dump(screen, path)
    assert path.exists()
    assert screen.cells == {}
    assert restored.row(20).strip() == "Scene 1"
    assert restored.row(0).startswith("<loaded dump>")


def test_run_window_dump_loads_window_content(tmp_path):
    screen = FakeWindow(keys=[1, 2, 3])
    path = tmp_path / "win.out"
    with mock.patch(
        "curses.newwin", side_effect=lambda h, w, y, x: FakeWindow(h, w, y, x)
    ) as newwin, mock.patch("curses.getwin", side_effect=fake_getwin):
        loaded = run_window_dump(screen, path)
    newwin.assert_called_once_with(20, 20, 5, 5)
    assert loaded.row(2).strip() == "Win Content"
    assert loaded.begin == (5, 5)
    assert screen.row(0) == "<press a key to load the win content>"
    assert screen.keys == []