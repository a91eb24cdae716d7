"""A menu of items laid out on a grid, navigated by requests."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

DEFAULT_ROWS = 16
DEFAULT_COLS = 1


class MenuError(Exception):
    """Raised when a menu request cannot be carried out."""


class MenuRequest(Enum):
    """Requests understood by Menu.drive."""

    UP_ITEM = auto()
    DOWN_ITEM = auto()
    LEFT_ITEM = auto()
    RIGHT_ITEM = auto()
    FIRST_ITEM = auto()
    LAST_ITEM = auto()
    SCR_UPAGE = auto()
    SCR_DPAGE = auto()
    TOGGLE_ITEM = auto()


@dataclass(eq=False)
class MenuItem:
    """One entry of a menu."""

    name: str
    description: str = ""
    selectable: bool = True
    value: bool = False
    user_data: Any = None


class Menu:
    """Items arranged in rows and columns with a current item and a scroll offset."""

    def __init__(
        self,
        items: Iterable[MenuItem | str],
        *,
        one_value: bool = True,
        show_desc: bool = True,
        row_major: bool = True,
    ) -> None:
        self.items: tuple[MenuItem, ...] = tuple(
            item if isinstance(item, MenuItem) else MenuItem(item, item) for item in items
        )
        if not self.items:
            raise MenuError("a menu needs at least one item")
        self.show_desc = show_desc
        self._one_value = one_value
        self._row_major = row_major
        self._format = (DEFAULT_ROWS, DEFAULT_COLS)
        self._current = 0
        self.top_row = 0

    # -- options -------------------------------------------------------

    @property
    def one_value(self) -> bool:
        return self._one_value

    @one_value.setter
    def one_value(self, enabled: bool) -> None:
        self._one_value = enabled
        if enabled:
            for item in self.items:
                item.value = False

    @property
    def row_major(self) -> bool:
        return self._row_major

    @row_major.setter
    def row_major(self, enabled: bool) -> None:
        self._row_major = enabled
        self._reset()

    @property
    def format(self) -> tuple[int, int]:
        return self._format

    def set_format(self, rows: int, cols: int) -> None:
        """Set the visible rows and the columns; zero keeps the current value."""
        if rows < 0 or cols < 0:
            raise MenuError("menu format must not be negative")
        old_rows, old_cols = self._format
        self._format = (rows or old_rows, cols or old_cols)
        self._reset()

    # -- geometry ------------------------------------------------------

    @property
    def rows(self) -> int:
        """Total number of rows in the item grid."""
        return (len(self.items) - 1) // self._format[1] + 1

    @property
    def cols(self) -> int:
        """Total number of columns in the item grid."""
        if self._row_major:
            return min(len(self.items), self._format[1])
        return (len(self.items) - 1) // self.rows + 1

    @property
    def visible_rows(self) -> int:
        return min(self._format[0], self.rows)

    def _position(self, index: int) -> tuple[int, int]:
        if self._row_major:
            return divmod(index, self.cols)
        col, row = divmod(index, self.rows)
        return row, col

    def _index_at(self, row: int, col: int) -> int | None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            return None
        index = row * self.cols + col if self._row_major else col * self.rows + row
        return index if index < len(self.items) else None

    # -- state ---------------------------------------------------------

    @property
    def current(self) -> MenuItem:
        return self.items[self._current]

    @property
    def current_index(self) -> int:
        return self._current

    def _reset(self) -> None:
        self._current = 0
        self.top_row = 0

    def _ensure_visible(self) -> None:
        row, _ = self._position(self._current)
        if row < self.top_row:
            self.top_row = row
        elif row >= self.top_row + self.visible_rows:
            self.top_row = row - self.visible_rows + 1

    def _move(self, drow: int, dcol: int) -> None:
        row, col = self._position(self._current)
        target = self._index_at(row + drow, col + dcol)
        if target is None:
            raise MenuError("request denied")
        self._current = target
        self._ensure_visible()

    def _scroll(self, forward: bool) -> None:
        visible = self.visible_rows
        if forward:
            if self.top_row + visible >= self.rows:
                raise MenuError("request denied")
            new_top = min(self.top_row + visible, self.rows - visible)
        else:
            if self.top_row == 0:
                raise MenuError("request denied")
            new_top = max(self.top_row - visible, 0)
        row, col = self._position(self._current)
        row += new_top - self.top_row
        while (target := self._index_at(row, col)) is None:
            col -= 1
        self._current = target
        self.top_row = new_top

    def _toggle(self) -> None:
        if self._one_value:
            raise MenuError("request denied")
        item = self.current
        if not item.selectable:
            raise MenuError("item is not selectable")
        item.value = not item.value

    def drive(self, request: MenuRequest) -> None:
        """Apply a request; raise MenuError when it is denied."""
        if request is MenuRequest.UP_ITEM:
            self._move(-1, 0)
        elif request is MenuRequest.DOWN_ITEM:
            self._move(1, 0)
        elif request is MenuRequest.LEFT_ITEM:
            self._move(0, -1)
        elif request is MenuRequest.RIGHT_ITEM:
            self._move(0, 1)
        elif request is MenuRequest.FIRST_ITEM:
            self._reset()
        elif request is MenuRequest.LAST_ITEM:
            self._current = len(self.items) - 1
            self._ensure_visible()
        elif request is MenuRequest.SCR_DPAGE:
            self._scroll(forward=True)
        elif request is MenuRequest.SCR_UPAGE:
            self._scroll(forward=False)
        elif request is MenuRequest.TOGGLE_ITEM:
            self._toggle()
        else:
            raise MenuError(f"unknown request: {request!r}")

    def selected_items(self) -> list[MenuItem]:
        """Return the items whose value is set, in menu order."""
        return [item for item in self.items if item.value]

    def visible_grid(self) -> list[list[MenuItem | None]]:
        """Return the visible rows; empty cells are None."""
        grid = []
        for row in range(self.top_row, self.top_row + self.visible_rows):
            cells = []
            for col in range(self.cols):
                index = self._index_at(row, col)
                cells.append(None if index is None else self.items[index])
            grid.append(cells)
        return grid