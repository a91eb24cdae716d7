"""Data-entry forms made of fixed-size fields, driven by requests."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field as dc_field
from enum import Enum, auto


class FormError(Exception):
    """Raised when a form request cannot be carried out."""


class FieldValidationError(FormError):
    """Raised when a field's contents fail its type check."""


class Justify(Enum):
    """How a single-line field's contents are placed when displayed."""

    NONE = auto()
    LEFT = auto()
    CENTER = auto()
    RIGHT = auto()


class FormRequest(Enum):
    """Requests understood by Form.drive."""

    NEXT_FIELD = auto()
    PREV_FIELD = auto()
    BEG_LINE = auto()
    END_LINE = auto()
    LEFT_CHAR = auto()
    RIGHT_CHAR = auto()
    DEL_PREV = auto()
    VALIDATION = auto()


@dataclass(eq=False)
class Field:
    """A rectangle of character cells placed at (row, col) in a form.

    When alnum_min is set the field only takes letters and digits, and a
    non-blank value must be at least that long with no blanks inside.
    """

    height: int
    width: int
    row: int
    col: int
    justify: Justify = Justify.NONE
    public: bool = True
    autoskip: bool = True
    alnum_min: int | None = None
    fore: int = 0
    back: int = 0
    lines: list[str] = dc_field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.height <= 0 or self.width <= 0:
            raise FormError("a field needs a positive height and width")
        if self.row < 0 or self.col < 0:
            raise FormError("a field cannot be placed at a negative position")
        self.lines = [" " * self.width for _ in range(self.height)]

    @property
    def value(self) -> str:
        """The whole buffer, blanks included."""
        return "".join(self.lines)

    def set_buffer(self, text: str) -> None:
        """Replace the contents, truncating or padding with blanks to fit."""
        capacity = self.height * self.width
        text = text[:capacity].ljust(capacity)
        self.lines = [text[start:start + self.width] for start in range(0, capacity, self.width)]

    def display_text(self) -> list[str]:
        """Return the rows as they appear on screen."""
        if not self.public:
            return [" " * self.width for _ in self.lines]
        if self.height != 1 or self.justify is Justify.NONE:
            return list(self.lines)
        content = self.lines[0].strip()
        if self.justify is Justify.LEFT:
            return [content.ljust(self.width)]
        if self.justify is Justify.RIGHT:
            return [content.rjust(self.width)]
        left = (self.width - len(content)) // 2
        return [(" " * left + content).ljust(self.width)]

    def is_valid(self) -> bool:
        """Check the contents against the field's type; blank is always valid."""
        if self.alnum_min is None:
            return True
        content = self.value.strip()
        if not content:
            return True
        return content.isalnum() and len(content) >= self.alnum_min

    def _accepts(self, ch: str) -> bool:
        return self.alnum_min is None or ch.isalnum()


class Form:
    """A group of fields with a current field and a cursor inside it."""

    def __init__(self, fields: Iterable[Field]) -> None:
        self.fields: tuple[Field, ...] = tuple(fields)
        if not self.fields:
            raise FormError("a form needs at least one field")
        self._current = 0
        self.cursor: tuple[int, int] = (0, 0)

    @property
    def current(self) -> Field:
        return self.fields[self._current]

    @property
    def current_index(self) -> int:
        return self._current

    def _goto(self, index: int) -> None:
        self._current = index % len(self.fields)
        self.cursor = (0, 0)

    def validate(self) -> None:
        """Raise FieldValidationError if the current field is invalid."""
        if not self.current.is_valid():
            raise FieldValidationError(f"field {self._current} is invalid")

    def drive(self, request: FormRequest) -> None:
        """Apply a request; raise FormError when it is denied."""
        fld = self.current
        row, col = self.cursor
        line = fld.lines[row]
        if request is FormRequest.NEXT_FIELD:
            self.validate()
            self._goto(self._current + 1)
        elif request is FormRequest.PREV_FIELD:
            self.validate()
            self._goto(self._current - 1)
        elif request is FormRequest.END_LINE:
            self.cursor = (row, min(len(line.rstrip()), fld.width - 1))
        elif request is FormRequest.BEG_LINE:
            self.cursor = (row, len(line) - len(line.lstrip()) if line.strip() else 0)
        elif request is FormRequest.LEFT_CHAR:
            if col > 0:
                self.cursor = (row, col - 1)
            elif row > 0:
                self.cursor = (row - 1, fld.width - 1)
            else:
                raise FormError("request denied")
        elif request is FormRequest.RIGHT_CHAR:
            if col < fld.width - 1:
                self.cursor = (row, col + 1)
            elif row < fld.height - 1:
                self.cursor = (row + 1, 0)
            else:
                raise FormError("request denied")
        elif request is FormRequest.DEL_PREV:
            if col == 0:
                raise FormError("request denied")
            fld.lines[row] = line[:col - 1] + line[col:] + " "
            self.cursor = (row, col - 1)
        elif request is FormRequest.VALIDATION:
            self.validate()
        else:
            raise FormError(f"unknown request: {request!r}")

    def type_char(self, ch: str) -> None:
        """Insert a character at the cursor and advance it."""
        if len(ch) != 1:
            raise FormError("exactly one character is expected")
        fld = self.current
        if not fld._accepts(ch):
            raise FieldValidationError(f"character {ch!r} is not allowed here")
        row, col = self.cursor
        line = fld.lines[row]
        if line[-1] != " ":
            raise FormError("field is full")
        fld.lines[row] = line[:col] + ch + line[col:-1]

        if col + 1 < fld.width:
            self.cursor = (row, col + 1)
        elif row + 1 < fld.height:
            self.cursor = (row + 1, 0)
        elif fld.autoskip and fld.is_valid():
            self._goto(self._current + 1)
        else:
            self.cursor = (row, fld.width - 1)

    def scale(self) -> tuple[int, int]:
        """Return the (rows, cols) needed to hold every field."""
        return (
            max(fld.row + fld.height for fld in self.fields),
            max(fld.col + fld.width for fld in self.fields),
        )