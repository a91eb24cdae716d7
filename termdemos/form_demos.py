"""Screen demonstrations of data-entry forms."""

from __future__ import annotations

import contextlib
import curses
from collections.abc import Callable

from termdemos.form import (
    Field,
    FieldValidationError,
    Form,
    FormError,
    FormRequest,
    Justify,
)

QUIT = ord("q")


def draw_form(window, form: Form) -> None:
    """Draw every field and place the cursor in the current one."""
    for fld in form.fields:
        attr = fld.fore | fld.back
        for offset, text in enumerate(fld.display_text()):
            with contextlib.suppress(curses.error):
                window.addstr(fld.row + offset, fld.col, text, attr)
    row, col = form.cursor
    with contextlib.suppress(curses.error):
        window.move(form.current.row + row, form.current.col + col)


def _drive(form: Form, *requests: FormRequest) -> None:
    for request in requests:
        with contextlib.suppress(FormError):
            form.drive(request)


def _handle_key(form: Form, ch: int) -> None:
    if ch == curses.KEY_DOWN:
        _drive(form, FormRequest.NEXT_FIELD, FormRequest.END_LINE)
    elif ch == curses.KEY_UP:
        _drive(form, FormRequest.PREV_FIELD, FormRequest.END_LINE)
    elif 0 <= ch < 256 and chr(ch).isprintable():
        with contextlib.suppress(FormError):
            form.type_char(chr(ch))


def _run(
    keys,
    canvas,
    form: Form,
    after: Callable[[], None] | None = None,
    screen=None,
) -> Form:
    """Feed keys from `keys` into the form and redraw on `canvas` until 'q'."""
    screen = screen or keys
    draw_form(canvas, form)
    screen.refresh()
    while (ch := keys.getch()) != QUIT:
        _handle_key(form, ch)
        if after is not None:
            after()
        draw_form(canvas, form)
        screen.refresh()
    return form


def run_simple_form(stdscr) -> Form:
    """Two labelled fields moved between with up and down."""
    stdscr.clear()
    stdscr.keypad(True)
    form = Form([
        Field(1, 10, 4, 18, back=curses.A_UNDERLINE, autoskip=False),
        Field(2, 10, 6, 18, back=curses.A_UNDERLINE, autoskip=False),
    ])
    stdscr.addstr(4, 10, "Field 1:")
    stdscr.addstr(6, 10, "Field 2:")
    return _run(stdscr, stdscr, form)


def run_justification(stdscr) -> Form:
    """Three fields whose contents are centred, right and left aligned."""
    stdscr.clear()
    stdscr.keypad(True)
    layout = [
        (4, Justify.CENTER, "Center"),
        (6, Justify.RIGHT, "Right"),
        (8, Justify.LEFT, "Left"),
    ]
    fields = []
    for row, justify, text in layout:
        fld = Field(1, 20, row, 18, justify=justify, back=curses.A_UNDERLINE, autoskip=False)
        fld.set_buffer(text)
        fields.append(fld)
    form = Form(fields)
    stdscr.move(8, 18)
    return _run(stdscr, stdscr, form)


def run_form_colors(stdscr) -> Form:
    """A field drawn with colour pairs for its text and its background."""
    curses.start_color()
    stdscr.keypad(True)
    curses.init_pair(1, curses.COLOR_WHITE, curses.COLOR_BLUE)
    curses.init_pair(2, curses.COLOR_YELLOW, curses.COLOR_RED)
    form = Form([
        Field(1, 10, 4, 18, fore=curses.color_pair(1), back=curses.color_pair(2)),
    ])
    return _run(stdscr, stdscr, form)


def run_public_field(stdscr) -> Form:
    """The second field takes input without showing it."""
    stdscr.clear()
    stdscr.keypad(True)
    form = Form([
        Field(1, 10, 4, 18, back=curses.A_UNDERLINE),
        Field(1, 10, 6, 18, back=curses.A_UNDERLINE, public=False),
    ])
    return _run(stdscr, stdscr, form)


def run_form_window(stdscr) -> Form:
    """A form drawn inside a boxed window."""
    stdscr.clear()
    form = Form([
        Field(1, 10, 6, 1, back=curses.A_UNDERLINE),
        Field(1, 10, 8, 1, back=curses.A_UNDERLINE),
    ])
    win = curses.newwin(20, 40, 2, 2)
    win.keypad(True)
    rows, cols = form.scale()
    sub = win.derwin(rows, cols, 2, 2)
    win.box()
    stdscr.refresh()
    return _run(win, sub, form, screen=win)


def run_validation(stdscr) -> Form:
    """A letters-and-digits field; a message shows while it is invalid."""
    stdscr.clear()
    stdscr.keypad(True)
    form = Form([Field(1, 20, 6, 1, back=curses.A_UNDERLINE, alnum_min=1)])

    def report() -> None:
        try:
            form.drive(FormRequest.VALIDATION)
        except FieldValidationError:
            stdscr.addstr(20, 2, "Invalid Field")
            stdscr.refresh()
        else:
            stdscr.move(20, 2)
            stdscr.clrtoeol()

    return _run(stdscr, stdscr, form, after=report)