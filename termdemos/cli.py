"""Command line entry point that starts one of the screen demonstrations."""

from __future__ import annotations

import argparse
import curses
import functools
from collections.abc import Callable

from termdemos import basics, dumps, form_demos, menu_demos, mouse, panels, progmode, simple_menu

_DEMOS: dict[str, Callable] = {
    "hello-world": basics.hello_world,
    "mvaddch": basics.move_and_add,
    "getch": basics.wait_for_key,
    "window": basics.centered_window,
    "colors": basics.colors,
    "key-board": basics.key_codes,
    "simple-menu": simple_menu.run_simple_menu,
    "mouse-events": mouse.run_mouse,
    "getyx": basics.cursor_position,
    "getbegyx-getmaxyx": basics.window_geometry,
    "screen-dumping": functools.partial(dumps.run_screen_dump, path="scene1.out"),
    "window-dumping": functools.partial(dumps.run_window_dump, path="win.out"),
    "curs-set": basics.hidden_cursor,
    "prog-mode": progmode.run_shell_escape,
    "panel": panels.stacked_panels,
    "panel-user-pointer": panels.panel_user_value,
    "panel-move": panels.run_panel_move,
    "panel-resize": panels.run_panel_resize,
    "panel-visibility": panels.run_panel_visibility,
    "menu": menu_demos.run_menu,
    "menu-multi-select": menu_demos.run_multi_select,
    "menu-window": menu_demos.run_menu_window,
    "menu-scrolling": menu_demos.run_menu_scrolling,
    "menu-multi-columns": menu_demos.run_menu_columns,
    "menu-row-major": menu_demos.run_menu_row_major,
    "menu-selectable": menu_demos.run_menu_selectable,
    "menu-user-pointer": menu_demos.run_menu_user_pointer,
    "simple-form": form_demos.run_simple_form,
    "form-justification": form_demos.run_justification,
    "form-colors": form_demos.run_form_colors,
    "form-public-field": form_demos.run_public_field,
    "form-window": form_demos.run_form_window,
    "form-field-validation": form_demos.run_validation,
}


def demo_names() -> list[str]:
    """Return the names of all demonstrations in their usual order."""
    return list(_DEMOS)


def main(argv: list[str] | None = None) -> int:
    """Run the named demonstration; return the exit status."""
    parser = argparse.ArgumentParser(prog="termdemos", description="Terminal screen demonstrations.")
    parser.add_argument("demo", nargs="?", default="hello-world", choices=demo_names(),
                        help="demonstration to run (default: hello-world)")
    parser.add_argument("--list", action="store_true", help="list the demonstrations and exit")
    args = parser.parse_args(argv)

    if args.list:
        print("\n".join(demo_names()))
        return 0

    try:
        curses.wrapper(_DEMOS[args.demo])
    except basics.ColorUnsupportedError as exc:
        print(exc)
        return 1
    return 0