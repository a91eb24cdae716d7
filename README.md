# termdemos

Small terminal UI demos built on the standard library's `curses` module.
Each demo shows one idea. The ideas are printing text and moving the cursor,
windows and borders, colour pairs, key codes, mouse clicks, saving a window
to a file and loading it back, leaving curses mode to run a shell, stacked
panels, menus and forms.

## Installation

```
pip install .
```

The package needs no third-party libraries at run time. To run the demos you
need a terminal with curses support, which means any POSIX terminal.

## Running a demo

```
termdemos                 # runs the default demo, hello-world
termdemos <demo-name>     # runs the named demo
termdemos --list          # prints every demo name, one per line
```

The command exits with status 0. It exits with status 1 when you ask for the
`colors` demo on a terminal that has no colour support.

The demo names, in order:

`hello-world`, `mvaddch`, `getch`, `window`, `colors`, `key-board`,
`simple-menu`, `mouse-events`, `getyx`, `getbegyx-getmaxyx`,
`screen-dumping`, `window-dumping`, `curs-set`, `prog-mode`, `panel`,
`panel-user-pointer`, `panel-move`, `panel-resize`, `panel-visibility`,
`menu`, `menu-multi-select`, `menu-window`, `menu-scrolling`,
`menu-multi-columns`, `menu-row-major`, `menu-selectable`,
`menu-user-pointer`, `simple-form`, `form-justification`, `form-colors`,
`form-public-field`, `form-window`, `form-field-validation`.

`termdemos.cli.demo_names()` returns the same list.

How each demo ends:

- The single-screen demos end on any key.
- `key-board` ends on `KEY_EXIT`.
- `simple-menu` ends when you choose its `Exit` option.
- The mouse, panel, menu and form demos end on `q`.

Two demos write files into the current directory: `screen-dumping` writes
`scene1.out` and `window-dumping` writes `win.out`. The `prog-mode` demo
leaves curses mode and runs `/bin/sh`. The screen comes back when the shell
exits.

## Modules

- `termdemos.basics`
  - `hello_world`, `move_and_add` and `wait_for_key`: text, cursor and key demos.
  - `centered_window`: draws a centred window. `centre_origin(lines, cols, height, width)` computes where it goes.
  - `colors`: raises `ColorUnsupportedError` when the terminal has no colours.
  - `key_codes`, `cursor_position`, `window_geometry` and `hidden_cursor`.
- `termdemos.simple_menu`
  - `SimpleMenu` is a wrapping selection. Its methods are `up`, `down` and `select`.
  - `draw_menu` draws the menu and `run_simple_menu` runs it.
- `termdemos.mouse`
  - `run_mouse` marks clicks with an `X` and returns the `(x, y)` clicks.
  - `mouse_report(x, y)` formats the status line.
- `termdemos.dumps`
  - `dump_window(window, path)` and `load_window(path)` use the window's `putwin` and `curses.getwin`.
  - `run_screen_dump` and `run_window_dump` are the demos.
- `termdemos.progmode`
  - `run_shell_escape(stdscr, shell="/bin/sh")` returns the shell's exit status.
- `termdemos.panels`
  - `PanelPosition.move(key)` moves with the arrow keys. Up and left stop at 1.
  - `resized_size(height, width, multiple)` computes a new size.
  - The panel demos are `stacked_panels`, `panel_user_value`, `run_panel_move`, `run_panel_resize` and `run_panel_visibility`.
- `termdemos.menu` is a terminal-free menu model.
  - `Menu` takes `MenuItem` objects or plain strings, with the options `one_value`, `show_desc` and `row_major`.
  - `Menu.set_format(rows, cols)` sets the grid shape.
  - `Menu.drive(MenuRequest...)` applies a request. It raises `MenuError` when the request is denied.
  - `Menu.selected_items()` and `Menu.visible_grid()` report state.
- `termdemos.menu_demos`
  - `request_for_key` maps keys to menu requests.
  - `draw_menu` draws a menu.
  - The demos are `run_menu`, `run_multi_select`, `run_menu_window`, `run_menu_scrolling`, `run_menu_columns`, `run_menu_row_major`, `run_menu_selectable` and `run_menu_user_pointer`.
- `termdemos.form` is a terminal-free form model.
  - A `Field` has a justification (`Justify`), a `public` flag, an `autoskip` flag and an optional letters-and-digits check (`alnum_min`).
  - `Form.drive(FormRequest...)` applies a request. `Form.type_char(ch)` types one character.
  - `Form.validate()` checks the current field. `Form.scale()` gives the size needed for all fields.
  - Errors are `FormError` and `FieldValidationError`.
- `termdemos.form_demos`
  - `draw_form` draws a form.
  - The demos are `run_simple_form`, `run_justification`, `run_form_colors`, `run_public_field`, `run_form_window` and `run_validation`.

The `Menu` and `Form` models do not touch the terminal, so you can use them on
their own:

```python
from termdemos.menu import Menu, MenuRequest

menu = Menu(["Sword", "Bow", "Magic"])
menu.drive(MenuRequest.DOWN_ITEM)
print(menu.current.name)  # Bow
```

## What it does not do

- This is a set of demos, not a toolkit.
- The menu model knows only the requests in `MenuRequest`. It has no pattern matching and no item callbacks beyond `user_data`.
- The form model knows only the requests in `FormRequest`. It has no field scrolling, no field types other than the letters-and-digits check, and no pages.
- In the form demos, only the up and down arrows and printable characters do anything. No keys are bound to cursor movement or deletion.
- Window and screen dumps use curses' own window file format. There is no viewer for that format.

## Tests

```
pip install .[test]
pytest
```