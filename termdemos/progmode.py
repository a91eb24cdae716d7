"""Leave screen mode to run a shell, then return to it."""

from __future__ import annotations

import curses
import subprocess
from collections.abc import Sequence


def run_shell_escape(stdscr, shell: str | Sequence[str] = "/bin/sh") -> int:
    """Suspend the screen, run the shell, restore the screen.

    The shell may be a program path or a full argument sequence.
    Returns the shell's exit status.
    """
    stdscr.clear()
    stdscr.addstr(2, 2, "<ncurses mode, press any key to continue to the sh>")
    stdscr.refresh()
    stdscr.getch()

    curses.def_prog_mode()
    curses.endwin()

    command = [shell] if isinstance(shell, str) else list(shell)
    status = subprocess.run(command, check=False).returncode

    curses.reset_prog_mode()
    stdscr.refresh()

    stdscr.addstr(3, 2, "<ncurses reconnected, press any key to quit>")
    stdscr.refresh()
    stdscr.getch()
    return status