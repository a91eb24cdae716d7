"""Terminal UI demos built on curses, with terminal-free menu and form models."""

__version__ = "0.1.0"