[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termdemos"
version = "0.1.0"
description = "Small terminal UI demos built on curses: windows, colours, panels, menus and forms"
requires-python = ">=3.10"
dependencies = []
keywords = ["curses", "terminal", "tui", "menu", "form", "panel", "demo"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
termdemos = "termdemos.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["termdemos"]

[tool.pytest.ini_options]
addopts = "-ra"
