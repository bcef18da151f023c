[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "othello"
version = "0.1.0"
description = "Terminal Othello (Reversi) with human and CPU opponents"
requires-python = ">=3.10"
keywords = ["othello", "reversi", "board game", "terminal", "minimax"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
othello = "othello.ui:main"

[tool.hatch.build.targets.wheel]
packages = ["othello"]

[tool.pytest.ini_options]
addopts = "-ra"
