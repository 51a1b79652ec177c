[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gomoku"
version = "0.1.0"
description = "Five-in-a-row in the terminal, against a friend or the computer, with match history in SQLite"
requires-python = ">=3.10"
dependencies = []
keywords = ["gomoku", "five-in-a-row", "board-game", "sqlite"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gomoku = "gomoku.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gomoku"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
