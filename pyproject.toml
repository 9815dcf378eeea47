[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "checkers"
version = "0.1.0"
description = "Terminal checkers (draughts) against a random-move computer opponent"
requires-python = ">=3.10"
dependencies = []
keywords = ["checkers", "draughts", "board game", "curses", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
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
checkers = "checkers.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["checkers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
