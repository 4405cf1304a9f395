[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskkit"
version = "0.1.0"
description = "Small command-line tasks: a knapsack solver, a train departures filter, a range expander and a terminal snake game"
requires-python = ">=3.10"
dependencies = []
keywords = ["knapsack", "snake", "game", "ranges", "timetable", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
taskkit-knapsack = "taskkit.knapsack:main"
taskkit-trains = "taskkit.trains:main"
taskkit-ranges = "taskkit.ranges:main"
taskkit-snake = "taskkit.snake_game:main"

[tool.hatch.build.targets.wheel]
packages = ["taskkit"]

[tool.pytest.ini_options]
addopts = "-ra"
