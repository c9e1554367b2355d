[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventsolve"
version = "0.1.0"
description = "Solvers for a selection of Advent of Code puzzles from 2021, 2022 and 2023"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "solver"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adventsolve = "adventsolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["adventsolve"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
