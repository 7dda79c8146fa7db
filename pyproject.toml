[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc2021"
version = "0.1.0"
description = "Solvers for Advent of Code 2021 puzzles"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "algorithms"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aoc2021"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
