"""Solvers for Advent of Code 2021 puzzles, one module per solved day."""

__version__ = "0.1.0"