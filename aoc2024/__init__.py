"""Solvers for the 2024 Advent of Code puzzles, days 1-9 and 14-21, with shared helpers."""

__version__ = "1.0.0"