"""Helpers and the Day 1 solution for Advent of Code 2020 puzzles."""

__version__ = "0.1.0"
__all__ = ["aocmath", "day01", "reader"]