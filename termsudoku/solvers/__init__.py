"""Solvers module for Sudoku puzzles."""

from .backtracking_solver import BacktrackingSolver, SearchStats, solve

__all__ = [
    "BacktrackingSolver",
    "SearchStats",
    "solve",
]
