"""Core module for Sudoku board representation and validation."""

from .board import SudokuBoard, SIZE, BOX_SIZE, EMPTY
from .validator import can_place, has_unique_solution, count_solutions

__all__ = [
    "SudokuBoard",
    "SIZE",
    "BOX_SIZE",
    "EMPTY",
    "can_place",
    "has_unique_solution",
    "count_solutions",
]
