"""Terminal Sudoku game with a backtracking puzzle generator."""

from .core import SudokuBoard, EMPTY, can_place
from .generator import SudokuGenerator, Difficulty, generate
from .solvers import solve

__version__ = "1.0.0"

__all__ = [
    "SudokuBoard",
    "EMPTY",
    "can_place",
    "SudokuGenerator",
    "Difficulty",
    "generate",
    "solve",
]
