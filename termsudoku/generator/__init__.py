"""Generator module for creating Sudoku puzzles."""

from .generator import SudokuGenerator, Difficulty, GenerationReport, generate

__all__ = ["SudokuGenerator", "Difficulty", "GenerationReport", "generate"]
