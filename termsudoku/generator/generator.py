"""Sudoku puzzle generator with fixed-removal difficulty levels."""

from __future__ import annotations
import os
import random
import time
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple, Optional

from tqdm import tqdm

from ..core.board import SudokuBoard, SIZE
from ..solvers.backtracking_solver import BacktrackingSolver


class Difficulty(Enum):
    """Difficulty levels for Sudoku puzzles."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def cells_to_remove(self) -> int:
        """Number of cells erased from the solved grid."""
        counts = {
            Difficulty.EASY: 40,
            Difficulty.MEDIUM: 50,
            Difficulty.HARD: 60,
        }
        return counts[self]

    @property
    def clues(self) -> int:
        """Number of filled cells left in the puzzle."""
        return SIZE * SIZE - self.cells_to_remove

    @classmethod
    def from_level(cls, level: int) -> Optional[Difficulty]:
        """Map the menu level 0/1/2 to a difficulty, None if out of range."""
        levels = {0: cls.EASY, 1: cls.MEDIUM, 2: cls.HARD}
        return levels.get(level)


@dataclass
class GenerationReport:
    """What one solve-then-remove run cost."""
    difficulty: str
    fill_assignments: int
    fill_undos: int
    fill_seconds: float
    removal_seconds: float
    draws: int

    @property
    def resamples(self) -> int:
        """Draws that hit an already-empty cell."""
        return self.draws - Difficulty(self.difficulty).cells_to_remove


class SudokuGenerator:
    """
    Generator for Sudoku puzzles.

    Algorithm:
    1. Solve an empty grid with the backtracking solver
    2. Erase ``difficulty.cells_to_remove`` cells picked uniformly at random,
       resampling cells that are already empty

    Uniqueness of the puzzle's solution is not checked.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        """
        Initialize the generator.

        Args:
            seed: Random seed for reproducibility. Ignored if rng is given.
            rng: Random source used to pick the cells to erase.
        """
        self.rng = rng if rng is not None else random.Random(seed)

    def generate(self, difficulty: Difficulty = Difficulty.EASY) -> SudokuBoard:
        """
        Generate a Sudoku puzzle with the specified difficulty.

        Returns:
            A SudokuBoard with exactly ``difficulty.cells_to_remove`` empty cells.
        """
        puzzle, _ = self.generate_with_solution(difficulty)
        return puzzle

    def generate_with_solution(self, difficulty: Difficulty = Difficulty.EASY) -> Tuple[SudokuBoard, SudokuBoard]:
        """
        Generate a puzzle along with the solution it was carved from.

        Returns:
            Tuple of (puzzle, solution) SudokuBoards.
        """
        puzzle, solution, _ = self.generate_with_report(difficulty)
        return puzzle, solution

    def generate_with_report(self, difficulty: Difficulty = Difficulty.EASY) -> Tuple[SudokuBoard, SudokuBoard, GenerationReport]:
        """Generate a puzzle, its solution, and the cost of each phase."""
        solver = BacktrackingSolver()
        solution = SudokuBoard()
        start = time.perf_counter()
        if not solver.fill(solution):
            raise RuntimeError("Failed to fill an empty board")
        fill_seconds = time.perf_counter() - start

        start = time.perf_counter()
        puzzle, draws = self._remove_cells(solution, difficulty)
        removal_seconds = time.perf_counter() - start

        report = GenerationReport(
            difficulty=difficulty.value,
            fill_assignments=solver.stats.assignments,
            fill_undos=solver.stats.undos,
            fill_seconds=fill_seconds,
            removal_seconds=removal_seconds,
            draws=draws,
        )
        return puzzle, solution, report

    def generate_batch(
        self,
        count: int,
        difficulty: Difficulty = Difficulty.EASY,
        show_progress: bool = False
    ) -> List[SudokuBoard]:
        """
        Generate multiple puzzles of the same difficulty.

        Args:
            count: Number of puzzles to generate.
            difficulty: Desired difficulty level.
            show_progress: Display a progress bar.
        """
        return [
            self.generate(difficulty)
            for _ in tqdm(range(count), desc=difficulty.value, disable=not show_progress)
        ]

    def _remove_cells(self, solution: SudokuBoard, difficulty: Difficulty) -> Tuple[SudokuBoard, int]:
        """Erase cells at random; returns the puzzle and the number of draws."""
        puzzle = solution.copy()
        remaining = difficulty.cells_to_remove
        draws = 0

        while remaining > 0:
            draws += 1
            row = self.rng.randrange(SIZE)
            col = self.rng.randrange(SIZE)
            if not puzzle.is_empty(row, col):
                puzzle.clear(row, col)
                remaining -= 1

        return puzzle, draws

    @staticmethod
    def save_to_folder(puzzles: List[SudokuBoard], folder_path: str, prefix: str = "puzzle") -> None:
        """
        Save a list of puzzles to a folder as individual text files.

        Args:
            puzzles: List of SudokuBoard objects.
            folder_path: Directory to save the puzzles.
            prefix: Prefix for the filename (default: "puzzle").
        """
        os.makedirs(folder_path, exist_ok=True)

        for i, puzzle in enumerate(puzzles, 1):
            file_path = os.path.join(folder_path, f"{prefix}_{i}.txt")
            with open(file_path, "w") as f:
                f.write(puzzle.to_string())
                f.write("\n\nPretty format:\n")
                f.write(str(puzzle))
                f.write("\n")


def generate(difficulty: Difficulty, rng: Optional[random.Random] = None) -> SudokuBoard:
    """Generate a puzzle using ``rng`` (a fresh unseeded source if None)."""
    return SudokuGenerator(rng=rng).generate(difficulty)
