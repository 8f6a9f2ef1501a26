"""Validation utilities for Sudoku puzzles."""

from __future__ import annotations
from typing import TYPE_CHECKING

from .board import SIZE, BOX_SIZE

if TYPE_CHECKING:
    from .board import SudokuBoard


def can_place(board: SudokuBoard, row: int, col: int, digit: int) -> bool:
    """
    Check whether ``digit`` may be placed at (row, col).

    Returns False iff the digit already appears in the same row, column or
    3x3 box. The target cell's own contents are not inspected, so callers
    must check that it is empty first. The digit range is not checked either:
    a digit above 9 never collides and yields True, while 0 matches any EMPTY
    cell in the row, column or box (the target cell included) and yields False.

    Args:
        board: The Sudoku board.
        row: Row index, 0-8.
        col: Column index, 0-8.
        digit: Digit to check.

    Returns:
        True if no row, column or box conflict exists.
    """
    grid = board.grid

    for i in range(SIZE):
        if grid[row, i] == digit or grid[i, col] == digit:
            return False

    start_row = (row // BOX_SIZE) * BOX_SIZE
    start_col = (col // BOX_SIZE) * BOX_SIZE
    for i in range(BOX_SIZE):
        for j in range(BOX_SIZE):
            if grid[start_row + i, start_col + j] == digit:
                return False

    return True


def count_solutions(board: SudokuBoard, limit: int = 2) -> int:
    """
    Count the number of solutions for a puzzle (up to limit).

    Uses backtracking with the minimum-remaining-values heuristic and stops
    early once limit is reached. The board passed in is not modified.

    Args:
        board: The puzzle board.
        limit: Maximum solutions to count before stopping.

    Returns:
        Number of solutions found (up to limit).
    """
    work_board = board.copy()
    count = [0]

    def backtrack() -> bool:
        """Returns True if limit reached."""
        empty_cells = work_board.get_empty_cells()
        if not empty_cells:
            count[0] += 1
            return count[0] >= limit

        best_cell = empty_cells[0]
        best_candidates = None
        for cell in empty_cells:
            candidates = work_board.get_candidates(cell[0], cell[1])
            if best_candidates is None or len(candidates) < len(best_candidates):
                best_cell = cell
                best_candidates = candidates
                if not candidates:
                    return False

        row, col = best_cell
        for val in sorted(best_candidates):
            work_board.set(row, col, val)
            if backtrack():
                return True
            work_board.clear(row, col)

        return False

    if board.is_valid():
        backtrack()
    return count[0]


def has_unique_solution(board: SudokuBoard) -> bool:
    """Check if a puzzle has exactly one solution."""
    return count_solutions(board, limit=2) == 1


def validate_solution(puzzle: SudokuBoard, solution: SudokuBoard) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if solution is complete, valid and keeps every puzzle clue.
    """
    for i in range(SIZE):
        for j in range(SIZE):
            if not puzzle.is_empty(i, j):
                if puzzle.get(i, j) != solution.get(i, j):
                    return False

    return solution.is_solved()
