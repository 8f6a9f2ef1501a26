"""Row-major recursive backtracking solver."""

from __future__ import annotations
import time
import tracemalloc
from dataclasses import dataclass, asdict
from typing import Optional, Tuple

from ..core.board import SudokuBoard, SIZE, EMPTY
from ..core.validator import can_place


@dataclass
class SearchStats:
    """Counters and cost of one backtracking run."""
    solved: bool = False
    calls: int = 0
    assignments: int = 0
    undos: int = 0
    max_depth: int = 0
    time_seconds: float = 0.0
    peak_memory_bytes: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


class BacktrackingSolver:
    """
    Exhaustive depth-first backtracking solver.

    Scans for the first empty cell in row-major order and tries digits 1-9 in
    ascending order, keeping the first complete solution it reaches. There is
    no randomness, so equal inputs always give equal outputs.

    Counters in ``stats``:
    - calls: recursive calls made
    - assignments: tentative digits accepted by ``can_place``
    - undos: assignments reverted after a dead end
    - max_depth: deepest recursion reached, in decided cells
    """

    def __init__(self):
        self.stats = SearchStats()

    def solve(self, board: SudokuBoard) -> Tuple[Optional[SudokuBoard], SearchStats]:
        """
        Solve a copy of ``board``, timing the run and tracking peak memory.

        Returns:
            Tuple of (solution or None, stats). The input board is untouched.
        """
        work = board.copy()

        tracemalloc.start()
        start = time.perf_counter()
        try:
            solved = self.fill(work)
        finally:
            elapsed = time.perf_counter() - start
            _, peak = tracemalloc.get_traced_memory()
            tracemalloc.stop()

        self.stats.time_seconds = elapsed
        self.stats.peak_memory_bytes = peak
        return (work if solved else None), self.stats

    def fill(self, board: SudokuBoard) -> bool:
        """
        Fill the board in place.

        Clues that already conflict with each other are rejected up front;
        ``can_place`` only guards new digits, so the search would otherwise
        complete around an existing duplicate.

        Returns:
            True if a complete solution was written into the board. On False
            the board is left exactly as it was before the call.
        """
        self.stats = SearchStats()
        if board.is_valid():
            self.stats.solved = self._backtrack(board, 0)
        return self.stats.solved

    def _backtrack(self, board: SudokuBoard, depth: int) -> bool:
        self.stats.calls += 1
        self.stats.max_depth = max(self.stats.max_depth, depth)

        cell = board.find_empty()
        if cell is None:
            return True

        row, col = cell
        for digit in range(1, SIZE + 1):
            if not can_place(board, row, col, digit):
                continue

            board.grid[row, col] = digit
            self.stats.assignments += 1
            if self._backtrack(board, depth + 1):
                return True

            # Dead end below this assignment
            board.grid[row, col] = EMPTY
            self.stats.undos += 1

        return False


def solve(board: SudokuBoard) -> bool:
    """Solve ``board`` in place with :class:`BacktrackingSolver`."""
    return BacktrackingSolver().fill(board)
