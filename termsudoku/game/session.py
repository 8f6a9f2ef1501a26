"""Interactive game state: moves, hints, undo and the session clock."""

from __future__ import annotations
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from ..core.board import SudokuBoard, SIZE
from ..core.validator import can_place


TIME_LIMIT_SECONDS = 900.0


@dataclass
class MoveResult:
    """Outcome of a submitted move."""
    accepted: bool
    solved: bool = False


@dataclass
class Hint:
    """A digit the player could place, with 0-based coordinates."""
    row: int
    col: int
    digit: int


class GameSession:
    """
    Owns the board being played and applies player actions to it.

    Every move is checked with ``can_place``; completion is checked after
    each accepted move. The time limit is only reported, never enforced.
    """

    def __init__(
        self,
        puzzle: SudokuBoard,
        clock: Callable[[], float] = time.monotonic,
        time_limit: float = TIME_LIMIT_SECONDS
    ):
        """
        Args:
            puzzle: Starting puzzle. The session plays on a copy.
            clock: Monotonic clock returning seconds.
            time_limit: Advisory session length in seconds.
        """
        self.board = puzzle.copy()
        self.moves = 0
        self.time_limit = time_limit
        self._clock = clock
        self._start = clock()
        self._history: List[Tuple[int, int]] = []

    def place(self, row: int, col: int, digit: int) -> MoveResult:
        """
        Place ``digit`` at 0-based (row, col).

        Rejected when the coordinates or digit are out of range, the cell is
        already filled, or the digit conflicts with its row, column or box.
        """
        if not (0 <= row < SIZE and 0 <= col < SIZE and 1 <= digit <= SIZE):
            return MoveResult(accepted=False)
        if not self.board.is_empty(row, col):
            return MoveResult(accepted=False)
        if not can_place(self.board, row, col, digit):
            return MoveResult(accepted=False)

        self.board.set(row, col, digit)
        self._history.append((row, col))
        self.moves += 1
        return MoveResult(accepted=True, solved=self.is_solved())

    def undo(self) -> Optional[Tuple[int, int]]:
        """Clear the most recent accepted move and return its cell."""
        if not self._history:
            return None
        row, col = self._history.pop()
        self.board.clear(row, col)
        return row, col

    def can_undo(self) -> bool:
        return bool(self._history)

    def hint(self) -> Optional[Hint]:
        """Return the smallest allowed digit for the first fillable empty cell."""
        for row, col in self.board.get_empty_cells():
            for digit in range(1, SIZE + 1):
                if can_place(self.board, row, col, digit):
                    return Hint(row, col, digit)
        return None

    def is_solved(self) -> bool:
        """True once no empty cell is left."""
        return self.board.is_complete()

    def elapsed(self) -> float:
        return self._clock() - self._start

    def time_remaining(self) -> float:
        return max(0.0, self.time_limit - self.elapsed())
