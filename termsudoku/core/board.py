"""Sudoku board representation for the standard 9x9 game."""

from __future__ import annotations
import numpy as np
from typing import List, Tuple, Optional, Set


SIZE = 9
BOX_SIZE = 3
EMPTY = 0


class SudokuBoard:
    """
    Represents a 9x9 Sudoku board.

    Cells hold a digit 1-9 or EMPTY (0). The grid is a numpy array and can be
    read or written cell by cell.
    """

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize a Sudoku board.

        Args:
            grid: Optional initial 9x9 grid. If None, creates an empty board.
        """
        self.size = SIZE
        self.box_size = BOX_SIZE

        if grid is not None:
            grid = np.asarray(grid)
            if grid.shape != (SIZE, SIZE):
                raise ValueError(f"Grid shape must be ({SIZE}, {SIZE}), got {grid.shape}")
            self.grid = grid.copy().astype(np.int32)
        else:
            self.grid = np.full((SIZE, SIZE), EMPTY, dtype=np.int32)

    def copy(self) -> SudokuBoard:
        """Create a deep copy of the board."""
        return SudokuBoard(self.grid)

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). EMPTY means no digit."""
        return int(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use EMPTY to clear."""
        if value < EMPTY or value > SIZE:
            raise ValueError(f"Value must be {EMPTY}-{SIZE}, got {value}")
        self.grid[row, col] = value

    def clear(self, row: int, col: int) -> None:
        """Clear the cell at position (row, col)."""
        self.grid[row, col] = EMPTY

    def is_empty(self, row: int, col: int) -> bool:
        return self.grid[row, col] == EMPTY

    def get_row(self, row: int) -> np.ndarray:
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        return self.grid[:, col]

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the box containing (row, col)."""
        box_row = (row // BOX_SIZE) * BOX_SIZE
        box_col = (col // BOX_SIZE) * BOX_SIZE
        return self.grid[box_row:box_row + BOX_SIZE,
                         box_col:box_col + BOX_SIZE].flatten()

    def get_candidates(self, row: int, col: int) -> Set[int]:
        """
        Get all digits that could go into an empty cell.

        Returns:
            Set of digits 1-9 not used in the cell's row, column or box.
            Returns empty set if the cell is not empty.
        """
        if not self.is_empty(row, col):
            return set()

        used = set(self.get_row(row).tolist())
        used |= set(self.get_col(col).tolist())
        used |= set(self.get_box(row, col).tolist())

        return set(range(1, SIZE + 1)) - used

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """Get all empty cell positions in row-major order."""
        rows, cols = np.nonzero(self.grid == EMPTY)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def find_empty(self) -> Optional[Tuple[int, int]]:
        """Return the row-major first empty cell, or None if the board is full."""
        for row in range(SIZE):
            for col in range(SIZE):
                if self.grid[row, col] == EMPTY:
                    return row, col
        return None

    def count_empty(self) -> int:
        return int(np.sum(self.grid == EMPTY))

    def count_filled(self) -> int:
        return int(np.sum(self.grid != EMPTY))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """
        Check if the current board state is valid.
        Does not check if solution is complete, only if no conflicts exist.
        """
        for i in range(SIZE):
            row = self.get_row(i)
            non_zero = row[row != EMPTY]
            if len(non_zero) != len(set(non_zero)):
                return False

        for j in range(SIZE):
            col = self.get_col(j)
            non_zero = col[col != EMPTY]
            if len(non_zero) != len(set(non_zero)):
                return False

        for box_row in range(0, SIZE, BOX_SIZE):
            for box_col in range(0, SIZE, BOX_SIZE):
                box = self.get_box(box_row, box_col)
                non_zero = box[box != EMPTY]
                if len(non_zero) != len(set(non_zero)):
                    return False

        return True

    def is_solved(self) -> bool:
        """Check if the puzzle is completely and correctly solved."""
        return self.is_complete() and self.is_valid()

    def to_string(self) -> str:
        """Convert board to an 81-character string, 0 for empty cells."""
        return ''.join(str(v) for v in self.grid.flatten())

    @classmethod
    def from_string(cls, s: str) -> SudokuBoard:
        """
        Create a board from a string representation.

        Args:
            s: String of 81 characters, 0 or . for empty, 1-9 for digits.
               Whitespace is ignored.
        """
        s = ''.join(s.split())
        if len(s) != SIZE * SIZE:
            raise ValueError(f"String length must be {SIZE * SIZE}, got {len(s)}")

        grid = np.full((SIZE, SIZE), EMPTY, dtype=np.int32)
        for idx, c in enumerate(s):
            if c in '0.':
                continue
            if not c.isdigit():
                raise ValueError(f"Invalid character {c!r} at position {idx}")
            grid[idx // SIZE, idx % SIZE] = int(c)

        return cls(grid)

    @classmethod
    def from_2d_list(cls, data: List[List[int]]) -> SudokuBoard:
        """Create a board from a 2D list."""
        return cls(np.array(data, dtype=np.int32))

    def __str__(self) -> str:
        """Render the board as text, empty cells shown as blanks."""
        lines = []
        for i in range(SIZE):
            row_str = ''
            for j in range(SIZE):
                val = self.grid[i, j]
                row_str += '  ' if val == EMPTY else f'{val} '
                if (j + 1) % BOX_SIZE == 0 and j != SIZE - 1:
                    row_str += '| '
            lines.append(row_str)
            if (i + 1) % BOX_SIZE == 0 and i != SIZE - 1:
                lines.append('------+-------+------')
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuBoard(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())
