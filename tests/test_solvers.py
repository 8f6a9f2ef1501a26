"""Unit tests for the backtracking solver."""

import pytest
from termsudoku.core.board import SudokuBoard
from termsudoku.solvers import BacktrackingSolver, solve


# A known solvable puzzle (medium difficulty)
TEST_PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

# The solution to the test puzzle
TEST_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


def assert_full_sudoku(board):
    """Every row, column and box is a permutation of 1-9."""
    digits = set(range(1, 10))
    for i in range(9):
        assert set(board.get_row(i).tolist()) == digits
        assert set(board.get_col(i).tolist()) == digits
    for r in range(0, 9, 3):
        for c in range(0, 9, 3):
            assert set(board.get_box(r, c).tolist()) == digits


def dead_end_board():
    """
    Valid clues, but no solution: (0, 0) accepts 1 or 2, after which (0, 1)
    has no candidate because column 1 already holds both.
    """
    board = SudokuBoard()
    for col, digit in zip(range(2, 9), range(3, 10)):
        board.set(0, col, digit)
    board.set(4, 1, 1)
    board.set(5, 1, 2)
    return board


class TestSolveInPlace:
    """Tests for the module-level solve function."""

    def test_solve_empty_board(self):
        """An empty board is always filled into a complete solution."""
        board = SudokuBoard()
        assert solve(board)
        assert board.is_solved()
        assert_full_sudoku(board)

    def test_empty_board_first_row_is_ascending(self):
        """Ascending digits with no randomness start the grid at 1..9."""
        board = SudokuBoard()
        solve(board)
        assert board.get_row(0).tolist() == list(range(1, 10))

    def test_deterministic(self):
        """Two separately built empty boards solve identically."""
        first = SudokuBoard()
        second = SudokuBoard()
        assert solve(first)
        assert solve(second)
        assert first == second

    def test_solve_puzzle(self):
        board = SudokuBoard.from_string(TEST_PUZZLE)
        assert solve(board)
        assert board.to_string() == TEST_SOLUTION

    def test_keeps_clues(self):
        board = SudokuBoard.from_string(TEST_PUZZLE)
        clues = SudokuBoard.from_string(TEST_PUZZLE)
        solve(board)
        for r, c in [(0, 0), (1, 4), (8, 8)]:
            assert board.get(r, c) == clues.get(r, c)

    def test_contradiction_returns_false_unchanged(self):
        """Two 5s in the same row cannot be solved; the board is untouched."""
        board = SudokuBoard()
        board.set(0, 0, 5)
        board.set(0, 4, 5)
        before = board.copy()

        assert not solve(board)
        assert board == before

    def test_dead_end_undoes_tentative_assignments(self):
        """Assignments tried before a dead end are all reverted."""
        board = dead_end_board()
        before = board.copy()

        assert not solve(board)
        assert board == before

    def test_full_board_is_already_solved(self):
        board = SudokuBoard.from_string(TEST_SOLUTION)
        assert solve(board)
        assert board.to_string() == TEST_SOLUTION


class TestBacktrackingSolver:
    """Tests for the solver class and its statistics."""

    def test_solve_puzzle(self):
        """Test solving a known puzzle."""
        board = SudokuBoard.from_string(TEST_PUZZLE)
        solver = BacktrackingSolver()

        solution, stats = solver.solve(board)

        assert stats.solved
        assert solution is not None
        assert solution.to_string() == TEST_SOLUTION

    def test_input_not_modified(self):
        board = SudokuBoard.from_string(TEST_PUZZLE)
        BacktrackingSolver().solve(board)
        assert board.to_string() == TEST_PUZZLE

    def test_stats_collected(self):
        """Test that stats are collected."""
        board = SudokuBoard.from_string(TEST_PUZZLE)
        solver = BacktrackingSolver()

        _, stats = solver.solve(board)

        assert stats.time_seconds > 0
        assert stats.calls > 0
        assert stats.assignments >= board.count_empty()
        assert stats.assignments - stats.undos == board.count_empty()
        assert stats.max_depth == board.count_empty()
        assert stats.peak_memory_bytes >= 0

    def test_dead_end_counters(self):
        """Both candidates for the first cell are tried and undone."""
        solver = BacktrackingSolver()
        assert not solver.fill(dead_end_board())

        assert solver.stats.assignments == 2
        assert solver.stats.undos == 2
        assert solver.stats.calls == 3
        assert solver.stats.max_depth == 1

    def test_unsolvable_reports_none(self):
        board = SudokuBoard()
        board.set(0, 0, 5)
        board.set(0, 4, 5)

        solution, stats = BacktrackingSolver().solve(board)

        assert solution is None
        assert not stats.solved

    def test_stats_to_dict(self):
        _, stats = BacktrackingSolver().solve(SudokuBoard.from_string(TEST_PUZZLE))
        data = stats.to_dict()
        assert data["solved"] is True
        assert set(data) >= {"calls", "assignments", "undos", "max_depth", "peak_memory_bytes"}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
