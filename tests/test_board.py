"""Unit tests for Sudoku board and validation."""

import pytest
import numpy as np
from termsudoku.core.board import SudokuBoard, EMPTY
from termsudoku.core.validator import (
    can_place, count_solutions, has_unique_solution, validate_solution
)


def reference_grid():
    """Solved grid whose rows are cyclic shifts of 1-9."""
    return [[(r * 3 + r // 3 + c) % 9 + 1 for c in range(9)] for r in range(9)]


class TestSudokuBoard:
    """Tests for SudokuBoard class."""

    def test_create_empty_board(self):
        """Test creating an empty 9x9 board."""
        board = SudokuBoard()
        assert board.size == 9
        assert board.box_size == 3
        assert board.count_empty() == 81
        assert board.count_filled() == 0

    def test_wrong_shape_rejected(self):
        """Only 9x9 grids are accepted."""
        with pytest.raises(ValueError):
            SudokuBoard(np.zeros((4, 4), dtype=np.int32))

    def test_set_and_get(self):
        """Test setting and getting values."""
        board = SudokuBoard()
        board.set(0, 0, 5)
        assert board.get(0, 0) == 5
        assert not board.is_empty(0, 0)

        board.clear(0, 0)
        assert board.is_empty(0, 0)
        assert board.get(0, 0) == EMPTY

    def test_set_out_of_range(self):
        board = SudokuBoard()
        with pytest.raises(ValueError):
            board.set(0, 0, 10)

    def test_get_candidates(self):
        """Test getting valid candidates for a cell."""
        board = SudokuBoard()
        board.set(0, 0, 5)
        board.set(0, 1, 3)

        candidates = board.get_candidates(0, 2)
        assert 5 not in candidates
        assert 3 not in candidates
        assert len(candidates) == 7

    def test_find_empty_row_major(self):
        """The first empty cell is found scanning rows left to right."""
        board = SudokuBoard.from_2d_list(reference_grid())
        board.clear(4, 2)
        board.clear(2, 7)
        assert board.find_empty() == (2, 7)
        assert board.get_empty_cells() == [(2, 7), (4, 2)]

        full = SudokuBoard.from_2d_list(reference_grid())
        assert full.find_empty() is None

    def test_is_valid(self):
        """Test board validation."""
        board = SudokuBoard()
        assert board.is_valid()

        board.set(0, 0, 5)
        board.set(0, 1, 5)
        assert not board.is_valid()

    def test_reference_grid_is_solved(self):
        board = SudokuBoard.from_2d_list(reference_grid())
        assert board.is_solved()

    def test_from_string(self):
        """Test creating board from string."""
        board = SudokuBoard.from_string("." * 80 + "9")
        assert board.get(8, 8) == 9
        assert board.count_filled() == 1

    def test_from_string_rejects_bad_input(self):
        with pytest.raises(ValueError):
            SudokuBoard.from_string("123")
        with pytest.raises(ValueError):
            SudokuBoard.from_string("x" * 81)

    def test_to_string(self):
        """Test converting board to string."""
        board = SudokuBoard()
        board.set(0, 0, 5)
        s = board.to_string()
        assert len(s) == 81
        assert s[0] == '5'
        assert SudokuBoard.from_string(s) == board

    def test_render(self):
        """Empty cells render as blanks, boxes are separated."""
        board = SudokuBoard.from_2d_list(reference_grid())
        board.clear(0, 0)
        lines = str(board).split('\n')

        assert len(lines) == 11
        assert lines[0] == '  2 3 | 4 5 6 | 7 8 9 '
        assert lines[3] == '------+-------+------'

    def test_copy(self):
        """Test board copy."""
        board = SudokuBoard()
        board.set(4, 4, 7)
        copy = board.copy()

        assert copy.get(4, 4) == 7

        copy.set(4, 4, 8)
        assert board.get(4, 4) == 7


class TestCanPlace:
    """Tests for the placement check."""

    def test_row_column_box_conflicts(self):
        """Test placement validation."""
        board = SudokuBoard()
        board.set(0, 0, 5)

        assert not can_place(board, 0, 5, 5)
        assert not can_place(board, 5, 0, 5)
        assert not can_place(board, 1, 1, 5)
        assert can_place(board, 0, 5, 7)
        assert can_place(board, 4, 4, 5)

    def test_reference_grid_scenario(self):
        """A cleared cell accepts its original digit and nothing else in its row."""
        original = reference_grid()
        board = SudokuBoard.from_2d_list(original)
        board.clear(0, 0)

        assert can_place(board, 0, 0, original[0][0])
        for digit in original[0][1:]:
            assert not can_place(board, 0, 0, digit)

    def test_does_not_check_target_cell(self):
        """An occupied cell still reports True when there is no peer conflict."""
        board = SudokuBoard()
        board.set(3, 3, 4)
        assert can_place(board, 3, 3, 7)

    def test_out_of_range_digit_never_collides(self):
        board = SudokuBoard.from_2d_list(reference_grid())
        assert can_place(board, 0, 0, 10)

    def test_zero_matches_empty_cells(self):
        """EMPTY is 0, so asking about 0 collides with any empty peer."""
        board = SudokuBoard()
        board.set(0, 0, 5)
        assert not can_place(board, 4, 4, 0)

        full = SudokuBoard.from_2d_list(reference_grid())
        assert can_place(full, 4, 4, 0)

    def test_does_not_modify_board(self):
        board = SudokuBoard.from_2d_list(reference_grid())
        before = board.copy()
        can_place(board, 2, 2, 1)
        assert board == before


class TestValidator:
    """Tests for solution counting utilities."""

    def test_solved_board_has_one_solution(self):
        board = SudokuBoard.from_2d_list(reference_grid())
        assert count_solutions(board) == 1
        assert has_unique_solution(board)

    def test_empty_board_has_many_solutions(self):
        board = SudokuBoard()
        assert count_solutions(board, limit=2) == 2
        assert not has_unique_solution(board)

    def test_conflicting_board_has_none(self):
        board = SudokuBoard()
        board.set(0, 0, 5)
        board.set(0, 8, 5)
        assert count_solutions(board) == 0

    def test_count_does_not_modify_board(self):
        board = SudokuBoard.from_2d_list(reference_grid())
        board.clear(0, 0)
        board.clear(5, 5)
        before = board.copy()
        count_solutions(board)
        assert board == before

    def test_public_names(self):
        import termsudoku.core as core
        assert sorted(core.__all__) == sorted([
            "SudokuBoard", "SIZE", "BOX_SIZE", "EMPTY",
            "can_place", "has_unique_solution", "count_solutions",
        ])
        assert not hasattr(core, "is_valid_board")

    def test_validate_solution(self):
        solution = SudokuBoard.from_2d_list(reference_grid())
        puzzle = solution.copy()
        puzzle.clear(0, 0)
        assert validate_solution(puzzle, solution)

        other = solution.copy()
        other.set(0, 1, 1)
        assert not validate_solution(puzzle, other)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
