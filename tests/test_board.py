"""Unit tests for Sudoku board and validation."""

import pytest
import numpy as np
from sudoku_engine.core.board import SudokuBoard
from sudoku_engine.core.validator import is_valid, is_valid_placement, validate_solution

from conftest import TEST_PUZZLE, TEST_SOLUTION


class TestSudokuBoard:
    """Tests for SudokuBoard class."""

    def test_create_empty_board(self):
        """Test creating an empty 9x9 board."""
        board = SudokuBoard()
        assert board.size == 9
        assert board.box_size == 3
        assert board.count_empty() == 81
        assert board.count_filled() == 0

    def test_rejects_other_sizes(self):
        """Only 9x9 grids are supported."""
        with pytest.raises(ValueError):
            SudokuBoard(np.zeros((16, 16), dtype=np.int32))
        with pytest.raises(ValueError):
            SudokuBoard.from_2d_list([[0] * 9] * 8)

    def test_rejects_out_of_range_values(self):
        """Grid values must lie in 0-9."""
        data = [[0] * 9 for _ in range(9)]
        data[2][3] = 10
        with pytest.raises(ValueError):
            SudokuBoard.from_2d_list(data)

    def test_rejects_non_integer_values(self):
        """Fractional grids are rejected instead of truncated."""
        data = [[0] * 9 for _ in range(9)]
        data[0][0] = 1.5
        with pytest.raises(ValueError):
            SudokuBoard.from_2d_list(data)
        with pytest.raises(ValueError):
            SudokuBoard(np.full((9, 9), 1.0))

    def test_set_and_get(self):
        """Test setting and getting values."""
        board = SudokuBoard()
        board.set(0, 0, 5)
        assert board.get(0, 0) == 5
        assert not board.is_empty(0, 0)

        board.clear(0, 0)
        assert board.is_empty(0, 0)

    def test_out_of_range_cell_fails_loudly(self):
        """Negative or too large coordinates raise instead of wrapping."""
        board = SudokuBoard()
        with pytest.raises(IndexError):
            board.get(-1, 0)
        with pytest.raises(IndexError):
            board.set(0, 9, 1)
        with pytest.raises(ValueError):
            board.set(0, 0, 10)

    def test_unit_access_checks_indices(self):
        """Unit slices do not wrap negative or too large indices."""
        board = SudokuBoard.from_string(TEST_PUZZLE)
        with pytest.raises(IndexError):
            board.get_row(-1)
        with pytest.raises(IndexError):
            board.get_col(9)
        with pytest.raises(IndexError):
            board.get_box(-1, 0)

    def test_is_empty_returns_bool(self):
        board = SudokuBoard.from_string(TEST_PUZZLE)
        assert type(board.is_empty(0, 2)) is bool
        assert type(board.is_empty(0, 0)) is bool

    def test_get_candidates(self):
        """Test getting valid candidates for a cell."""
        board = SudokuBoard()
        board.set(0, 0, 5)
        board.set(0, 1, 3)

        # Cell (0, 2) should not have 5 or 3 as candidates
        candidates = board.get_candidates(0, 2)
        assert 5 not in candidates
        assert 3 not in candidates
        assert len(candidates) == 7  # 1-9 minus 5 and 3

    def test_box_cells(self):
        """Box positions are derived from the cell's coordinates."""
        cells = SudokuBoard.box_cells(4, 7)
        assert len(cells) == 9
        assert cells[0] == (3, 6)
        assert cells[-1] == (5, 8)

    def test_first_empty_is_row_major(self):
        """The first empty cell is found scanning rows left to right."""
        board = SudokuBoard.from_string(TEST_SOLUTION)
        assert board.first_empty() is None

        board.clear(6, 2)
        board.clear(2, 7)
        assert board.first_empty() == (2, 7)
        assert board.get_empty_cells() == [(2, 7), (6, 2)]

    def test_is_valid(self):
        """Test board validation."""
        board = SudokuBoard()
        assert board.is_valid()  # Empty board is valid

        board.set(0, 0, 5)
        board.set(0, 1, 5)  # Duplicate in row
        assert not board.is_valid()

    def test_from_string(self):
        """Test creating board from string."""
        puzzle_str = "." * 80 + "9"
        board = SudokuBoard.from_string(puzzle_str)
        assert board.get(8, 8) == 9
        assert board.count_filled() == 1

    def test_from_string_rejects_bad_input(self):
        """Wrong length or characters raise ValueError."""
        with pytest.raises(ValueError):
            SudokuBoard.from_string("123")
        with pytest.raises(ValueError):
            SudokuBoard.from_string("x" * 81)

    def test_to_string(self):
        """Test converting board to string."""
        board = SudokuBoard.from_string(TEST_PUZZLE)
        assert board.to_string() == TEST_PUZZLE

    def test_format_rows(self):
        """Rows print as space-separated digits with 0 for empty."""
        board = SudokuBoard.from_string(TEST_PUZZLE)
        lines = board.format_rows().splitlines()
        assert len(lines) == 9
        assert lines[0] == "5 3 0 0 7 0 0 0 0"

    def test_pretty_print(self):
        """The pretty form draws box separators and dots for empty cells."""
        text = str(SudokuBoard.from_string(TEST_PUZZLE))
        assert text.splitlines()[0] == "+-------+-------+-------+"
        assert "| 5 3 . | . 7 . | . . . |" in text

    def test_copy(self):
        """Test board copy."""
        board = SudokuBoard()
        board.set(4, 4, 7)
        copy = board.copy()

        assert copy.get(4, 4) == 7
        assert copy == board

        # Modify copy, original should be unchanged
        copy.set(4, 4, 8)
        assert board.get(4, 4) == 7
        assert copy != board


class TestValidator:
    """Tests for validation utilities."""

    def test_is_valid_placement(self):
        """Test placement validation."""
        board = SudokuBoard()
        board.set(0, 0, 5)

        # Can't place 5 in same row
        assert not is_valid_placement(board, 0, 5, 5)

        # Can't place 5 in same column
        assert not is_valid_placement(board, 5, 0, 5)

        # Can't place 5 in same box
        assert not is_valid_placement(board, 1, 1, 5)

        # Can place different value
        assert is_valid_placement(board, 0, 5, 7)

        # Outside its row, column and box the value is fine
        assert is_valid_placement(board, 4, 4, 5)

    def test_matches_unit_membership(self):
        """Validity is exactly "value absent from row, column and box"."""
        board = SudokuBoard.from_string(TEST_PUZZLE)
        for row in range(9):
            for col in range(9):
                for value in range(1, 10):
                    present = (value in board.get_row(row)
                               or value in board.get_col(col)
                               or value in board.get_box(row, col))
                    assert is_valid(board, row, col, value) == (not present)

    def test_duplicate_in_row(self):
        """Two equal values in a row block that value across the row."""
        board = SudokuBoard()
        board.set(0, 2, 5)
        board.set(0, 6, 5)

        assert not board.is_valid()
        for col in range(9):
            assert not is_valid(board, 0, col, 5)

    def test_target_cell_is_inspected(self):
        """A filled target only reports whether the value is already there."""
        board = SudokuBoard()
        board.set(3, 3, 4)
        assert not is_valid(board, 3, 3, 4)
        assert is_valid(board, 3, 3, 6)

    def test_rejects_bad_arguments(self):
        """Out of range coordinates or values fail loudly."""
        board = SudokuBoard()
        with pytest.raises(IndexError):
            is_valid(board, 9, 0, 1)
        with pytest.raises(IndexError):
            is_valid(board, 0, -1, 1)
        with pytest.raises(ValueError):
            is_valid(board, 0, 0, 0)
        with pytest.raises(ValueError):
            is_valid(board, 0, 0, 10)

    def test_validate_solution(self):
        """A solution must be complete, conflict free and keep the clues."""
        puzzle = SudokuBoard.from_string(TEST_PUZZLE)
        solution = SudokuBoard.from_string(TEST_SOLUTION)
        assert validate_solution(puzzle, solution)

        wrong = solution.copy()
        wrong.set(0, 0, 4)
        assert not validate_solution(puzzle, wrong)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
