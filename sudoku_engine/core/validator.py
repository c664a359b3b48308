"""Validation utilities for Sudoku puzzles."""

from __future__ import annotations
from typing import TYPE_CHECKING

from .board import SIZE

if TYPE_CHECKING:
    from .board import SudokuBoard


def is_valid_placement(board: SudokuBoard, row: int, col: int, value: int) -> bool:
    """
    Check if placing a value at (row, col) is valid.

    All 27 cells of the row, column and box are inspected, the target cell
    included, so a filled target only reports whether ``value`` is already
    present around it.

    Args:
        board: The Sudoku board.
        row: Row index (0-8).
        col: Column index (0-8).
        value: Value to check (1-9).

    Returns:
        True if ``value`` appears nowhere in the row, column or box.

    Raises:
        IndexError: If (row, col) lies outside the grid.
        ValueError: If value is not between 1 and 9.
    """
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise IndexError(f"Cell ({row}, {col}) is outside the {SIZE}x{SIZE} grid")
    if value < 1 or value > SIZE:
        raise ValueError(f"Value must be 1-{SIZE}, got {value}")

    # Check row
    if value in board.get_row(row):
        return False

    # Check column
    if value in board.get_col(col):
        return False

    # Check box
    if value in board.get_box(row, col):
        return False

    return True


is_valid = is_valid_placement


def validate_solution(puzzle: SudokuBoard, solution: SudokuBoard) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if solution is valid and matches puzzle clues.
    """
    # Check that solution respects original clues
    for row, col in zip(*puzzle.grid.nonzero()):
        if puzzle.grid[row, col] != solution.grid[row, col]:
            return False

    # Check that solution is complete and valid
    return solution.is_solved()
