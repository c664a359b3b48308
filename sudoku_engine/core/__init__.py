"""Core module for Sudoku board representation and validation."""

from .board import SudokuBoard, SIZE, BOX_SIZE, DIGITS
from .validator import is_valid, is_valid_placement, validate_solution

__all__ = [
    "SudokuBoard",
    "SIZE",
    "BOX_SIZE",
    "DIGITS",
    "is_valid",
    "is_valid_placement",
    "validate_solution",
]
