"""Sudoku solving engine: validation, deduction, backtracking, counting and uniqueness reduction."""

from .core import SudokuBoard, is_valid, is_valid_placement, validate_solution
from .solvers import (
    BacktrackingSolver,
    SolverStats,
    apply_deductions,
    count_solutions,
    fill_naked_singles,
    fill_unique_candidates,
    has_unique_solution,
    solve,
)
from .puzzle import UniquenessReducer, check_entries, make_unique, reduce_to_unique

__version__ = "1.0.0"

__all__ = [
    "SudokuBoard",
    "is_valid",
    "is_valid_placement",
    "validate_solution",
    "BacktrackingSolver",
    "SolverStats",
    "apply_deductions",
    "count_solutions",
    "fill_naked_singles",
    "fill_unique_candidates",
    "has_unique_solution",
    "solve",
    "UniquenessReducer",
    "check_entries",
    "make_unique",
    "reduce_to_unique",
]
