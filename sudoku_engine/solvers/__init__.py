"""Solvers module for Sudoku puzzles."""

from .base_solver import BaseSolver, SolverStats
from .deduction import (
    NAKED_SINGLE,
    UNIQUE_CANDIDATE,
    apply_deductions,
    fill_naked_singles,
    fill_unique_candidates,
)
from .backtracking import BacktrackingSolver, solve, count_solutions, has_unique_solution

__all__ = [
    "BaseSolver",
    "SolverStats",
    "BacktrackingSolver",
    "NAKED_SINGLE",
    "UNIQUE_CANDIDATE",
    "apply_deductions",
    "fill_naked_singles",
    "fill_unique_candidates",
    "solve",
    "count_solutions",
    "has_unique_solution",
]
