"""Exhaustive backtracking solver and solution counter."""

from __future__ import annotations
import logging
from typing import Optional

from .base_solver import BaseSolver
from .deduction import FillCallback, NAKED_SINGLE, apply_deductions
from ..core.board import SudokuBoard, DIGITS
from ..core.validator import is_valid_placement

logger = logging.getLogger(__name__)


class BacktrackingSolver(BaseSolver):
    """
    Chronological backtracking over empty cells.

    Cells are taken in row-major order and values are tried in ascending
    order; there is no cell or value ordering heuristic. Solving is preceded
    by one naked single pass and one unique candidate pass unless
    ``use_deduction`` is False.
    """

    name = "Backtracking"

    def __init__(self, use_deduction: bool = True, on_fill: Optional[FillCallback] = None):
        """
        Initialize the solver.

        Args:
            use_deduction: Run the deductive fill passes before searching.
            on_fill: Called as ``on_fill(technique, row, col, value)`` for
                every cell filled by deduction.
        """
        super().__init__()
        self.use_deduction = use_deduction
        self.on_fill = on_fill

    def _solve(self, board: SudokuBoard) -> Optional[SudokuBoard]:
        if self.fill(board):
            return board
        return None

    def fill(self, board: SudokuBoard) -> bool:
        """
        Complete ``board`` in place.

        Returns:
            True if the board now holds a full solution. On False the search
            placements have been undone but deductive fills remain.
        """
        if self.use_deduction:
            apply_deductions(board, self._record_fill)

        solved = self._backtrack(board)
        logger.info("Backtracking %s after %d nodes, %d backtracks",
                    "solved" if solved else "failed",
                    self.stats.nodes_explored, self.stats.backtracks)
        return solved

    def count(self, board: SudokuBoard, limit: Optional[int] = None) -> int:
        """
        Count the completions of ``board``; the board is left unchanged.

        Args:
            board: The partial grid.
            limit: Stop once this many completions are found. None counts
                them all.
        """
        if limit is not None and limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")
        return self._count(board, limit)

    def _record_fill(self, technique: str, row: int, col: int, value: int) -> None:
        if technique == NAKED_SINGLE:
            self.stats.naked_singles += 1
        else:
            self.stats.unique_candidates += 1
        if self.on_fill is not None:
            self.on_fill(technique, row, col, value)

    def _backtrack(self, board: SudokuBoard) -> bool:
        """
        Recursive backtracking algorithm.

        Returns True if solution found, False otherwise.
        """
        self.stats.nodes_explored += 1

        cell = board.first_empty()
        if cell is None:
            # No empty cells - solution found!
            return True

        row, col = cell
        for value in DIGITS:
            if is_valid_placement(board, row, col, value):
                board.set(row, col, value)
                if self._backtrack(board):
                    return True
                board.clear(row, col)
                self.stats.backtracks += 1

        return False

    def _count(self, board: SudokuBoard, limit: Optional[int]) -> int:
        self.stats.nodes_explored += 1

        cell = board.first_empty()
        if cell is None:
            return 1

        row, col = cell
        total = 0
        for value in DIGITS:
            if is_valid_placement(board, row, col, value):
                board.set(row, col, value)
                total += self._count(board, None if limit is None else limit - total)
                board.clear(row, col)
                if limit is not None and total >= limit:
                    break

        return total


def solve(board: SudokuBoard, on_fill: Optional[FillCallback] = None) -> bool:
    """
    Solve ``board`` in place.

    Returns:
        True iff the board was completed to a full solution.
    """
    return BacktrackingSolver(on_fill=on_fill).fill(board)


def count_solutions(board: SudokuBoard, limit: Optional[int] = None) -> int:
    """
    Count the number of solutions for a puzzle.

    Args:
        board: The puzzle board. Restored to its original state on return.
        limit: Maximum solutions to count before stopping, or None for all.

    Returns:
        0 if unsatisfiable, 1 if unique, more if ambiguous (capped at limit).
    """
    return BacktrackingSolver().count(board, limit)


def has_unique_solution(board: SudokuBoard) -> bool:
    """Check if a puzzle has exactly one solution."""
    return count_solutions(board, limit=2) == 1
