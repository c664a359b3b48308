"""Deductive fill passes run before backtracking."""

from __future__ import annotations
import logging
from typing import Callable, List, Optional, Tuple

from ..core.board import SudokuBoard, SIZE, DIGITS
from ..core.validator import is_valid_placement

logger = logging.getLogger(__name__)

NAKED_SINGLE = "naked_single"
UNIQUE_CANDIDATE = "unique_candidate"

# on_fill(technique, row, col, value)
FillCallback = Callable[[str, int, int, int], None]


def _record(board: SudokuBoard, technique: str, row: int, col: int, value: int,
            on_fill: Optional[FillCallback]) -> None:
    board.set(row, col, value)
    logger.debug("Found %s (%d, %d) = %d", technique, row, col, value)
    if on_fill is not None:
        on_fill(technique, row, col, value)


def fill_naked_singles(board: SudokuBoard, on_fill: Optional[FillCallback] = None) -> int:
    """
    Fill every empty cell that has exactly one legal value.

    Cells are scanned once in row-major order and each fill is visible to
    the cells scanned after it.

    Returns:
        Number of cells filled.
    """
    filled = 0
    for row in range(SIZE):
        for col in range(SIZE):
            if not board.is_empty(row, col):
                continue

            candidates = [v for v in DIGITS if is_valid_placement(board, row, col, v)]
            if len(candidates) == 1:
                _record(board, NAKED_SINGLE, row, col, candidates[0], on_fill)
                filled += 1
    return filled


def _placeable_count(board: SudokuBoard, cells: List[Tuple[int, int]], value: int) -> int:
    # Filled cells count too whenever the checker accepts the value there.
    return sum(1 for r, c in cells if is_valid_placement(board, r, c, value))


def fill_unique_candidates(board: SudokuBoard, on_fill: Optional[FillCallback] = None) -> int:
    """
    Fill cells holding the only legal spot for a value in their row,
    column or box.

    For each candidate of an empty cell the row is counted first, then the
    column, then the box. The first count equal to one fills the cell and
    the remaining candidates of that cell are skipped.

    Returns:
        Number of cells filled.
    """
    filled = 0
    for row in range(SIZE):
        for col in range(SIZE):
            if not board.is_empty(row, col):
                continue

            for value in DIGITS:
                if not is_valid_placement(board, row, col, value):
                    continue

                if (_placeable_count(board, board.row_cells(row), value) == 1
                        or _placeable_count(board, board.col_cells(col), value) == 1
                        or _placeable_count(board, board.box_cells(row, col), value) == 1):
                    _record(board, UNIQUE_CANDIDATE, row, col, value, on_fill)
                    filled += 1
                    break
    return filled


def apply_deductions(board: SudokuBoard, on_fill: Optional[FillCallback] = None) -> int:
    """
    Run the naked single pass then the unique candidate pass, once each.

    Neither pass iterates to a fixed point or reports an unsatisfiable
    board; they only fill what they can see in one sweep.

    Returns:
        Total number of cells filled.
    """
    return fill_naked_singles(board, on_fill) + fill_unique_candidates(board, on_fill)
