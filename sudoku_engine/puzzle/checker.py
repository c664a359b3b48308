"""Check entered values against the solution of a puzzle."""

from __future__ import annotations
import logging
from typing import Dict, Optional, Tuple

from ..core.board import SudokuBoard
from ..solvers.backtracking import solve

logger = logging.getLogger(__name__)


def check_entries(puzzle: SudokuBoard, attempt: SudokuBoard) -> Optional[Dict[Tuple[int, int], bool]]:
    """
    Mark every entered cell as correct or wrong.

    An entered cell is one filled in ``attempt`` but empty in ``puzzle``.
    The puzzle's givens are solved and each entry is compared with the
    solution.

    Args:
        puzzle: The givens.
        attempt: The givens plus the player's entries.

    Returns:
        Mapping of (row, col) to True (correct) or False (wrong), or None if
        the givens cannot be solved.
    """
    solution = puzzle.copy()
    if not solve(solution):
        logger.warning("Givens cannot be solved, entries not checked")
        return None

    results = {}
    for row, col in puzzle.get_empty_cells():
        value = attempt.get(row, col)
        if value == 0:
            continue
        results[(row, col)] = value == solution.get(row, col)

    wrong = sum(1 for ok in results.values() if not ok)
    logger.info("Checked %d entries: %d correct, %d wrong",
                len(results), len(results) - wrong, wrong)
    return results
