"""Reduce a multi-solution puzzle to one with a single solution."""

from __future__ import annotations
import logging
import random
from typing import List, Optional, Tuple

from ..core.board import SudokuBoard, SIZE
from ..solvers.backtracking import count_solutions, solve

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 9_999_999


class UniquenessReducer:
    """
    Reveals clues from a reference solution until a puzzle is unique.

    Algorithm:
    1. Count the puzzle's solutions; stop if there is exactly one or none
    2. Pick a random cell; if it is empty, copy the solution's value into it
    3. Recount and stop as soon as the puzzle has exactly one solution

    Each call may reveal different cells; every result is a uniquely
    solvable puzzle consistent with the reference solution.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None,
                 max_attempts: int = MAX_ATTEMPTS):
        """
        Initialize the reducer.

        Args:
            seed: Random seed for reproducibility. Ignored when rng is given.
            rng: Random source used to pick cells.
            max_attempts: Upper bound on random cell picks.
        """
        self.rng = rng if rng is not None else random.Random(seed)
        self.max_attempts = max_attempts
        self.revealed: List[Tuple[int, int]] = []
        # Outcome of the last reduce or make_unique call
        self.succeeded = False

    def reduce(self, puzzle: SudokuBoard, solution: SudokuBoard) -> bool:
        """
        Reveal cells of ``solution`` in ``puzzle`` until it is unique.

        ``solution`` must be a full completion consistent with the puzzle's
        filled cells; this is not checked.

        Returns:
            True if the puzzle now has exactly one solution. On False the
            cells revealed so far are kept.
        """
        self.revealed = []
        self.succeeded = self._reveal_until_unique(puzzle, solution)
        return self.succeeded

    def _reveal_until_unique(self, puzzle: SudokuBoard, solution: SudokuBoard) -> bool:
        # Only "exactly one" matters, so stop counting at two
        count = count_solutions(puzzle, limit=2)
        if count == 1:
            return True
        if count < 1:
            logger.info("Puzzle has no solution, nothing to reveal")
            return False

        for _ in range(self.max_attempts):
            row = self.rng.randrange(SIZE)
            col = self.rng.randrange(SIZE)
            if not puzzle.is_empty(row, col):
                continue

            value = solution.get(row, col)
            puzzle.set(row, col, value)
            self.revealed.append((row, col))
            logger.debug("Revealed (%d, %d) = %d", row, col, value)

            if count_solutions(puzzle, limit=2) == 1:
                logger.info("Puzzle made unique after revealing %d cells", len(self.revealed))
                return True

        logger.warning("Could not make puzzle unique, revealed %d cells", len(self.revealed))
        return False

    def make_unique(self, puzzle: SudokuBoard) -> SudokuBoard:
        """
        Build a single-solution version of ``puzzle``.

        The solver's completion of the puzzle is the reference solution.

        Returns:
            A new board: all zeros if the puzzle has no solution, an unchanged
            copy if it is already unique, otherwise the reduced copy.
            ``succeeded`` tells whether the returned board has exactly one
            solution.
        """
        self.revealed = []
        self.succeeded = False
        solved = puzzle.copy()
        count = count_solutions(puzzle, limit=2)
        if count < 1 or not solve(solved):
            logger.info("Puzzle has no solution, returning an empty board")
            return SudokuBoard()

        corrected = puzzle.copy()
        if count == 1:
            self.succeeded = True
            return corrected

        self.reduce(corrected, solved)
        return corrected


def reduce_to_unique(puzzle: SudokuBoard, solution: SudokuBoard,
                     rng: Optional[random.Random] = None,
                     max_attempts: int = MAX_ATTEMPTS) -> bool:
    """Reveal clues of ``solution`` in ``puzzle`` (in place) until it is unique."""
    return UniquenessReducer(rng=rng, max_attempts=max_attempts).reduce(puzzle, solution)


def make_unique(puzzle: SudokuBoard, rng: Optional[random.Random] = None) -> SudokuBoard:
    """Return a single-solution copy of ``puzzle``, or an empty board if unsolvable."""
    return UniquenessReducer(rng=rng).make_unique(puzzle)
