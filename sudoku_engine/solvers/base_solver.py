"""Base solver interface and common utilities."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Dict, Any, Tuple
import time
import tracemalloc

from ..core.board import SudokuBoard


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    # Core metrics
    solved: bool = False
    time_seconds: float = 0.0
    memory_bytes: int = 0

    # Search metrics
    nodes_explored: int = 0
    backtracks: int = 0

    # Deductive fills before the search
    naked_singles: int = 0
    unique_candidates: int = 0

    algorithm: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "nodes_explored": self.nodes_explored,
            "backtracks": self.backtracks,
            "naked_singles": self.naked_singles,
            "unique_candidates": self.unique_candidates,
            "algorithm": self.algorithm,
        }


class BaseSolver(ABC):
    """Abstract base class for Sudoku solvers."""

    name: str = "BaseSolver"

    def __init__(self):
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, board: SudokuBoard) -> Tuple[Optional[SudokuBoard], SolverStats]:
        """
        Solve a copy of a Sudoku puzzle with timing and memory tracking.

        Args:
            board: The puzzle to solve. It is not modified.

        Returns:
            Tuple of (solution or None, stats).
        """
        self.stats = SolverStats(algorithm=self.name)

        tracemalloc.start()
        start_time = time.perf_counter()

        try:
            solution = self._solve(board.copy())
            self.stats.solved = solution is not None and solution.is_solved()
        finally:
            self.stats.time_seconds = time.perf_counter() - start_time
            _, peak = tracemalloc.get_traced_memory()
            tracemalloc.stop()
            self.stats.memory_bytes = peak

        return solution, self.stats

    @abstractmethod
    def _solve(self, board: SudokuBoard) -> Optional[SudokuBoard]:
        """
        Internal solve method to be implemented by subclasses.

        Args:
            board: A copy of the puzzle to solve (can be modified).

        Returns:
            The solved board, or None if no solution found.
        """
        pass
