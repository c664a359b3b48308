"""Puzzle-level operations built on the solvers."""

from .reducer import MAX_ATTEMPTS, UniquenessReducer, reduce_to_unique, make_unique
from .checker import check_entries

__all__ = ["MAX_ATTEMPTS", "UniquenessReducer", "reduce_to_unique", "make_unique", "check_entries"]
