"""Shared puzzle fixtures."""

import pytest

from sudoku_engine.core.board import SudokuBoard


# A known solvable puzzle (medium difficulty)
TEST_PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

# The solution to the test puzzle
TEST_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)

# TEST_SOLUTION with cells (3,5), (3,8), (4,5), (4,8) cleared. Those four
# cells hold 1/3 and 3/1 across two boxes, so both orders complete the grid.
TWO_SOLUTION_PUZZLE = (
    "534678912"
    "672195348"
    "198342567"
    "859760420"
    "426850790"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)

# The other completion of TWO_SOLUTION_PUZZLE
SWAPPED_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859763421"
    "426851793"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)

# (0, 8) has no legal value: its row holds 1-8 and its box holds 9
UNSOLVABLE_PUZZLE = "123456780" + "000000009" + "0" * 63


@pytest.fixture
def puzzle():
    return SudokuBoard.from_string(TEST_PUZZLE)


@pytest.fixture
def solution():
    return SudokuBoard.from_string(TEST_SOLUTION)


@pytest.fixture
def two_solution_puzzle():
    return SudokuBoard.from_string(TWO_SOLUTION_PUZZLE)


@pytest.fixture
def unsolvable_puzzle():
    return SudokuBoard.from_string(UNSOLVABLE_PUZZLE)
