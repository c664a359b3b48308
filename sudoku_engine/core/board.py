"""Sudoku board representation for standard 9x9 puzzles."""

from __future__ import annotations
import numpy as np
from typing import List, Tuple, Optional, Set


SIZE = 9
BOX_SIZE = 3
DIGITS = range(1, SIZE + 1)


class SudokuBoard:
    """
    Represents a 9x9 Sudoku board with 3x3 boxes.

    Cells hold 0 (empty) or a value from 1 to 9. Nothing else is stored:
    candidates and box coordinates are derived on demand.
    """

    size = SIZE
    box_size = BOX_SIZE

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize a Sudoku board.

        Args:
            grid: Optional initial 9x9 grid. If None, creates empty board.
        """
        if grid is not None:
            grid = np.asarray(grid)
            if not np.issubdtype(grid.dtype, np.integer):
                raise ValueError(f"Grid values must be integers, got dtype {grid.dtype}")
            if grid.shape != (SIZE, SIZE):
                raise ValueError(f"Grid shape must be ({SIZE}, {SIZE}), got {grid.shape}")
            if grid.min() < 0 or grid.max() > SIZE:
                raise ValueError(f"Grid values must be 0-{SIZE}")
            self.grid = grid.copy().astype(np.int32)
        else:
            self.grid = np.zeros((SIZE, SIZE), dtype=np.int32)

    @staticmethod
    def _check_index(index: int, name: str) -> None:
        # numpy would silently wrap negative indices
        if not 0 <= index < SIZE:
            raise IndexError(f"{name} {index} is outside the {SIZE}x{SIZE} grid")

    @staticmethod
    def _check_cell(row: int, col: int) -> None:
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise IndexError(f"Cell ({row}, {col}) is outside the {SIZE}x{SIZE} grid")

    def copy(self) -> SudokuBoard:
        """Create a deep copy of the board."""
        new_board = SudokuBoard()
        new_board.grid = self.grid.copy()
        return new_board

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        self._check_cell(row, col)
        return int(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use 0 to clear."""
        self._check_cell(row, col)
        if value < 0 or value > SIZE:
            raise ValueError(f"Value must be 0-{SIZE}, got {value}")
        self.grid[row, col] = value

    def clear(self, row: int, col: int) -> None:
        """Clear the cell at position (row, col)."""
        self._check_cell(row, col)
        self.grid[row, col] = 0

    def is_empty(self, row: int, col: int) -> bool:
        """Check if cell is empty (value is 0)."""
        self._check_cell(row, col)
        return bool(self.grid[row, col] == 0)

    def get_row(self, row: int) -> np.ndarray:
        """Get all values in a row."""
        self._check_index(row, "Row")
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        """Get all values in a column."""
        self._check_index(col, "Column")
        return self.grid[:, col]

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the box containing (row, col)."""
        self._check_cell(row, col)
        box_row = row - row % BOX_SIZE
        box_col = col - col % BOX_SIZE
        return self.grid[box_row:box_row + BOX_SIZE,
                        box_col:box_col + BOX_SIZE].flatten()

    @staticmethod
    def row_cells(row: int) -> List[Tuple[int, int]]:
        """Positions of every cell in a row."""
        return [(row, col) for col in range(SIZE)]

    @staticmethod
    def col_cells(col: int) -> List[Tuple[int, int]]:
        """Positions of every cell in a column."""
        return [(row, col) for row in range(SIZE)]

    @staticmethod
    def box_cells(row: int, col: int) -> List[Tuple[int, int]]:
        """Positions of every cell in the box containing (row, col)."""
        box_row = row - row % BOX_SIZE
        box_col = col - col % BOX_SIZE
        return [(box_row + i, box_col + j)
                for i in range(BOX_SIZE)
                for j in range(BOX_SIZE)]

    def get_candidates(self, row: int, col: int) -> Set[int]:
        """
        Get all valid candidate values for an empty cell.

        Returns:
            Set of values (1 to 9) that can be placed at (row, col).
            Returns empty set if cell is not empty.
        """
        if not self.is_empty(row, col):
            return set()

        used = set(self.get_row(row).tolist())
        used |= set(self.get_col(col).tolist())
        used |= set(self.get_box(row, col).tolist())

        return set(DIGITS) - used

    def first_empty(self) -> Optional[Tuple[int, int]]:
        """Position of the first empty cell in row-major order, or None."""
        empty = np.flatnonzero(self.grid == 0)
        if empty.size == 0:
            return None
        row, col = divmod(int(empty[0]), SIZE)
        return row, col

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """Get list of all empty cell positions in row-major order."""
        return [(int(r), int(c)) for r, c in np.argwhere(self.grid == 0)]

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return int(np.sum(self.grid == 0))

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return int(np.sum(self.grid != 0))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """
        Check if the current board state is valid.
        Does not check if solution is complete, only if no conflicts exist.
        """
        units = [self.get_row(i) for i in range(SIZE)]
        units += [self.get_col(j) for j in range(SIZE)]
        units += [self.get_box(r, c)
                  for r in range(0, SIZE, BOX_SIZE)
                  for c in range(0, SIZE, BOX_SIZE)]

        for unit in units:
            non_zero = unit[unit != 0]
            if len(non_zero) != len(set(non_zero.tolist())):
                return False

        return True

    def is_solved(self) -> bool:
        """Check if the puzzle is completely and correctly solved."""
        return self.is_complete() and self.is_valid()

    def to_string(self) -> str:
        """Convert board to an 81-character string, 0 for empty cells."""
        return ''.join(str(v) for v in self.grid.flatten().tolist())

    def to_rows(self) -> List[List[int]]:
        """Convert board to a plain 2D list."""
        return self.grid.tolist()

    def format_rows(self) -> str:
        """One line per row, space-separated digits, 0 for empty."""
        return '\n'.join(' '.join(str(v) for v in row) for row in self.to_rows())

    @classmethod
    def from_string(cls, s: str) -> SudokuBoard:
        """
        Create a board from a string representation.

        Args:
            s: String of 81 characters, 0 or . for empty, 1-9 for values.
        """
        s = s.strip()
        if len(s) != SIZE * SIZE:
            raise ValueError(f"String length must be {SIZE * SIZE}, got {len(s)}")

        values = []
        for c in s:
            if c == '.':
                values.append(0)
            elif c.isdigit():
                values.append(int(c))
            else:
                raise ValueError(f"Invalid character {c!r} in puzzle string")

        return cls(np.array(values, dtype=np.int32).reshape(SIZE, SIZE))

    @classmethod
    def from_2d_list(cls, data: List[List[int]]) -> SudokuBoard:
        """Create a board from a 2D list."""
        return cls(np.array(data))

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = '+' + (('-' * (BOX_SIZE * 2 + 1)) + '+') * BOX_SIZE

        for i in range(SIZE):
            if i % BOX_SIZE == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(SIZE):
                val = self.grid[i, j]
                row_str += ' .' if val == 0 else f' {val}'

                if (j + 1) % BOX_SIZE == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuBoard(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())
