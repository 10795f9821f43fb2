"""
sudoku_gp/board.py - Board validation, legality checks and per-pass snapshots
"""
import math
from functools import cached_property
from typing import Dict, List, Optional, Sequence

import numpy as np

from .errors import ConfigurationError

# Per-cell map from legal candidate value to its current heuristic score
Grades = List[List[Dict[int, float]]]


def square_size(size: int) -> int:
    """Side length of a sub-square for an N x N board"""
    root = math.isqrt(size)
    if size < 1 or root * root != size:
        raise ConfigurationError(
            f"Board dimension must be N x N where sqrt(N) is a natural number, got N={size}")
    return root


def validate_board(board: Sequence[Sequence[int]]) -> np.ndarray:
    """Check the board shape and cell values, returning an int array copy"""
    rows = [list(row) for row in board]
    size = len(rows)
    square_size(size)

    for index, row in enumerate(rows):
        if len(row) != size:
            raise ConfigurationError(
                f"Row {index} has {len(row)} cells, expected {size} for an N x N board")

    array = np.array(rows, dtype=np.int64)
    if np.any((array < 0) | (array > size)):
        raise ConfigurationError(f"Cell values must be between 0 and {size}")
    return array


def empty_grades(size: int) -> Grades:
    return [[{} for _ in range(size)] for _ in range(size)]


def count_empty_cells(board: np.ndarray) -> int:
    return int(np.count_nonzero(board == 0))


def format_board(board: np.ndarray) -> str:
    """Render a board as text with a gap after every sub-square"""
    size = board.shape[0]
    n = square_size(size)
    width = len(str(size))
    lines = []
    for i in range(size):
        cells = []
        for j in range(size):
            cells.append(str(int(board[i, j])).rjust(width))
            if (j + 1) % n == 0 and j + 1 < size:
                cells.append('')
        lines.append(' '.join(cells))
        if (i + 1) % n == 0 and i + 1 < size:
            lines.append('')
    return '\n'.join(lines)


class BoardView:
    """Read-only snapshot of a working board for one scoring pass.

    Every table is computed lazily from the board as it was when the view
    was built, so a new view must be taken after each committed move.
    Tables are kept as nested lists because terminals index them one cell
    at a time.
    """

    def __init__(self, board: np.ndarray, grades: Optional[Grades] = None):
        self.board = board
        self.grades = grades if grades is not None else empty_grades(board.shape[0])
        self.size = board.shape[0]
        self.square = square_size(self.size)

    @cached_property
    def _empty(self) -> np.ndarray:
        return self.board == 0

    @cached_property
    def _presence(self) -> np.ndarray:
        # presence[r, c, v] is True when cell (r, c) holds value v
        return self.board[..., np.newaxis] == np.arange(self.size + 1)

    @cached_property
    def total_empty(self) -> int:
        return int(self._empty.sum())

    @cached_property
    def row_empty(self) -> List[int]:
        return self._empty.sum(axis=1).tolist()

    @cached_property
    def col_empty(self) -> List[int]:
        return self._empty.sum(axis=0).tolist()

    @cached_property
    def square_empty(self) -> List[List[int]]:
        n = self.square
        return self._empty.reshape(n, n, n, n).sum(axis=(1, 3)).tolist()

    @cached_property
    def value_counts(self) -> List[int]:
        return np.bincount(self.board.ravel(), minlength=self.size + 1).tolist()

    @cached_property
    def _row_contains(self) -> np.ndarray:
        return self._presence.any(axis=1)

    @cached_property
    def _col_contains(self) -> np.ndarray:
        return self._presence.any(axis=0)

    @cached_property
    def _square_contains(self) -> np.ndarray:
        n = self.square
        return self._presence.reshape(n, n, n, n, self.size + 1).any(axis=(1, 3))

    @cached_property
    def row_contains(self) -> List[List[bool]]:
        return self._row_contains.tolist()

    @cached_property
    def col_contains(self) -> List[List[bool]]:
        return self._col_contains.tolist()

    @cached_property
    def square_contains(self) -> List[List[List[bool]]]:
        return self._square_contains.tolist()

    @cached_property
    def empty_in_rows_containing(self) -> List[int]:
        """Indexed by value: empty cells summed over rows that hold it"""
        return (self._empty.sum(axis=1)[:, np.newaxis] * self._row_contains).sum(axis=0).tolist()

    @cached_property
    def empty_in_cols_containing(self) -> List[int]:
        return (self._empty.sum(axis=0)[:, np.newaxis] * self._col_contains).sum(axis=0).tolist()

    @cached_property
    def empty_in_squares_containing(self) -> List[int]:
        n = self.square
        per_square = self._empty.reshape(n, n, n, n).sum(axis=(1, 3))
        return (per_square[..., np.newaxis] * self._square_contains).sum(axis=(0, 1)).tolist()

    def square_of(self, row: int, col: int):
        return row // self.square, col // self.square

    def is_legal(self, row: int, col: int, value: int) -> bool:
        """True when value appears in none of the cell's row, column or square"""
        square_row, square_col = self.square_of(row, col)
        return not (self.row_contains[row][value]
                    or self.col_contains[col][value]
                    or self.square_contains[square_row][square_col][value])

    def legal_values(self, row: int, col: int) -> List[int]:
        return [value for value in range(1, self.size + 1) if self.is_legal(row, col, value)]
