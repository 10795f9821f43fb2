"""
sudoku_gp/terminals.py - Leaf scoring functions over a board snapshot

Each function maps (view, row, col, value) to a float feature of the
candidate value at that cell. None of them change the view.
"""
from typing import Callable, Dict

from .board import BoardView

TerminalFunction = Callable[[BoardView, int, int, int], float]


def count_empty_cell_in_row(view: BoardView, row: int, col: int, value: int) -> float:
    return float(view.row_empty[row])


def count_empty_cell_in_col(view: BoardView, row: int, col: int, value: int) -> float:
    return float(view.col_empty[col])


def count_empty_cell_in_square(view: BoardView, row: int, col: int, value: int) -> float:
    square_row, square_col = view.square_of(row, col)
    return float(view.square_empty[square_row][square_col])


def num_of_options_in_cell(view: BoardView, row: int, col: int, value: int) -> float:
    return float(len(view.grades[row][col]))


def num_of_options_to_appear_in_board(view: BoardView, row: int, col: int, value: int) -> float:
    # How many more times the value may still be placed
    return float(view.size - view.value_counts[value])


def count_empty_cells_in_rows_contains_num(view: BoardView, row: int, col: int, value: int) -> float:
    return float(view.empty_in_rows_containing[value])


def count_empty_cells_in_cols_contains_num(view: BoardView, row: int, col: int, value: int) -> float:
    return float(view.empty_in_cols_containing[value])


def count_empty_cells_in_square_contains_num(view: BoardView, row: int, col: int, value: int) -> float:
    return float(view.empty_in_squares_containing[value])


# Every empty cell lies in exactly one row, column and square, so the
# "not containing" sums are the complement of the "containing" ones.
def count_empty_cells_in_rows_not_contains_num(view: BoardView, row: int, col: int, value: int) -> float:
    return float(view.total_empty - view.empty_in_rows_containing[value])


def count_empty_cells_in_cols_not_contains_num(view: BoardView, row: int, col: int, value: int) -> float:
    return float(view.total_empty - view.empty_in_cols_containing[value])


def count_empty_cells_in_square_not_contains_num(view: BoardView, row: int, col: int, value: int) -> float:
    return float(view.total_empty - view.empty_in_squares_containing[value])


TERMINAL_FUNCTIONS: Dict[str, TerminalFunction] = {
    'countEmptyCellInRow': count_empty_cell_in_row,
    'countEmptyCellInCol': count_empty_cell_in_col,
    'countEmptyCellInSquare': count_empty_cell_in_square,
    'numOfOptionsInCell': num_of_options_in_cell,
    'numOfOptionsToAppearInBoard': num_of_options_to_appear_in_board,
    'countEmptyCellsInRowsContainsNum': count_empty_cells_in_rows_contains_num,
    'countEmptyCellsInColsContainsNum': count_empty_cells_in_cols_contains_num,
    'countEmptyCellsInSquareContainsNum': count_empty_cells_in_square_contains_num,
    'countEmptyCellsInRowsThatNotContainsNum': count_empty_cells_in_rows_not_contains_num,
    'countEmptyCellsInColsThatNotContainsNum': count_empty_cells_in_cols_not_contains_num,
    'countEmptyCellsInSquareThatNotContainsNum': count_empty_cells_in_square_not_contains_num,
}
