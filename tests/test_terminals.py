"""
Tests for the terminal scoring functions
"""
import math

import pytest

from sudoku_gp import TERMINAL_FUNCTIONS, BoardView, ConfigurationError, Terminal, validate_board
from sudoku_gp.board import empty_grades

SAMPLE = [[1, 2, 0, 0],
          [0, 0, 0, 0],
          [0, 4, 1, 0],
          [0, 0, 0, 3]]


@pytest.fixture
def view():
    grades = empty_grades(4)
    grades[1][0] = {3: math.nan, 4: math.nan}
    return BoardView(validate_board(SAMPLE), grades)


def score(name, view, row, col, value):
    return Terminal(name).evaluate(view, row, col, value)


class TestTerminals:
    def test_registry_holds_all_eleven(self):
        assert len(TERMINAL_FUNCTIONS) == 11

    def test_unit_empty_counts(self, view):
        assert score('countEmptyCellInRow', view, 1, 0, 3) == 4.0
        assert score('countEmptyCellInCol', view, 1, 0, 3) == 3.0
        assert score('countEmptyCellInSquare', view, 1, 0, 3) == 2.0
        assert score('countEmptyCellInSquare', view, 0, 3, 3) == 4.0

    def test_options_in_cell_reads_grades(self, view):
        assert score('numOfOptionsInCell', view, 1, 0, 3) == 2.0
        assert score('numOfOptionsInCell', view, 1, 1, 3) == 0.0

    def test_options_to_appear_in_board(self, view):
        assert score('numOfOptionsToAppearInBoard', view, 1, 0, 1) == 2.0
        assert score('numOfOptionsToAppearInBoard', view, 1, 0, 4) == 3.0

    @pytest.mark.parametrize("name, value, expected", [
        ('countEmptyCellsInRowsContainsNum', 1, 4.0),
        ('countEmptyCellsInColsContainsNum', 1, 6.0),
        ('countEmptyCellsInSquareContainsNum', 1, 4.0),
        ('countEmptyCellsInRowsThatNotContainsNum', 1, 7.0),
        ('countEmptyCellsInColsThatNotContainsNum', 1, 5.0),
        ('countEmptyCellsInSquareThatNotContainsNum', 1, 7.0),
        ('countEmptyCellsInRowsContainsNum', 3, 3.0),
        ('countEmptyCellsInSquareContainsNum', 3, 2.0),
        ('countEmptyCellsInSquareThatNotContainsNum', 3, 9.0),
    ])
    def test_value_unit_sums(self, view, name, value, expected):
        assert score(name, view, 1, 0, value) == expected

    def test_square_sums_visit_every_square_on_large_boards(self):
        board = [[0] * 16 for _ in range(16)]
        board[15][15] = 7
        view = BoardView(validate_board(board))
        assert score('countEmptyCellsInSquareContainsNum', view, 0, 0, 7) == 15.0
        assert score('countEmptyCellsInSquareThatNotContainsNum', view, 0, 0, 7) == 240.0

    def test_terminals_do_not_change_board(self, view):
        before = view.board.copy()
        for name in TERMINAL_FUNCTIONS:
            score(name, view, 1, 0, 3)
        assert (view.board == before).all()

    def test_unknown_terminal_fails_fast(self):
        with pytest.raises(ConfigurationError):
            Terminal('countEverything')
