"""
Shared fixtures for the sudoku_gp test suite
"""
import math
import random

import numpy as np
import pytest

from sudoku_gp import BoardSolver, EvolutionConfig


def solved_grid(size):
    """A valid completely filled N x N board"""
    n = math.isqrt(size)
    return [[(r * n + r // n + c) % size + 1 for c in range(size)] for r in range(size)]


def units(board):
    """Every row, column and sub-square of a board as flat lists"""
    board = np.asarray(board)
    size = board.shape[0]
    n = math.isqrt(size)
    groups = [list(board[i]) for i in range(size)]
    groups += [list(board[:, j]) for j in range(size)]
    for top in range(0, size, n):
        for left in range(0, size, n):
            groups.append(list(board[top:top + n, left:left + n].ravel()))
    return groups


def has_no_conflicts(board):
    for group in units(board):
        filled = [value for value in group if value != 0]
        if len(filled) != len(set(filled)):
            return False
    return True


@pytest.fixture(autouse=True)
def seeded_random():
    random.seed(1234)
    yield


@pytest.fixture
def small_config():
    return EvolutionConfig(tree_height=2, population_size=6, max_generations=3)


@pytest.fixture
def one_empty_board():
    """4 x 4 board whose only empty cell (1, 2) must take the value 1"""
    board = solved_grid(4)
    board[1][2] = 0
    return board


@pytest.fixture
def partial_board():
    """4 x 4 board with six empty cells and no conflicts"""
    board = solved_grid(4)
    for row, col in [(0, 0), (0, 3), (1, 1), (2, 2), (3, 0), (3, 3)]:
        board[row][col] = 0
    return board


@pytest.fixture
def full_board():
    return solved_grid(9)


@pytest.fixture
def conflict_board():
    """9 x 9 board where (0, 0) has no legal value and (8, 8) has exactly one"""
    board = solved_grid(9)
    stuck_value = board[0][0]
    board[0][0] = 0
    board[4][0] = stuck_value
    board[8][8] = 0
    return board


@pytest.fixture
def solver(one_empty_board, small_config):
    return BoardSolver(one_empty_board, small_config)
