"""
sudoku_gp/puzzle_io.py - Loading boards from a puzzle collection file

A collection holds one or more boards, each introduced by a header line
starting with "G" (for example "Grid 01") and followed by N rows. Rows of
boards up to 9 x 9 are written as N digits with 0 for an empty cell; larger
boards use whitespace-separated integers.
"""
import logging
import random
from typing import List, Optional

import numpy as np

from .board import validate_board
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


def parse_row(line: str, size: int) -> List[int]:
    tokens = line.split()
    if len(tokens) == 1 and size <= 9:
        tokens = list(tokens[0])
    try:
        return [int(token) for token in tokens]
    except ValueError:
        raise ConfigurationError(f"Malformed board row: {line!r}") from None


def parse_boards(text: str, size: int) -> List[np.ndarray]:
    """Parse every board in a collection's text"""
    boards = []
    rows: Optional[List[List[int]]] = None

    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        if line.startswith('G'):
            if rows is not None:
                boards.append(validate_board(rows))
            rows = []
        elif rows is None:
            raise ConfigurationError(f"Board row before any header line: {line!r}")
        else:
            rows.append(parse_row(line, size))

    if rows is not None:
        boards.append(validate_board(rows))

    for index, board in enumerate(boards):
        if board.shape[0] != size:
            raise ConfigurationError(
                f"Board {index} is {board.shape[0]} x {board.shape[0]}, expected {size} x {size}")
    return boards


def load_boards(path: str, size: int = 9) -> List[np.ndarray]:
    with open(path, 'r') as f:
        boards = parse_boards(f.read(), size)
    logger.info("Loaded %d boards from %s", len(boards), path)
    return boards


def load_board(path: str, size: int = 9, index: Optional[int] = None) -> np.ndarray:
    """Load one board by index, or a random one when index is None"""
    boards = load_boards(path, size)
    if not boards:
        raise ConfigurationError(f"No boards found in {path}")
    if index is None:
        index = random.randrange(len(boards))
        logger.info("Picked board %d at random", index)
    if not 0 <= index < len(boards):
        raise ConfigurationError(
            f"Board index {index} is out of range, {path} holds {len(boards)} boards")
    return boards[index]
