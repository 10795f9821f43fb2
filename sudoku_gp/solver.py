"""
sudoku_gp/solver.py - Greedy board filling driven by an individual's heuristic
"""
import math
from typing import Any, Dict, Optional, Sequence, Tuple

import numpy as np

from .ast_nodes import ASTNode
from .board import (BoardView, Grades, count_empty_cells, empty_grades,
                    format_board, validate_board)
from .config import EvolutionConfig
from .genome import Individual

Move = Tuple[int, int, int]


class BoardSolver(Individual):
    """Individual whose fitness is the number of cells left empty after a greedy play.

    The original board is validated once and never written to; every play
    starts from a fresh copy of it.
    """

    def __init__(self, board: Sequence[Sequence[int]], config: EvolutionConfig,
                 tree: Optional[ASTNode] = None):
        self._attach_board(validate_board(board))
        super().__init__(config, tree)

    def _attach_board(self, original: np.ndarray) -> None:
        original.setflags(write=False)
        self.original_board = original
        self.size = original.shape[0]
        self.board = original.copy()
        self.grades: Grades = empty_grades(self.size)

    def _with_tree(self, tree: ASTNode) -> 'BoardSolver':
        # Offspring share the already validated read-only board
        child = type(self).__new__(type(self))
        child._attach_board(self.original_board)
        Individual.__init__(child, self.config, tree)
        return child

    @classmethod
    def from_dict(cls, data: Dict[str, Any], board: Sequence[Sequence[int]],
                  config: EvolutionConfig) -> 'BoardSolver':
        """Rebuild a solver around a saved tree, its fitness is recomputed on demand"""
        return cls(board, config, cls.tree_from_dict(data))

    @classmethod
    def from_json(cls, board: Sequence[Sequence[int]], config: EvolutionConfig,
                  json_data: str = None, filename: str = None) -> 'BoardSolver':
        return cls.from_dict(cls.read_json(json_data, filename), board, config)

    def evaluate(self) -> int:
        return self.play()

    def play(self) -> int:
        """Fill the working board one best-scored legal move at a time.

        Returns the number of cells still empty once no legal move remains.
        """
        self.board = self.original_board.copy()
        self.grades = empty_grades(self.size)
        fitness = count_empty_cells(self.board)

        view = self.initialize_grades()
        while self.is_forward():
            self.evaluate_grades(view)
            move = self.best_move()
            if move is None:
                # Every remaining score is NaN or infinite
                break
            row, col, value = move
            self.board[row, col] = value
            self.grades[row][col].clear()
            fitness -= 1
            view = self.initialize_grades()
        return fitness

    def initialize_grades(self) -> BoardView:
        """Reset every empty cell's candidates to its currently legal values, largest first"""
        view = BoardView(self.board, self.grades)
        for i in range(self.size):
            for j in range(self.size):
                if self.board[i, j] == 0:
                    self.grades[i][j] = {value: math.nan for value in reversed(view.legal_values(i, j))}
                else:
                    self.grades[i][j] = {}
        return view

    def is_forward(self) -> bool:
        return any(cell for row in self.grades for cell in row)

    def evaluate_grades(self, view: BoardView) -> None:
        for i, row in enumerate(self.grades):
            for j, cell in enumerate(row):
                for value in cell:
                    cell[value] = self.run(view, i, j, value)

    def best_move(self) -> Optional[Move]:
        """First strictly smallest score, scanning cells row-major then each cell's candidates in order"""
        best, best_score = None, math.inf
        for i, row in enumerate(self.grades):
            for j, cell in enumerate(row):
                for value, score in cell.items():
                    if score < best_score:
                        best, best_score = (i, j, value), score
        return best

    def count_empty_cells(self) -> int:
        return count_empty_cells(self.board)

    def count_empty_cells_in_original(self) -> int:
        return count_empty_cells(self.original_board)

    def __str__(self) -> str:
        lines = ["Individual:", ""]
        original_empty = self.count_empty_cells_in_original()
        current_empty = self.count_empty_cells()
        if not self.is_evaluated:
            lines.append("This individual has not played yet")
        else:
            lines.append(f"Solved = {original_empty - current_empty} / {original_empty}")
            lines.append(f"Left = {current_empty}")
        lines.append("")
        lines.append(format_board(self.board))
        lines.append("")
        lines.append(super().__str__())
        return "\n".join(lines)
