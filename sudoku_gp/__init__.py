"""
sudoku_gp - Genetic programming search for greedy Sudoku heuristics

Individuals are expression trees that score a candidate value for an empty
cell. A solver repeatedly commits the best-scored legal move, and the
number of cells it leaves empty is the fitness the population minimizes.
"""

__version__ = "0.1.0"
__author__ = "Sudoku GP Project"

from .errors import ConfigurationError
from .config import EvolutionConfig, DEFAULT_TERMINALS, DEFAULT_PRIMITIVES
from .board import BoardView, validate_board, count_empty_cells, format_board
from .terminals import TERMINAL_FUNCTIONS
from .ast_nodes import (
    ASTNode, Terminal, Primitive,
    create_full_tree, node_from_dict,
    PRIMITIVE_FUNCTIONS, OPERATOR_SYMBOLS
)
from .genome import Individual
from .solver import BoardSolver
from .selection import Selection, TournamentSelection
from .population import Population
from .evolution import Evolution, EvolutionResult, GenerationReport
from .puzzle_io import load_board, load_boards, parse_boards
from .archive import EvolutionArchive

__all__ = [
    'ConfigurationError',
    'EvolutionConfig', 'DEFAULT_TERMINALS', 'DEFAULT_PRIMITIVES',
    'BoardView', 'validate_board', 'count_empty_cells', 'format_board',
    'TERMINAL_FUNCTIONS',
    'ASTNode', 'Terminal', 'Primitive',
    'create_full_tree', 'node_from_dict',
    'PRIMITIVE_FUNCTIONS', 'OPERATOR_SYMBOLS',
    'Individual', 'BoardSolver',
    'Selection', 'TournamentSelection',
    'Population',
    'Evolution', 'EvolutionResult', 'GenerationReport',
    'load_board', 'load_boards', 'parse_boards',
    'EvolutionArchive'
]
