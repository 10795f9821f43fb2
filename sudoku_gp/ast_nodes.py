"""
sudoku_gp/ast_nodes.py - Expression tree nodes and protected primitives
"""
import math
import random
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Sequence

from .board import BoardView
from .errors import ConfigurationError
from .terminals import TERMINAL_FUNCTIONS


def plus(left: float, right: float) -> float:
    return left + right


def minus(left: float, right: float) -> float:
    # Always non-negative
    return abs(left - right)


def multi(left: float, right: float) -> float:
    return left * right


def div(left: float, right: float) -> float:
    return left / right if right != 0 else left


def mod(left: float, right: float) -> float:
    if right == 0:
        return left
    if math.isinf(left):
        return math.nan
    # Truncated remainder, the result takes the sign of the dividend
    return math.fmod(left, right)


def maximum(left: float, right: float) -> float:
    return left if left >= right else right


def minimum(left: float, right: float) -> float:
    return left if left <= right else right


PRIMITIVE_FUNCTIONS: Dict[str, Callable[[float, float], float]] = {
    'Plus': plus,
    'Minus': minus,
    'Multi': multi,
    'div': div,
    'Mod': mod,
    'Maximum': maximum,
    'Minimum': minimum,
}

OPERATOR_SYMBOLS = {
    'Plus': '+',
    'Minus': '-',
    'Multi': '*',
    'div': '/',
    'Mod': '%',
    'Maximum': 'Max',
    'Minimum': 'Min',
}


def operator_symbol(name: str) -> str:
    """Infix symbol for an operator name, unknown names pass through"""
    return OPERATOR_SYMBOLS.get(name, name)


class ASTNode(ABC):
    """Base class for all expression tree nodes"""

    @abstractmethod
    def evaluate(self, view: BoardView, row: int, col: int, value: int) -> float:
        """Score a candidate value at a cell, lower is better"""

    @abstractmethod
    def height(self) -> int:
        """Edges on the longest path down to a leaf"""

    @abstractmethod
    def copy(self) -> 'ASTNode':
        """Create a deep copy of this node"""

    @abstractmethod
    def prefix(self) -> str:
        """Render as a prefix expression"""

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary"""

    def get_all_nodes(self) -> List['ASTNode']:
        """Get all nodes in this subtree, pre-order"""
        nodes = [self]
        for child in self.children:
            nodes.extend(child.get_all_nodes())
        return nodes

    @property
    def children(self) -> List['ASTNode']:
        return []

    def is_terminal(self) -> bool:
        return not self.children


class Terminal(ASTNode):
    """Leaf node reading one feature of the board"""

    def __init__(self, name: str):
        if name not in TERMINAL_FUNCTIONS:
            raise ConfigurationError(f"Terminal is not supported: {name}")
        self.name = name
        self.function = TERMINAL_FUNCTIONS[name]

    def evaluate(self, view: BoardView, row: int, col: int, value: int) -> float:
        return self.function(view, row, col, value)

    def height(self) -> int:
        return 0

    def copy(self) -> 'Terminal':
        return Terminal(self.name)

    def prefix(self) -> str:
        return self.name

    def to_dict(self) -> Dict[str, Any]:
        return {'type': 'Terminal', 'name': self.name}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Terminal':
        return cls(data['name'])

    def __str__(self):
        return self.name


class Primitive(ASTNode):
    """Internal node combining its two children with a binary operator"""

    def __init__(self, op: str, left: ASTNode, right: ASTNode):
        if op not in PRIMITIVE_FUNCTIONS:
            raise ConfigurationError(f"Operation is not supported: {op}")
        self.op = op
        self.function = PRIMITIVE_FUNCTIONS[op]
        self.left = left
        self.right = right

    @property
    def children(self) -> List[ASTNode]:
        return [self.left, self.right]

    def evaluate(self, view: BoardView, row: int, col: int, value: int) -> float:
        return self.function(self.left.evaluate(view, row, col, value),
                             self.right.evaluate(view, row, col, value))

    def height(self) -> int:
        return 1 + max(self.left.height(), self.right.height())

    def copy(self) -> 'Primitive':
        return Primitive(self.op, self.left.copy(), self.right.copy())

    def prefix(self) -> str:
        return f"{self.op}({self.left.prefix()}, {self.right.prefix()})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': 'Primitive',
            'op': self.op,
            'left': self.left.to_dict(),
            'right': self.right.to_dict()
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Primitive':
        return cls(data['op'], node_from_dict(data['left']), node_from_dict(data['right']))

    def __str__(self):
        return f"({self.left} {operator_symbol(self.op)} {self.right})"


def node_from_dict(data: Dict[str, Any]) -> ASTNode:
    """Create node from dictionary representation"""
    if not isinstance(data, dict):
        raise ConfigurationError(f"Tree node must be an object, got {data!r}")
    node_type = data.get('type')

    try:
        if node_type == 'Terminal':
            return Terminal.from_dict(data)
        elif node_type == 'Primitive':
            return Primitive.from_dict(data)
    except KeyError as e:
        raise ConfigurationError(f"{node_type} node is missing the {e} entry") from e
    raise ConfigurationError(f"Unknown node type: {node_type}")


def create_full_tree(height: int, terminals: Sequence[str], primitives: Sequence[str]) -> ASTNode:
    """Build a complete binary tree of exactly the given height.

    Operators are drawn for every internal node and terminals for every
    leaf, uniformly from the given name sets.
    """
    if height < 0:
        raise ConfigurationError(f"Can't create a tree with negative height: {height}")
    if height == 0:
        return Terminal(random.choice(terminals))

    op = random.choice(primitives)
    left = create_full_tree(height - 1, terminals, primitives)
    right = create_full_tree(height - 1, terminals, primitives)
    return Primitive(op, left, right)
