"""
sudoku_gp/genome.py - Individual representation, genetic operators and JSON serialization
"""
import json
import random
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from .ast_nodes import ASTNode, Primitive, create_full_tree, node_from_dict
from .board import BoardView
from .config import EvolutionConfig
from .errors import ConfigurationError

SIDES = ('left', 'right')


class Individual(ABC):
    """One candidate heuristic: an expression tree plus its lazily computed fitness.

    Individuals are never edited once born. mutate() and crossover() work on
    a deep clone and return a new Individual whose fitness is unevaluated.
    Lower fitness is better and 0 is ideal.
    """

    IDEAL_FITNESS = 0

    def __init__(self, config: EvolutionConfig, tree: Optional[ASTNode] = None):
        self.config = config
        if tree is None:
            self.height = config.tree_height
            self.tree = self.generate_full_tree(self.height)
        else:
            self.height = tree.height()
            self.tree = tree
        if self.height < 1:
            raise ConfigurationError(f"An individual's tree height can't be less than 1, got {self.height}")

        self._fitness: Optional[int] = None

    @abstractmethod
    def evaluate(self) -> int:
        """Compute the fitness from scratch"""

    @abstractmethod
    def _with_tree(self, tree: ASTNode) -> 'Individual':
        """New individual of the same kind and problem owning the given tree"""

    @property
    def fitness(self) -> int:
        if self._fitness is None:
            self._fitness = self.evaluate()
        return self._fitness

    @property
    def is_evaluated(self) -> bool:
        return self._fitness is not None

    def is_ideal(self) -> bool:
        return self.fitness == self.IDEAL_FITNESS

    def run(self, view: BoardView, row: int, col: int, value: int) -> float:
        return self.tree.evaluate(view, row, col, value)

    def generate_full_tree(self, height: int) -> ASTNode:
        return create_full_tree(height, self.config.terminals, self.config.primitives)

    def find_height(self) -> int:
        return self.tree.height()

    def clone(self) -> 'Individual':
        """Create a deep copy of this individual with its fitness unevaluated"""
        return self._with_tree(self.tree.copy())

    def regenerate(self) -> 'Individual':
        """Fresh individual for the same problem with a new random full tree"""
        return self._with_tree(self.generate_full_tree(self.config.tree_height))

    def mutate(self) -> 'Individual':
        """Subtree mutation: regrow a random subtree so the tree keeps its height"""
        mutant = self.clone()
        tree_height = mutant.find_height()
        insertion_depth = random.randint(1, max(1, tree_height - 1))

        parent, side, node = None, None, mutant.tree
        depth = 0
        while depth < insertion_depth and isinstance(node, Primitive):
            parent = node
            side = random.choice(SIDES)
            node = getattr(node, side)
            depth += 1

        subtree = mutant.generate_full_tree(tree_height - depth)
        if parent is None:
            mutant.tree = subtree
        else:
            setattr(parent, side, subtree)
        mutant.height = mutant.find_height()
        return mutant

    def crossover(self, other: 'Individual') -> 'Individual':
        """Replace one root branch of a clone with a copy of one of other's root branches"""
        child = self.clone()
        target = random.choice(SIDES)
        donor = random.choice(SIDES)

        setattr(child.tree, target, getattr(other.tree, donor).copy())
        child.height = child.find_height()
        return child

    def tree_as_prefix_expression(self) -> str:
        return self.tree.prefix()

    def tree_as_infix_expression(self) -> str:
        return str(self.tree)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize individual to dictionary"""
        return {
            'height': self.height,
            'fitness': self._fitness,
            'prefix': self.tree_as_prefix_expression(),
            'tree': self.tree.to_dict()
        }

    def to_json(self, filename: str = None) -> str:
        """Serialize to JSON string or file"""
        json_str = json.dumps(self.to_dict(), indent=2)
        if filename:
            with open(filename, 'w') as f:
                f.write(json_str)
        return json_str

    @staticmethod
    def tree_from_dict(data: Dict[str, Any]) -> ASTNode:
        if 'tree' not in data:
            raise ConfigurationError("Genome data has no 'tree' entry")
        return node_from_dict(data['tree'])

    @staticmethod
    def read_json(json_data: str = None, filename: str = None) -> Dict[str, Any]:
        """Read serialized individual data from a JSON string or file"""
        if filename:
            with open(filename, 'r') as f:
                json_data = f.read()
        return json.loads(json_data)

    def __str__(self) -> str:
        return ("The tree as prefix expression:\n"
                f"{self.tree_as_prefix_expression()}\n\n"
                "The tree as infix expression:\n"
                f"{self.tree_as_infix_expression()}")
