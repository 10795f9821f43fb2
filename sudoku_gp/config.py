"""
sudoku_gp/config.py - Immutable run configuration
"""
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Optional, Tuple

from .errors import ConfigurationError
from .terminals import TERMINAL_FUNCTIONS
from .ast_nodes import PRIMITIVE_FUNCTIONS

DEFAULT_TERMINALS: Tuple[str, ...] = tuple(TERMINAL_FUNCTIONS)
DEFAULT_PRIMITIVES: Tuple[str, ...] = tuple(PRIMITIVE_FUNCTIONS)


@dataclass(frozen=True)
class EvolutionConfig:
    """Config for the genetic programming search."""

    tree_height: int = 5
    population_size: int = 100
    max_generations: int = 100
    mutation_prob: float = 0.3
    crossover_prob: float = 0.7
    good_population_percent: float = 0.4
    terminals: Tuple[str, ...] = field(default=DEFAULT_TERMINALS)
    primitives: Tuple[str, ...] = field(default=DEFAULT_PRIMITIVES)
    seed: Optional[int] = None

    def __post_init__(self):
        # Lists are accepted for convenience but stored as tuples
        object.__setattr__(self, 'terminals', tuple(self.terminals))
        object.__setattr__(self, 'primitives', tuple(self.primitives))

        if self.tree_height < 1:
            raise ConfigurationError(f"tree_height must be at least 1, got {self.tree_height}")
        if self.population_size < 1:
            raise ConfigurationError(f"population_size must be at least 1, got {self.population_size}")
        if self.max_generations < 0:
            raise ConfigurationError(f"max_generations can't be negative, got {self.max_generations}")
        for name in ('mutation_prob', 'crossover_prob'):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigurationError(f"{name} must be in [0, 1], got {value}")
        if not 0.0 < self.good_population_percent <= 1.0:
            raise ConfigurationError(
                f"good_population_percent must be in (0, 1], got {self.good_population_percent}")

        if not self.terminals:
            raise ConfigurationError("At least one terminal is required")
        if not self.primitives:
            raise ConfigurationError("At least one primitive is required")
        for name in self.terminals:
            if name not in TERMINAL_FUNCTIONS:
                raise ConfigurationError(f"Unknown terminal: {name}")
        for name in self.primitives:
            if name not in PRIMITIVE_FUNCTIONS:
                raise ConfigurationError(f"Unknown primitive: {name}")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary"""
        data = asdict(self)
        data['terminals'] = list(self.terminals)
        data['primitives'] = list(self.primitives)
        return data
