"""
sudoku_gp/selection.py - Parent selection and reproduction strategies
"""
import random
from abc import ABC, abstractmethod
from typing import Sequence

from .config import EvolutionConfig
from .genome import Individual


class Selection(ABC):
    """Decides how one slot of the next generation is produced"""

    def __init__(self, mutation_prob: float, crossover_prob: float, good_population_percent: float):
        self.mutation_prob = mutation_prob
        self.crossover_prob = crossover_prob
        self.good_population_percent = good_population_percent

    @classmethod
    def from_config(cls, config: EvolutionConfig) -> 'Selection':
        return cls(config.mutation_prob, config.crossover_prob, config.good_population_percent)

    @abstractmethod
    def select(self, pool: Sequence[Individual]) -> Individual:
        """Pick a mating partner from a pool sorted best first"""

    @abstractmethod
    def reproduce(self, pool: Sequence[Individual], parent: Individual) -> Individual:
        """Produce the individual replacing parent in the next generation"""


class TournamentSelection(Selection):
    """Partners are drawn uniformly from the best fraction of the sorted pool"""

    def select(self, pool: Sequence[Individual]) -> Individual:
        return pool[random.randrange(self.good_pool_size(len(pool)))]

    def good_pool_size(self, size: int) -> int:
        # A tiny pool still offers its best individual
        return max(1, int(size * self.good_population_percent))

    def reproduce(self, pool: Sequence[Individual], parent: Individual) -> Individual:
        child = parent
        if random.random() < self.crossover_prob:
            child = child.crossover(self.select(pool))
        if random.random() < self.mutation_prob:
            child = child.mutate()
        return child
