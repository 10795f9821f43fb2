"""
sudoku_gp/population.py - Population management across generations
"""
import logging
from typing import Any, Dict, List

import numpy as np

from .genome import Individual
from .selection import Selection

logger = logging.getLogger(__name__)


class Population:
    """Fixed-size population kept sorted by ascending fitness (best first)"""

    def __init__(self, size: int, prototype: Individual, selection: Selection):
        self.size = size
        self.selection = selection
        self.generation = 0
        self.individuals: List[Individual] = [prototype.regenerate() for _ in range(size)]
        self._sort()

    def _sort(self) -> None:
        # Reading fitness here is what triggers evaluation
        self.individuals = sorted(self.individuals, key=lambda individual: individual.fitness)

    def next_generation(self) -> None:
        """Replace every slot with an offspring of the current sorted pool"""
        pool = self.individuals
        offspring = [self.selection.reproduce(pool, parent) for parent in pool]
        self.individuals = offspring
        self._sort()
        self.generation += 1
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Generation %d stats: %s", self.generation, self.get_stats())

    def get_best(self) -> Individual:
        return self.individuals[0]

    def get_worst(self) -> Individual:
        return self.individuals[-1]

    def average_fitness(self) -> float:
        return float(np.mean([individual.fitness for individual in self.individuals]))

    def __len__(self) -> int:
        return len(self.individuals)

    def __iter__(self):
        return iter(self.individuals)

    def get_stats(self) -> Dict[str, Any]:
        """Get population statistics"""
        fitnesses = [individual.fitness for individual in self.individuals]
        heights = [individual.find_height() for individual in self.individuals]

        return {
            'generation': self.generation,
            'population_size': len(self.individuals),
            'fitness': {
                'min': int(np.min(fitnesses)),
                'max': int(np.max(fitnesses)),
                'mean': float(np.mean(fitnesses)),
                'std': float(np.std(fitnesses))
            },
            'height': {
                'min': int(np.min(heights)),
                'max': int(np.max(heights)),
                'mean': float(np.mean(heights))
            }
        }
