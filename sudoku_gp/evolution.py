"""
sudoku_gp/evolution.py - Generational loop and per-generation reports
"""
import logging
from dataclasses import dataclass, field, fields
from typing import Any, Callable, Dict, Iterable, List, Optional

from .genome import Individual
from .population import Population

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationReport:
    """What the loop exposes about one generation"""

    generation: int
    worst_fitness: int
    best_fitness: int
    average_fitness: float
    best_prefix: str
    best_infix: str
    best: Optional[Individual] = field(default=None, compare=False, repr=False)
    worst: Optional[Individual] = field(default=None, compare=False, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        # The individuals themselves stay out of the serialized form
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name not in ('best', 'worst')}


@dataclass
class EvolutionResult:
    best: Individual
    solved: bool
    generation: int


Reporter = Callable[[GenerationReport], Any]


class Evolution:
    """Drives a population until a solver is found or the generations run out"""

    def __init__(self, population: Population, max_generations: int,
                 reporters: Iterable[Reporter] = ()):
        self.population = population
        self.max_generations = max_generations
        self.reporters: List[Reporter] = list(reporters)

    def get_best(self) -> Individual:
        return self.population.get_best()

    def get_worst(self) -> Individual:
        return self.population.get_worst()

    def report(self, generation: int) -> GenerationReport:
        best, worst = self.get_best(), self.get_worst()
        return GenerationReport(
            generation=generation,
            worst_fitness=worst.fitness,
            best_fitness=best.fitness,
            average_fitness=self.population.average_fitness(),
            best_prefix=best.tree_as_prefix_expression(),
            best_infix=best.tree_as_infix_expression(),
            best=best,
            worst=worst,
        )

    def evolve(self) -> EvolutionResult:
        generation = 0
        while generation < self.max_generations:
            report = self.report(generation)
            logger.info("Gen %3d/%d: Best=%d Worst=%d Avg=%.2f", generation, self.max_generations,
                        report.best_fitness, report.worst_fitness, report.average_fitness)
            for reporter in self.reporters:
                reporter(report)

            if self.get_best().is_ideal():
                break
            self.population.next_generation()
            generation += 1

        best = self.get_best()
        solved = best.is_ideal()
        if solved:
            logger.info("Solved at generation %d", generation)
        else:
            logger.info("No solver found after %d generations, best fitness %d",
                        generation, best.fitness)
        return EvolutionResult(best=best, solved=solved, generation=generation)
