"""
sudoku_gp/archive.py - Evolution reports, logs and genome persistence
"""
import csv
import json
import logging
import os
import time
from datetime import datetime
from typing import Any, Dict, List, Optional

from .config import EvolutionConfig
from .evolution import EvolutionResult, GenerationReport
from .genome import Individual

logger = logging.getLogger(__name__)

REPORT_COLUMNS = [
    'Generation',
    'Worst Individual Fitness',
    'Best Individual Fitness',
    'Average Fitness',
    'Best Individual Tree - Prefix',
    'Best Individual Tree - Infix',
]


class EvolutionArchive:
    """Archive an evolution run as a CSV report, a JSON log and genome files"""

    def __init__(self, base_path: str):
        self.base_path = base_path
        self.evolution_log: List[Dict[str, Any]] = []
        self.report_file: Optional[str] = None
        self.config: Optional[EvolutionConfig] = None

        # Create directory structure
        self.dirs = {
            'reports': os.path.join(base_path, 'reports'),
            'genomes': os.path.join(base_path, 'genomes'),
            'logs': os.path.join(base_path, 'logs'),
        }

        for dir_path in self.dirs.values():
            os.makedirs(dir_path, exist_ok=True)

    def _append_rows(self, rows: List[List[Any]]) -> None:
        with open(self.report_file, 'a', newline='') as f:
            csv.writer(f).writerows(rows)

    def start(self, config: EvolutionConfig, original_empty_cells: int) -> str:
        """Create the CSV report with the experiment parameters and column headers"""
        self.config = config
        now = datetime.now()
        filename = now.strftime('%d-%m-%Y_%H-%M-%S') + '.csv'
        self.report_file = os.path.join(self.dirs['reports'], filename)

        with open(self.report_file, 'w', newline='') as f:
            writer = csv.writer(f)
            writer.writerow(['Genetic Sudoku Experiment'])
            writer.writerow(['Experiment Time:', now.strftime('%d/%m/%Y %H:%M:%S')])
            writer.writerow(['Experiment Parameters:'])
            writer.writerow(['Original Empty Cells:', original_empty_cells])
            writer.writerow(['Population Size:', config.population_size])
            writer.writerow(['Max Generations:', config.max_generations])
            writer.writerow(['Tree Height:', config.tree_height])
            writer.writerow(['Crossover Probability:', config.crossover_prob])
            writer.writerow(['Mutation Probability:', config.mutation_prob])
            writer.writerow(['Percent of good individuals from population:',
                             config.good_population_percent])
            writer.writerow([])
            writer.writerow(['Primitive Set:'])
            writer.writerow(list(config.primitives))
            writer.writerow(['Terminal Set:'])
            writer.writerow(list(config.terminals))
            writer.writerow([])
            writer.writerow(REPORT_COLUMNS)

        logger.info("Writing report to %s", self.report_file)
        return self.report_file

    def record_generation(self, report: GenerationReport) -> None:
        """Append one generation to the report and the log"""
        if self.report_file is None:
            raise RuntimeError("start() must be called before recording generations")

        self._append_rows([[
            report.generation,
            report.worst_fitness,
            report.best_fitness,
            report.average_fitness,
            report.best_prefix,
            report.best_infix,
        ]])

        timestamp = time.time()
        entry = report.to_dict()
        entry['timestamp'] = timestamp
        entry['datetime'] = datetime.fromtimestamp(timestamp).isoformat()
        self.evolution_log.append(entry)

    def save_best(self, individual: Individual, generation: int) -> str:
        """Save an individual's genome as JSON"""
        filename = os.path.join(self.dirs['genomes'], f"best_gen_{generation:04d}.json")
        individual.to_json(filename)
        logger.info("Saved genome to %s", filename)
        return filename

    def finish(self, result: EvolutionResult) -> str:
        """Write the full evolution log with the final outcome"""
        log_file = os.path.join(self.dirs['logs'], 'evolution_log.json')
        summary = {
            'solved': result.solved,
            'generation': result.generation,
            'best_fitness': result.best.fitness,
            'best_prefix': result.best.tree_as_prefix_expression(),
            'best_infix': result.best.tree_as_infix_expression(),
            'report_file': self.report_file,
        }
        log = {'generations': self.evolution_log, 'result': summary}
        if self.config is not None:
            log['config'] = self.config.to_dict()
        with open(log_file, 'w') as f:
            json.dump(log, f, indent=2)
        return log_file
