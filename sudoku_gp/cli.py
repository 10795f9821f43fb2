"""
sudoku_gp/cli.py - Command-line interface
"""
import logging
import random
import time

import click

from .archive import EvolutionArchive
from .board import count_empty_cells, format_board
from .config import EvolutionConfig
from .errors import ConfigurationError
from .evolution import Evolution, GenerationReport
from .population import Population
from .puzzle_io import load_board
from .selection import TournamentSelection
from .solver import BoardSolver

board_options = [
    click.option('--boards', '-b', required=True, type=click.Path(exists=True, dir_okay=False),
                 help='Puzzle collection file'),
    click.option('--index', '-i', type=int, default=None, help='Board index (random if omitted)'),
    click.option('--size', '-n', default=9, help='Board dimension N for an N x N board'),
]


def with_board_options(func):
    for option in reversed(board_options):
        func = option(func)
    return func


def read_board(boards, index, size):
    try:
        return load_board(boards, size, index)
    except ConfigurationError as e:
        raise click.ClickException(str(e))


@click.group()
def cli():
    """Sudoku GP - Evolve greedy heuristics that fill Sudoku boards"""
    pass


@cli.command()
@with_board_options
@click.option('--height', '-t', 'tree_height', default=5, help='Height of every initial tree')
@click.option('--population', '-p', default=100, help='Population size')
@click.option('--generations', '-g', default=100, help='Maximum number of generations')
@click.option('--mutation-prob', default=0.3, help='Mutation probability (0.0-1.0)')
@click.option('--crossover-prob', default=0.7, help='Crossover probability (0.0-1.0)')
@click.option('--good-percent', default=0.4,
              help='Fraction of the sorted population mates are drawn from (0.0-1.0]')
@click.option('--seed', type=int, default=None, help='Seed for the random source')
@click.option('--out', '-o', default='out/', help='Output directory')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
def evolve(boards, index, size, tree_height, population, generations, mutation_prob,
           crossover_prob, good_percent, seed, out, verbose):
    """Evolve a heuristic that solves a board"""
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING,
                        format='%(asctime)s %(name)s %(levelname)s: %(message)s')

    try:
        config = EvolutionConfig(
            tree_height=tree_height,
            population_size=population,
            max_generations=generations,
            mutation_prob=mutation_prob,
            crossover_prob=crossover_prob,
            good_population_percent=good_percent,
            seed=seed,
        )
    except ConfigurationError as e:
        raise click.ClickException(str(e))

    if config.seed is not None:
        random.seed(config.seed)

    board = read_board(boards, index, size)
    click.echo(f"Empty cells: {count_empty_cells(board)}")
    click.echo(format_board(board))
    click.echo(f"\nStarting evolution: {generations} generations, population {population}")

    start_time = time.time()
    archive = EvolutionArchive(out)
    archive.start(config, count_empty_cells(board))

    def echo_progress(report: GenerationReport):
        click.echo(f"Gen {report.generation:3d}/{generations}: "
                   f"Best={report.best_fitness} "
                   f"Worst={report.worst_fitness} "
                   f"Avg={report.average_fitness:.2f}")
        if verbose:
            click.echo(f"Best individual:\n{report.best}\n")

    prototype = BoardSolver(board, config)
    pop = Population(config.population_size, prototype, TournamentSelection.from_config(config))
    evolution = Evolution(pop, config.max_generations,
                          reporters=[archive.record_generation, echo_progress])
    result = evolution.evolve()

    archive.save_best(result.best, result.generation)
    log_file = archive.finish(result)

    total_time = time.time() - start_time
    click.echo(f"\nEvolution completed in {total_time:.1f}s")
    click.echo(("Solution:" if result.solved else "Best attempt:") + f"\n{result.best}")
    click.echo(f"\nReport saved to {archive.report_file}")
    click.echo(f"Log saved to {log_file}")


@cli.command()
@with_board_options
def show(boards, index, size):
    """Print a board from a puzzle collection"""
    board = read_board(boards, index, size)
    click.echo(f"Empty cells: {count_empty_cells(board)}")
    click.echo(format_board(board))


@cli.command()
@click.option('--genome', '-g', required=True, type=click.Path(exists=True, dir_okay=False),
              help='Path to genome JSON file')
@with_board_options
def replay(genome, boards, index, size):
    """Play a saved genome on a board"""
    board = read_board(boards, index, size)
    try:
        solver = BoardSolver.from_json(board, EvolutionConfig(), filename=genome)
    except ValueError as e:
        raise click.ClickException(f"Error loading genome: {e}")

    fitness = solver.fitness
    click.echo(str(solver))
    click.echo(f"\nFitness: {fitness}" + (" (solved)" if fitness == 0 else ""))


if __name__ == '__main__':
    cli()
