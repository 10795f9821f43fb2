"""
Tests for population initialization and generational replacement
"""
import logging

import numpy as np

from sudoku_gp import BoardSolver, Population, TournamentSelection


def make_population(board, config):
    return Population(config.population_size, BoardSolver(board, config),
                      TournamentSelection.from_config(config))


class TestPopulation:
    def test_initial_population_is_sorted(self, partial_board, small_config):
        population = make_population(partial_board, small_config)
        fitnesses = [individual.fitness for individual in population]
        assert len(population) == small_config.population_size
        assert fitnesses == sorted(fitnesses)
        assert population.get_best() is population.individuals[0]
        assert population.get_worst() is population.individuals[-1]

    def test_individuals_have_their_own_trees(self, partial_board, small_config):
        population = make_population(partial_board, small_config)
        ids = [id(individual.tree) for individual in population]
        assert len(set(ids)) == len(ids)

    def test_next_generation_replaces_the_array(self, partial_board, small_config):
        population = make_population(partial_board, small_config)
        previous = population.individuals
        prefixes = [individual.tree_as_prefix_expression() for individual in previous]

        population.next_generation()

        assert population.individuals is not previous
        assert len(population) == small_config.population_size
        assert population.generation == 1
        fitnesses = [individual.fitness for individual in population]
        assert fitnesses == sorted(fitnesses)
        # Parents are never edited in place
        assert [individual.tree_as_prefix_expression() for individual in previous] == prefixes

    def test_average_and_stats(self, partial_board, small_config):
        population = make_population(partial_board, small_config)
        fitnesses = [individual.fitness for individual in population]
        assert population.average_fitness() == np.mean(fitnesses)

        stats = population.get_stats()
        assert stats['population_size'] == small_config.population_size
        assert stats['fitness']['min'] == population.get_best().fitness
        assert stats['fitness']['max'] == population.get_worst().fitness
        assert stats['height']['max'] == small_config.tree_height

    def test_next_generation_logs_stats(self, partial_board, small_config, caplog):
        population = make_population(partial_board, small_config)
        with caplog.at_level(logging.DEBUG, logger='sudoku_gp.population'):
            population.next_generation()
        messages = [record.getMessage() for record in caplog.records]
        assert any(message.startswith("Generation 1 stats:") for message in messages)
