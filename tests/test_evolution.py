"""
Tests for the evolution loop and its reports
"""
import json

from sudoku_gp import BoardSolver, Evolution, EvolutionConfig, Population, TournamentSelection


def make_evolution(board, config, reporters=()):
    population = Population(config.population_size, BoardSolver(board, config),
                            TournamentSelection.from_config(config))
    return Evolution(population, config.max_generations, reporters)


class TestEvolution:
    def test_stops_as_soon_as_solved(self, one_empty_board, small_config):
        reports = []
        result = make_evolution(one_empty_board, small_config, [reports.append]).evolve()

        assert result.solved
        assert result.generation == 0
        assert result.best.fitness == 0
        assert [report.generation for report in reports] == [0]
        assert reports[0].best_fitness == 0
        assert reports[0].best_prefix == result.best.tree_as_prefix_expression()

    def test_runs_every_generation_when_unsolvable(self, conflict_board):
        config = EvolutionConfig(tree_height=2, population_size=4, max_generations=3)
        reports = []
        result = make_evolution(conflict_board, config, [reports.append]).evolve()

        assert not result.solved
        assert result.generation == 3
        assert result.best.fitness == 1
        assert [report.generation for report in reports] == [0, 1, 2]
        for report in reports:
            assert report.best_fitness <= report.average_fitness <= report.worst_fitness

    def test_zero_generations_produces_no_reports(self, conflict_board):
        config = EvolutionConfig(tree_height=2, population_size=3, max_generations=0)
        reports = []
        result = make_evolution(conflict_board, config, [reports.append]).evolve()
        assert reports == []
        assert result.generation == 0
        assert not result.solved

    def test_report_renders_both_expressions(self, partial_board, small_config):
        evolution = make_evolution(partial_board, small_config)
        report = evolution.report(0)
        best = evolution.get_best()
        assert report.best_infix == str(best.tree)
        assert report.to_dict()['worst_fitness'] == evolution.get_worst().fitness

    def test_report_carries_best_and_worst_individuals(self, partial_board, small_config):
        evolution = make_evolution(partial_board, small_config)
        report = evolution.report(0)
        assert report.best is evolution.get_best()
        assert report.worst is evolution.get_worst()
        assert "Solved =" in str(report.best)

        data = report.to_dict()
        assert 'best' not in data and 'worst' not in data
        json.dumps(data)
