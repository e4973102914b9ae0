"""Tests for result presentation."""

import pytest

from counter_sim.patterns import loop_pattern
from counter_sim.reporting import comparison_table, format_result, markdown_table, plot_accuracy
from counter_sim.simulation import SimulationResult, simulate


@pytest.fixture
def results():
    return [
        SimulationResult('loop_5', 'two_bit', total=9600, correct=7999),
        SimulationResult('loop_5', 'static_taken', total=9600, correct=8000),
        SimulationResult('random', 'two_bit', total=9600, correct=4800),
    ]


class TestFormatResult:

    def test_line_format(self):
        result = simulate(loop_pattern(5, 1600))
        assert format_result(result) == "Pattern: loop_5 | Accuracy: 83.32%"


class TestTables:

    def test_comparison_table(self, results):
        table = comparison_table(results)
        lines = table.splitlines()
        assert 'two_bit' in lines[2] and 'static_taken' in lines[2]
        assert lines[4].startswith('loop_5')
        assert '83.32%' in lines[4]
        assert '9.6K' in lines[4]
        random_row = lines[5]
        assert random_row.startswith('random')
        assert '50.00%' in random_row
        assert random_row.split()[2] == '-'

    def test_comparison_table_empty(self):
        assert comparison_table([]) == "No results"

    def test_markdown_table(self, results):
        lines = markdown_table(results).splitlines()
        assert lines[0] == "| Pattern | two_bit | static_taken |"
        assert lines[1] == "|---|---|---|"
        assert lines[2] == "| loop_5 | 83.32% | 83.33% |"
        assert lines[3] == "| random | 50.00% | - |"


class TestPlot:

    def test_plot_written(self, results, tmp_path):
        pytest.importorskip("matplotlib")
        path = plot_accuracy(results, tmp_path / 'plots')
        assert path is not None
        assert path.exists()

    def test_nothing_to_plot(self, tmp_path):
        pytest.importorskip("matplotlib")
        assert plot_accuracy([], tmp_path) is None
