"""Tests for the experiment runner."""

import json
from pathlib import Path

import pytest

from counter_sim.errors import ConfigError, UnknownPredictorError
from counter_sim.patterns import build_pattern
from counter_sim.runner import DEFAULT_PATTERNS, output_settings, run_experiment
from counter_sim.utils import load_config


CONFIG_DIR = Path(__file__).resolve().parent.parent / 'config'


@pytest.fixture
def small_config():
    return {
        'seed': 3,
        'predictors': ['two_bit', 'static_taken'],
        'patterns': [
            {'name': 'rand', 'kind': 'random', 'length': 600},
            {'name': 'loop_5', 'kind': 'loop', 'taken_run': 5, 'repeats': 100},
        ],
    }


class TestRunExperiment:

    def test_one_result_per_pattern_and_predictor(self, small_config):
        experiment = run_experiment(small_config)
        pairs = [(r.pattern_name, r.predictor_name) for r in experiment.results]
        assert pairs == [
            ('rand', 'two_bit'), ('rand', 'static_taken'),
            ('loop_5', 'two_bit'), ('loop_5', 'static_taken'),
        ]
        assert experiment.results[2].correct == 5 * 100 - 1

    def test_seed_makes_runs_reproducible(self, small_config):
        assert run_experiment(small_config).results == run_experiment(small_config).results

    def test_hardware_costs(self, small_config):
        costs = run_experiment(small_config).hardware_costs
        assert costs['two_bit']['total_bits'] == 2
        assert costs['static_taken']['total_bits'] == 0

    def test_defaults(self):
        experiment = run_experiment({'seed': 1})
        assert [r.pattern_name for r in experiment.results] == [p['name'] for p in DEFAULT_PATTERNS]
        assert experiment.trials is None

    def test_trials_summary(self, small_config):
        small_config['trials'] = {'length': 1000, 'count': 4}
        trials = run_experiment(small_config).trials
        assert set(trials) == {'two_bit', 'static_taken'}
        assert trials['two_bit']['runs'] == 4

    def test_warmup_from_simulation_section(self, small_config):
        small_config['simulation'] = {'warmup': 6}
        experiment = run_experiment(small_config)
        assert experiment.results[2].total == 600 - 6

    def test_to_dict_is_json_serializable(self, small_config):
        small_config['trials'] = {'length': 200, 'count': 2}
        data = run_experiment(small_config).to_dict()
        decoded = json.loads(json.dumps(data))
        assert len(decoded['results']) == 4
        assert decoded['results'][0]['pattern_name'] == 'rand'

    def test_unknown_predictor(self, small_config):
        small_config['predictors'] = ['two_bit', 'perceptron']
        with pytest.raises(UnknownPredictorError):
            run_experiment(small_config)

    def test_no_predictors(self, small_config):
        small_config['predictors'] = []
        with pytest.raises(ConfigError):
            run_experiment(small_config)

    def test_bad_simulation_section(self, small_config):
        small_config['simulation'] = {'warmpu': 3}
        with pytest.raises(ConfigError):
            run_experiment(small_config)

    def test_incomplete_trials_section(self, small_config):
        small_config['trials'] = {'length': 100}
        with pytest.raises(ConfigError):
            run_experiment(small_config)


class TestDefaultConfig:

    def test_default_config_builds(self):
        config = load_config(CONFIG_DIR / 'default.yaml')
        patterns = [build_pattern(entry, config['seed']) for entry in config['patterns']]
        assert {p.name for p in patterns} >= {'random', 'loop_5'}
        assert all(len(p) == 9600 for p in patterns)


class TestPatternFailures:
    """One unscorable pattern must not discard the others."""

    @pytest.fixture
    def config_with_empty(self):
        return {
            'predictors': ['two_bit', 'static_taken'],
            'patterns': [
                {'name': 'ok', 'kind': 'loop', 'taken_run': 5, 'repeats': 10},
                {'name': 'empty', 'kind': 'loop', 'taken_run': 5, 'repeats': 0},
            ],
        }

    def test_good_patterns_kept(self, config_with_empty):
        experiment = run_experiment(config_with_empty)
        assert [(r.pattern_name, r.predictor_name) for r in experiment.results] == [
            ('ok', 'two_bit'), ('ok', 'static_taken'),
        ]
        assert experiment.results[0].correct == 5 * 10 - 1

    def test_failures_recorded_per_pattern(self, config_with_empty):
        errors = run_experiment(config_with_empty).errors
        assert [(e['pattern'], e['predictor']) for e in errors] == [
            ('empty', 'two_bit'), ('empty', 'static_taken'),
        ]
        assert 'empty' in errors[0]['error']

    def test_failures_serialized(self, config_with_empty):
        data = json.loads(json.dumps(run_experiment(config_with_empty).to_dict()))
        assert len(data['errors']) == 2
        assert len(data['results']) == 2

    def test_no_errors_on_clean_run(self, small_config):
        assert run_experiment(small_config).errors == []


class TestConfigSections:
    """Keys present with no value behave like missing keys."""

    def test_null_sections_use_defaults(self):
        config = {'seed': 1, 'patterns': None, 'predictors': None, 'simulation': None}
        experiment = run_experiment(config)
        assert [r.pattern_name for r in experiment.results] == [p['name'] for p in DEFAULT_PATTERNS]
        assert all(r.predictor_name == 'two_bit' for r in experiment.results)

    def test_predictor_names_deduplicated_case_insensitively(self, small_config):
        small_config['predictors'] = ['two_bit', 'TWO_BIT']
        experiment = run_experiment(small_config)
        assert [r.predictor_name for r in experiment.results] == ['two_bit', 'two_bit']
        assert list(experiment.hardware_costs) == ['two_bit']

    def test_non_positive_log_interval(self, small_config):
        small_config['simulation'] = {'verbose': True, 'log_interval': 0}
        with pytest.raises(ConfigError):
            run_experiment(small_config)

    def test_output_settings_defaults(self):
        assert output_settings({}) == (Path('results'), ('json',))
        assert output_settings({'output': None}) == (Path('results'), ('json',))

    def test_output_settings_from_config(self):
        config = {'output': {'dir': 'out/run1', 'formats': ['json', 'csv']}}
        assert output_settings(config) == (Path('out/run1'), ('json', 'csv'))

    def test_output_settings_default_file(self):
        config = load_config(CONFIG_DIR / 'default.yaml')
        assert output_settings(config) == (Path('results'), ('json', 'csv'))
