"""Tests for configuration, logging and export helpers."""

import csv
import json
import logging

import pytest
import yaml

from counter_sim.errors import ConfigError
from counter_sim.utils import format_number, load_config, save_config, save_results, setup_logging


class TestLoadConfig:

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / 'nope.yaml')

    def test_empty_file(self, tmp_path):
        path = tmp_path / 'empty.yaml'
        path.write_text('')
        assert load_config(path) == {}

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / 'list.yaml'
        path.write_text('- a\n- b\n')
        with pytest.raises(ConfigError):
            load_config(path)

    def test_invalid_yaml_rejected(self, tmp_path):
        path = tmp_path / 'bad.yaml'
        path.write_text('seed: [1, 2\n')
        with pytest.raises(ConfigError):
            load_config(path)

    def test_saved_config_loads_back(self, tmp_path):
        config = {'seed': 42, 'predictors': ['two_bit']}
        path = tmp_path / 'nested' / 'config.yaml'
        save_config(config, path)
        assert load_config(path) == config


class TestSaveResults:

    def test_writes_requested_formats(self, tmp_path):
        results = {
            'config': {'seed': 1},
            'results': [{'pattern_name': 'loop_5', 'accuracy': 0.83}],
        }
        paths = save_results(results, tmp_path, name='run',
                             formats=('json', 'yaml', 'csv'), timestamp=False)

        assert paths['json'] == tmp_path / 'run.json'
        assert json.loads(paths['json'].read_text()) == results
        assert yaml.safe_load(paths['yaml'].read_text()) == results

        with open(paths['csv'], newline='') as f:
            rows = list(csv.reader(f))
        assert rows[0] == ['config.seed', '1']
        assert rows[1] == ['results', 'pattern_name', 'accuracy']
        assert rows[2] == ['', 'loop_5', '0.83']

    def test_timestamped_name(self, tmp_path):
        paths = save_results({'a': 1}, tmp_path, name='run', formats=('json',))
        assert paths['json'].name.startswith('run_')
        assert set(paths) == {'json'}


class TestSetupLogging:

    def test_handlers_not_duplicated(self, tmp_path):
        logger = setup_logging('DEBUG')
        logger = setup_logging('INFO', log_file=tmp_path / 'logs' / 'sim.log')
        try:
            assert logger.name == 'counter_sim'
            assert logger.level == logging.INFO
            assert len(logger.handlers) == 2
            logging.getLogger('counter_sim.simulation').info("hello")
            for handler in logger.handlers:
                handler.flush()
            assert 'hello' in (tmp_path / 'logs' / 'sim.log').read_text()
        finally:
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()


class TestFormatNumber:

    @pytest.mark.parametrize("value,expected", [
        (950, "950.00"),
        (9600, "9.60K"),
        (2_500_000, "2.50M"),
        (3e9, "3.00B"),
    ])
    def test_suffixes(self, value, expected):
        assert format_number(value) == expected
