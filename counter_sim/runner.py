"""
Experiment Runner

Turns a configuration dictionary into patterns, runs every configured
predictor over every pattern, and optionally repeats random trials.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .errors import ConfigError
from .patterns.generators import build_pattern, make_rng
from .predictors.registry import create_predictor
from .simulation.batch import SimulationJob, run_batch_with_errors, run_random_trials
from .simulation.metrics import SimulationResult, summarize
from .simulation.simulator import SimulationConfig


logger = logging.getLogger(__name__)


DEFAULT_PATTERNS: List[Dict[str, Any]] = [
    {'name': 'random', 'kind': 'random', 'length': 9600},
    {'name': 'loop_5', 'kind': 'loop', 'taken_run': 5, 'repeats': 1600},
]


@dataclass
class ExperimentResults:
    """Everything one experiment produced."""
    results: List[SimulationResult]
    hardware_costs: Dict[str, Dict[str, int]]
    trials: Optional[Dict[str, Any]] = None
    errors: List[Dict[str, Any]] = field(default_factory=list)
    config: Dict[str, Any] = field(default_factory=dict)
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'timestamp': self.timestamp,
            'config': self.config,
            'hardware_costs': self.hardware_costs,
            'results': [r.to_dict() for r in self.results],
            'trials': self.trials,
            'errors': self.errors,
        }


def _section(config: Dict[str, Any], key: str, default: Any) -> Any:
    """Config value, treating a key present with no value as absent."""
    value = config.get(key)
    return default if value is None else value


def _simulation_config(config: Dict[str, Any]) -> SimulationConfig:
    try:
        return SimulationConfig(**_section(config, 'simulation', {}))
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Bad 'simulation' section: {e}") from e


def output_settings(config: Dict[str, Any]) -> Tuple[Path, Tuple[str, ...]]:
    """Output directory and export formats from the 'output' section."""
    output = _section(config, 'output', {})
    return (Path(output.get('dir') or 'results'),
            tuple(output.get('formats') or ('json',)))


def run_experiment(config: Dict[str, Any],
                   num_workers: Optional[int] = 1) -> ExperimentResults:
    """
    Run an experiment described by a config dictionary.

    Recognised keys:
        seed: Seed for all random patterns (default: unseeded)
        simulation: SimulationConfig fields
        predictors: Registry names (default: ['two_bit'])
        patterns: build_pattern entries (default: random + loop_5)
        trials: {'length': int, 'count': int} for repeated random runs

    Args:
        config: Experiment configuration
        num_workers: Worker processes for the batch

    Returns:
        ExperimentResults with one result per (pattern, predictor) that
        could be scored, and one error record per pair that could not
    """
    sim_config = _simulation_config(config)
    predictor_types = []
    for predictor_type in _section(config, 'predictors', ['two_bit']):
        if predictor_type.lower() not in predictor_types:
            predictor_types.append(predictor_type.lower())
    if not predictor_types:
        raise ConfigError("No predictors configured")

    hardware_costs = {}
    for predictor_type in predictor_types:
        predictor = create_predictor(predictor_type)
        hardware_costs[predictor.name] = predictor.get_hardware_cost()

    seed = config.get('seed')
    rng = make_rng(seed)
    patterns = [build_pattern(entry, rng) for entry in _section(config, 'patterns', DEFAULT_PATTERNS)]

    jobs = [
        SimulationJob(pattern=pattern, predictor_type=predictor_type,
                      warmup=sim_config.warmup)
        for pattern in patterns
        for predictor_type in predictor_types
    ]
    logger.info("Running %d patterns x %d predictors", len(patterns), len(predictor_types))
    results, errors = run_batch_with_errors(jobs, num_workers=num_workers)

    trials = None
    trials_config = config.get('trials')
    if trials_config:
        try:
            length = int(trials_config['length'])
            count = int(trials_config['count'])
        except KeyError as e:
            raise ConfigError(f"'trials' section is missing {e}") from e
        trials = {}
        for predictor_type in predictor_types:
            trial_results = run_random_trials(length, count, seed=seed,
                                              predictor_type=predictor_type,
                                              num_workers=num_workers)
            trials[trial_results[0].predictor_name] = summarize(trial_results)

    return ExperimentResults(
        results=results,
        hardware_costs=hardware_costs,
        trials=trials,
        errors=errors,
        config=dict(config),
    )
