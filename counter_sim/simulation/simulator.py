"""
Branch Prediction Simulator

Drives predictors over an outcome pattern and scores them.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence, Union
from tqdm import tqdm

from ..errors import InvalidInputError
from ..patterns.generators import Pattern
from ..predictors.base import Predictor
from ..predictors.registry import create_predictor
from .metrics import SimulationResult


logger = logging.getLogger(__name__)


@dataclass
class SimulationConfig:
    """Configuration for simulation run."""
    warmup: int = 0             # Leading outcomes that train but are not scored
    verbose: bool = False
    log_interval: int = 100000

    def __post_init__(self):
        if self.log_interval <= 0:
            raise ValueError(f"log_interval must be positive, got {self.log_interval}")


class BranchSimulator:
    """
    Branch Prediction Simulator.

    Every run starts each registered predictor type from a fresh
    instance. For every outcome, each predictor predicts first and is
    then updated with the real outcome.
    """

    def __init__(self, config: Union[SimulationConfig, dict, None] = None,
                 predictor_types: Iterable[str] = ('two_bit',)):
        """
        Initialize simulator.

        Args:
            config: Simulation configuration
            predictor_types: Registry names of the predictors to evaluate
        """
        if config is None:
            self.config = SimulationConfig()
        elif isinstance(config, dict):
            self.config = SimulationConfig(**config)
        else:
            self.config = config

        self.predictor_types = []
        for predictor_type in predictor_types:
            self.add_predictor(predictor_type)

    def add_predictor(self, predictor_type: str) -> None:
        """Add a predictor type to evaluate (validated immediately)."""
        create_predictor(predictor_type)
        predictor_type = predictor_type.lower()
        if predictor_type not in self.predictor_types:
            self.predictor_types.append(predictor_type)

    def run(self, pattern: Union[Pattern, Sequence[bool]],
            pattern_name: Optional[str] = None) -> Dict[str, SimulationResult]:
        """
        Run every registered predictor over a pattern.

        Args:
            pattern: Pattern or plain ordered sequence of outcomes
            pattern_name: Name for plain sequences (Pattern carries its own)

        Returns:
            Dictionary of predictor name -> SimulationResult
        """
        if isinstance(pattern, Pattern):
            name = pattern.name
            outcomes = pattern.outcomes
        else:
            name = pattern_name or "custom"
            outcomes = tuple(bool(o) for o in pattern)

        warmup = self.config.warmup
        if warmup < 0:
            raise InvalidInputError(f"warmup must be non-negative, got {warmup}")
        if len(outcomes) <= warmup:
            raise InvalidInputError(
                f"Pattern '{name}' has {len(outcomes)} outcomes, "
                f"nothing left to score after warmup of {warmup}"
            )

        predictors: Dict[str, Predictor] = {}
        for predictor_type in self.predictor_types:
            predictor = create_predictor(predictor_type)
            predictors[predictor.name] = predictor
        correct = {pred_name: 0 for pred_name in predictors}

        logger.debug("Simulating pattern '%s' (%d outcomes) with %s",
                     name, len(outcomes), list(predictors))

        if self.config.verbose:
            progress = tqdm(outcomes, total=len(outcomes),
                            desc=f"Simulating {name}", unit="branches")
        else:
            progress = outcomes

        for step, actual in enumerate(progress):
            scored = step >= warmup
            for pred_name, predictor in predictors.items():
                prediction = predictor.predict()
                if scored and prediction == actual:
                    correct[pred_name] += 1
                predictor.update(actual)

            if self.config.verbose and (step + 1) % self.config.log_interval == 0:
                self._log_progress(name, step + 1 - warmup, correct)

        total = len(outcomes) - warmup
        results = {
            pred_name: SimulationResult(
                pattern_name=name,
                predictor_name=pred_name,
                total=total,
                correct=correct[pred_name],
                warmup=warmup,
            )
            for pred_name in predictors
        }

        for result in results.values():
            logger.info("Pattern: %s | Predictor: %s | Accuracy: %.2f%%",
                        name, result.predictor_name, result.accuracy * 100)
        return results

    def _log_progress(self, name: str, measured: int,
                      correct: Dict[str, int]) -> None:
        """Log progress during simulation."""
        if measured <= 0:
            return
        first_pred = next(iter(correct))
        tqdm.write(f"{name}: {measured:,} scored | "
                   f"Acc ({first_pred}): {correct[first_pred] / measured * 100:.2f}%")


def simulate(pattern: Union[Pattern, Sequence[bool]],
             predictor_type: str = 'two_bit',
             warmup: int = 0,
             pattern_name: Optional[str] = None) -> SimulationResult:
    """
    Evaluate one fresh predictor against one pattern.

    Args:
        pattern: Ordered outcomes (must not be empty)
        predictor_type: Registry name of the predictor
        warmup: Leading outcomes used for training only
        pattern_name: Name for plain sequences

    Returns:
        SimulationResult for the run

    Raises:
        InvalidInputError: if no outcomes are left to score
    """
    simulator = BranchSimulator(SimulationConfig(warmup=warmup),
                                predictor_types=[predictor_type])
    results = simulator.run(pattern, pattern_name=pattern_name)
    return next(iter(results.values()))
