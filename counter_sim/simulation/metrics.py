"""
Simulation Results and Metrics

Result record for one (pattern, predictor) run and aggregation
across many runs.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable
import numpy as np

from ..errors import InvalidInputError


@dataclass(frozen=True)
class SimulationResult:
    """Outcome of running one predictor over one pattern."""
    pattern_name: str
    predictor_name: str
    total: int          # Scored outcomes (warmup excluded)
    correct: int        # Correct predictions among them
    warmup: int = 0

    def __post_init__(self):
        if self.total <= 0:
            raise InvalidInputError("Accuracy is undefined for zero scored outcomes")
        if not 0 <= self.correct <= self.total:
            raise ValueError(
                f"correct must be in [0, {self.total}], got {self.correct}"
            )

    @property
    def accuracy(self) -> float:
        """Fraction of correct predictions, in [0, 1]."""
        return self.correct / self.total

    @property
    def mispredictions(self) -> int:
        return self.total - self.correct

    @property
    def misprediction_rate(self) -> float:
        return self.mispredictions / self.total

    @property
    def mpki(self) -> float:
        """Mispredictions per 1000 branches."""
        return self.misprediction_rate * 1000

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'pattern_name': self.pattern_name,
            'predictor_name': self.predictor_name,
            'total': self.total,
            'correct': self.correct,
            'warmup': self.warmup,
            'accuracy': self.accuracy,
            'mispredictions': self.mispredictions,
            'mpki': self.mpki,
        }


def summarize(results: Iterable[SimulationResult]) -> Dict[str, float]:
    """
    Aggregate accuracy over repeated runs.

    Args:
        results: Results of independent runs (e.g. random trials)

    Returns:
        Dictionary with run count, mean/std/min/max accuracy and the
        half-width of a normal-approximation 95% interval on the mean
    """
    accuracies = np.array([r.accuracy for r in results], dtype=np.float64)
    if accuracies.size == 0:
        raise InvalidInputError("Cannot summarize zero results")

    std = float(np.std(accuracies, ddof=1)) if accuracies.size > 1 else 0.0
    return {
        'runs': int(accuracies.size),
        'mean_accuracy': float(np.mean(accuracies)),
        'std_accuracy': std,
        'min_accuracy': float(np.min(accuracies)),
        'max_accuracy': float(np.max(accuracies)),
        'ci95': float(1.96 * std / np.sqrt(accuracies.size)),
    }
