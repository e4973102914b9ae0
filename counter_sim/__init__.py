# Counter Simulator Package
"""
2-bit Saturating Counter Branch Prediction Simulator

A small trace-free simulation engine:
- Single 2-bit saturating counter predictor (plus simple baselines)
- Reproducible, seeded outcome patterns (random, loop, ...)
- Harness that scores predict-then-update accuracy per pattern
"""

__version__ = "1.0.0"

from .errors import CounterSimError, InvalidInputError, UnknownPredictorError, ConfigError

__all__ = [
    'CounterSimError',
    'InvalidInputError',
    'UnknownPredictorError',
    'ConfigError',
]
