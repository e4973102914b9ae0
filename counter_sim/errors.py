"""
Exceptions

Error types raised by the simulator.
"""


class CounterSimError(Exception):
    """Base class for simulator errors."""


class InvalidInputError(CounterSimError, ValueError):
    """Pattern cannot be scored (empty, or nothing left after warmup)."""


class UnknownPredictorError(CounterSimError, ValueError):
    """Predictor type is not in the registry."""


class ConfigError(CounterSimError):
    """Configuration file is malformed."""
