"""
Predictor Interface

Capability interface shared by every predictor in the simulator.
"""

from typing import Dict, Protocol, runtime_checkable


@runtime_checkable
class Predictor(Protocol):
    """A single-branch predictor: query first, then learn the real outcome."""

    name: str

    def predict(self) -> bool:
        """
        Predict the next outcome.

        Returns:
            True for Taken, False for Not Taken. Must not change state.
        """
        ...

    def update(self, actual: bool) -> None:
        """
        Learn the actual outcome of the branch that was just predicted.

        Args:
            actual: Ground-truth outcome (True = taken)
        """
        ...

    def reset(self) -> None:
        """Return to the initial state."""
        ...

    def get_hardware_cost(self) -> Dict[str, int]:
        """Storage needed by this predictor, in bits."""
        ...
