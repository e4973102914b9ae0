"""
2-bit Saturating Counter

The classic bimodal building block: four confidence levels on a line,
moved one step per outcome and clamped at both ends.
"""

from enum import IntEnum
from typing import Dict


class CounterState(IntEnum):
    """Confidence level of a 2-bit counter. Only these four values exist."""
    STRONGLY_NOT_TAKEN = 0
    WEAKLY_NOT_TAKEN = 1
    WEAKLY_TAKEN = 2
    STRONGLY_TAKEN = 3

    @property
    def predicts_taken(self) -> bool:
        return self >= CounterState.WEAKLY_TAKEN

    @property
    def label(self) -> str:
        return self.name.replace('_', ' ').title()

    def increment(self) -> 'CounterState':
        """One step toward Strongly Taken (saturates at 3)."""
        return CounterState(min(self + 1, CounterState.STRONGLY_TAKEN))

    def decrement(self) -> 'CounterState':
        """One step toward Strongly Not Taken (saturates at 0)."""
        return CounterState(max(self - 1, CounterState.STRONGLY_NOT_TAKEN))

    def next(self, taken: bool) -> 'CounterState':
        return self.increment() if taken else self.decrement()


class SaturatingCounterPredictor:
    """
    Single 2-bit saturating counter predictor.

    States 0,1 predict Not Taken; 2,3 predict Taken. Because a strong
    state only weakens by one step, a single contrary outcome never flips
    the prediction (hysteresis).
    """

    name = "two_bit"

    def __init__(self, initial_state: CounterState = CounterState.WEAKLY_NOT_TAKEN):
        """
        Initialize the counter.

        Args:
            initial_state: Starting confidence level (default: Weakly Not Taken)
        """
        self.initial_state = CounterState(initial_state)
        self._state = self.initial_state

    @property
    def state(self) -> CounterState:
        return self._state

    def predict(self) -> bool:
        return self._state.predicts_taken

    def update(self, actual: bool) -> None:
        self._state = self._state.next(bool(actual))

    def reset(self) -> None:
        self._state = self.initial_state

    def get_hardware_cost(self) -> Dict[str, int]:
        return {
            'table_entries': 1,
            'bits_per_entry': 2,
            'total_bits': 2,
        }

    def __repr__(self) -> str:
        return f"SaturatingCounterPredictor(state={self._state.label})"
