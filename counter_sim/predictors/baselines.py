"""
Baseline Predictors

Reference points for the 2-bit counter: static prediction and a
1-bit last-outcome predictor without hysteresis.
"""

from typing import Dict


class StaticPredictor:
    """Always predicts the same direction; updates are ignored."""

    def __init__(self, taken: bool):
        self.taken = bool(taken)
        self.name = "static_taken" if self.taken else "static_not_taken"

    def predict(self) -> bool:
        return self.taken

    def update(self, actual: bool) -> None:
        pass

    def reset(self) -> None:
        pass

    def get_hardware_cost(self) -> Dict[str, int]:
        return {'table_entries': 0, 'bits_per_entry': 0, 'total_bits': 0}


class LastOutcomePredictor:
    """
    1-bit predictor: predicts whatever the branch did last time.

    Flips after every single contrary outcome, so each loop exit
    costs two mispredictions instead of one.
    """

    name = "last_outcome"

    def __init__(self, initial: bool = False):
        self.initial = bool(initial)
        self._last = self.initial

    def predict(self) -> bool:
        return self._last

    def update(self, actual: bool) -> None:
        self._last = bool(actual)

    def reset(self) -> None:
        self._last = self.initial

    def get_hardware_cost(self) -> Dict[str, int]:
        return {'table_entries': 1, 'bits_per_entry': 1, 'total_bits': 1}
