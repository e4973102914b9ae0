"""
Predictor Registry

Closed set of predictor variants, addressed by type name.
"""

from functools import partial
from typing import Callable, Dict, List

from ..errors import UnknownPredictorError
from .base import Predictor
from .baselines import LastOutcomePredictor, StaticPredictor
from .counter import SaturatingCounterPredictor


PREDICTOR_TYPES: Dict[str, Callable[[], Predictor]] = {
    'two_bit': SaturatingCounterPredictor,
    'last_outcome': LastOutcomePredictor,
    'static_taken': partial(StaticPredictor, True),
    'static_not_taken': partial(StaticPredictor, False),
}


def available_predictors() -> List[str]:
    return list(PREDICTOR_TYPES)


def create_predictor(predictor_type: str = 'two_bit') -> Predictor:
    """
    Create a fresh predictor instance.

    Args:
        predictor_type: Key of PREDICTOR_TYPES

    Returns:
        Predictor in its initial state
    """
    factory = PREDICTOR_TYPES.get(predictor_type.lower())
    if factory is None:
        raise UnknownPredictorError(
            f"Unknown predictor type: {predictor_type} "
            f"(choose from {', '.join(PREDICTOR_TYPES)})"
        )
    return factory()
