# Predictors Package
from .base import Predictor
from .counter import CounterState, SaturatingCounterPredictor
from .baselines import StaticPredictor, LastOutcomePredictor
from .registry import PREDICTOR_TYPES, available_predictors, create_predictor

__all__ = [
    'Predictor',
    'CounterState',
    'SaturatingCounterPredictor',
    'StaticPredictor',
    'LastOutcomePredictor',
    'PREDICTOR_TYPES',
    'available_predictors',
    'create_predictor',
]
