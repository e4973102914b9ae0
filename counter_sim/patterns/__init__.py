# Patterns Package
from .generators import (
    Pattern,
    make_rng,
    random_pattern,
    biased_pattern,
    loop_pattern,
    alternating_pattern,
    constant_pattern,
    loop_steady_state_accuracy,
    build_pattern,
)

__all__ = [
    'Pattern',
    'make_rng',
    'random_pattern',
    'biased_pattern',
    'loop_pattern',
    'alternating_pattern',
    'constant_pattern',
    'loop_steady_state_accuracy',
    'build_pattern',
]
