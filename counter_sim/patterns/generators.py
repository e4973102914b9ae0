"""
Pattern Generators

Builds the outcome sequences the simulator is driven with.
All randomness comes from an explicit numpy Generator so that every
pattern can be reproduced from its seed.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Mapping, Optional, Sequence, Tuple, Union
import numpy as np

from ..errors import ConfigError


RandomSource = Union[None, int, np.random.Generator, np.random.SeedSequence]


@dataclass(frozen=True)
class Pattern:
    """Named, ordered, immutable sequence of branch outcomes."""
    name: str
    outcomes: Tuple[bool, ...]

    def __post_init__(self):
        # Normalise numpy bools / ints so equality and JSON output are plain
        object.__setattr__(self, 'outcomes', tuple(bool(o) for o in self.outcomes))

    def __len__(self) -> int:
        return len(self.outcomes)

    def __iter__(self) -> Iterator[bool]:
        return iter(self.outcomes)

    def __getitem__(self, index):
        return self.outcomes[index]

    @property
    def taken_fraction(self) -> float:
        if not self.outcomes:
            return 0.0
        return sum(self.outcomes) / len(self.outcomes)

    @classmethod
    def from_sequence(cls, outcomes: Sequence[bool], name: str = "custom") -> 'Pattern':
        return cls(name=name, outcomes=tuple(outcomes))


def make_rng(source: RandomSource = None) -> np.random.Generator:
    """
    Turn a seed, SeedSequence or Generator into a Generator.

    A Generator is passed through untouched so callers can share one
    stream across several patterns.
    """
    if isinstance(source, np.random.Generator):
        return source
    return np.random.default_rng(source)


def _resolve_rng(rng: RandomSource, seed: Optional[int]) -> np.random.Generator:
    if rng is not None and seed is not None:
        raise ValueError("Pass either rng or seed, not both")
    return make_rng(seed if rng is None else rng)


def _check_length(length: int) -> None:
    if length < 0:
        raise ValueError(f"Pattern length must be non-negative, got {length}")


def random_pattern(length: int, rng: RandomSource = None,
                   seed: Optional[int] = None,
                   name: str = "random") -> Pattern:
    """
    Uniform random outcomes.

    Args:
        length: Number of outcomes
        rng: Seed or Generator
        seed: Integer seed (alternative to rng)
        name: Pattern name

    Returns:
        Pattern whose outcomes are independent fair coin flips
    """
    return biased_pattern(length, 0.5, rng=rng, seed=seed, name=name)


def biased_pattern(length: int, p_taken: float, rng: RandomSource = None,
                   seed: Optional[int] = None,
                   name: Optional[str] = None) -> Pattern:
    """Independent outcomes, each Taken with probability p_taken."""
    _check_length(length)
    if not 0.0 <= p_taken <= 1.0:
        raise ValueError(f"p_taken must be in [0, 1], got {p_taken}")

    generator = _resolve_rng(rng, seed)
    outcomes = generator.random(length) < p_taken
    return Pattern(name=name or f"biased_{p_taken:g}", outcomes=tuple(outcomes))


def loop_pattern(taken_run: int, repeats: int,
                 name: Optional[str] = None) -> Pattern:
    """
    Loop-shaped outcomes: taken_run Taken, then one Not Taken (the exit).

    Args:
        taken_run: Taken outcomes per iteration block (k)
        repeats: Number of blocks (m)

    Returns:
        Pattern of length (taken_run + 1) * repeats
    """
    if taken_run < 1:
        raise ValueError(f"taken_run must be at least 1, got {taken_run}")
    if repeats < 0:
        raise ValueError(f"repeats must be non-negative, got {repeats}")

    block = (True,) * taken_run + (False,)
    return Pattern(name=name or f"loop_{taken_run}", outcomes=block * repeats)


def alternating_pattern(length: int, start: bool = True,
                        name: str = "alternating") -> Pattern:
    """T, F, T, F, ... (or starting with F)."""
    _check_length(length)
    return Pattern(name=name,
                   outcomes=tuple((i % 2 == 0) == start for i in range(length)))


def constant_pattern(length: int, taken: bool = True,
                     name: Optional[str] = None) -> Pattern:
    _check_length(length)
    default_name = "always_taken" if taken else "never_taken"
    return Pattern(name=name or default_name, outcomes=(bool(taken),) * length)


def loop_steady_state_accuracy(taken_run: int) -> float:
    """
    Steady-state accuracy of a 2-bit counter on loop_pattern(taken_run, ...).

    Each block costs exactly one misprediction at the exit: the counter
    drops from Strongly to Weakly Taken and the next Taken restores it.
    With taken_run == 1 the counter bounces between the two weak states
    and every prediction is wrong.
    """
    if taken_run < 1:
        raise ValueError(f"taken_run must be at least 1, got {taken_run}")
    if taken_run == 1:
        return 0.0
    return taken_run / (taken_run + 1)


def build_pattern(entry: Mapping[str, Any], rng: RandomSource = None) -> Pattern:
    """
    Build a pattern from a config entry.

    Example entries:
        {'name': 'random', 'kind': 'random', 'length': 9600}
        {'name': 'loop5', 'kind': 'loop', 'taken_run': 5, 'repeats': 1600}
        {'kind': 'biased', 'length': 1000, 'p_taken': 0.9, 'seed': 7}

    A 'seed' key in the entry overrides the shared rng.
    """
    params: Dict[str, Any] = dict(entry)
    kind = params.pop('kind', None)
    if kind is None:
        raise ConfigError(f"Pattern entry has no 'kind': {dict(entry)}")

    if 'seed' in params:
        rng = params.pop('seed')

    try:
        if kind == 'random':
            return random_pattern(rng=rng, **params)
        if kind == 'biased':
            return biased_pattern(rng=rng, **params)
        if kind == 'loop':
            return loop_pattern(**params)
        if kind == 'alternating':
            return alternating_pattern(**params)
        if kind == 'constant':
            return constant_pattern(**params)
    except TypeError as e:
        raise ConfigError(f"Bad parameters for pattern kind '{kind}': {e}") from e

    raise ConfigError(f"Unknown pattern kind: {kind}")
