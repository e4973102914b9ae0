"""Pytest configuration and fixtures."""

import pytest

from counter_sim.patterns import loop_pattern, random_pattern


@pytest.fixture
def loop5():
    """The textbook loop: five Taken then one Not Taken, 1600 times."""
    return loop_pattern(5, 1600)


@pytest.fixture
def random9600():
    return random_pattern(9600, rng=2024)
