"""Pytest configuration and fixtures for ecosim tests."""

import random

import pytest

from ecosim.config import AnimalConfig, EvolutionConfig, SimulationConfig, WorldConfig
from ecosim.util import ChaCha8Random


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def zero_seed_rng():
    """ChaCha8 keyed with 32 zero bytes; reproduces the reference vectors."""
    return ChaCha8Random(bytes(32))


@pytest.fixture
def small_config():
    """A small, fast world: few animals, short generations, generous eating radius."""
    return SimulationConfig(
        world=WorldConfig(animals=6, foods=10, eat_distance=0.05),
        animal=AnimalConfig(),
        evolution=EvolutionConfig(generation_length=20),
    )
