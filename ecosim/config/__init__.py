"""Configuration package for the ecosim simulation.

Constants live in small topic modules (world, animal, evolution) and are
gathered into dataclasses by ``ecosim.config.simulation``.
"""

from ecosim.config.simulation import (
    AnimalConfig,
    EvolutionConfig,
    SimulationConfig,
    WorldConfig,
)

__all__ = [
    "AnimalConfig",
    "EvolutionConfig",
    "SimulationConfig",
    "WorldConfig",
]
