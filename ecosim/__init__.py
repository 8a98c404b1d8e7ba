"""ecosim: foraging animals evolved by a pluggable genetic algorithm.

This package contains the pure simulation logic, with no UI dependencies.
Key modules include:

- evolution: Generic genetic algorithm (genome, strategies, engine)
- simulation: Step pipeline and the Simulation controller
- world / entities: Animals, food, and read-only world snapshots
- brains / eye: Decision and perception functions of an animal
- util: Explicit RNG helpers and the ChaCha8 random source

Design note: this module exposes a small, explicit public API via ``__all__``.
Use direct imports from subpackages for everything else.
"""

from ecosim.evolution import GeneticAlgorithm, Genome, Statistics
from ecosim.simulation import Simulation
from ecosim.util import ChaCha8Random

__version__ = "0.1.0"

# Public API of the package. Keep this list intentionally small.
__all__ = [
    "ChaCha8Random",
    "GeneticAlgorithm",
    "Genome",
    "Simulation",
    "Statistics",
]
