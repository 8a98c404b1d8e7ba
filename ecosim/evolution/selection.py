"""Selection strategies: pick parents from a population.

Selection is where fitness enters the algorithm. Strategies receive the
population being replaced and return a reference to one of its members;
the same individual may be returned for both parents of an offspring.
"""

import random
from abc import ABC, abstractmethod
from typing import Sequence

from ecosim.evolution.individual import I
from ecosim.exceptions import EmptyPopulationError
from ecosim.util.rng import choose_weighted_index


class SelectionMethod(ABC):
    """Picks one individual from a population."""

    @abstractmethod
    def select(self, rng: random.Random, population: Sequence[I]) -> I:
        """Return one member of ``population``."""


class RouletteWheelSelection(SelectionMethod):
    """Fitness-proportionate selection with replacement.

    Each individual is chosen with probability ``fitness / total_fitness``.
    Zero-fitness individuals are never chosen. There is deliberately no
    uniform fallback: a population whose fitness is all zero raises
    DegenerateWeightsError.

    Each call consumes exactly one 32-bit draw.
    """

    def select(self, rng: random.Random, population: Sequence[I]) -> I:
        if not population:
            raise EmptyPopulationError("Cannot select from an empty population")
        index = choose_weighted_index(rng, [individual.fitness() for individual in population])
        return population[index]

    def __repr__(self) -> str:
        return "RouletteWheelSelection()"
