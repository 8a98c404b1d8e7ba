"""Crossover strategies: combine two parent genomes into one child."""

import random
from abc import ABC, abstractmethod

import numpy as np

from ecosim.evolution.genome import Genome
from ecosim.exceptions import LengthMismatchError
from ecosim.util.rng import gen_bool


class CrossoverMethod(ABC):
    """Builds a child genome from two parents of equal length."""

    @abstractmethod
    def crossover(self, rng: random.Random, parent_a: Genome, parent_b: Genome) -> Genome:
        """Return a new genome; the parents are left untouched."""


def _check_lengths(parent_a: Genome, parent_b: Genome) -> None:
    if len(parent_a) != len(parent_b):
        raise LengthMismatchError(
            f"Parents must have equal genome length, got {len(parent_a)} and {len(parent_b)}"
        )


class UniformCrossover(CrossoverMethod):
    """Pick every gene independently from either parent.

    One fair coin per gene position, in order: heads takes parent A's
    allele, tails parent B's.
    """

    def crossover(self, rng: random.Random, parent_a: Genome, parent_b: Genome) -> Genome:
        _check_lengths(parent_a, parent_b)
        from_a = np.array([gen_bool(rng, 0.5) for _ in range(len(parent_a))], dtype=bool)
        return Genome.from_array(
            np.where(from_a, parent_a.as_array(), parent_b.as_array())
        )

    def __repr__(self) -> str:
        return "UniformCrossover()"
