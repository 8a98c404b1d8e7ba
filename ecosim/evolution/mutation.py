"""Mutation strategies: perturb a child genome in place.

Mutations are the only source of novelty in the population; crossover just
reshuffles alleles that already exist.
"""

import random
from abc import ABC, abstractmethod

import numpy as np

from ecosim.evolution.genome import Genome
from ecosim.exceptions import InvalidParameterError
from ecosim.util.rng import gen_bool, gen_f32

_PLUS = np.float32(1.0)
_MINUS = np.float32(-1.0)


class MutationMethod(ABC):
    """Modifies a genome in place without changing its length."""

    @abstractmethod
    def mutate(self, rng: random.Random, genome: Genome) -> None:
        """Perturb ``genome`` in place."""


class GaussianMutation(MutationMethod):
    """Per-gene bounded random perturbation.

    For every gene, in order: draw a fair sign, then decide with probability
    ``chance`` whether to perturb; a perturbed gene gains
    ``sign * coefficient * U`` with ``U`` uniform in [0, 1).

    Args:
        chance: Per-gene mutation probability, in [0, 1]
        coefficient: Maximum perturbation magnitude, >= 0

    Raises:
        InvalidParameterError: If chance is outside [0, 1] or coefficient is negative
    """

    def __init__(self, chance: float, coefficient: float) -> None:
        if not 0.0 <= chance <= 1.0:
            raise InvalidParameterError(f"Mutation chance must be in [0, 1], got {chance!r}")
        if not coefficient >= 0.0:
            raise InvalidParameterError(
                f"Mutation coefficient must be >= 0, got {coefficient!r}"
            )
        self.chance = np.float32(chance)
        self.coefficient = np.float32(coefficient)

    def mutate(self, rng: random.Random, genome: Genome) -> None:
        chance = float(self.chance)
        for index in range(len(genome)):
            sign = _MINUS if gen_bool(rng, 0.5) else _PLUS
            if gen_bool(rng, chance):
                # Zero coefficient still consumes the magnitude draw but leaves the gene alone
                genome[index] = genome[index] + sign * self.coefficient * gen_f32(rng)

    def __repr__(self) -> str:
        return f"GaussianMutation(chance={float(self.chance)}, coefficient={float(self.coefficient)})"
