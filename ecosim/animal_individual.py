"""Adapter between simulation animals and the generic genetic algorithm.

The genetic algorithm only sees ``AnimalIndividual`` objects: a fitness and
a genome. Converting back to an ``Animal`` needs an RNG for placement, so it
happens after ``evolve`` returns, never inside it.
"""

import random
from dataclasses import dataclass
from typing import Optional

from ecosim.config.simulation import AnimalConfig
from ecosim.entities import Animal
from ecosim.evolution.genome import Genome


@dataclass
class AnimalIndividual:
    """Genome plus fitness snapshot of one animal."""

    fitness_value: float
    genome_value: Genome

    @classmethod
    def from_animal(cls, animal: Animal) -> "AnimalIndividual":
        return cls(fitness_value=float(animal.satiation), genome_value=animal.as_genome())

    @classmethod
    def create(cls, genome: Genome) -> "AnimalIndividual":
        return cls(fitness_value=0.0, genome_value=genome)

    def fitness(self) -> float:
        return self.fitness_value

    def genome(self) -> Genome:
        return self.genome_value

    def into_animal(self, rng: random.Random, config: Optional[AnimalConfig] = None) -> Animal:
        """Materialize a fresh animal with this genome.

        Raises:
            ShapeMismatchError: If the genome does not fit the brain topology
        """
        return Animal.from_genome(self.genome_value, rng, config)
