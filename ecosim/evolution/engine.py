"""Genetic algorithm engine: one generation of selection, crossover, mutation.

The engine is domain-agnostic. It holds one strategy of each kind and only
talks to individuals through the :class:`~ecosim.evolution.individual.Individual`
protocol.

Random draws happen in a fixed order so a seeded generator reproduces the
same offspring: for each offspring in turn, parent A's selection, parent B's
selection, the crossover coins, then the mutation draws.
"""

import logging
import random
from typing import List, Sequence, Tuple

from ecosim.evolution.crossover import CrossoverMethod
from ecosim.evolution.individual import I
from ecosim.evolution.mutation import MutationMethod
from ecosim.evolution.selection import SelectionMethod
from ecosim.evolution.statistics import Statistics
from ecosim.exceptions import EmptyPopulationError
from ecosim.util.rng import require_rng_param

logger = logging.getLogger(__name__)


class GeneticAlgorithm:
    """Generational genetic algorithm with pluggable strategies.

    Args:
        selection_method: Chooses parents from the current population
        crossover_method: Combines two parent genomes into a child genome
        mutation_method: Perturbs the child genome in place

    Example:
        ga = GeneticAlgorithm(
            RouletteWheelSelection(),
            UniformCrossover(),
            GaussianMutation(chance=0.01, coefficient=0.3),
        )
        population, stats = ga.evolve(rng, population)
    """

    def __init__(
        self,
        selection_method: SelectionMethod,
        crossover_method: CrossoverMethod,
        mutation_method: MutationMethod,
    ) -> None:
        self.selection_method = selection_method
        self.crossover_method = crossover_method
        self.mutation_method = mutation_method

    def evolve(self, rng: random.Random, population: Sequence[I]) -> Tuple[List[I], Statistics]:
        """Produce the next generation.

        Parents are always drawn from ``population`` (the generation being
        replaced). Every offspring is a new object built with the type's
        ``create`` classmethod, even when its genome equals a parent's.

        Args:
            rng: Random source, consumed in the fixed per-offspring order
            population: Current generation, non-empty

        Returns:
            (new population of the same size, statistics of the input population)

        Raises:
            EmptyPopulationError: If population is empty
        """
        rng = require_rng_param(rng, "GeneticAlgorithm.evolve")
        if not population:
            raise EmptyPopulationError("Cannot evolve an empty population")

        statistics = Statistics.from_population(population)
        individual_type = type(population[0])

        offspring = []
        for _ in range(len(population)):
            parent_a = self.selection_method.select(rng, population).genome()
            parent_b = self.selection_method.select(rng, population).genome()

            child = self.crossover_method.crossover(rng, parent_a, parent_b)
            self.mutation_method.mutate(rng, child)

            offspring.append(individual_type.create(child))

        logger.debug(
            "Evolved %d individuals (%s)", len(offspring), statistics
        )
        return offspring, statistics

    def __repr__(self) -> str:
        return (
            f"GeneticAlgorithm({self.selection_method!r}, "
            f"{self.crossover_method!r}, {self.mutation_method!r})"
        )
