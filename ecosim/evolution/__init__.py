"""Evolution module: a generic, pluggable genetic algorithm.

Unlike the rest of ecosim, nothing here knows about animals or worlds. The
module provides:

- Genome: fixed-length float32 gene sequence
- Individual: protocol every evolvable entity satisfies
- Selection: fitness-proportionate (roulette wheel)
- Crossover: uniform, one coin per gene
- Mutation: bounded random perturbation per gene
- GeneticAlgorithm: one generation of select, cross, mutate, create

New strategies subclass SelectionMethod, CrossoverMethod or MutationMethod
and plug into GeneticAlgorithm without touching the engine.
"""

from ecosim.evolution.crossover import CrossoverMethod, UniformCrossover
from ecosim.evolution.engine import GeneticAlgorithm
from ecosim.evolution.genome import Genome
from ecosim.evolution.individual import Individual
from ecosim.evolution.mutation import GaussianMutation, MutationMethod
from ecosim.evolution.selection import RouletteWheelSelection, SelectionMethod
from ecosim.evolution.statistics import Statistics

__all__ = [
    # Genome
    "Genome",
    "Individual",
    # Strategies
    "SelectionMethod",
    "RouletteWheelSelection",
    "CrossoverMethod",
    "UniformCrossover",
    "MutationMethod",
    "GaussianMutation",
    # Engine
    "GeneticAlgorithm",
    "Statistics",
]
