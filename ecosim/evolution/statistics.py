"""Per-generation fitness summary."""

from dataclasses import asdict, dataclass
from typing import Dict, Sequence

from ecosim.evolution.individual import Individual
from ecosim.exceptions import EmptyPopulationError


@dataclass(frozen=True)
class Statistics:
    """Fitness summary of the population a generation started from.

    Attributes:
        min_fitness: Lowest fitness in the population
        max_fitness: Highest fitness in the population
        avg_fitness: Arithmetic mean fitness
    """

    min_fitness: float
    max_fitness: float
    avg_fitness: float

    @classmethod
    def from_population(cls, population: Sequence[Individual]) -> "Statistics":
        if not population:
            raise EmptyPopulationError("Cannot summarise an empty population")

        fitnesses = [float(individual.fitness()) for individual in population]
        return cls(
            min_fitness=min(fitnesses),
            max_fitness=max(fitnesses),
            avg_fitness=sum(fitnesses) / len(fitnesses),
        )

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    def __str__(self) -> str:
        return (
            f"min={self.min_fitness:.2f}, "
            f"max={self.max_fitness:.2f}, "
            f"avg={self.avg_fitness:.2f}"
        )
