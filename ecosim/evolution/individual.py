"""Individual protocol: the seam between the genetic algorithm and a domain.

The engine never looks inside an individual. Anything that can report a
fitness, hand out its genome, and be created from a genome can be evolved.

Example:
    @dataclass
    class Candidate:
        genes: Genome
        score: float = 0.0

        def fitness(self) -> float:
            return self.score

        def genome(self) -> Genome:
            return self.genes

        @classmethod
        def create(cls, genome: Genome) -> "Candidate":
            return cls(genome)
"""

from typing import Protocol, TypeVar, runtime_checkable

from ecosim.evolution.genome import Genome

I = TypeVar("I", bound="Individual")


@runtime_checkable
class Individual(Protocol):
    """Protocol for anything the genetic algorithm can evolve.

    ``fitness`` must be non-negative; fitness-proportionate selection
    rejects negative values.

    ``create`` must not consume randomness: the engine calls it once per
    offspring in the middle of a fixed random-draw sequence.
    """

    def fitness(self) -> float:
        """Score used as the selection weight."""
        ...

    def genome(self) -> Genome:
        """The individual's genome (a reference, not a copy)."""
        ...

    @classmethod
    def create(cls, genome: Genome) -> "Individual":
        """Build a fresh individual carrying ``genome``."""
        ...
