"""Simulation controller: runs steps and replaces the population each generation.

The simulation owns its World exclusively. Every public operation that
consumes randomness takes the RNG as an argument; the simulation never
stores one.

Each step runs the pipeline (collisions, brains, movement) and then bumps
the age counter. Once the age exceeds the generation length the population
is evolved, the food is scattered again, the counter returns to zero, and
``step`` returns the generation's statistics.
"""

import logging
import random as pyrandom
from typing import Optional

from ecosim.animal_individual import AnimalIndividual
from ecosim.config.simulation import EvolutionConfig, SimulationConfig
from ecosim.entities import Animal
from ecosim.evolution import (
    GaussianMutation,
    GeneticAlgorithm,
    RouletteWheelSelection,
    Statistics,
    UniformCrossover,
)
from ecosim.exceptions import EmptyPopulationError
from ecosim.math_utils import heading_vector, wrap_angle
from ecosim.simulation.context import StepContext
from ecosim.simulation.pipeline import SimulationPipeline, default_pipeline
from ecosim.util.rng import require_rng_param
from ecosim.world import World, WorldView

logger = logging.getLogger(__name__)


def _clamp(value: float, min_value: float, max_value: float) -> float:
    return max(min_value, min(max_value, value))


def build_genetic_algorithm(config: Optional[EvolutionConfig] = None) -> GeneticAlgorithm:
    """Roulette-wheel selection, uniform crossover, Gaussian mutation."""
    config = config or EvolutionConfig()
    return GeneticAlgorithm(
        RouletteWheelSelection(),
        UniformCrossover(),
        GaussianMutation(config.mutation_chance, config.mutation_coefficient),
    )


class Simulation:
    """Stepped foraging simulation driven by a genetic algorithm.

    Args:
        world: Initial world; the simulation takes ownership
        config: Run configuration (validated on construction)
        genetic_algorithm: Engine used at generation boundaries
        pipeline: Per-step phase order

    Example:
        rng = ChaCha8Random(42)
        sim = Simulation.random(rng)
        stats = sim.train(rng)
        print(stats)  # min=..., max=..., avg=...
    """

    def __init__(
        self,
        world: World,
        config: Optional[SimulationConfig] = None,
        genetic_algorithm: Optional[GeneticAlgorithm] = None,
        pipeline: Optional[SimulationPipeline] = None,
    ) -> None:
        self.config = (config or SimulationConfig()).validate()
        self._world = world
        self._ga = genetic_algorithm or build_genetic_algorithm(self.config.evolution)
        self._pipeline = pipeline or default_pipeline()
        self._age = 0
        self._generation = 0

    @classmethod
    def random(cls, rng: pyrandom.Random, config: Optional[SimulationConfig] = None) -> "Simulation":
        """Create a simulation with a randomly populated world."""
        rng = require_rng_param(rng, "Simulation.random")
        config = (config or SimulationConfig()).validate()
        world = World.random(rng, config.world, config.animal)
        return cls(world, config)

    # ------------------------------------------------------------------
    # Public surface
    # ------------------------------------------------------------------

    def world(self) -> WorldView:
        """Read-only snapshot of the current world."""
        return self._world.view()

    @property
    def age(self) -> int:
        """Steps taken since the last generation boundary."""
        return self._age

    @property
    def generation(self) -> int:
        """Number of completed generations."""
        return self._generation

    @property
    def genetic_algorithm(self) -> GeneticAlgorithm:
        return self._ga

    @property
    def pipeline(self) -> SimulationPipeline:
        return self._pipeline

    def step(self, rng: pyrandom.Random) -> Optional[Statistics]:
        """Advance the world by one step.

        Returns:
            The finished generation's statistics if this step crossed a
            generation boundary, otherwise None

        Raises:
            DegenerateWeightsError: If a generation ends with no animal having eaten
        """
        rng = require_rng_param(rng, "Simulation.step")
        ctx = StepContext(rng=rng)
        self._pipeline.run(self, ctx)

        self._age += 1
        if ctx.foods_eaten:
            logger.debug("Step %d: %d food eaten", self._age, ctx.foods_eaten)
        if self._age > self.config.evolution.generation_length:
            return self._evolve(rng)
        return None

    def train(self, rng: pyrandom.Random) -> Statistics:
        """Step until a generation completes and return its statistics."""
        rng = require_rng_param(rng, "Simulation.train")
        while True:
            statistics = self.step(rng)
            if statistics is not None:
                return statistics

    def choose_best(self, rng: pyrandom.Random) -> int:
        """Restart the population from its best-fed animal.

        Every animal is replaced by a freshly placed clone of the animal with
        the highest satiation; food is scattered again. When nobody has eaten,
        the clones carry the genome of a newly drawn random animal instead.
        The age counter is left untouched.

        Returns:
            The best satiation found (0 if nobody has eaten)

        Raises:
            EmptyPopulationError: If the world has no animals
        """
        rng = require_rng_param(rng, "Simulation.choose_best")
        animals = self._world.animals
        if not animals:
            raise EmptyPopulationError("Cannot choose the best animal of an empty world")

        # Drawn up front so the RNG stream does not depend on who has eaten
        best_genome = Animal.random(rng, self.config.animal).as_genome()
        best_satiation = 0
        for animal in animals:
            if animal.satiation > best_satiation:
                best_genome = animal.as_genome()
                best_satiation = animal.satiation

        self._world.animals = [
            Animal.from_genome(best_genome.copy(), rng, self.config.animal)
            for _ in range(len(animals))
        ]
        self._world.scatter_foods(rng)

        logger.info(
            "Restarted %d animals from best genome (satiation=%d)", len(animals), best_satiation
        )
        return best_satiation

    # ------------------------------------------------------------------
    # Pipeline phases
    # ------------------------------------------------------------------

    def _phase_collisions(self, rng: pyrandom.Random) -> int:
        eat_distance = self.config.world.eat_distance
        eaten = 0
        for animal in self._world.animals:
            for food in self._world.foods:
                if animal.position.distance_to(food.position) <= eat_distance:
                    animal.satiation += 1
                    food.respawn(rng)
                    eaten += 1
        return eaten

    def _phase_brains(self) -> None:
        limits = self.config.animal
        foods = self._world.foods
        for animal in self._world.animals:
            vision = animal.eye.process_vision(animal.position, animal.heading, foods)
            speed_delta, rotation_delta = animal.brain.propagate(vision)

            speed_delta = _clamp(speed_delta, -limits.speed_accel, limits.speed_accel)
            rotation_delta = _clamp(rotation_delta, -limits.rotation_accel, limits.rotation_accel)

            animal.speed = _clamp(animal.speed + speed_delta, limits.speed_min, limits.speed_max)
            animal.heading = wrap_angle(animal.heading + rotation_delta)

    def _phase_movement(self) -> None:
        for animal in self._world.animals:
            animal.position.add_inplace(heading_vector(animal.heading) * animal.speed)
            animal.position.wrap_inplace()

    # ------------------------------------------------------------------
    # Generation boundary
    # ------------------------------------------------------------------

    def _evolve(self, rng: pyrandom.Random) -> Statistics:
        current_population = [
            AnimalIndividual.from_animal(animal) for animal in self._world.animals
        ]
        evolved_population, statistics = self._ga.evolve(rng, current_population)

        self._world.animals = [
            individual.into_animal(rng, self.config.animal) for individual in evolved_population
        ]
        self._world.scatter_foods(rng)

        self._age = 0
        self._generation += 1
        logger.info("Generation %d complete: %s", self._generation, statistics)
        return statistics
