"""Simulation entities: animals and the food they eat.

Positions live in the unit torus [0, 1) x [0, 1). Random placement draws
two float32 values (x then y); a random heading draws one more.
"""

import random as pyrandom
from typing import Optional

from ecosim.brains.brain import Brain
from ecosim.config.simulation import AnimalConfig
from ecosim.evolution.genome import Genome
from ecosim.eye import Eye
from ecosim.math_utils import TWO_PI, Vector2
from ecosim.util.rng import gen_f32


def random_position(rng: pyrandom.Random) -> Vector2:
    x = float(gen_f32(rng))
    y = float(gen_f32(rng))
    return Vector2(x, y)


def random_heading(rng: pyrandom.Random) -> float:
    return float(gen_f32(rng)) * TWO_PI


class Food:
    """A consumable point that reappears elsewhere once eaten."""

    __slots__ = ("position",)

    def __init__(self, position: Vector2) -> None:
        self.position = position

    @classmethod
    def random(cls, rng: pyrandom.Random) -> "Food":
        return cls(random_position(rng))

    def respawn(self, rng: pyrandom.Random) -> None:
        self.position = random_position(rng)

    def __repr__(self) -> str:
        return f"Food({self.position.x:.4f}, {self.position.y:.4f})"


def make_eye(config: AnimalConfig) -> Eye:
    return Eye(fov_range=config.fov_range, fov_angle=config.fov_angle, cells=config.eye_cells)


class Animal:
    """An evolving agent.

    Attributes:
        eye: Perception configuration
        brain: Decision function; its weights are the animal's genome
        position: Location in the unit torus
        heading: Direction of travel in radians (0 points along +y)
        speed: Distance covered per step
        satiation: Food eaten this generation; the animal's fitness
    """

    def __init__(
        self,
        eye: Eye,
        brain: Brain,
        position: Vector2,
        heading: float,
        speed: float,
    ) -> None:
        self.eye = eye
        self.brain = brain
        self.position = position
        self.heading = heading
        self.speed = speed
        self.satiation = 0

    @classmethod
    def spawn(
        cls,
        eye: Eye,
        brain: Brain,
        rng: pyrandom.Random,
        config: Optional[AnimalConfig] = None,
    ) -> "Animal":
        """Place a new animal at a random position and heading with the initial speed."""
        config = config or AnimalConfig()
        position = random_position(rng)
        heading = random_heading(rng)
        return cls(eye, brain, position, heading, config.initial_speed)

    @classmethod
    def random(cls, rng: pyrandom.Random, config: Optional[AnimalConfig] = None) -> "Animal":
        """Animal with random brain weights; weights are drawn before placement."""
        config = config or AnimalConfig()
        eye = make_eye(config)
        brain = Brain.random(rng, eye)
        return cls.spawn(eye, brain, rng, config)

    @classmethod
    def from_genome(
        cls,
        genome: Genome,
        rng: pyrandom.Random,
        config: Optional[AnimalConfig] = None,
    ) -> "Animal":
        """Rebuild an animal from an evolved genome.

        The genome carries behaviour only; position and heading are fresh.

        Raises:
            ShapeMismatchError: If the genome length does not fit the brain
        """
        config = config or AnimalConfig()
        eye = make_eye(config)
        brain = Brain.from_genome(genome, eye)
        return cls.spawn(eye, brain, rng, config)

    def as_genome(self) -> Genome:
        return self.brain.as_genome()

    def __repr__(self) -> str:
        return (
            f"Animal(pos=({self.position.x:.4f}, {self.position.y:.4f}), "
            f"heading={self.heading:.3f}, speed={self.speed:.4f}, satiation={self.satiation})"
        )
