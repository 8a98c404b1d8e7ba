"""Lightweight simulation configuration helpers."""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict

from ecosim.config.animal import (
    EYE_CELLS,
    EYE_FOV_ANGLE,
    EYE_FOV_RANGE,
    INITIAL_SPEED,
    ROTATION_ACCEL,
    SPEED_ACCEL,
    SPEED_MAX,
    SPEED_MIN,
)
from ecosim.config.evolution import (
    GENERATION_LENGTH,
    MUTATION_CHANCE,
    MUTATION_COEFFICIENT,
)
from ecosim.config.world import ANIMAL_COUNT, EAT_DISTANCE, FOOD_COUNT
from ecosim.exceptions import ConfigurationError


@dataclass
class WorldConfig:
    """Population sizes and the eating radius."""

    animals: int = ANIMAL_COUNT
    foods: int = FOOD_COUNT
    eat_distance: float = EAT_DISTANCE


@dataclass
class AnimalConfig:
    """Movement limits and eye geometry shared by every animal."""

    speed_min: float = SPEED_MIN
    speed_max: float = SPEED_MAX
    initial_speed: float = INITIAL_SPEED
    speed_accel: float = SPEED_ACCEL
    rotation_accel: float = ROTATION_ACCEL
    fov_range: float = EYE_FOV_RANGE
    fov_angle: float = EYE_FOV_ANGLE
    eye_cells: int = EYE_CELLS


@dataclass
class EvolutionConfig:
    """Generation length and mutation parameters."""

    generation_length: int = GENERATION_LENGTH
    mutation_chance: float = MUTATION_CHANCE
    mutation_coefficient: float = MUTATION_COEFFICIENT


@dataclass
class SimulationConfig:
    """Complete configuration for a simulation run.

    Attributes:
        world: Population sizes and eating radius
        animal: Movement limits and eye geometry
        evolution: Generation length and mutation parameters
    """

    world: WorldConfig = field(default_factory=WorldConfig)
    animal: AnimalConfig = field(default_factory=AnimalConfig)
    evolution: EvolutionConfig = field(default_factory=EvolutionConfig)

    def validate(self) -> "SimulationConfig":
        """Check every value, raising ConfigurationError on the first bad one.

        Returns:
            self, so construction and validation can be chained
        """
        if self.world.animals < 1:
            raise ConfigurationError(f"world.animals must be >= 1, got {self.world.animals}")
        if self.world.foods < 0:
            raise ConfigurationError(f"world.foods must be >= 0, got {self.world.foods}")
        if self.world.eat_distance < 0:
            raise ConfigurationError(
                f"world.eat_distance must be >= 0, got {self.world.eat_distance}"
            )

        animal = self.animal
        if not 0 < animal.speed_min <= animal.speed_max:
            raise ConfigurationError(
                f"animal speed limits must satisfy 0 < speed_min <= speed_max, "
                f"got [{animal.speed_min}, {animal.speed_max}]"
            )
        if not animal.speed_min <= animal.initial_speed <= animal.speed_max:
            raise ConfigurationError(
                f"animal.initial_speed {animal.initial_speed} outside "
                f"[{animal.speed_min}, {animal.speed_max}]"
            )
        if animal.speed_accel < 0 or animal.rotation_accel < 0:
            raise ConfigurationError("animal acceleration limits must be non-negative")

        evolution = self.evolution
        if evolution.generation_length < 1:
            raise ConfigurationError(
                f"evolution.generation_length must be >= 1, got {evolution.generation_length}"
            )
        if not 0.0 <= evolution.mutation_chance <= 1.0:
            raise ConfigurationError(
                f"evolution.mutation_chance must be in [0, 1], got {evolution.mutation_chance}"
            )
        if evolution.mutation_coefficient < 0:
            raise ConfigurationError(
                f"evolution.mutation_coefficient must be >= 0, "
                f"got {evolution.mutation_coefficient}"
            )
        return self

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
