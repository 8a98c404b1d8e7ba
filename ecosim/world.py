"""World state and read-only snapshots of it.

The World is owned and mutated by the Simulation only. Front ends receive a
``WorldView``: frozen copies of positions and scores that stay valid after
the simulation moves on.
"""

import random as pyrandom
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Tuple

from ecosim.config.simulation import AnimalConfig, WorldConfig
from ecosim.entities import Animal, Food


class World:
    """Animals and food sharing the unit torus.

    Attributes:
        animals: Current population, in evaluation order
        foods: Food items, in collision order
    """

    def __init__(self, animals: List[Animal], foods: List[Food]) -> None:
        self.animals = animals
        self.foods = foods

    @classmethod
    def random(
        cls,
        rng: pyrandom.Random,
        config: Optional[WorldConfig] = None,
        animal_config: Optional[AnimalConfig] = None,
    ) -> "World":
        """Populate a world; every animal is drawn before any food."""
        config = config or WorldConfig()
        animals = [Animal.random(rng, animal_config) for _ in range(config.animals)]
        foods = [Food.random(rng) for _ in range(config.foods)]
        return cls(animals, foods)

    def scatter_foods(self, rng: pyrandom.Random) -> None:
        """Move every food item to a new random position, in order."""
        for food in self.foods:
            food.respawn(rng)

    def view(self) -> "WorldView":
        return WorldView(
            animals=tuple(
                AnimalView(
                    x=animal.position.x,
                    y=animal.position.y,
                    heading=animal.heading,
                    speed=animal.speed,
                    satiation=animal.satiation,
                )
                for animal in self.animals
            ),
            foods=tuple(FoodView(x=food.position.x, y=food.position.y) for food in self.foods),
        )


@dataclass(frozen=True)
class AnimalView:
    x: float
    y: float
    heading: float
    speed: float
    satiation: int


@dataclass(frozen=True)
class FoodView:
    x: float
    y: float


@dataclass(frozen=True)
class WorldView:
    """Immutable snapshot of a World."""

    animals: Tuple[AnimalView, ...]
    foods: Tuple[FoodView, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "animals": [asdict(animal) for animal in self.animals],
            "foods": [asdict(food) for food in self.foods],
        }
