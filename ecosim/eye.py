"""Eye: turns the food around an animal into a fixed-width sensory vector.

The field of view is a cone centred on the animal's heading, ``fov_angle``
wide and ``fov_range`` deep, split into ``cells`` equal photoreceptors.
Each visible food adds ``(fov_range - distance) / fov_range`` to the cell
its bearing falls in, so near food reads brighter than far food. The eye is
stateless and draws no randomness.
"""

import math
from typing import List, Sequence

from ecosim.config.animal import EYE_CELLS, EYE_FOV_ANGLE, EYE_FOV_RANGE
from ecosim.exceptions import InvalidParameterError
from ecosim.math_utils import TWO_PI, Vector2, bearing, wrap_angle


class Eye:
    """Field-of-view perception.

    Args:
        fov_range: Maximum sight distance (exclusive), > 0
        fov_angle: Angular width of the cone, in (0, 2*pi]
        cells: Number of photoreceptors, >= 1
    """

    def __init__(
        self,
        fov_range: float = EYE_FOV_RANGE,
        fov_angle: float = EYE_FOV_ANGLE,
        cells: int = EYE_CELLS,
    ) -> None:
        if not fov_range > 0:
            raise InvalidParameterError(f"fov_range must be > 0, got {fov_range!r}")
        if not 0 < fov_angle <= TWO_PI:
            raise InvalidParameterError(f"fov_angle must be in (0, 2*pi], got {fov_angle!r}")
        if cells < 1:
            raise InvalidParameterError(f"cells must be >= 1, got {cells!r}")

        self.fov_range = fov_range
        self.fov_angle = fov_angle
        self.cells = cells

    def process_vision(self, position: Vector2, heading: float, foods: Sequence) -> List[float]:
        """Compute the sensory vector.

        Args:
            position: Observer position
            heading: Observer heading in radians
            foods: Anything with a ``position`` Vector2

        Returns:
            ``cells`` non-negative floats, ordered by increasing relative bearing
        """
        cells = [0.0] * self.cells
        half_angle = self.fov_angle / 2

        for food in foods:
            distance = position.distance_to(food.position)
            if distance >= self.fov_range:
                continue

            angle = wrap_angle(bearing(position, food.position) - heading)
            if angle < -half_angle or angle > half_angle:
                continue

            # Shift from [-half, half] to [0, fov_angle] before bucketing
            angle += half_angle
            cell = min(int(angle / self.fov_angle * self.cells), self.cells - 1)
            cells[cell] += (self.fov_range - distance) / self.fov_range

        return cells

    def __repr__(self) -> str:
        return (
            f"Eye(fov_range={self.fov_range}, "
            f"fov_angle={math.degrees(self.fov_angle):.1f}deg, cells={self.cells})"
        )
