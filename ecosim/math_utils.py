"""Centralized math utilities for the simulation.

Pure Python 2D helpers for the toroidal unit world: a small Vector2, the
wrap-around used after every movement, and heading/angle conversions.
"""

from __future__ import annotations

import math

TWO_PI = 2.0 * math.pi


class Vector2:
    """A 2D vector class for mathematical operations."""

    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x: float = float(x)
        self.y: float = float(y)

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    def distance_to(self, other: "Vector2") -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def add_inplace(self, other: "Vector2") -> "Vector2":
        """Add another vector to this one in-place."""
        self.x += other.x
        self.y += other.y
        return self

    def wrap_inplace(self) -> "Vector2":
        """Wrap both coordinates into [0, 1) in-place."""
        self.x = wrap_unit(self.x)
        self.y = wrap_unit(self.y)
        return self

    def copy(self) -> "Vector2":
        """Return a copy of this vector."""
        return Vector2(self.x, self.y)

    def __eq__(self, other: object) -> bool:
        """Check if two vectors are equal."""
        if other.__class__ is not Vector2:
            return False
        return abs(self.x - other.x) < 1e-9 and abs(self.y - other.y) < 1e-9

    def __ne__(self, other: object) -> bool:
        """Check if two vectors are not equal."""
        return not self.__eq__(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Vector2({self.x}, {self.y})"


def wrap_unit(value: float) -> float:
    """Wrap a coordinate into [0, 1).

    ``%`` can round tiny negative inputs up to exactly 1.0, which is folded
    back to 0.0 so the half-open invariant always holds.
    """
    wrapped = value % 1.0
    if wrapped >= 1.0:
        return 0.0
    return wrapped


def wrap_angle(angle: float) -> float:
    """Wrap an angle into [-pi, pi)."""
    return (angle + math.pi) % TWO_PI - math.pi


def heading_vector(heading: float) -> Vector2:
    """Unit vector for a heading.

    Heading 0 points along +y; positive headings rotate counter-clockwise.
    """
    return Vector2(-math.sin(heading), math.cos(heading))


def bearing(from_pos: Vector2, to_pos: Vector2) -> float:
    """Heading (same convention as ``heading_vector``) pointing from one position to another."""
    delta = to_pos - from_pos
    return math.atan2(-delta.x, delta.y)
