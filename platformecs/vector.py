"""Two-dimensional vector arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Vector2:
    """A mutable two-component vector."""

    x: float = 0
    y: float = 0

    def length(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vector2:
        """Return a copy of the vector scaled to unit length.

        Raises ZeroDivisionError for the zero vector.
        """
        length = self.length()
        return Vector2(self.x / length, self.y / length)

    def dot_product(self, other: Vector2) -> float:
        """Return the dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2:
        return Vector2(self.x * factor, self.y * factor)

    def __truediv__(self, divisor: float) -> Vector2:
        return Vector2(self.x / divisor, self.y / divisor)