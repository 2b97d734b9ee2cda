from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np


Number = float | int


@dataclass(frozen=True)
class Vector2D:
    """An immutable vector in the plane.

    Every operation returns a new instance; coordinates are never
    validated, so NaN or infinite values simply propagate.

    Attributes
    ----------
    x, y:
        Cartesian coordinates.
    """

    x: Number
    y: Number

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Vector2D:
        """Build a vector from an array-like of shape (2,)."""
        values = np.asarray(arr, dtype=float)
        if values.shape != (2,):
            raise ValueError(f"Expected an array of shape (2,), got {values.shape}.")
        return cls(float(values[0]), float(values[1]))

    def plus(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y)

    def minus(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x - other.x, self.y - other.y)

    def length(self) -> float:
        """Euclidean norm, sqrt(x**2 + y**2)."""
        # hypot avoids overflow/underflow of the intermediate squares
        return float(np.hypot(self.x, self.y))

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    def __add__(self, other: Vector2D) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: Vector2D) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.minus(other)

    def __abs__(self) -> float:
        return self.length()

    def __iter__(self) -> Iterator[Number]:
        yield self.x
        yield self.y
