"""
Immutable 3-component vector.

Used for grid positions, trail points, axis vectors and RGB colors.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, Tuple

import numpy as np

ROUNDING_FACTOR = 1000


def round_half_up(value: float, factor: int = 1) -> float:
    """
    Round to the nearest multiple of 1/factor, ties going towards +inf.

    Python's round() is banker's rounding; serialized output must match the
    usual half-up convention instead (1.0005 -> 1.001).
    """
    return math.floor(value * factor + 0.5) / factor


def _format_component(value: float) -> float | int:
    # Integral values serialize without a trailing ".0"; -0.0 becomes 0
    if math.isfinite(value) and value == int(value):
        return int(value)
    return value


@dataclass(frozen=True)
class Vector3:
    """
    An ordered triple of floats.

    Attributes:
        x: First component
        y: Second component
        z: Third component
    """

    x: float
    y: float
    z: float

    def __post_init__(self):
        for name in ("x", "y", "z"):
            object.__setattr__(self, name, float(getattr(self, name)))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> Vector3:
        """Create a Vector3 from any iterable of exactly three numbers."""
        components = [float(v) for v in values]
        if len(components) != 3:
            raise ValueError(
                f"Vector3 needs exactly 3 components, got {len(components)}"
            )
        return cls(*components)

    @classmethod
    def zero(cls) -> Vector3:
        return cls(0.0, 0.0, 0.0)

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __len__(self) -> int:
        return 3

    def __getitem__(self, index: int) -> float:
        return self.as_tuple()[index]

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_array(self) -> np.ndarray:
        return np.array(self.as_tuple(), dtype=float)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def multiply_by_matrix(self, matrix: Sequence[Sequence[float]]) -> Vector3:
        """
        Compute matrix · v.

        Args:
            matrix: 3x3 matrix, e.g. a rotation matrix

        Returns:
            New vector whose i-th component is dot(matrix[i], v)
        """
        m = np.asarray(matrix, dtype=float)
        if m.shape != (3, 3):
            raise ValueError(f"Expected a 3x3 matrix, got shape {m.shape}")
        return Vector3.from_iterable(m @ self.to_array())

    def add(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __add__(self, other: Vector3) -> Vector3:
        return self.add(other)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def scale_to_distance(self, delta: float) -> Vector3:
        """
        Extend (or shorten) the vector by delta along its own direction.

        The zero vector has no direction and is returned unchanged.
        """
        current = self.magnitude()
        if current == 0.0:
            return Vector3(self.x, self.y, self.z)
        return self * ((current + delta) / current)

    def is_close(self, other: Iterable[float], atol: float = 1e-3) -> bool:
        """Componentwise comparison with an absolute tolerance."""
        return bool(np.allclose(self.to_array(), list(other), rtol=0.0, atol=atol))

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def serialize(self) -> str:
        """Compact array text with components rounded to 3 decimals."""
        rounded = [
            _format_component(round_half_up(v, ROUNDING_FACTOR)) for v in self
        ]
        return json.dumps(rounded, separators=(",", ":"))

    def __str__(self) -> str:
        return self.serialize()
