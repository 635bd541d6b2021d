"""
Rotation value types and rotation-matrix math.

A pipe turns about one of the three principal axes at every step:
- RotationDirection: the choice of axis and polarity
- Rotation: the choice with a signed angle in degrees
- SpatialRotation: the same rotation with the axis given as a unit vector,
  which is what the trail reconstruction works with
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Sequence, Union

import numpy as np

from .errors import InvalidAxisError
from .vector import Vector3


class Axis(IntEnum):
    """Principal axis. The integer value is what the shading stage receives."""

    X = 1
    Y = 2
    Z = 3


_AXIS_VECTORS = {
    Axis.X: Vector3(1.0, 0.0, 0.0),
    Axis.Y: Vector3(0.0, 1.0, 0.0),
    Axis.Z: Vector3(0.0, 0.0, 1.0),
}


@dataclass(frozen=True)
class RotationDirection:
    """Axis plus polarity (+1 or -1), chosen before an angle is applied."""

    axis: Axis
    polarity: int

    def inverse(self) -> RotationDirection:
        """The direction that would double back on this one."""
        return RotationDirection(axis=self.axis, polarity=-self.polarity)


@dataclass(frozen=True)
class Rotation:
    """Rotation about a principal axis by a signed angle in degrees."""

    axis: Axis
    angle: float

    def to_spatial(self) -> SpatialRotation:
        return SpatialRotation(axis=axis_to_vector(self.axis), angle=self.angle)

    def to_matrix(self) -> np.ndarray:
        return rotation_matrix(self.axis, self.angle)


@dataclass(frozen=True)
class SpatialRotation:
    """Rotation about an arbitrary axis vector by a signed angle in degrees."""

    axis: Vector3
    angle: float

    def __post_init__(self):
        if not isinstance(self.axis, Vector3):
            object.__setattr__(self, "axis", Vector3.from_iterable(self.axis))


def coerce_axis(axis: Union[Axis, int]) -> Axis:
    """
    Validate an axis tag.

    Accepts Axis members and their raw integer values; anything else raises
    InvalidAxisError.
    """
    if isinstance(axis, Axis):
        return axis
    if isinstance(axis, (int, np.integer)) and not isinstance(axis, bool):
        try:
            return Axis(int(axis))
        except ValueError:
            pass
    raise InvalidAxisError(f"Invalid axis: {axis!r}")


def degrees_to_radians(angle: float) -> float:
    return angle * (math.pi / 180)


def axis_to_vector(axis: Union[Axis, int]) -> Vector3:
    """Unit vector along the given principal axis."""
    return _AXIS_VECTORS[coerce_axis(axis)]


def rotation_matrix(axis: Union[Axis, int], angle: float) -> np.ndarray:
    """
    Right-handed rotation matrix about a principal axis.

    Args:
        axis: Axis to rotate about
        angle: Rotation angle in degrees

    Returns:
        3x3 numpy array R such that R @ v rotates v
    """
    axis = coerce_axis(axis)
    radians = degrees_to_radians(angle)
    c = math.cos(radians)
    s = math.sin(radians)

    if axis is Axis.X:
        rows = [[1, 0, 0], [0, c, -s], [0, s, c]]
    elif axis is Axis.Y:
        rows = [[c, 0, s], [0, 1, 0], [-s, 0, c]]
    else:
        rows = [[c, -s, 0], [s, c, 0], [0, 0, 1]]

    return np.array(rows, dtype=float)


def rotation_to_matrix(rotation: Rotation) -> np.ndarray:
    return rotation_matrix(rotation.axis, rotation.angle)


def flatten_matrix(matrix: Sequence[Sequence[float]]) -> List[float]:
    """Row-major list of the 9 matrix entries, as passed to shader uniforms."""
    m = np.asarray(matrix, dtype=float)
    if m.shape != (3, 3):
        raise ValueError(f"Expected a 3x3 matrix, got shape {m.shape}")
    return [float(v) for v in m.reshape(-1)]
