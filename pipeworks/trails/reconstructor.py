"""
Trail reconstruction from a rotation sequence.

A pipe always grows along its own local Y axis. Every turn rotates the
pipe's local frame; the world-space step is the fixed growth direction
mapped through the inverse of the current frame. A turn about the pipe's own
longitudinal axis therefore spins it in place and leaves the walk direction
unchanged.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Tuple, Union

import numpy as np
from scipy.spatial.transform import Rotation as ScipyRotation

from pipeworks.common import Rotation, SpatialRotation, Vector3, degrees_to_radians

logger = logging.getLogger(__name__)

GROWTH_DIRECTION = Vector3(0.0, 1.0, 0.0)

AnyRotation = Union[SpatialRotation, Rotation]


def _as_spatial(rotation: AnyRotation) -> SpatialRotation:
    if isinstance(rotation, Rotation):
        return rotation.to_spatial()
    return rotation


def axis_angle_quaternion(axis: Vector3, angle: float) -> np.ndarray:
    """
    Unit quaternion for a rotation of angle degrees about axis.

    Returns:
        Array (x, y, z, w), scalar last
    """
    axis_array = axis.to_array()
    norm = np.linalg.norm(axis_array)
    if norm == 0.0:
        raise ValueError("Rotation axis must be non-zero")

    half_angle = degrees_to_radians(angle) / 2.0
    xyz = axis_array / norm * np.sin(half_angle)
    return np.array([xyz[0], xyz[1], xyz[2], np.cos(half_angle)])


def rotate_basis(basis: np.ndarray, rotation: SpatialRotation) -> np.ndarray:
    """Return a new basis with every column rotated by rotation."""
    quaternion = ScipyRotation.from_quat(axis_angle_quaternion(rotation.axis, rotation.angle))
    # apply() rotates row vectors, the basis vectors are columns
    return quaternion.apply(basis.T).T


class PathReconstructor:
    """
    Walks a growth direction through a sequence of rotations.

    Attributes:
        growth_direction: Local direction the pipe advances along each step
    """

    def __init__(self, growth_direction: Optional[Vector3] = None):
        self.growth_direction = (
            growth_direction if growth_direction is not None else GROWTH_DIRECTION
        )

    def walk(
        self, start: Vector3, rotations: Iterable[AnyRotation]
    ) -> Iterator[Tuple[Vector3, np.ndarray]]:
        """
        Yield (point, basis) after each rotation.

        The starting point is not yielded. Each basis is a fresh array.
        """
        basis = np.identity(3)
        cursor = start
        growth = self.growth_direction.to_array()

        for rotation in rotations:
            basis = rotate_basis(basis, _as_spatial(rotation))
            step = np.linalg.inv(basis) @ growth
            cursor = cursor + Vector3.from_iterable(step)
            yield cursor, basis

    def build_trail(self, start: Vector3, rotations: Iterable[AnyRotation]) -> List[Vector3]:
        """
        Reconstruct the polyline visited by a pipe.

        Args:
            start: Starting point
            rotations: Ordered turns, as SpatialRotation or Rotation

        Returns:
            Trail of len(rotations) + 1 points, beginning with start
        """
        start = start if isinstance(start, Vector3) else Vector3.from_iterable(start)
        trail = [start]
        trail.extend(point for point, _ in self.walk(start, rotations))

        logger.debug(f"Built trail of {len(trail)} points from {start}")
        return trail

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(growth_direction={self.growth_direction})"
