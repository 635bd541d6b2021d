"""
Trail reconstruction.
"""

from .reconstructor import (
    GROWTH_DIRECTION,
    PathReconstructor,
    axis_angle_quaternion,
    rotate_basis,
)

__all__ = [
    "GROWTH_DIRECTION",
    "PathReconstructor",
    "axis_angle_quaternion",
    "rotate_basis",
]
