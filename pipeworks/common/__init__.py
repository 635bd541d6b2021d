"""
Shared value types and math.

This module contains the building blocks every other part relies on:
- Vector3 (positions, trail points, colors)
- Axis / rotation value types and rotation matrices
- Error kinds
- Parameter schemas
"""

from .errors import (
    ForbiddenPositionSelectedError,
    GridExhaustedError,
    InvalidAxisError,
    InvalidSelectionError,
    PipeworksError,
)
from .rotation import (
    Axis,
    Rotation,
    RotationDirection,
    SpatialRotation,
    axis_to_vector,
    coerce_axis,
    degrees_to_radians,
    flatten_matrix,
    rotation_matrix,
    rotation_to_matrix,
)
from .schema_utils import SchemaClass
from .schemas import ColorParams, GridBounds, SimulationParams
from .vector import Vector3

__all__ = [
    "Axis",
    "ColorParams",
    "ForbiddenPositionSelectedError",
    "GridBounds",
    "GridExhaustedError",
    "InvalidAxisError",
    "InvalidSelectionError",
    "PipeworksError",
    "Rotation",
    "RotationDirection",
    "SchemaClass",
    "SimulationParams",
    "SpatialRotation",
    "Vector3",
    "axis_to_vector",
    "coerce_axis",
    "degrees_to_radians",
    "flatten_matrix",
    "rotation_matrix",
    "rotation_to_matrix",
]
