"""
Pipeworks: procedural pipe geometry.

Generates constrained sequences of 90-degree turns, non-colliding grid
positions and hue-based colors, and reconstructs the 3D trail a pipe leaves
when it grows along its own rotating local frame.
"""

__version__ = "0.1.0"

# Core value types and math
from .common import (
    Axis,
    ColorParams,
    ForbiddenPositionSelectedError,
    GridBounds,
    GridExhaustedError,
    InvalidAxisError,
    InvalidSelectionError,
    PipeworksError,
    Rotation,
    RotationDirection,
    SimulationParams,
    SpatialRotation,
    Vector3,
    axis_to_vector,
    degrees_to_radians,
    rotation_matrix,
)

# Generators
from .generators import (
    ColorGenerator,
    DirectionSequenceGenerator,
    PipeGenerator,
    PositionGenerator,
    SelectorSet,
)

# Trails
from .trails import PathReconstructor

# Simulation
from .simulation import PipeSimulation, RenderablePipe

__all__ = [
    # Core
    "Axis",
    "ColorParams",
    "GridBounds",
    "Rotation",
    "RotationDirection",
    "SimulationParams",
    "SpatialRotation",
    "Vector3",
    "axis_to_vector",
    "degrees_to_radians",
    "rotation_matrix",
    # Errors
    "ForbiddenPositionSelectedError",
    "GridExhaustedError",
    "InvalidAxisError",
    "InvalidSelectionError",
    "PipeworksError",
    # Generators
    "ColorGenerator",
    "DirectionSequenceGenerator",
    "PipeGenerator",
    "PositionGenerator",
    "SelectorSet",
    # Trails
    "PathReconstructor",
    # Simulation
    "PipeSimulation",
    "RenderablePipe",
]
