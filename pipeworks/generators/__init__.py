"""
Procedural generators.

Each generator delegates its random choice to an injectable selector:
- DirectionSequenceGenerator: turn sequences without doubleback
- PositionGenerator: non-colliding grid positions
- ColorGenerator: hue-based colors
- PipeGenerator: all three behind one cloneable facade
"""

from .colors import ColorGenerator, hsl_to_rgb
from .directions import ROTATION_DIRECTIONS, DirectionSequenceGenerator
from .pipe import PipeGenerator, SelectorSet
from .positions import PositionGenerator
from .selectors import (
    UniformDirectionSelector,
    UniformHueSelector,
    UniformPositionSelector,
    grid_points,
)

__all__ = [
    "ColorGenerator",
    "DirectionSequenceGenerator",
    "PipeGenerator",
    "PositionGenerator",
    "ROTATION_DIRECTIONS",
    "SelectorSet",
    "UniformDirectionSelector",
    "UniformHueSelector",
    "UniformPositionSelector",
    "grid_points",
    "hsl_to_rgb",
]
