"""
Parameter schemas for pipe generation.

Defaults mirror the values the visualization has always shipped with:
32 turns of 90 degrees per pipe, four pipes, and fully saturated colors at
55% lightness. The position grid is [-4, 4] on every axis.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .schema_utils import SchemaClass

DEFAULT_GRID_MIN = -4
DEFAULT_GRID_MAX = 4

DEFAULT_COLOR_SATURATION = 100.0
DEFAULT_COLOR_LIGHTNESS = 55.0

DEFAULT_NUM_PIPES = 4
DEFAULT_NUM_TURNS = 32
DEFAULT_ROTATION_ANGLE = 90.0


@dataclass
class GridBounds(SchemaClass):
    """Inclusive integer bounds of the cubic position grid."""

    grid_min: int = DEFAULT_GRID_MIN
    grid_max: int = DEFAULT_GRID_MAX

    def __post_init__(self):
        super().__post_init__()
        if self.grid_min > self.grid_max:
            raise ValueError(
                f"grid_min ({self.grid_min}) must not exceed grid_max ({self.grid_max})"
            )

    @property
    def side(self) -> int:
        return self.grid_max - self.grid_min + 1

    def __len__(self) -> int:
        """Number of grid cells."""
        return self.side**3


@dataclass
class ColorParams(SchemaClass):
    """Fixed HSL saturation and lightness, in percent."""

    saturation: float = DEFAULT_COLOR_SATURATION
    lightness: float = DEFAULT_COLOR_LIGHTNESS

    def __post_init__(self):
        super().__post_init__()
        for name in ("saturation", "lightness"):
            value = getattr(self, name)
            if not 0.0 <= value <= 100.0:
                raise ValueError(f"{name} must be in [0, 100], got {value}")


@dataclass
class SimulationParams(SchemaClass):
    """Everything needed to generate a reproducible set of pipes."""

    num_pipes: int = DEFAULT_NUM_PIPES
    num_turns: int = DEFAULT_NUM_TURNS
    rotation_angle: float = DEFAULT_ROTATION_ANGLE
    seed: Optional[int] = None
    grid: GridBounds = field(default_factory=GridBounds)
    color: ColorParams = field(default_factory=ColorParams)

    def __post_init__(self):
        super().__post_init__()
        if self.num_pipes < 0:
            raise ValueError(f"num_pipes must be non-negative, got {self.num_pipes}")
        if self.num_turns < 0:
            raise ValueError(f"num_turns must be non-negative, got {self.num_turns}")
        if self.num_pipes > len(self.grid):
            raise ValueError(
                f"{self.num_pipes} pipes do not fit in a grid of {len(self.grid)} cells"
            )
