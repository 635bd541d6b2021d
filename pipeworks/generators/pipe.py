"""
Facade bundling the three pipe generators.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

import numpy as np

from pipeworks.common import ColorParams, GridBounds, Rotation, Vector3

from .colors import ColorGenerator
from .directions import DirectionSequenceGenerator
from .positions import PositionGenerator
from .selectors import DirectionSelector, HueSelector, PositionSelector


@dataclass(frozen=True)
class SelectorSet:
    """
    The three injectable strategies. A None field means "use the default".

    Attributes:
        direction_selector: Chooses a turn from the allowed directions
        hue_selector: Produces a hue in degrees
        position_selector: Chooses a point avoiding the forbidden list
    """

    direction_selector: Optional[DirectionSelector] = None
    hue_selector: Optional[HueSelector] = None
    position_selector: Optional[PositionSelector] = None


class PipeGenerator:
    """
    Generates everything a single pipe needs: turns, a start and a color.

    Copy an existing generator with clone(); the copy shares the exact same
    strategy callables.
    """

    def __init__(
        self,
        selectors: Optional[SelectorSet] = None,
        grid: Optional[GridBounds] = None,
        color: Optional[ColorParams] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        """
        Initialize PipeGenerator.

        Args:
            selectors: Strategies to use; missing ones get uniform defaults
            grid: Grid bounds for the default position selector
            color: Saturation and lightness for generated colors
            rng: Random source shared by the default selectors
        """
        selectors = selectors if selectors is not None else SelectorSet()
        self.grid = grid if grid is not None else GridBounds()
        self.color = color if color is not None else ColorParams()
        self.rng = rng if rng is not None else np.random.default_rng()

        self.directions = DirectionSequenceGenerator(
            selectors.direction_selector, rng=self.rng
        )
        self.colors = ColorGenerator(selectors.hue_selector, self.color, rng=self.rng)
        self.positions = PositionGenerator(
            selectors.position_selector, self.grid, rng=self.rng
        )

    @property
    def selectors(self) -> SelectorSet:
        """The strategies actually in use, defaults included."""
        return SelectorSet(
            direction_selector=self.directions.direction_selector,
            hue_selector=self.colors.hue_selector,
            position_selector=self.positions.position_selector,
        )

    def clone(self) -> PipeGenerator:
        return PipeGenerator(
            selectors=self.selectors, grid=self.grid, color=self.color, rng=self.rng
        )

    def generate_pipe_directions(
        self, num_turns: int, rotation_angle: float
    ) -> List[Rotation]:
        return self.directions.generate_sequence(num_turns, rotation_angle)

    def generate_color(self) -> Vector3:
        return self.colors.generate_color()

    def generate_position(self, forbidden: Optional[Iterable] = None) -> Vector3:
        return self.positions.generate_position(forbidden)

    def __repr__(self) -> str:
        return (
            f"PipeGenerator(directions={self.directions!r}, "
            f"colors={self.colors!r}, positions={self.positions!r})"
        )
