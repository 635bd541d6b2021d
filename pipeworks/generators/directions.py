"""
Constrained turn-sequence generation.

A pipe never doubles back: after turning about an axis with some polarity,
the next turn may not be the same axis with the opposite polarity.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import numpy as np

from pipeworks.common import (
    Axis,
    InvalidSelectionError,
    Rotation,
    RotationDirection,
)

from .selectors import DirectionSelector, UniformDirectionSelector

logger = logging.getLogger(__name__)

# Canonical pool; selectors are only ever offered a filtered copy of it
ROTATION_DIRECTIONS: Tuple[RotationDirection, ...] = (
    RotationDirection(axis=Axis.X, polarity=1),
    RotationDirection(axis=Axis.Y, polarity=1),
    RotationDirection(axis=Axis.Z, polarity=1),
    RotationDirection(axis=Axis.X, polarity=-1),
    RotationDirection(axis=Axis.Y, polarity=-1),
    RotationDirection(axis=Axis.Z, polarity=-1),
)


class DirectionSequenceGenerator:
    """
    Generates sequences of rotations with no immediate doubleback.

    The choice at each step is delegated to a direction selector, which is
    handed the list of allowed directions and must return one of them.
    """

    def __init__(
        self,
        direction_selector: Optional[DirectionSelector] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        """
        Initialize DirectionSequenceGenerator.

        Args:
            direction_selector: Callable choosing one direction from a list.
                Defaults to a uniform random pick.
            rng: Random source for the default selector
        """
        self.direction_selector = (
            direction_selector
            if direction_selector is not None
            else UniformDirectionSelector(rng)
        )
        self.last_direction: Optional[RotationDirection] = None

    def allowed_directions(self) -> List[RotationDirection]:
        """Directions that may follow last_direction, in canonical order."""
        if self.last_direction is None:
            return list(ROTATION_DIRECTIONS)

        forbidden = self.last_direction.inverse()
        return [d for d in ROTATION_DIRECTIONS if d != forbidden]

    def next_rotation(self, angle_magnitude: float) -> Rotation:
        """
        Choose one more direction and turn it into a rotation.

        Raises:
            InvalidSelectionError: If the selector returns something that is
                not one of the six canonical directions, or the inverse of
                the previous direction
        """
        candidates = self.allowed_directions()
        direction = self.direction_selector(list(candidates))

        if direction not in ROTATION_DIRECTIONS:
            logger.warning(f"Direction selector returned {direction!r}")
            raise InvalidSelectionError(
                f"Invalid direction returned from direction selector: {direction!r}"
            )
        if direction not in candidates:
            logger.warning(f"Direction selector doubled back with {direction!r}")
            raise InvalidSelectionError(
                f"Direction {direction!r} doubles back on {self.last_direction!r}"
            )

        self.last_direction = direction
        return Rotation(axis=direction.axis, angle=direction.polarity * angle_magnitude)

    def generate_sequence(self, count: int, angle_magnitude: float) -> List[Rotation]:
        """
        Generate a fresh sequence of rotations.

        Args:
            count: Number of rotations; the selector is called this many times
            angle_magnitude: Unsigned turn angle in degrees

        Returns:
            List of rotations whose signs carry the chosen polarities
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")

        self.last_direction = None
        rotations = [self.next_rotation(angle_magnitude) for _ in range(count)]

        logger.debug(f"Generated {count} rotations of {angle_magnitude} degrees")
        return rotations

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(selector={self.direction_selector!r})"
