"""
Starting-position generation on an integer grid.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

import numpy as np

from pipeworks.common import ForbiddenPositionSelectedError, GridBounds, Vector3

from .selectors import PositionSelector, UniformPositionSelector

logger = logging.getLogger(__name__)


def _as_vector(point) -> Vector3:
    return point if isinstance(point, Vector3) else Vector3.from_iterable(point)


class PositionGenerator:
    """
    Chooses grid positions that avoid a caller-supplied forbidden set.

    The position selector receives the forbidden list and could ignore it,
    so every result is checked before being handed back.
    """

    def __init__(
        self,
        position_selector: Optional[PositionSelector] = None,
        bounds: Optional[GridBounds] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        """
        Initialize PositionGenerator.

        Args:
            position_selector: Callable mapping a forbidden list to a point.
                Defaults to a uniform pick over the free cells of the grid.
            bounds: Grid used by the default selector
            rng: Random source for the default selector
        """
        self.bounds = bounds if bounds is not None else GridBounds()
        self.position_selector = (
            position_selector
            if position_selector is not None
            else UniformPositionSelector(self.bounds, rng)
        )

    def generate_position(self, forbidden: Optional[Iterable] = None) -> Vector3:
        """
        Generate a position not contained in forbidden.

        Args:
            forbidden: Points that must not be returned (Vector3 or triples)

        Returns:
            The selected position

        Raises:
            ForbiddenPositionSelectedError: If the selector picked a forbidden point
        """
        forbidden_positions: List[Vector3] = (
            [_as_vector(p) for p in forbidden] if forbidden is not None else []
        )

        selected = _as_vector(self.position_selector(forbidden_positions))

        if selected in set(forbidden_positions):
            logger.warning(f"Position selector returned forbidden point {selected}")
            raise ForbiddenPositionSelectedError(
                f"Selected position {selected} was in the forbidden list"
            )

        return selected

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(selector={self.position_selector!r})"
