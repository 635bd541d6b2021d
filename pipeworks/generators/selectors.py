"""
Default selection strategies.

A selector is any callable; these are the ones used when the caller injects
nothing. Each owns a numpy Generator so runs can be seeded without touching
global random state.
"""

from __future__ import annotations

import itertools
from typing import Callable, List, Optional, Sequence

import numpy as np

from pipeworks.common import GridBounds, GridExhaustedError, RotationDirection, Vector3

DirectionSelector = Callable[[List[RotationDirection]], RotationDirection]
HueSelector = Callable[[], float]
PositionSelector = Callable[[List[Vector3]], Vector3]


def grid_points(bounds: GridBounds) -> List[Vector3]:
    """All integer points of the cube [grid_min, grid_max]^3, x-major."""
    axis_range = range(bounds.grid_min, bounds.grid_max + 1)
    return [Vector3(i, j, k) for i, j, k in itertools.product(axis_range, repeat=3)]


class UniformDirectionSelector:
    """Pick one of the offered directions uniformly at random."""

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng()

    def __call__(self, directions: Sequence[RotationDirection]) -> RotationDirection:
        return directions[int(self.rng.integers(len(directions)))]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class UniformHueSelector:
    """Hue uniformly distributed over [0, 360)."""

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng()

    def __call__(self) -> float:
        return float(self.rng.uniform(0.0, 360.0))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class UniformPositionSelector:
    """
    Pick a free grid cell uniformly at random.

    The candidate grid is enumerated once; every call removes the forbidden
    points and chooses among what remains.
    """

    def __init__(
        self,
        bounds: Optional[GridBounds] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.bounds = bounds if bounds is not None else GridBounds()
        self.rng = rng if rng is not None else np.random.default_rng()
        self._candidates = grid_points(self.bounds)

    def __call__(self, forbidden: Sequence[Vector3]) -> Vector3:
        excluded = set(forbidden)
        available = [p for p in self._candidates if p not in excluded]
        if not available:
            raise GridExhaustedError(
                f"All {len(self._candidates)} cells of grid "
                f"[{self.bounds.grid_min}, {self.bounds.grid_max}] are forbidden"
            )
        return available[int(self.rng.integers(len(available)))]

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"grid_min={self.bounds.grid_min}, grid_max={self.bounds.grid_max})"
        )
