"""
Pytest configuration and shared fixtures for pipeworks tests.

Provides recording selectors, seeded random sources and small helpers for
comparing vectors with a tolerance.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List

import numpy as np
import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from pipeworks.common import RotationDirection, Vector3

# =============================================================================
# Random Sources
# =============================================================================


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded numpy Generator."""
    return np.random.default_rng(1234)


# =============================================================================
# Selector Fixtures
# =============================================================================


class RecordingDirectionSelector:
    """Direction selector that always picks the first option and remembers
    every list it was offered."""

    def __init__(self):
        self.offered: List[List[RotationDirection]] = []
        self.selected: List[RotationDirection] = []

    @property
    def call_count(self) -> int:
        return len(self.offered)

    def __call__(self, directions: List[RotationDirection]) -> RotationDirection:
        self.offered.append(list(directions))
        choice = directions[0]
        self.selected.append(choice)
        return choice


@pytest.fixture
def recording_selector() -> RecordingDirectionSelector:
    """Fresh recording direction selector."""
    return RecordingDirectionSelector()


# =============================================================================
# Vector Utilities
# =============================================================================


@pytest.fixture
def assert_trail_close():
    """Fixture comparing a trail against expected triples with atol=0.001."""

    def _assert_close(trail: List[Vector3], expected, atol=1e-3):
        assert len(trail) == len(expected)
        np.testing.assert_allclose(
            [p.as_tuple() for p in trail], expected, rtol=0, atol=atol
        )

    return _assert_close


# =============================================================================
# Markers
# =============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "viz: marks tests that render matplotlib figures")
