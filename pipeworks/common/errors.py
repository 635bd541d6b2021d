"""
Error kinds raised by the generators and the rotation helpers.

All of them are programming errors in injected strategies or bad arguments,
so they subclass ValueError and are never retried internally.
"""

from __future__ import annotations


class PipeworksError(ValueError):
    """Base class for all pipeworks errors."""


class InvalidSelectionError(PipeworksError):
    """A direction selector returned something outside the canonical pool."""


class ForbiddenPositionSelectedError(PipeworksError):
    """A position selector returned a point the caller marked as forbidden."""


class InvalidAxisError(PipeworksError):
    """An axis tag outside {X, Y, Z} was supplied."""


class GridExhaustedError(PipeworksError):
    """Every grid cell is forbidden, so no position can be chosen."""
