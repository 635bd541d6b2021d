"""
Tests for Vector3.

Tests for pipeworks/common/vector.py
"""

from __future__ import annotations

import math

import numpy as np
import pytest

from pipeworks.common import Vector3
from pipeworks.common.vector import round_half_up


class TestVectorCreation:
    """Test Vector3 creation."""

    def test_components_are_floats(self):
        """Test integer components are stored as floats."""
        v = Vector3(1, 2, 3)
        assert v.as_tuple() == (1.0, 2.0, 3.0)
        assert all(isinstance(c, float) for c in v)

    def test_from_iterable(self):
        """Test creating a vector from a list."""
        assert Vector3.from_iterable([2, 1, 3]) == Vector3(2, 1, 3)

    @pytest.mark.parametrize("values", [[], [1, 2], [1, 2, 3, 4]])
    def test_from_iterable_wrong_length_raises(self, values):
        """Test a vector always has exactly three components."""
        with pytest.raises(ValueError, match="exactly 3"):
            Vector3.from_iterable(values)

    def test_frozen_dataclass(self):
        """Test that Vector3 is immutable."""
        v = Vector3(1, 2, 3)
        with pytest.raises(AttributeError):
            v.x = 5.0

    def test_hashable_and_equal(self):
        """Test equal vectors collapse in a set."""
        assert len({Vector3(1, 2, 3), Vector3(1.0, 2.0, 3.0)}) == 1

    def test_sequence_protocol(self):
        """Test len, indexing and iteration."""
        v = Vector3(4, 5, 6)
        assert len(v) == 3
        assert v[1] == 5.0
        assert list(v) == [4.0, 5.0, 6.0]


class TestMatrixMultiplication:
    """Test multiply_by_matrix."""

    def test_multiply_by_matrix(self):
        """Test the product is exact for integer inputs."""
        v = Vector3(2, 1, 3)
        result = v.multiply_by_matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        assert result == Vector3(13, 31, 49)

    def test_identity_is_noop(self):
        """Test identity matrix returns an equal vector."""
        v = Vector3(0.5, -2, 7)
        assert v.multiply_by_matrix(np.identity(3)) == v

    def test_does_not_mutate(self):
        """Test original vector is unchanged."""
        v = Vector3(2, 1, 3)
        v.multiply_by_matrix([[0, 0, 0], [0, 0, 0], [0, 0, 0]])
        assert v == Vector3(2, 1, 3)

    def test_non_square_matrix_raises(self):
        """Test a non 3x3 matrix is rejected."""
        with pytest.raises(ValueError, match="3x3"):
            Vector3(1, 2, 3).multiply_by_matrix([[1, 0], [0, 1]])


class TestArithmetic:
    """Test add, magnitude and scale_to_distance."""

    def test_add(self):
        """Test componentwise sum."""
        assert Vector3(1, 2, 3).add(Vector3(4, 5, 6)) == Vector3(5, 7, 9)
        assert Vector3(1, 2, 3) + Vector3(-1, -2, -3) == Vector3.zero()

    def test_magnitude(self):
        """Test Euclidean norm."""
        assert Vector3(1, 2, 2).magnitude() == 3.0
        assert Vector3.zero().magnitude() == 0.0

    def test_scale_to_distance_adds_to_magnitude(self):
        """Test the scaled vector is one unit longer."""
        v = Vector3(1, 2, 2)
        scaled = v.scale_to_distance(1)
        assert scaled.magnitude() == pytest.approx(v.magnitude() + 1)

    def test_scale_to_distance_preserves_direction(self):
        """Test cosine to every world axis is unchanged."""
        v = Vector3(1, 2, 2)
        scaled = v.scale_to_distance(1)
        for index in range(3):
            before = v[index] / v.magnitude()
            after = scaled[index] / scaled.magnitude()
            assert after == pytest.approx(before, abs=1e-3)

    def test_scale_to_distance_negative_delta(self):
        """Test shrinking a vector."""
        scaled = Vector3(0, 3, 4).scale_to_distance(-2.5)
        assert scaled.is_close((0, 1.5, 2))

    def test_scale_zero_vector_returns_copy(self):
        """Test the zero vector has no direction and comes back unchanged."""
        zero = Vector3.zero()
        scaled = zero.scale_to_distance(5)
        assert scaled == zero
        assert not any(math.isnan(c) for c in scaled)


class TestSerialization:
    """Test serialize."""

    def test_serialize_integers_without_rounding(self):
        """Test integral components print without a decimal part."""
        assert Vector3(2, 1, 3).serialize() == "[2,1,3]"

    def test_serialize_rounds_to_thousandth(self):
        """Test half-up rounding at three decimals."""
        assert Vector3(2, 1.0005, 3.0004).serialize() == "[2,1.001,3]"

    def test_serialize_negative_zero(self):
        """Test -0.0 prints as 0."""
        assert Vector3(-0.0, -0.0001, 0).serialize() == "[0,0,0]"

    def test_str_uses_serialize(self):
        """Test __str__."""
        assert str(Vector3(0.25, -1, 10)) == "[0.25,-1,10]"

    def test_round_half_up(self):
        """Test ties go up, unlike builtin round."""
        assert round_half_up(2.5) == 3.0
        assert round_half_up(-2.5) == -2.0
        assert round_half_up(1.2344, 1000) == pytest.approx(1.234)
