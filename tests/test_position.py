"""Tests for the Position model."""

import pytest

from gcode_encoder.models import Position


class TestPosition:
    """Tests for Position construction."""

    def test_defaults(self):
        """Test that a bare Position has every axis absent."""
        pos = Position()
        assert pos.x is None
        assert pos.y is None
        assert pos.z is None
        assert pos.absolute is False
        assert pos.speed is None

    def test_zero_is_not_absent(self):
        """Test that 0 is stored as a present axis value."""
        pos = Position(x=0.0)
        assert pos.x == 0.0
        assert pos.x is not None

    def test_position_immutability(self):
        """Test that Position is immutable (frozen dataclass)."""
        pos = Position(x=1.0)
        with pytest.raises(Exception):
            pos.x = 2.0


class TestPositionAdd:
    """Tests for Position.add() merging."""

    def test_full_positions_add_as_vectors(self):
        """Test that fully specified positions add component-wise."""
        merged = Position(x=1.0, y=2.0, z=3.0).add(Position(x=10.0, y=20.0, z=30.0))
        assert (merged.x, merged.y, merged.z) == (11.0, 22.0, 33.0)

    def test_adding_empty_position_changes_nothing(self):
        """Test that a position with all axes absent is an identity."""
        pos = Position(x=1.5, y=None, z=-2.0, absolute=True, speed=30.0)
        assert pos.add(Position()) == pos

    def test_axis_absent_on_both_sides_stays_absent(self):
        """Test that an axis missing from both inputs is missing from the result."""
        merged = Position(x=1.0).add(Position(y=2.0))
        assert merged.x == 1.0
        assert merged.y == 2.0
        assert merged.z is None

    def test_absolute_is_or_of_inputs(self):
        """Test that the result is absolute if either input is."""
        assert Position(absolute=True).add(Position()).absolute is True
        assert Position().add(Position(absolute=True)).absolute is True
        assert Position().add(Position()).absolute is False

    def test_speed_prefers_own_speed(self):
        """Test that this position's speed wins when set."""
        merged = Position(speed=20.0).add(Position(speed=80.0))
        assert merged.speed == 20.0

    def test_speed_falls_back_to_other(self):
        """Test that the other speed is used when this one is missing."""
        merged = Position().add(Position(speed=80.0))
        assert merged.speed == 80.0

    def test_zero_speed_treated_as_absent(self):
        """Test that a speed of exactly 0 is overridden by the other speed."""
        merged = Position(speed=0.0).add(Position(speed=80.0))
        assert merged.speed == 80.0

    def test_add_does_not_mutate_inputs(self):
        """Test that both inputs are unchanged after merging."""
        a = Position(x=1.0)
        b = Position(x=2.0)
        a.add(b)
        assert a.x == 1.0
        assert b.x == 2.0
