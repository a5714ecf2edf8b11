"""Tests for ribbon and travel preview geometry."""

import math

import numpy as np
import pytest

from gcode_encoder.geometry import (
    RIBBON_HALF_WIDTH,
    RIBBON_SIDES,
    as_ribbon_triangles,
    as_ribbon_vertices,
    as_travel_segments,
    extrusion_ribbon,
    ribbon_normal,
    travel_segment,
)


class TestRibbonNormal:
    """Tests for ribbon_normal()."""

    def test_move_along_x(self):
        """Test that a +X move has its normal pointing to -Y."""
        assert ribbon_normal(10.0, 0.0) == (0.0, -RIBBON_HALF_WIDTH)

    def test_move_along_y(self):
        """Test that a +Y move has its normal pointing to +X."""
        assert ribbon_normal(0.0, 5.0) == (RIBBON_HALF_WIDTH, 0.0)

    def test_normal_length_is_half_width(self):
        nx, ny = ribbon_normal(3.0, -7.0)
        assert math.hypot(nx, ny) == pytest.approx(RIBBON_HALF_WIDTH)

    def test_zero_length_move_has_zero_normal(self):
        """Test that no planar travel yields a zero normal instead of NaN."""
        assert ribbon_normal(0.0, 0.0) == (0.0, 0.0)


class TestExtrusionRibbon:
    """Tests for extrusion_ribbon()."""

    def test_six_vertices(self):
        vertices = extrusion_ribbon((0.0, 0.0, 0.0), (10.0, 0.0, 0.0))
        assert len(vertices) == 24

    def test_vertex_order_and_sides(self):
        """Test the exact vertex layout of a +X move."""
        vertices = extrusion_ribbon((0.0, 0.0, 0.0), (10.0, 0.0, 0.0))
        assert vertices == [
            0.0, -0.2, 0.0, 0.0,
            10.0, -0.2, 0.0, 0.0,
            0.0, 0.2, 0.0, 1.0,
            10.0, -0.2, 0.0, 0.0,
            0.0, 0.2, 0.0, 1.0,
            10.0, 0.2, 0.0, 1.0,
        ]

    def test_side_flags(self):
        vertices = extrusion_ribbon((1.0, 2.0, 0.3), (4.0, 6.0, 0.3))
        assert tuple(vertices[3::4]) == RIBBON_SIDES

    def test_z_follows_start_and_end(self):
        """Test that start vertices use the old Z and end vertices the new Z."""
        vertices = extrusion_ribbon((0.0, 0.0, 1.0), (0.0, 5.0, 2.0))
        z_values = vertices[2::4]
        assert z_values == [1.0, 2.0, 1.0, 2.0, 1.0, 2.0]

    def test_zero_length_move_is_degenerate_not_nan(self):
        """Test that a pure Z move produces a zero-width ribbon with no NaN."""
        vertices = extrusion_ribbon((5.0, 5.0, 0.0), (5.0, 5.0, 1.0))
        assert len(vertices) == 24
        assert not any(math.isnan(v) for v in vertices)
        assert vertices[0::4] == [5.0] * 6
        assert vertices[1::4] == [5.0] * 6


class TestTravelSegment:
    """Tests for travel_segment()."""

    def test_segment_layout(self):
        assert travel_segment((1.0, 2.0, 3.0), (4.0, 5.0, 6.0)) == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]


class TestArrayViews:
    """Tests for the numpy views over flat buffers."""

    def test_ribbon_vertices_shape(self):
        buffer = extrusion_ribbon((0.0, 0.0, 0.0), (1.0, 0.0, 0.0)) * 2
        assert as_ribbon_vertices(buffer).shape == (12, 4)

    def test_ribbon_triangles_shape(self):
        buffer = extrusion_ribbon((0.0, 0.0, 0.0), (1.0, 0.0, 0.0))
        triangles = as_ribbon_triangles(buffer)
        assert triangles.shape == (2, 3, 4)
        np.testing.assert_array_equal(triangles[1, 2], [1.0, 0.2, 0.0, 1.0])

    def test_travel_segments_shape(self):
        buffer = travel_segment((0.0, 0.0, 0.0), (1.0, 1.0, 0.0)) * 3
        assert as_travel_segments(buffer).shape == (3, 2, 3)

    def test_empty_buffers(self):
        assert as_ribbon_triangles([]).shape == (0, 3, 4)
        assert as_travel_segments([]).shape == (0, 2, 3)
