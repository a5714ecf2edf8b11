"""Tests for EncoderConfig validation."""

import pytest

from gcode_encoder.models import EncoderConfig


class TestEncoderConfig:
    """Tests for the EncoderConfig model."""

    def test_defaults(self):
        """Test default machine settings."""
        config = EncoderConfig()
        assert config.filament_diameter == 2.85
        assert config.travel_speed == 150.0
        assert config.print_speed == 50.0
        assert config.volumetric is False
        assert config.extrusion_width == 0.4
        assert config.extrusion_height == 0.1

    def test_zero_filament_diameter_raises_error(self):
        """Test that a zero filament diameter raises ValueError."""
        with pytest.raises(ValueError, match="filament_diameter must be positive"):
            EncoderConfig(filament_diameter=0.0)

    def test_negative_width_raises_error(self):
        """Test that a negative bead width raises ValueError."""
        with pytest.raises(ValueError, match="extrusion_width must be positive"):
            EncoderConfig(extrusion_width=-0.4)

    def test_zero_height_raises_error(self):
        """Test that a zero bead height raises ValueError."""
        with pytest.raises(ValueError, match="extrusion_height must be positive"):
            EncoderConfig(extrusion_height=0.0)
