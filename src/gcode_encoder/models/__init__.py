"""Value types and configuration for the G-code encoder.

This package contains the Position model and the encoder configuration.
"""

from gcode_encoder.models.config import (
    DEFAULT_EXTRUSION_HEIGHT,
    DEFAULT_EXTRUSION_WIDTH,
    EncoderConfig,
    require_positive,
)
from gcode_encoder.models.position import Position

__all__ = [
    "Position",
    "EncoderConfig",
    "DEFAULT_EXTRUSION_WIDTH",
    "DEFAULT_EXTRUSION_HEIGHT",
    "require_positive",
]
