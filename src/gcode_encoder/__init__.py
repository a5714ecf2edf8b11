"""G-code encoder for extrusion toolpaths with ribbon preview geometry."""

from .encoder import GCodeEncoder
from .flavors import Flavor
from .models import EncoderConfig, Position

__all__ = ["GCodeEncoder", "Position", "EncoderConfig", "Flavor"]
