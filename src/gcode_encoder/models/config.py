"""Encoder configuration model."""

from dataclasses import dataclass

# Default bead cross-section applied before any explicit width/height call
DEFAULT_EXTRUSION_WIDTH = 0.4
DEFAULT_EXTRUSION_HEIGHT = 0.1


def require_positive(name: str, value: float) -> None:
    """Raise ValueError unless value is strictly positive."""
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


@dataclass(frozen=True)
class EncoderConfig:
    """Initial machine and material settings for a GCodeEncoder.

    Attributes:
        filament_diameter: Filament diameter in millimeters
        travel_speed: Speed for non-extruding moves in millimeters per second
        print_speed: Speed for extruding moves in millimeters per second
        volumetric: Track extrusion as volume (mm³) instead of filament length
        extrusion_width: Initial bead width in millimeters
        extrusion_height: Initial bead height in millimeters
    """

    filament_diameter: float = 2.85
    travel_speed: float = 150.0
    print_speed: float = 50.0
    volumetric: bool = False
    extrusion_width: float = DEFAULT_EXTRUSION_WIDTH
    extrusion_height: float = DEFAULT_EXTRUSION_HEIGHT

    def __post_init__(self) -> None:
        """Validate the dimensions used to derive extrusion constants."""
        require_positive("filament_diameter", self.filament_diameter)
        require_positive("extrusion_width", self.extrusion_width)
        require_positive("extrusion_height", self.extrusion_height)
