"""Extrusion constants and per-move extrusion accounting."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class ExtrusionRates:
    """Extrusion required per millimeter of tool travel.

    Attributes:
        per_mm_movement: Extrusion per mm of planar (XY) travel
        per_mm_z_movement: Extrusion per mm of Z travel
    """

    per_mm_movement: float
    per_mm_z_movement: float


def filament_cross_section(diameter: float) -> float:
    """Cross-sectional area of the filament in mm²."""
    radius = diameter / 2.0
    return math.pi * radius * radius


def calculate_extrusion_rates(
    width: float, height: float, filament_diameter: float, volumetric: bool
) -> ExtrusionRates:
    """Derive extrusion-per-millimeter constants for a bead size.

    Planar travel deposits a bead of ``width * height`` cross-section. Pure Z
    travel deposits a round blob, accounted as a disc of diameter ``width``.

    In volumetric mode the rates are volumes (mm³ per mm). Otherwise they are
    divided by the filament cross-section to give filament length per mm.

    Args:
        width: Bead width in millimeters
        height: Bead (layer) height in millimeters
        filament_diameter: Filament diameter in millimeters
        volumetric: Whether extrusion is tracked in mm³

    Returns:
        ExtrusionRates for planar and Z travel

    Examples:
        >>> calculate_extrusion_rates(0.4, 0.1, 2.85, volumetric=True).per_mm_movement
        0.04000000000000001
    """
    per_mm_movement = width * height
    per_mm_z_movement = math.pi * (width / 2) * (width / 2)
    if not volumetric:
        area = filament_cross_section(filament_diameter)
        per_mm_movement /= area
        per_mm_z_movement /= area
    return ExtrusionRates(per_mm_movement=per_mm_movement, per_mm_z_movement=per_mm_z_movement)


def calculate_extrusion(dx: float, dy: float, dz: float, rates: ExtrusionRates) -> float:
    """Extrusion for a single move.

    Z travel is signed: moving down while extruding subtracts material.

    Args:
        dx: X travel in millimeters
        dy: Y travel in millimeters
        dz: Z travel in millimeters
        rates: Extrusion rates to apply

    Returns:
        Extrusion amount for the move, in the units of ``rates``
    """
    distance_xy = math.sqrt(dx * dx + dy * dy)
    return distance_xy * rates.per_mm_movement + dz * rates.per_mm_z_movement
