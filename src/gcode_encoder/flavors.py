"""Machine flavor presets: header blocks and extrusion mode per firmware."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union


class Flavor(Enum):
    """Supported G-code flavors."""

    UM2 = "UM2"  # Ultimaker 2, UltiGCode: volumetric extrusion
    UM3 = "UM3"  # Ultimaker 3, Griffin header
    REPRAP = "RepRap"  # Generic RepRap firmware


@dataclass(frozen=True)
class FlavorProfile:
    """Static data emitted and applied when an encoder starts.

    Attributes:
        flavor: The flavor this profile describes
        header: Literal lines that open the command stream
        volumetric: Whether E values are volumes (mm³) rather than filament length
    """

    flavor: Flavor
    header: Tuple[str, ...]
    volumetric: bool


_UM2_HEADER = (
    ";FLAVOR:UltiGCode",
    ";TIME:1",
    ";MATERIAL:1",
)

_UM3_HEADER = (
    ";START_OF_HEADER",
    ";HEADER_VERSION:0.1",
    ";FLAVOR:Griffin",
    ";GENERATOR.NAME:GCodeGenJS",
    ";GENERATOR.VERSION:?",
    ";GENERATOR.BUILD_DATE:2016-11-26",
    ";TARGET_MACHINE.NAME:Ultimaker Jedi",
    ";EXTRUDER_TRAIN.0.INITIAL_TEMPERATURE:200",
    ";EXTRUDER_TRAIN.0.MATERIAL.VOLUME_USED:1",
    ";EXTRUDER_TRAIN.0.NOZZLE.DIAMETER:0.4",
    ";BUILD_PLATE.INITIAL_TEMPERATURE:0",
    ";PRINT.TIME:1",
    ";PRINT.SIZE.MIN.X:0",
    ";PRINT.SIZE.MIN.Y:0",
    ";PRINT.SIZE.MIN.Z:0",
    ";PRINT.SIZE.MAX.X:215",
    ";PRINT.SIZE.MAX.Y:215",
    ";PRINT.SIZE.MAX.Z:200",
    ";END_OF_HEADER",
    "G92 E0",
)

_REPRAP_HEADER = (
    ";RepRap target",
    "G28",
    "G92 E0",
)


def resolve_flavor(flavor: Union[Flavor, str]) -> Flavor:
    """
    Map a flavor or flavor name onto a Flavor.

    Unknown names fall back to the generic RepRap flavor rather than raising.

    Args:
        flavor: A Flavor member or its string value ("UM2", "UM3", "RepRap")

    Returns:
        The matching Flavor, or Flavor.REPRAP if nothing matches

    Examples:
        >>> resolve_flavor("UM3")
        <Flavor.UM3: 'UM3'>
        >>> resolve_flavor("Marlin")
        <Flavor.REPRAP: 'RepRap'>
    """
    if isinstance(flavor, Flavor):
        return flavor
    try:
        return Flavor(flavor)
    except ValueError:
        return Flavor.REPRAP


def create_flavor_profile(flavor: Union[Flavor, str]) -> FlavorProfile:
    """
    Create the FlavorProfile for a flavor.

    - UM2: short UltiGCode header, E tracked in mm³
    - UM3: full Griffin header, E tracked as filament length
    - anything else: RepRap header with homing, E tracked as filament length

    Args:
        flavor: Flavor to use

    Returns:
        FlavorProfile with the verbatim header and extrusion mode
    """
    flavor = resolve_flavor(flavor)
    if flavor == Flavor.UM2:
        return FlavorProfile(flavor=flavor, header=_UM2_HEADER, volumetric=True)
    elif flavor == Flavor.UM3:
        return FlavorProfile(flavor=flavor, header=_UM3_HEADER, volumetric=False)
    else:
        return FlavorProfile(flavor=Flavor.REPRAP, header=_REPRAP_HEADER, volumetric=False)
