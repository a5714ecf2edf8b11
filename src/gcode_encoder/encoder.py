"""Stateful G-code encoder.

This module provides the GCodeEncoder class, which turns a stream of move and
command requests into G-code lines plus preview geometry:
- Move resolution (absolute/relative axes, default speeds)
- Minimal-diff command emission (only changed parameters are written)
- Extrusion accounting in filament length or volume
- Named saved positions

Example:
    >>> from gcode_encoder import GCodeEncoder, Position
    >>>
    >>> encoder = GCodeEncoder()
    >>> encoder.start("RepRap")
    >>> encoder.move(Position(x=10, y=10, z=0, absolute=True))
    >>> encoder.move(Position(x=20, y=10, z=0, absolute=True), extrude=True)
    >>> encoder.write_to_file("line.gcode")
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Union

from gcode_encoder.commands import (
    comment_line,
    dwell_command,
    fan_command,
    format_coordinate,
    format_extrusion,
    format_feed_rate,
    hotend_temperature_command,
)
from gcode_encoder.extrusion import (
    ExtrusionRates,
    calculate_extrusion,
    calculate_extrusion_rates,
)
from gcode_encoder.flavors import Flavor, create_flavor_profile
from gcode_encoder.geometry import extrusion_ribbon, travel_segment
from gcode_encoder.models import (
    DEFAULT_EXTRUSION_HEIGHT,
    DEFAULT_EXTRUSION_WIDTH,
    EncoderConfig,
    Position,
    require_positive,
)

logger = logging.getLogger(__name__)

# last_speed before any feed rate has been emitted; below any valid speed
NO_SPEED = -1.0

TRAVEL_COMMAND = "G0"
EXTRUDE_COMMAND = "G1"


@dataclass
class MachineState:
    """Tool position and last emitted feed rate as seen by the machine."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    e: float = 0.0
    last_speed: float = NO_SPEED


class GCodeEncoder:
    """Encode toolpath requests into G-code.

    One encoder holds the state of one toolpath build. It is not safe to share
    between threads without external locking.

    Args:
        config: Initial speeds, filament and bead settings
            (default: EncoderConfig())

    Example:
        >>> encoder = GCodeEncoder()
        >>> encoder.start(Flavor.UM3)
        >>> encoder.move(Position(z=0.2))
        >>> encoder.get_output()[-1]
        'G0 F9000 Z0.200'
    """

    def __init__(self, config: Optional[EncoderConfig] = None) -> None:
        config = config or EncoderConfig()

        self._state = MachineState()
        self._filament_diameter = config.filament_diameter
        self._volumetric = config.volumetric
        self._travel_speed = config.travel_speed
        self._print_speed = config.print_speed

        self._output: List[str] = []
        self._extrusion_lines: List[float] = []
        self._travel_lines: List[float] = []
        self._saved_positions: Dict[str, Position] = {}

        self._width = config.extrusion_width
        self._height = config.extrusion_height
        self._rates: ExtrusionRates
        self._update_extrusion_rates()

    def start(self, flavor: Union[Flavor, str] = Flavor.UM2) -> None:
        """Begin a new command stream for a machine flavor.

        Replaces the output with the flavor's header, applies the flavor's
        extrusion mode and resets the bead size to the default width/height.
        Unknown flavors fall back to RepRap.

        Args:
            flavor: Flavor or flavor name (default: UM2)
        """
        profile = create_flavor_profile(flavor)
        logger.debug("starting %s output", profile.flavor.value)

        self._output = list(profile.header)
        self._volumetric = profile.volumetric
        self.set_extrusion_width_height(DEFAULT_EXTRUSION_WIDTH, DEFAULT_EXTRUSION_HEIGHT)

    # -- configuration -----------------------------------------------------

    def set_extrusion_width_height(self, width: float, height: float) -> None:
        """Set the bead size used for extrusion accounting.

        Args:
            width: Bead width in millimeters
            height: Bead height in millimeters

        Raises:
            ValueError: If width or height is not positive
        """
        require_positive("extrusion_width", width)
        require_positive("extrusion_height", height)
        self._width = width
        self._height = height
        self._update_extrusion_rates()

    def set_filament_diameter(self, diameter: float) -> None:
        """Set the filament diameter used to convert volume to filament length."""
        require_positive("filament_diameter", diameter)
        self._filament_diameter = diameter
        self._update_extrusion_rates()

    def set_volumetric_extrusion(self, volumetric: bool) -> None:
        """Switch between volumetric (mm³) and filament-length E values."""
        self._volumetric = volumetric
        self._update_extrusion_rates()

    def set_travel_speed(self, speed: float) -> None:
        """Set the default speed for travel moves in mm/s."""
        self._travel_speed = speed

    def set_print_speed(self, speed: float) -> None:
        """Set the default speed for extruding moves in mm/s."""
        self._print_speed = speed

    def _update_extrusion_rates(self) -> None:
        self._rates = calculate_extrusion_rates(
            self._width, self._height, self._filament_diameter, self._volumetric
        )

    # -- motion --------------------------------------------------------------

    def move(self, position: Position, extrude: bool = False) -> None:
        """Move the tool, optionally extruding along the way.

        Axes present in ``position`` are taken as absolute coordinates if
        ``position.absolute`` is set, otherwise as offsets from the current
        position. Absent axes are left unchanged. Without an explicit speed the
        print speed is used for extruding moves and the travel speed otherwise.

        No bounds checking is done; any coordinate is accepted.

        Args:
            position: Target position (absolute or relative)
            extrude: Whether to extrude while moving (default: False)
        """
        state = self._state
        new_x, new_y, new_z = state.x, state.y, state.z
        if position.absolute:
            if position.x is not None:
                new_x = position.x
            if position.y is not None:
                new_y = position.y
            if position.z is not None:
                new_z = position.z
        else:
            if position.x is not None:
                new_x = state.x + position.x
            if position.y is not None:
                new_y = state.y + position.y
            if position.z is not None:
                new_z = state.z + position.z

        if position.speed:
            speed = position.speed
        else:
            speed = self._print_speed if extrude else self._travel_speed

        self._emit_move(new_x, new_y, new_z, speed, extrude)

    def _emit_move(self, x: float, y: float, z: float, speed: float, extrude: bool) -> None:
        """Record geometry, account extrusion and append the minimal G-code line."""
        state = self._state
        start = (state.x, state.y, state.z)
        end = (x, y, z)

        if extrude:
            self._extrusion_lines.extend(extrusion_ribbon(start, end))
            state.e += calculate_extrusion(x - state.x, y - state.y, z - state.z, self._rates)
            command = EXTRUDE_COMMAND
        else:
            self._travel_lines.extend(travel_segment(start, end))
            command = TRAVEL_COMMAND

        # Parameter order is fixed: F, X, Y, Z, E
        if speed != state.last_speed:
            command += " F" + format_feed_rate(speed)
            state.last_speed = speed
        if x != state.x:
            command += " X" + format_coordinate(x)
            state.x = x
        if y != state.y:
            command += " Y" + format_coordinate(y)
            state.y = y
        if z != state.z:
            command += " Z" + format_coordinate(z)
            state.z = z
        if extrude:
            command += " E" + format_extrusion(state.e)

        # A bare G0/G1 means nothing changed; it is never written
        if len(command) > len(TRAVEL_COMMAND):
            self._output.append(command)

    # -- saved positions -----------------------------------------------------

    def save_position(self, name: str) -> None:
        """Remember the current position under ``name``.

        The snapshot is absolute and carries the current print speed. Saving
        again under the same name overwrites the previous snapshot.
        """
        state = self._state
        self._saved_positions[name] = Position(
            x=state.x, y=state.y, z=state.z, absolute=True, speed=self._print_speed
        )

    def move_to_saved_position(self, name: str, extrude: bool = False) -> None:
        """Move to a position stored with save_position().

        An unknown name is logged as a warning and no move is made.

        Args:
            name: Name the position was saved under
            extrude: Whether to extrude while moving (default: False)
        """
        position = self._saved_positions.get(name)
        if position is None:
            logger.warning("saved position `%s` not found", name)
            return
        self.move(position, extrude)

    @property
    def saved_positions(self) -> List[str]:
        """Names of all saved positions, in save order."""
        return list(self._saved_positions)

    # -- ancillary commands --------------------------------------------------

    def fan(self, percent: float) -> None:
        """Set the part cooling fan speed in percent."""
        self._output.append(fan_command(percent))

    def set_hotend_temperature(self, temperature: float) -> None:
        """Set the hotend temperature in °C and wait for it."""
        self._output.append(hotend_temperature_command(temperature))

    def wait(self, seconds: float) -> None:
        """Dwell for the given number of seconds."""
        self._output.append(dwell_command(seconds))

    def comment(self, text: str) -> None:
        self._output.append(comment_line(text))

    # -- state accessors -----------------------------------------------------

    @property
    def position(self) -> Position:
        """Current tool position as an absolute Position."""
        state = self._state
        return Position(x=state.x, y=state.y, z=state.z, absolute=True)

    @property
    def extrusion_amount(self) -> float:
        """Cumulative E value emitted so far."""
        return self._state.e

    @property
    def extrusion_per_mm_movement(self) -> float:
        return self._rates.per_mm_movement

    @property
    def extrusion_per_mm_z_movement(self) -> float:
        return self._rates.per_mm_z_movement

    @property
    def travel_speed(self) -> float:
        return self._travel_speed

    @property
    def print_speed(self) -> float:
        return self._print_speed

    @property
    def volumetric(self) -> bool:
        return self._volumetric

    @property
    def extrusion_lines(self) -> List[float]:
        """Ribbon vertices of all extruding moves, as flat (x, y, z, side) data."""
        return list(self._extrusion_lines)

    @property
    def travel_lines(self) -> List[float]:
        """Segments of all travel moves, as flat (x0, y0, z0, x1, y1, z1) data."""
        return list(self._travel_lines)

    # -- output --------------------------------------------------------------

    def get_output(self) -> List[str]:
        """Return a copy of the G-code lines produced so far."""
        return list(self._output)

    def to_string(self) -> str:
        """Return the G-code as a single newline-separated string."""
        return "\n".join(self._output)

    def __str__(self) -> str:
        return self.to_string()

    def write_to_file(self, path: Union[str, Path]) -> None:
        """Write the G-code to ``path``, replacing any existing file."""
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.to_string())

    def __repr__(self) -> str:
        """Return string representation of the encoder."""
        state = self._state
        return (
            f"GCodeEncoder(x={state.x}, y={state.y}, z={state.z}, e={state.e}, "
            f"lines={len(self._output)})"
        )
