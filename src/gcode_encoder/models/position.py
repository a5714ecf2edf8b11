"""Position value type for toolpath moves."""

from dataclasses import dataclass
from typing import Optional


def _sum_axis(a: Optional[float], b: Optional[float]) -> Optional[float]:
    """Add two optional axis values, keeping the axis absent if both are."""
    if a is None and b is None:
        return None
    return (a or 0.0) + (b or 0.0)


@dataclass(frozen=True)
class Position:
    """A requested or captured tool position.

    Any axis may be left as None, meaning the axis is not part of the request.
    This is different from 0: a relative move with x=0 is a no-op on X, while a
    move with x=None leaves X untouched in both absolute and relative mode.

    Attributes:
        x: X coordinate in millimeters, or None if absent
        y: Y coordinate in millimeters, or None if absent
        z: Z coordinate in millimeters, or None if absent
        absolute: Whether the coordinates are absolute (default: relative)
        speed: Feed rate in millimeters per second, or None to use the
            encoder's print/travel speed
    """

    x: Optional[float] = None
    y: Optional[float] = None
    z: Optional[float] = None
    absolute: bool = False
    speed: Optional[float] = None

    def add(self, other: "Position") -> "Position":
        """Merge another position into this one.

        Axes are summed component-wise, with an absent axis acting as 0 unless
        both sides are absent. The result is absolute if either side is.

        Note:
            Speed uses a truthiness check, so a speed of exactly 0 on this
            position is treated as absent and the other position's speed wins.

        Args:
            other: The position to merge in

        Returns:
            A new merged Position. Neither input is modified.

        Examples:
            >>> Position(x=1.0, y=2.0).add(Position(x=3.0))
            Position(x=4.0, y=2.0, z=None, absolute=False, speed=None)
        """
        return Position(
            x=_sum_axis(self.x, other.x),
            y=_sum_axis(self.y, other.y),
            z=_sum_axis(self.z, other.z),
            absolute=self.absolute or other.absolute,
            speed=self.speed or other.speed,
        )
