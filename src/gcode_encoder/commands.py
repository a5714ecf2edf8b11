"""G-code number formatting and stateless command formatters.

Motion parameters use fixed precision (3 decimals for coordinates, 5 for
extrusion) with halfway values rounded away from zero. Everything else (feed
rate, fan value, dwell time) uses the shortest round-trip digits, written
without a decimal point when the value is integral, e.g. ``F9000`` rather than
``F9000.0``, and in exponent form only below 1e-6 or from 1e21 upward.
"""

import math
from decimal import ROUND_HALF_UP, Decimal

# Feed rates are given in mm/s but G-code F values are mm/min
SECONDS_PER_MINUTE = 60.0

COORDINATE_DECIMALS = 3
EXTRUSION_DECIMALS = 5

# Fan PWM range used by M106
FAN_MAX_VALUE = 255

MILLISECONDS_PER_SECOND = 1000

# Decimal point positions outside (-6, 21] switch to exponent notation
_MIN_PLAIN_POINT = -6
_MAX_PLAIN_POINT = 21


def format_number(value: float) -> str:
    """Format a number using its shortest round-trip digits.

    Examples:
        >>> format_number(9000.0)
        '9000'
        >>> format_number(127.5)
        '127.5'
        >>> format_number(0.00005)
        '0.00005'
        >>> format_number(1e-7)
        '1e-7'
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    point = len(digits) + exponent
    prefix = "-" if sign else ""

    if len(digits) <= point <= _MAX_PLAIN_POINT:
        return prefix + digits + "0" * (point - len(digits))
    if 0 < point <= _MAX_PLAIN_POINT:
        return prefix + digits[:point] + "." + digits[point:]
    if _MIN_PLAIN_POINT < point <= 0:
        return prefix + "0." + "0" * -point + digits

    power = point - 1
    mantissa = digits if len(digits) == 1 else digits[0] + "." + digits[1:]
    return f"{prefix}{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


def _fixed(value: float, decimals: int) -> str:
    # Adding 0.0 turns -0.0 into 0.0 so an origin coordinate never prints as "-0.000"
    value = value + 0.0
    if not math.isfinite(value) or abs(value) >= 10**_MAX_PLAIN_POINT:
        return format_number(value)
    rounded = Decimal(value).quantize(Decimal(10) ** -decimals, rounding=ROUND_HALF_UP)
    return f"{rounded:f}"


def format_coordinate(value: float) -> str:
    """Format an X/Y/Z coordinate with three decimals."""
    return _fixed(value, COORDINATE_DECIMALS)


def format_extrusion(value: float) -> str:
    """Format a cumulative E value with five decimals."""
    return _fixed(value, EXTRUSION_DECIMALS)


def format_feed_rate(speed: float) -> str:
    """Convert a speed in mm/s to the F parameter value in mm/min."""
    return format_number(speed * SECONDS_PER_MINUTE)


def fan_command(percent: float) -> str:
    """M106 line for a fan speed given in percent (0-100)."""
    return "M106 S" + format_number(percent / 100 * FAN_MAX_VALUE)


def hotend_temperature_command(temperature: float) -> str:
    """M109 (set and wait) line for a hotend temperature in °C."""
    return "M109 S" + _fixed(temperature, 0)


def dwell_command(seconds: float) -> str:
    """G4 dwell line for a pause given in seconds."""
    return "G4 P" + format_number(seconds * MILLISECONDS_PER_SECOND)


def comment_line(text: str) -> str:
    return "; " + text
