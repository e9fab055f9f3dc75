"""
Unit conversions for DOCX documents.

WordprocessingML measures indents and grid columns in twips (1/20 pt),
drawing extents in EMU (914400 per inch) and font sizes in half-points.
Rounding is half-up to match the values the consuming editor expects.
"""

import math
from typing import Optional, Union

Number = Union[int, float]

TWIPS_PER_POINT = 20
EMU_PER_INCH = 914400
POINTS_PER_INCH = 72


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity."""
    return int(math.floor(value + 0.5))


def parse_int(value: Optional[str], default: int = 0) -> int:
    """Parse a leading integer from an attribute value, falling back to ``default``."""
    if value is None:
        return default
    text = value.strip()
    digits = ""
    for index, char in enumerate(text):
        if char.isdigit() or (index == 0 and char in "+-"):
            digits += char
        else:
            break
    try:
        return int(digits)
    except ValueError:
        return default


def twips_to_points(twips: Number) -> int:
    """Convert twips to whole points (``720`` -> ``36``)."""
    return round_half_up(twips / TWIPS_PER_POINT)


def emu_to_points(emu: Number) -> int:
    """Convert EMU to whole points (``914400`` -> ``72``)."""
    return round_half_up(emu / EMU_PER_INCH * POINTS_PER_INCH)


def half_points_to_points(half_points: Number) -> Number:
    """Convert a half-point font size to points, keeping whole values integral."""
    points = half_points / 2
    if float(points).is_integer():
        return int(points)
    return points


def format_number(value: Number) -> str:
    """Format a number the way the target format writes sizes (``12``, ``10.5``)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_indent(points: Optional[Number]) -> str:
    """Format an indent in points with a trailing ``.0`` (``36`` -> ``"36.0"``)."""
    if not points:
        return "0.0"
    return f"{float(points):.1f}"
