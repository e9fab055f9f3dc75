"""Color utilities for the UDF target format."""

from typing import Optional, Tuple

BLACK_ARGB = -16777216


def hex_to_rgb(hex_color: Optional[str]) -> Optional[Tuple[int, int, int]]:
    """Convert ``#RRGGBB`` (or ``RRGGBB``) to an RGB tuple."""
    if not hex_color or not isinstance(hex_color, str):
        return None

    hex_color = hex_color.lstrip("#")
    if len(hex_color) == 3:
        hex_color = "".join(c * 2 for c in hex_color)
    if len(hex_color) != 6:
        return None

    try:
        return tuple(int(hex_color[i:i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        return None


def normalize_hex(value: Optional[str]) -> Optional[str]:
    """Return ``#RRGGBB`` for a WordprocessingML color value, ``None`` for ``auto`` or junk."""
    if not value or value.lower() == "auto":
        return None
    rgb = hex_to_rgb(value)
    if rgb is None:
        return None
    return "#%02X%02X%02X" % rgb


def hex_to_rgb_int(hex_color: Optional[str]) -> int:
    """
    Convert a hex color to a Java-style signed 32-bit ARGB integer.

    Alpha is fixed at 0xFF, so ``#FF0000`` gives ``-65536`` and a missing
    color gives opaque black (``-16777216``).
    """
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return BLACK_ARGB

    r, g, b = rgb
    value = (0xFF << 24) | (r << 16) | (g << 8) | b
    if value >= 1 << 31:
        value -= 1 << 32
    return value
