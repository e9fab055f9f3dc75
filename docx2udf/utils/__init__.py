"""
Utilities for unit conversion, color conversion and logging.
"""

from .units import (
    round_half_up,
    parse_int,
    twips_to_points,
    emu_to_points,
    half_points_to_points,
    format_number,
    format_indent,
)
from .color_utils import hex_to_rgb, hex_to_rgb_int, normalize_hex, BLACK_ARGB
from .rich_logger import setup_logging

__all__ = [
    "round_half_up",
    "parse_int",
    "twips_to_points",
    "emu_to_points",
    "half_points_to_points",
    "format_number",
    "format_indent",
    "hex_to_rgb",
    "hex_to_rgb_int",
    "normalize_hex",
    "BLACK_ARGB",
    "setup_logging",
]
