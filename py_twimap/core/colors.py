"""Color helpers for landmass fills, borders and labels."""

import math
from typing import Tuple

DARK_TEXT = "#1a1a2e"
LIGHT_TEXT = "#ffffff"


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    """Parse ``#rrggbb``; anything else raises ValueError."""
    digits = color[1:] if color.startswith("#") else ""
    if len(digits) != 6:
        raise ValueError(f"Expected a #rrggbb color, got {color!r}")
    value = int(digits, 16)
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f"#{r:02x}{g:02x}{b:02x}"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def darken(color: str, amount: float) -> str:
    """
    Scale each channel toward 0 by ``amount`` (0.4 keeps 60% of each channel).

    Channels are rounded half-up and clamped to the 0-255 range.
    """
    factor = 1.0 - amount
    channels = [
        min(255, max(0, _round_half_up(channel * factor)))
        for channel in hex_to_rgb(color)
    ]
    return rgb_to_hex(*channels)


def luminance(color: str) -> float:
    """Perceptual luma (Rec. 601 weights) of a color, in ``[0, 1]``."""
    r, g, b = (channel / 255 for channel in hex_to_rgb(color))
    return 0.299 * r + 0.587 * g + 0.114 * b


def readable_text_color(fill: str) -> str:
    """Dark text on light fills, white text on dark fills."""
    return DARK_TEXT if luminance(fill) > 0.5 else LIGHT_TEXT
