"""Color literal parsing and color-space conversion utilities.

All conversions operate on canonical ``#RRGGBB`` literals. HSL components are
kept in the [0, 1] domain throughout (hue is not expressed in degrees, nor
saturation/lightness in percent) so the values stay the raw math results.
"""

import re
import colorsys
from typing import Optional, Tuple

from .errors import InvalidHexColor

HEX_PATTERN = re.compile(r"#[0-9A-Fa-f]{6}")


def is_hex_color(value: object) -> bool:
    """Return True if ``value`` is a string of the form ``#RRGGBB``."""
    return isinstance(value, str) and HEX_PATTERN.fullmatch(value) is not None


def normalize_hex(raw: str, label: Optional[str] = None) -> str:
    """Validate a hex literal and return it in canonical uppercase form.

    Args:
        raw: Candidate literal, case-insensitive (e.g. ``'#aabbcc'``)
        label: Optional slot label used in the error message

    Returns:
        Uppercase literal with leading ``#`` (e.g. ``'#AABBCC'``)

    Raises:
        InvalidHexColor: If ``raw`` is not exactly ``#`` plus six hex digits
    """
    if not is_hex_color(raw):
        raise InvalidHexColor(raw, label)
    return raw.upper()


def hex_to_rgb(hex_color: str) -> Optional[Tuple[int, int, int]]:
    """Convert a ``#RRGGBB`` literal to an 8-bit RGB triple.

    Returns None instead of raising on malformed input so callers can build
    their own contextual error.

    Args:
        hex_color: Hex color string with leading ``#``

    Returns:
        RGB tuple (r, g, b) with values 0-255, or None
    """
    if not is_hex_color(hex_color):
        return None
    r = int(hex_color[1:3], 16)
    g = int(hex_color[3:5], 16)
    b = int(hex_color[5:7], 16)
    return (r, g, b)


def rgb_to_hsl(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Convert 8-bit RGB values to HSL, every component in [0, 1].

    Achromatic colors (max == min) get hue and saturation 0. Hue is the
    six-way sector formula divided by 6, not a degree value.

    Args:
        r, g, b: RGB values 0-255

    Returns:
        Tuple (h, s, l)
    """
    h, l, s = colorsys.rgb_to_hls(r / 255.0, g / 255.0, b / 255.0)
    return (h, s, l)


def composite_alpha(hex_color: str, alpha: float) -> str:
    """Append an alpha byte to a 6-digit literal.

    Args:
        hex_color: ``#RRGGBB`` literal
        alpha: Opacity in [0.0, 1.0], inclusive

    Returns:
        Uppercase ``#RRGGBBAA`` literal

    Raises:
        ValueError: If alpha lies outside [0.0, 1.0]
        InvalidHexColor: If hex_color is malformed
    """
    if not 0.0 <= alpha <= 1.0:
        raise ValueError(f"alpha must be between 0.0 and 1.0, got {alpha}")
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        raise InvalidHexColor(hex_color)
    r, g, b = rgb
    # Round half up; alpha is non-negative here.
    a = int(alpha * 255.0 + 0.5)
    return f"#{r:02X}{g:02X}{b:02X}{a:02X}"


def perceived_luminance(r: int, g: int, b: int) -> float:
    """Weighted (Rec. 601) brightness of an RGB color, in [0, 1]."""
    return (0.299 * r + 0.587 * g + 0.114 * b) / 255.0


def contrast_text_color(hex_color: str) -> str:
    """Pick a light or dark foreground that stays readable on ``hex_color``.

    Args:
        hex_color: Background ``#RRGGBB`` literal

    Returns:
        ``'#FFFFFF'`` for dark backgrounds, ``'#000000'`` otherwise
    """
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        raise InvalidHexColor(hex_color)
    if perceived_luminance(*rgb) < 0.5:
        return "#FFFFFF"
    return "#000000"
