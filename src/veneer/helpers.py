"""Render-time color helpers.

Pure functions registered into the template environment. They operate on
already resolved ``#RRGGBB`` strings and raise HelperArgumentError instead
of clamping or coercing bad input.

``hsla`` reports hue, saturation and lightness in the [0, 1] domain rather
than degrees and percent. This follows the raw HSL math and is intentional.
"""

from numbers import Real
from typing import Any, Callable, Dict, Tuple

from .palette.color import composite_alpha, hex_to_rgb, rgb_to_hsl
from .palette.errors import HelperArgumentError


def _expect_string(helper: str, name: str, value: Any) -> str:
    if value is None:
        raise HelperArgumentError(helper, name, "is required")
    if not isinstance(value, str):
        raise HelperArgumentError(helper, name, "must be a string", value)
    return value


def _expect_alpha(helper: str, value: Any) -> float:
    if value is None:
        raise HelperArgumentError(helper, "alpha", "is required")
    if isinstance(value, bool) or not isinstance(value, Real):
        raise HelperArgumentError(helper, "alpha", "must be a number", value)
    alpha = float(value)
    if not 0.0 <= alpha <= 1.0:
        raise HelperArgumentError(helper, "alpha", "must be between 0.0 and 1.0", value)
    return alpha


def _expect_rgb(helper: str, color: Any) -> Tuple[int, int, int]:
    color = _expect_string(helper, "color", color)
    rgb = hex_to_rgb(color)
    if rgb is None:
        raise HelperArgumentError(helper, "color", "must be a #RRGGBB hex color", color)
    return rgb


def with_alpha(color: Any = None, alpha: Any = None) -> str:
    """Append an alpha byte: ``with_alpha('#112233', 0.5)`` -> ``'#11223380'``."""
    _expect_rgb("with_alpha", color)
    return composite_alpha(color, _expect_alpha("with_alpha", alpha))


def rgba(color: Any = None, alpha: Any = None) -> str:
    """CSS-style ``rgba(R, G, B, A)`` with 0-255 channels."""
    r, g, b = _expect_rgb("rgba", color)
    a = _expect_alpha("rgba", alpha)
    return f"rgba({r}, {g}, {b}, {a:.3f})"


def hsla(color: Any = None, alpha: Any = None) -> str:
    """``hsla(H, S, L, A)`` with every component in [0, 1]."""
    h, s, l = rgb_to_hsl(*_expect_rgb("hsla", color))
    a = _expect_alpha("hsla", alpha)
    return f"hsla({h:.3f}, {s:.3f}, {l:.3f}, {a:.3f})"


def rgba_floats(color: Any = None, alpha: Any = None) -> str:
    """Four space-separated floats in [0, 1], for shader-style configs."""
    r, g, b = _expect_rgb("rgba_floats", color)
    a = _expect_alpha("rgba_floats", alpha)
    return f"{r / 255.0:.6f} {g / 255.0:.6f} {b / 255.0:.6f} {a:.6f}"


def lowercase(value: Any) -> str:
    """Lowercase any string value."""
    if not isinstance(value, str):
        raise HelperArgumentError("lowercase", "value", "must be a string", value)
    return value.lower()


HELPER_FUNCTIONS: Dict[str, Callable[..., str]] = {
    "with_alpha": with_alpha,
    "rgba": rgba,
    "hsla": hsla,
    "rgba_floats": rgba_floats,
}

HELPER_FILTERS: Dict[str, Callable[..., str]] = {
    "lowercase": lowercase,
}
