"""Veneer palette package.

This package holds the palette core: the color model, the raw and resolved
palette schemas, the reference graph, structural validation, reference
resolution and palette file loading.
"""

from .color import (
    composite_alpha,
    contrast_text_color,
    hex_to_rgb,
    is_hex_color,
    normalize_hex,
    perceived_luminance,
    rgb_to_hsl,
)
from .errors import (
    CycleDetected,
    HelperArgumentError,
    InvalidHexColor,
    MalformedPath,
    MissingPath,
    PaletteError,
    PaletteLoadError,
    RenderError,
)
from .graph import ReferenceGraph
from .loader import load_palette, parse_palette, read_palette_document
from .resolver import PaletteResolver, resolve_palette
from .schema import (
    ANSI_LEVELS,
    ANSI_SLOTS,
    TONES,
    HexLiteral,
    Meta,
    Palette,
    PathReference,
    ResolvedAnsiRow,
    ResolvedPalette,
)
from .validator import check_color_ref, validate_palette

__all__ = [
    # Color model
    "composite_alpha",
    "contrast_text_color",
    "hex_to_rgb",
    "is_hex_color",
    "normalize_hex",
    "perceived_luminance",
    "rgb_to_hsl",

    # Errors
    "CycleDetected",
    "HelperArgumentError",
    "InvalidHexColor",
    "MalformedPath",
    "MissingPath",
    "PaletteError",
    "PaletteLoadError",
    "RenderError",

    # Schema
    "ANSI_LEVELS",
    "ANSI_SLOTS",
    "TONES",
    "HexLiteral",
    "Meta",
    "Palette",
    "PathReference",
    "ResolvedAnsiRow",
    "ResolvedPalette",

    # Graph, validation, resolution, loading
    "ReferenceGraph",
    "check_color_ref",
    "validate_palette",
    "PaletteResolver",
    "resolve_palette",
    "load_palette",
    "parse_palette",
    "read_palette_document",
]
