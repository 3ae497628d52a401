"""Structural validation of a raw palette.

Runs before resolution and checks each slot in isolation: literals must be
well-formed hex colors and references must look like dotted paths. Whether
a reference actually resolves is left to the resolver.
"""

import logging

from .color import is_hex_color
from .errors import InvalidHexColor, MalformedPath
from .graph import ColorRefValue, ReferenceGraph
from .schema import HexLiteral, Palette

logger = logging.getLogger(__name__)


def check_color_ref(label: str, ref: ColorRefValue) -> None:
    """Validate a single slot value.

    Raises:
        InvalidHexColor: If a literal is not ``#RRGGBB``
        MalformedPath: If a reference has no ``.`` separator
    """
    if isinstance(ref, HexLiteral):
        if not is_hex_color(ref.hex):
            raise InvalidHexColor(ref.hex, label)
    elif "." not in ref.path:
        raise MalformedPath(ref.path, label)


def validate_palette(palette: Palette) -> None:
    """Check every slot of ``palette``; the first bad slot raises."""
    graph = ReferenceGraph(palette)
    count = 0
    for label, ref in graph.slots():
        check_color_ref(label, ref)
        count += 1
    logger.debug(f"Palette '{palette.meta.name}' passed validation ({count} slots)")
