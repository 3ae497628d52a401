"""Reference graph over a raw palette.

Every slot of a palette is addressable by a canonical dotted path:
``colors.<tone>.<key>``, ``accents.<key>`` or ``ansi.<tone>.<level>.<slot>``.
The graph enumerates slots in a fixed order and dispatches a path string
to the sub-structure holding it.
"""

from typing import Dict, Iterator, List, Optional, Tuple, Union

from .errors import MissingPath
from .schema import (
    ANSI_LEVELS,
    ANSI_SLOTS,
    TONES,
    AnsiRow,
    HexLiteral,
    Palette,
    PathReference,
)

ColorRefValue = Union[HexLiteral, PathReference]
Slot = Tuple[str, ColorRefValue]


def colors_path(tone: str, key: str) -> str:
    return f"colors.{tone}.{key}"


def accents_path(key: str) -> str:
    return f"accents.{key}"


def ansi_path(tone: str, level: str, slot: str) -> str:
    return f"ansi.{tone}.{level}.{slot}"


class ReferenceGraph:
    """Path-addressed view of a raw palette."""

    def __init__(self, palette: Palette):
        self.palette = palette

    def sections(self) -> Iterator[Tuple[str, List[Slot]]]:
        """Yield (section prefix, slots) in the fixed enumeration order.

        Order: colors.light, colors.dark, accents, ansi.light.normal,
        ansi.light.bright, ansi.dark.normal, ansi.dark.bright. User-defined
        keys are visited in sorted order.
        """
        for tone in TONES:
            mapping = getattr(self.palette.colors, tone)
            yield f"colors.{tone}", [
                (colors_path(tone, key), mapping[key]) for key in sorted(mapping)
            ]

        accents = self.palette.accents
        yield "accents", [(accents_path(key), accents[key]) for key in sorted(accents)]

        for tone in TONES:
            scheme = getattr(self.palette.ansi, tone)
            for level in ANSI_LEVELS:
                row: AnsiRow = getattr(scheme, level)
                yield f"ansi.{tone}.{level}", [
                    (ansi_path(tone, level, slot), getattr(row, slot)) for slot in ANSI_SLOTS
                ]

    def slots(self) -> Iterator[Slot]:
        """Yield every (canonical path, ColorRef) pair; no slot is skipped."""
        for _, slots in self.sections():
            yield from slots

    def edges(self) -> Dict[str, str]:
        """Map each referencing slot to the path it points at."""
        return {
            path: ref.path
            for path, ref in self.slots()
            if isinstance(ref, PathReference)
        }

    def lookup(self, path: str) -> Optional[ColorRefValue]:
        """Find the ColorRef stored at ``path``, or None if there is none."""
        namespace, _, rest = path.partition(".")

        # User keys may contain dots; everything after the tone is the key.
        if namespace == "colors":
            tone, _, key = rest.partition(".")
            if tone not in TONES or not key:
                return None
            return getattr(self.palette.colors, tone).get(key)

        if namespace == "accents":
            if not rest:
                return None
            return self.palette.accents.get(rest)

        if namespace == "ansi":
            parts = rest.split(".")
            if len(parts) != 3:
                return None
            tone, level, slot = parts
            if tone not in TONES or level not in ANSI_LEVELS or slot not in ANSI_SLOTS:
                return None
            scheme = getattr(self.palette.ansi, tone)
            return getattr(getattr(scheme, level), slot)

        return None

    def get(self, path: str) -> ColorRefValue:
        """Like lookup, but a missing or malformed path is an error.

        Raises:
            MissingPath: If ``path`` does not name an existing slot
        """
        ref = self.lookup(path)
        if ref is None:
            raise MissingPath(path)
        return ref

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.lookup(path) is not None

    def __len__(self) -> int:
        return sum(1 for _ in self.slots())
