"""Palette reference resolution.

This module turns a raw palette, where any slot may point at another slot,
into a ResolvedPalette where every slot holds a canonical ``#RRGGBB``
literal. Resolution is a memoized depth-first walk of the reference graph:
each path is computed at most once per run, and a path that is reached again
while still in progress is reported as a cycle.
"""

import logging
from typing import Dict, List, Optional, Set

from .color import normalize_hex
from .errors import CycleDetected, PaletteError
from .graph import ColorRefValue, ReferenceGraph
from .schema import (
    ANSI_LEVELS,
    ANSI_SLOTS,
    TONES,
    HexLiteral,
    Palette,
    PathReference,
    ResolvedAnsi,
    ResolvedAnsiRow,
    ResolvedAnsiScheme,
    ResolvedColors,
    ResolvedPalette,
)

logger = logging.getLogger(__name__)


class PaletteResolver:
    """Single-use resolver for one palette.

    The memo table and in-progress stack live on the instance and are only
    meaningful for the duration of :meth:`resolve`.
    """

    def __init__(self, palette: Palette):
        self.palette = palette
        self.graph = ReferenceGraph(palette)
        self._memo: Dict[str, str] = {}
        self._stack: List[str] = []
        self._in_progress: Set[str] = set()

    def resolve(self) -> ResolvedPalette:
        """Resolve every slot and assemble the resolved palette.

        Returns:
            ResolvedPalette with all references replaced by literals

        Raises:
            PaletteError: MissingPath, CycleDetected or InvalidHexColor, with
                the originating slot prepended as context
        """
        resolved: Dict[str, str] = {}
        for label, ref in self.graph.slots():
            try:
                resolved[label] = self.resolve_slot(label, ref)
            except PaletteError as e:
                if isinstance(ref, PathReference):
                    raise e.with_context(f"resolving {label} -> {ref.path}")
                raise e.with_context(f"resolving {label}")

        logger.debug(
            f"Resolved palette '{self.palette.meta.name}': "
            f"{len(resolved)} slots, {len(self._memo)} memoized paths"
        )
        return self._assemble(resolved)

    def resolve_slot(self, label: str, ref: ColorRefValue) -> str:
        """Resolve the value held by slot ``label`` without looking the slot up again."""
        if label in self._memo:
            return self._memo[label]
        if isinstance(ref, HexLiteral):
            value = normalize_hex(ref.hex, label=label)
            self._memo[label] = value
            return value
        return self._follow(ref.path, origin=label)

    def resolve_path(self, path: str) -> str:
        """Resolve a canonical path to its literal, following references.

        Raises:
            MissingPath: If a path on the chain names no slot
            CycleDetected: If the chain revisits an in-progress path
            InvalidHexColor: If the chain ends in a malformed literal
        """
        if path in self._memo:
            return self._memo[path]
        return self._follow(path)

    def _follow(self, path: str, origin: Optional[str] = None) -> str:
        base = len(self._stack)
        if origin is not None:
            self._stack.append(origin)
            self._in_progress.add(origin)

        current = path
        try:
            while True:
                if current in self._memo:
                    value = self._memo[current]
                    break
                if current in self._in_progress:
                    raise CycleDetected(self._stack + [current])

                ref = self.graph.get(current)
                self._stack.append(current)
                self._in_progress.add(current)

                if isinstance(ref, HexLiteral):
                    value = normalize_hex(ref.hex, label=current)
                    break
                current = ref.path

            # Everything pushed during this call resolves to the same literal.
            for visited in self._stack[base:]:
                self._memo[visited] = value
            return value
        finally:
            for visited in self._stack[base:]:
                self._in_progress.discard(visited)
            del self._stack[base:]

    def _assemble(self, resolved: Dict[str, str]) -> ResolvedPalette:
        palette = self.palette

        colors = {
            tone: {
                key: resolved[f"colors.{tone}.{key}"]
                for key in sorted(getattr(palette.colors, tone))
            }
            for tone in TONES
        }
        accents = {key: resolved[f"accents.{key}"] for key in sorted(palette.accents)}

        schemes = {}
        for tone in TONES:
            rows = {}
            for level in ANSI_LEVELS:
                rows[level] = ResolvedAnsiRow(**{
                    slot: resolved[f"ansi.{tone}.{level}.{slot}"] for slot in ANSI_SLOTS
                })
            schemes[tone] = ResolvedAnsiScheme(**rows)

        return ResolvedPalette(
            meta=palette.meta,
            colors=ResolvedColors(**colors),
            accents=accents,
            ansi=ResolvedAnsi(**schemes),
        )


def resolve_palette(palette: Palette) -> ResolvedPalette:
    """Resolve ``palette`` with a fresh memo table and stack."""
    return PaletteResolver(palette).resolve()
