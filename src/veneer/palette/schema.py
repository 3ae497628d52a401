"""Palette schema definitions.

This module defines the Pydantic models for the raw, possibly
self-referential palette document and for the fully resolved palette that
is handed to templates. Leaf values of the raw document are classified into
``HexLiteral`` or ``PathReference`` by the ``#``-prefix rule; syntax checks
of those values are left to the validator so errors can name the slot.
"""

from types import MappingProxyType
from typing import Annotated, Any, Dict, Iterator, List, Optional, Tuple, Union

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer

TONES: Tuple[str, ...] = ("light", "dark")
ANSI_LEVELS: Tuple[str, ...] = ("normal", "bright")
ANSI_SLOTS: Tuple[str, ...] = (
    "black", "red", "green", "yellow", "blue", "magenta", "cyan", "white",
)


class HexLiteral(BaseModel):
    """A literal color value, as written in the document."""
    model_config = ConfigDict(frozen=True)

    hex: str

    @property
    def raw(self) -> str:
        return self.hex


class PathReference(BaseModel):
    """A dotted reference to another slot of the same palette."""
    model_config = ConfigDict(frozen=True)

    path: str

    @property
    def raw(self) -> str:
        return self.path


def classify_color_ref(value: Any) -> Any:
    """Turn a leaf string into a HexLiteral or PathReference."""
    if isinstance(value, (HexLiteral, PathReference)):
        return value
    if not isinstance(value, str):
        raise ValueError(f"color value must be a string, got {type(value).__name__}")
    if value.startswith("#"):
        return HexLiteral(hex=value)
    return PathReference(path=value)


ColorRef = Annotated[Union[HexLiteral, PathReference], BeforeValidator(classify_color_ref)]


class Meta(BaseModel):
    """Palette metadata, passed through to templates untouched."""
    model_config = ConfigDict(frozen=True, extra="allow")

    name: str = Field(..., description="Palette name")
    version: Optional[str] = None
    slug: Optional[str] = None


class AnsiRow(BaseModel):
    """The eight terminal color slots of one intensity level."""
    black: ColorRef
    red: ColorRef
    green: ColorRef
    yellow: ColorRef
    blue: ColorRef
    magenta: ColorRef
    cyan: ColorRef
    white: ColorRef


class AnsiScheme(BaseModel):
    normal: AnsiRow
    bright: AnsiRow


class Ansi(BaseModel):
    light: AnsiScheme
    dark: AnsiScheme


class Colors(BaseModel):
    """UI colors per tone; keys are user-defined."""
    light: Dict[str, ColorRef]
    dark: Dict[str, ColorRef]


class Palette(BaseModel):
    """Raw palette document, before references are resolved."""

    meta: Meta
    colors: Colors
    accents: Dict[str, ColorRef]
    ansi: Ansi


# Read-only view of a resolved key -> hex map; dumps as a plain dict.
ResolvedColorMap = Annotated[
    Dict[str, str],
    AfterValidator(MappingProxyType),
    PlainSerializer(dict),
]


class ResolvedAnsiRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    black: str
    red: str
    green: str
    yellow: str
    blue: str
    magenta: str
    cyan: str
    white: str

    def items(self) -> List[Tuple[str, str]]:
        """Slot name and hex value pairs in conventional ANSI order."""
        return [(slot, getattr(self, slot)) for slot in ANSI_SLOTS]


class ResolvedAnsiScheme(BaseModel):
    model_config = ConfigDict(frozen=True)

    normal: ResolvedAnsiRow
    bright: ResolvedAnsiRow


class ResolvedAnsi(BaseModel):
    model_config = ConfigDict(frozen=True)

    light: ResolvedAnsiScheme
    dark: ResolvedAnsiScheme


class ResolvedColors(BaseModel):
    model_config = ConfigDict(frozen=True)

    light: ResolvedColorMap
    dark: ResolvedColorMap


class ResolvedPalette(BaseModel):
    """Palette with every value replaced by a canonical ``#RRGGBB`` literal."""
    model_config = ConfigDict(frozen=True)

    meta: Meta
    colors: ResolvedColors
    accents: ResolvedColorMap
    ansi: ResolvedAnsi

    def ansi_rows(self) -> Iterator[Tuple[str, str, ResolvedAnsiRow]]:
        """Yield (tone, level, row) for the four ANSI rows in fixed order."""
        for tone in TONES:
            scheme = getattr(self.ansi, tone)
            for level in ANSI_LEVELS:
                yield tone, level, getattr(scheme, level)

    def to_document(self) -> Dict[str, Any]:
        """Plain nested-dict form, shaped like the raw palette document."""
        return self.model_dump(mode="json", exclude_none=True)
