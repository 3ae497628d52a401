"""Human-readable palette summary with true-color swatches."""

from pathlib import Path
from typing import List, Optional, Tuple, Union

from rich import box
from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from .palette import ANSI_SLOTS, ResolvedPalette
from .palette.color import contrast_text_color

MIN_LABEL_WIDTH = 8
SWATCH_WIDTH = 6

Section = Tuple[str, List[Tuple[str, str]]]


def max_label_width(palette: ResolvedPalette) -> int:
    """Width of the key column, shared by every section."""
    keys = (
        list(palette.colors.light)
        + list(palette.colors.dark)
        + list(palette.accents)
        + list(ANSI_SLOTS)
    )
    return max([MIN_LABEL_WIDTH] + [len(key) for key in keys])


def swatch(hex_color: str) -> Text:
    """A block filled with ``hex_color`` and a contrasting foreground."""
    style = Style(color=contrast_text_color(hex_color), bgcolor=hex_color)
    return Text(" " * SWATCH_WIDTH, style=style)


def palette_sections(palette: ResolvedPalette) -> List[Section]:
    """Summary sections in display order."""
    sections: List[Section] = [
        ("Colors (Light)", list(palette.colors.light.items())),
        ("Colors (Dark)", list(palette.colors.dark.items())),
        ("Accents", list(palette.accents.items())),
    ]
    for tone, level, row in palette.ansi_rows():
        sections.append((f"ANSI ({tone.title()} / {level.title()})", row.items()))
    return sections


def section_table(title: str, items: List[Tuple[str, str]], label_width: int) -> Table:
    table = Table(
        title=title,
        title_justify="left",
        box=box.SIMPLE_HEAD,
        show_edge=False,
        pad_edge=False,
    )
    table.add_column("key", min_width=label_width, max_width=label_width, no_wrap=True)
    table.add_column("swatch", width=SWATCH_WIDTH, no_wrap=True)
    table.add_column("hex", no_wrap=True)

    for label, hex_color in items:
        table.add_row(label, swatch(hex_color), hex_color)
    return table


def print_palette(palette: ResolvedPalette, palette_path: Union[str, Path],
                  console: Optional[Console] = None) -> None:
    """Print metadata and one table per non-empty section.

    Swatches are written as 24-bit color even when stdout is not a terminal,
    so piping into a pager keeps them (``NO_COLOR`` still disables them).
    """
    console = console or Console(color_system="truecolor")
    meta = palette.meta

    console.print(f"Palette: {meta.name} ({palette_path})", markup=False, highlight=False)
    if meta.version is not None:
        console.print(f"Version: {meta.version}", markup=False, highlight=False)
    console.print(f"Slug: {meta.slug or '<none>'}", markup=False, highlight=False)
    console.print()

    label_width = max_label_width(palette)
    for title, items in palette_sections(palette):
        if not items:
            continue
        console.print(section_table(title, items, label_width))
        console.print()
