"""
Module: layout.config

Purpose:
    Configuration for the pagination engine. Defines named page formats,
    the fixed set of font families, per-role text styles, page geometry
    and the immutable render context snapshotted at the start of every
    render pass.

Key Classes:
    - PageFormat: Named page size presets (default A4)
    - FontFamily: Standard PDF font faces (regular/bold variants)
    - TextStyle: Font family and size for one text role
    - PageGeometry: Page size and margins in points
    - RenderContext: Immutable snapshot consumed by the paginator

Key Functions:
    - split_lines(): Split header/footer/content text into lines

Dependencies:
    - reportlab.lib.pagesizes: Standard page dimensions

Used By:
    - layout.capacity: Line-capacity computation
    - layout.paginator: Page-fill loop
    - printer: Engine facade
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from reportlab.lib import pagesizes

from textpager.common.units import mm_to_pt

# Defaults
DEFAULT_MARGIN_MM = 20.0
DEFAULT_BODY_SIZE = 12
DEFAULT_HEADER_SIZE = 20
DEFAULT_FOOTER_SIZE = 10
DEFAULT_MAX_PAGES = 10000


class PageFormat(str, Enum):
    """Named page format presets. Sizes come from reportlab.lib.pagesizes."""

    A0 = "A0"
    A1 = "A1"
    A2 = "A2"
    A3 = "A3"
    A4 = "A4"
    A5 = "A5"
    A6 = "A6"
    LETTER = "LETTER"
    LEGAL = "LEGAL"

    @property
    def size(self) -> Tuple[float, float]:
        """(width, height) in points, portrait orientation."""
        return getattr(pagesizes, self.value)

    @property
    def width(self) -> float:
        return self.size[0]

    @property
    def height(self) -> float:
        return self.size[1]

    @classmethod
    def from_name(cls, name: str) -> "PageFormat":
        """
        Look up a format by case-insensitive name.

        Raises:
            ValueError: If the name is not a known preset
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            known = ", ".join(f.value for f in cls)
            raise ValueError(f"Unknown page format {name!r} (known: {known})") from None


class FontFamily(str, Enum):
    """Standard Type 1 faces available without embedding."""

    HELVETICA = "Helvetica"
    HELVETICA_BOLD = "Helvetica-Bold"
    TIMES = "Times-Roman"
    TIMES_BOLD = "Times-Bold"
    COURIER = "Courier"
    COURIER_BOLD = "Courier-Bold"

    @classmethod
    def from_name(cls, name: str) -> "FontFamily":
        """
        Look up a font by enum name ("HELVETICA_BOLD") or face name ("Helvetica-Bold").

        Raises:
            ValueError: If the name matches no font
        """
        key = name.strip()
        for font in cls:
            if key.lower() in (font.value.lower(), font.name.lower()):
                return font
        known = ", ".join(f.value for f in cls)
        raise ValueError(f"Unknown font {name!r} (known: {known})")


@dataclass(frozen=True)
class TextStyle:
    """
    Font configuration for one text role (immutable).

    Attributes:
        font: Font family
        size: Font size in points; also used as the line height
    """

    font: FontFamily
    size: int


DEFAULT_BODY_STYLE = TextStyle(FontFamily.HELVETICA, DEFAULT_BODY_SIZE)
DEFAULT_HEADER_STYLE = TextStyle(FontFamily.HELVETICA_BOLD, DEFAULT_HEADER_SIZE)
DEFAULT_FOOTER_STYLE = TextStyle(FontFamily.HELVETICA, DEFAULT_FOOTER_SIZE)


@dataclass(frozen=True)
class PageGeometry:
    """
    Page size and margins, all in points (immutable).

    Margins are not validated against the page size; degenerate values
    surface as a non-positive line capacity instead.

    Example:
        >>> geometry = PageGeometry.from_format(PageFormat.A4)
        >>> round(geometry.margin_top, 2)
        56.69
    """

    page_width: float
    page_height: float
    margin_top: float
    margin_bottom: float
    margin_left: float

    @classmethod
    def from_format(
        cls,
        page_format: PageFormat = PageFormat.A4,
        *,
        margin_top_mm: float = DEFAULT_MARGIN_MM,
        margin_bottom_mm: float = DEFAULT_MARGIN_MM,
        margin_left_mm: float = DEFAULT_MARGIN_MM,
    ) -> "PageGeometry":
        width, height = page_format.size
        return cls(
            page_width=width,
            page_height=height,
            margin_top=mm_to_pt(margin_top_mm),
            margin_bottom=mm_to_pt(margin_bottom_mm),
            margin_left=mm_to_pt(margin_left_mm),
        )

    @property
    def usable_width(self) -> float:
        """Width between the margins. The left margin is mirrored on the right."""
        return self.page_width - 2 * self.margin_left

    @property
    def usable_height(self) -> float:
        return self.page_height - self.margin_top - self.margin_bottom


def split_lines(text: Optional[str]) -> Tuple[str, ...]:
    """
    Split text on newlines.

    None and empty text give no lines. Trailing empty lines are dropped,
    interior empty lines are kept.

    Example:
        >>> split_lines("a\\n\\nb\\n")
        ('a', '', 'b')
    """
    if not text:
        return ()
    lines = text.split("\n")
    while lines and lines[-1] == "":
        lines.pop()
    return tuple(lines)


@dataclass(frozen=True)
class RenderContext:
    """
    Immutable snapshot of everything one render pass needs.

    Built once at the start of a render call; the paginator never reads
    mutable printer state.

    Attributes:
        geometry: Page size and margins
        body: Body text style
        header: Header text style
        footer: Footer text style
        content_lines: Body lines in order
        header_lines: Header lines, repeated on every page
        footer_lines: Footer lines, repeated on every page
        max_pages: Safety bound on emitted pages
    """

    geometry: PageGeometry
    body: TextStyle = DEFAULT_BODY_STYLE
    header: TextStyle = DEFAULT_HEADER_STYLE
    footer: TextStyle = DEFAULT_FOOTER_STYLE
    content_lines: Tuple[str, ...] = ()
    header_lines: Tuple[str, ...] = ()
    footer_lines: Tuple[str, ...] = ()
    max_pages: int = DEFAULT_MAX_PAGES

    @classmethod
    def from_text(
        cls,
        geometry: PageGeometry,
        content: Optional[str],
        header: Optional[str] = None,
        footer: Optional[str] = None,
        **styles,
    ) -> "RenderContext":
        """Build a context from raw newline-delimited strings."""
        return cls(
            geometry=geometry,
            content_lines=split_lines(content),
            header_lines=split_lines(header),
            footer_lines=split_lines(footer),
            **styles,
        )
