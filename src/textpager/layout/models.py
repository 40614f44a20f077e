"""
Module: layout.models

Purpose:
    Data models for paginated output.
    Immutable dataclasses representing positioned text and pages.

Key Classes:
    - TextRole: Header, body or footer
    - TextPlacement: One positioned draw command
    - PagePlan: All draw commands for one page
    - LayoutResult: Final layout output

Used By:
    - layout.paginator: Creates PagePlans
    - output.renderer: Replays PagePlans onto a canvas
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .config import FontFamily


class TextRole(str, Enum):
    HEADER = "header"
    BODY = "body"
    FOOTER = "footer"


@dataclass(frozen=True)
class TextPlacement:
    """
    A line of text anchored at a baseline (immutable).

    Coordinates are PDF points with the origin at the bottom-left of
    the page.

    Attributes:
        text: Line to draw
        x: Left edge of the text
        y: Baseline
        font: Font family
        size: Font size in points
        role: Which block the line belongs to
    """

    text: str
    x: float
    y: float
    font: FontFamily
    size: int
    role: TextRole


@dataclass(frozen=True)
class PagePlan:
    """
    Complete layout plan for a single page.

    Attributes:
        index: Page number (0-indexed)
        placements: Draw commands in emission order
        footer_baseline: Baseline of the topmost footer line
        width: Page width in points
        height: Page height in points

    Example:
        >>> page.body_lines
        ('line 1', 'line 2')
    """

    index: int
    placements: Tuple[TextPlacement, ...]
    footer_baseline: float
    width: float
    height: float

    def lines_for(self, role: TextRole) -> Tuple[str, ...]:
        return tuple(p.text for p in self.placements if p.role is role)

    @property
    def header_lines(self) -> Tuple[str, ...]:
        return self.lines_for(TextRole.HEADER)

    @property
    def body_lines(self) -> Tuple[str, ...]:
        return self.lines_for(TextRole.BODY)

    @property
    def footer_lines(self) -> Tuple[str, ...]:
        return self.lines_for(TextRole.FOOTER)

    @property
    def body_line_count(self) -> int:
        return len(self.body_lines)


@dataclass(frozen=True)
class LayoutResult:
    """
    Final layout output.

    Attributes:
        pages: Page plans in order
        capacity: Body lines per page used for this layout
    """

    pages: Tuple[PagePlan, ...]
    capacity: int

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def body_lines(self) -> Tuple[str, ...]:
        """Body lines across all pages, in order."""
        out: list[str] = []
        for page in self.pages:
            out.extend(page.body_lines)
        return tuple(out)

    @property
    def is_empty(self) -> bool:
        return not self.pages
