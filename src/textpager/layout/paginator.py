"""
Module: layout.paginator

Purpose:
    Arrange content lines onto pages with a repeating header and footer.

Algorithm:
    Per page:
    1. Start the cursor at page_height - margin_top - header_size
    2. Emit header lines (centered), advancing header_size per line,
       then advance one more header_size as the header/body gap
    3. Reset the body budget to the page capacity
    4. Emit body lines at the left margin, advancing body_size per line
    5. When the budget is spent or the content runs out, jump to
       margin_bottom + footer_size * footer_lines and emit footer lines
       (centered), advancing footer_size per line
    6. Start a new page while content remains

Key Functions:
    - paginate(): Main pagination function

Dependencies:
    - layout.capacity: Body lines per page
    - layout.centering: Header/footer x offsets

Used By:
    - printer.TextPrinter: Render pass
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Sequence, Tuple

from textpager.errors import DegenerateGeometryError

from .capacity import compute_max_body_lines, header_body_gap
from .centering import center_offset, footer_centering_style, header_centering_style
from .config import RenderContext, TextStyle
from .models import LayoutResult, PagePlan, TextPlacement, TextRole

if TYPE_CHECKING:
    from textpager.output.interfaces import FontMetricsProvider

logger = logging.getLogger(__name__)


@dataclass
class LayoutCursor:
    """
    Mutable position state for one render pass.

    Attributes:
        y: Current baseline on the active page
        budget: Body lines still allowed on the active page
        index: Next unconsumed content line
    """

    y: float = 0.0
    budget: int = 0
    index: int = 0


def paginate(
    ctx: RenderContext,
    metrics: "FontMetricsProvider",
) -> LayoutResult:
    """
    Lay out all content lines onto pages.

    Every page gets the full header and footer, even when it holds a
    single body line. Empty content produces no pages at all.

    Args:
        ctx: Render context snapshot
        metrics: Font metrics provider used for centering

    Returns:
        LayoutResult with one PagePlan per page

    Raises:
        DegenerateGeometryError: If capacity is <= 0 while content
            remains, or the content needs more than ctx.max_pages pages

    Example:
        >>> result = paginate(ctx, metrics)
        >>> [p.body_line_count for p in result.pages]
        [10, 10, 5]
    """
    capacity = compute_max_body_lines(ctx)
    content = ctx.content_lines

    if not content:
        logger.info("No content lines, no pages emitted")
        return LayoutResult(pages=(), capacity=capacity)

    if capacity <= 0:
        raise DegenerateGeometryError(
            f"Page geometry leaves room for {capacity} body lines; "
            f"{len(content)} lines cannot be placed",
            capacity=capacity,
        )

    pages_needed = math.ceil(len(content) / capacity)
    if pages_needed > ctx.max_pages:
        raise DegenerateGeometryError(
            f"{len(content)} lines at {capacity} per page need {pages_needed} pages "
            f"(limit {ctx.max_pages})",
            capacity=capacity,
        )

    geometry = ctx.geometry
    usable_width = geometry.usable_width
    header_x = _centered_x(ctx.header_lines, header_centering_style(ctx), ctx, usable_width, metrics)
    footer_x = _centered_x(ctx.footer_lines, footer_centering_style(ctx), ctx, usable_width, metrics)
    footer_baseline = geometry.margin_bottom + ctx.footer.size * len(ctx.footer_lines)

    pages: List[PagePlan] = []
    cursor = LayoutCursor()

    while cursor.index < len(content):
        placements: List[TextPlacement] = []

        # Header
        cursor.y = geometry.page_height - geometry.margin_top - ctx.header.size
        for line, x in zip(ctx.header_lines, header_x):
            placements.append(_place(line, x, cursor.y, ctx.header, TextRole.HEADER))
            cursor.y -= ctx.header.size
        cursor.y -= header_body_gap(ctx)

        # Body
        cursor.budget = capacity
        while cursor.budget > 0 and cursor.index < len(content):
            placements.append(
                _place(content[cursor.index], geometry.margin_left, cursor.y, ctx.body, TextRole.BODY)
            )
            cursor.y -= ctx.body.size
            cursor.budget -= 1
            cursor.index += 1

        # Footer is pinned to the bottom margin regardless of body fill
        cursor.y = footer_baseline
        for line, x in zip(ctx.footer_lines, footer_x):
            placements.append(_place(line, x, cursor.y, ctx.footer, TextRole.FOOTER))
            cursor.y -= ctx.footer.size

        page = PagePlan(
            index=len(pages),
            placements=tuple(placements),
            footer_baseline=footer_baseline,
            width=geometry.page_width,
            height=geometry.page_height,
        )
        logger.debug(f"Page {page.index}: {page.body_line_count} body lines")
        pages.append(page)

    logger.info(f"Paginated {len(content)} lines onto {len(pages)} pages ({capacity} per page)")

    return LayoutResult(pages=tuple(pages), capacity=capacity)


def _centered_x(
    lines: Sequence[str],
    style: TextStyle,
    ctx: RenderContext,
    usable_width: float,
    metrics: "FontMetricsProvider",
) -> Tuple[float, ...]:
    """Absolute x for each line, centered between the margins."""
    left = ctx.geometry.margin_left
    return tuple(
        left + center_offset(line, style.font, style.size, usable_width, metrics)
        for line in lines
    )


def _place(text: str, x: float, y: float, style: TextStyle, role: TextRole) -> TextPlacement:
    return TextPlacement(text=text, x=x, y=y, font=style.font, size=style.size, role=role)
