"""
Module: layout.capacity

Purpose:
    Compute how many body lines fit on one page.

Algorithm:
    1. Start from page height
    2. Subtract top and bottom margins
    3. Subtract header block: header_lines * header_size + header gap
    4. Subtract footer block: footer_lines * footer_size + footer gap
    5. Divide by body size, truncate toward zero

    The gaps are asymmetric: the header gap uses the header size while
    the footer gap uses the body size. Output depends on this, so both
    live in named functions below.

Key Functions:
    - compute_max_body_lines(): Body lines per page (may be <= 0)
    - header_body_gap(): Space between header block and body
    - footer_body_gap(): Space reserved between body and footer block

Used By:
    - layout.paginator: Page budget
    - printer.TextPrinter.max_lines()
"""

from __future__ import annotations

import logging

from .config import RenderContext

logger = logging.getLogger(__name__)


def header_body_gap(ctx: RenderContext) -> float:
    """Gap after the header block, one header line height."""
    return ctx.header.size


def footer_body_gap(ctx: RenderContext) -> float:
    """Gap reserved above the footer block, one *body* line height."""
    return ctx.body.size


def compute_max_body_lines(ctx: RenderContext) -> int:
    """
    Calculate the number of body lines on one page.

    Never raises. Degenerate geometry (margins, header or footer taller
    than the page) yields zero or a negative number; callers decide how
    to treat that.

    Args:
        ctx: Render context snapshot

    Returns:
        Body line capacity, truncated toward zero

    Example:
        >>> ctx = RenderContext(geometry=PageGeometry.from_format())
        >>> compute_max_body_lines(ctx)
        58
    """
    if ctx.body.size == 0:
        logger.warning("Body font size is 0, no body lines fit")
        return 0

    geometry = ctx.geometry
    space = geometry.page_height
    space -= geometry.margin_top + geometry.margin_bottom
    space -= len(ctx.header_lines) * ctx.header.size + header_body_gap(ctx)
    space -= len(ctx.footer_lines) * ctx.footer.size + footer_body_gap(ctx)
    return int(space / ctx.body.size)
