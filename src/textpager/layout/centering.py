"""
Module: layout.centering

Purpose:
    Horizontal centering of header and footer lines within the usable
    page width.

Key Functions:
    - center_offset(): Offset from the left margin that centers a string
    - header_centering_style(): Style used to measure header lines
    - footer_centering_style(): Style used to measure footer lines

Dependencies:
    - output.interfaces.FontMetricsProvider: String widths
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .config import FontFamily, RenderContext, TextStyle

if TYPE_CHECKING:
    from textpager.output.interfaces import FontMetricsProvider

logger = logging.getLogger(__name__)


def header_centering_style(ctx: RenderContext) -> TextStyle:
    """Header lines are drawn in the header font but measured with the body font."""
    return ctx.body


def footer_centering_style(ctx: RenderContext) -> TextStyle:
    return ctx.footer


def center_offset(
    text: str,
    font: FontFamily,
    size: float,
    max_width: float,
    metrics: "FontMetricsProvider",
) -> float:
    """
    Compute the x offset that centers text within max_width.

    Text as wide as or wider than max_width is left-aligned (offset 0);
    it is never clipped, shrunk or wrapped. Any error raised by the
    metrics provider (MeasurementError or otherwise) is logged and also
    yields 0.

    Args:
        text: String to center
        font: Font used for measuring
        size: Font size in points
        max_width: Available width in points
        metrics: Font metrics provider

    Returns:
        Offset in points, always >= 0

    Example:
        >>> center_offset("abc", FontFamily.HELVETICA, 12, 100, metrics)  # width 40
        30.0
    """
    try:
        width = metrics.measure_width(text, font, size)
    except Exception as e:
        logger.warning(f"Could not measure {text!r} in {font.value} {size}pt: {e}")
        return 0.0

    if width < max_width:
        return (max_width - width) / 2.0
    return 0.0
