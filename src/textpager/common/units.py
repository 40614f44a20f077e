"""Unit conversions between millimetres and PDF points.

PDF points are 1/72 inch; one inch is 25.4 mm.
"""

from __future__ import annotations

MM_PER_INCH = 25.4
PT_PER_INCH = 72.0
MM_TO_PT = PT_PER_INCH / MM_PER_INCH  # ~2.8346


def mm_to_pt(mm: float) -> float:
    """
    Convert millimetres to PDF points.

    Example:
        >>> round(mm_to_pt(20), 4)
        56.6929
    """
    return (mm * PT_PER_INCH) / MM_PER_INCH


def pt_to_mm(pt: float) -> float:
    """Convert PDF points to millimetres."""
    return (pt * MM_PER_INCH) / PT_PER_INCH
