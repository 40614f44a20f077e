"""Common utilities shared across textpager."""

from __future__ import annotations

from .units import MM_TO_PT, mm_to_pt, pt_to_mm

__all__ = [
    "MM_TO_PT",
    "mm_to_pt",
    "pt_to_mm",
]
