"""
Module: textpager.output

Purpose:
    Rendering backends for paginated layouts.
    Replays LayoutResult pages onto a canvas and serializes the result.

Key Functions:
    - render_layout(): Render a layout through a backend
    - export_page_images(): Rasterise a PDF to PNG files

Key Classes:
    - FontMetricsProvider, PageCanvas, DocumentBackend: Backend interfaces
    - ReportLabBackend: PDF output via ReportLab
    - RecordingBackend: In-memory command recording

Dependencies:
    - reportlab: PDF generation
    - fitz (PyMuPDF), PIL: Page rasterising
"""

from .interfaces import FontMetricsProvider, PageCanvas, DocumentBackend
from .renderer import RenderedDocument, render_layout, text_block
from .reportlab_backend import ReportLabBackend, ReportLabCanvas, ReportLabMetrics
from .recording import (
    DrawCommand,
    FixedWidthMetrics,
    RecordedPage,
    RecordingBackend,
    RecordingCanvas,
)
from .preview import render_page_images, export_page_images

__all__ = [
    # Interfaces
    "FontMetricsProvider",
    "PageCanvas",
    "DocumentBackend",
    # Rendering
    "RenderedDocument",
    "render_layout",
    "text_block",
    # ReportLab
    "ReportLabBackend",
    "ReportLabCanvas",
    "ReportLabMetrics",
    # Recording
    "DrawCommand",
    "FixedWidthMetrics",
    "RecordedPage",
    "RecordingBackend",
    "RecordingCanvas",
    # Preview
    "render_page_images",
    "export_page_images",
]
