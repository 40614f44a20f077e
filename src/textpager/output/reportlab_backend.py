"""
Module: output.reportlab_backend

Purpose:
    PDF backend built on ReportLab. Implements the canvas and metrics
    interfaces with the standard Type 1 fonts, so no font files are
    embedded.

Key Classes:
    - ReportLabMetrics: String widths from ReportLab's AFM tables
    - ReportLabCanvas: In-memory PDF canvas
    - ReportLabBackend: Factory used by the printer

Dependencies:
    - reportlab: PDF generation and font metrics
"""

from __future__ import annotations

import io
import logging
from typing import Optional

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen import canvas
from reportlab.pdfgen.textobject import PDFTextObject

from textpager.errors import BackendError, MeasurementError
from textpager.layout.config import FontFamily, PageFormat

from .interfaces import DocumentBackend, FontMetricsProvider, PageCanvas

logger = logging.getLogger(__name__)


class ReportLabMetrics(FontMetricsProvider):
    """Font metrics from ReportLab's built-in font tables."""

    def measure_width(self, text: str, font: FontFamily, size: float) -> float:
        try:
            return pdfmetrics.stringWidth(text, font.value, size)
        except Exception as e:
            raise MeasurementError(f"stringWidth failed for font {font.value}: {e}") from e


class ReportLabCanvas(PageCanvas):
    """
    PDF document written to an in-memory buffer.

    ReportLab's moveCursor treats positive dy as downward, so move_to
    negates dy to keep PDF orientation.
    """

    def __init__(self, title: Optional[str] = None) -> None:
        self._buffer = io.BytesIO()
        self._canvas = canvas.Canvas(self._buffer, pagesize=PageFormat.A4.size)
        if title:
            self._canvas.setTitle(title)
        self._text: Optional[PDFTextObject] = None
        self._page_open = False
        self._closed = False
        self.page_count = 0

    def add_page(self, width: float, height: float) -> None:
        self._check_open()
        if self._page_open:
            self._canvas.showPage()
        self._canvas.setPageSize((width, height))
        self._page_open = True
        self.page_count += 1

    def begin_text(self) -> None:
        self._check_open()
        if not self._page_open:
            raise BackendError("begin_text called before add_page")
        self._text = self._canvas.beginText(0, 0)

    def move_to(self, dx: float, dy: float) -> None:
        self._require_text().moveCursor(dx, -dy)

    def set_font(self, font: FontFamily, size: float) -> None:
        self._require_text().setFont(font.value, size)

    def draw_text(self, text: str) -> None:
        self._require_text().textOut(text)

    def end_text(self) -> None:
        if self._text is None:
            return
        text, self._text = self._text, None
        self._canvas.drawText(text)

    def finish(self) -> bytes:
        self._check_open()
        if self._page_open:
            self._canvas.showPage()
            self._page_open = False
        try:
            self._canvas.save()
        except Exception as e:
            raise BackendError(f"Failed to write PDF: {e}") from e
        data = self._buffer.getvalue()
        logger.debug(f"Saved PDF: {self.page_count} pages, {len(data)} bytes")
        return data

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._text = None
        self._buffer.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_open(self) -> None:
        if self._closed:
            raise BackendError("Canvas is closed")

    def _require_text(self) -> PDFTextObject:
        if self._text is None:
            raise BackendError("No open text block")
        return self._text


class ReportLabBackend(DocumentBackend):
    """Creates ReportLab PDF canvases."""

    media_type = "application/pdf"

    def __init__(self) -> None:
        self._metrics = ReportLabMetrics()

    @property
    def metrics(self) -> FontMetricsProvider:
        return self._metrics

    def create_document(self, title: Optional[str] = None) -> PageCanvas:
        return ReportLabCanvas(title=title)
