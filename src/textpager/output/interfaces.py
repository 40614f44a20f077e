"""
Interfaces for rendering backends.

The layout engine drives these abstractions; concrete backends
(ReportLab, in-memory recording) implement them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from textpager.layout.config import FontFamily


class FontMetricsProvider(ABC):
    """
    Interface for measuring rendered string widths.

    Used only for centering header and footer lines.
    """

    @abstractmethod
    def measure_width(self, text: str, font: FontFamily, size: float) -> float:
        """
        Measure the width of text set in font at size.

        Args:
            text: String to measure
            font: Font family
            size: Font size in points

        Returns:
            Width in points (glyph units scaled by size / 1000)

        Raises:
            MeasurementError: If the string cannot be measured
        """
        pass


class PageCanvas(ABC):
    """
    Interface for a document under construction.

    Text is drawn inside a text block whose cursor starts at the page
    origin (bottom-left) and moves relatively. Positive dy moves up.

    A canvas is a resource: close() must be called on every exit path.
    It is usable as a context manager for that purpose.
    """

    @abstractmethod
    def add_page(self, width: float, height: float) -> None:
        """Finish the current page (if any) and start a new one."""
        pass

    @abstractmethod
    def begin_text(self) -> None:
        pass

    @abstractmethod
    def move_to(self, dx: float, dy: float) -> None:
        """Move the text cursor relative to the start of the current line."""
        pass

    @abstractmethod
    def set_font(self, font: FontFamily, size: float) -> None:
        pass

    @abstractmethod
    def draw_text(self, text: str) -> None:
        """Draw text at the cursor."""
        pass

    @abstractmethod
    def end_text(self) -> None:
        pass

    @abstractmethod
    def finish(self) -> bytes:
        """
        Complete the document and return its serialized form.

        Raises:
            BackendError: If the document cannot be written
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Release resources. Safe to call more than once."""
        pass

    def __enter__(self) -> "PageCanvas":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class DocumentBackend(ABC):
    """
    Factory for canvases plus the metrics provider matching its fonts.
    """

    media_type: str = "application/octet-stream"

    @property
    @abstractmethod
    def metrics(self) -> FontMetricsProvider:
        pass

    @abstractmethod
    def create_document(self, title: Optional[str] = None) -> PageCanvas:
        """
        Create an empty document.

        Raises:
            BackendError: If the document cannot be created
        """
        pass
