"""
Module: printer

Purpose:
    Engine facade. Holds the mutable configuration (text, page format,
    fonts, margins), snapshots it at the start of every render pass and
    orchestrates Paginate -> Render -> Print/Export.

Key Classes:
    - TextPrinter: Configurable pagination engine
    - RenderResult: Outcome of a render pass
    - PrintResult: Outcome of a print/export

Dependencies:
    - layout: Capacity and pagination
    - output: Rendering backends
    - printing: Print/export backends

Used By:
    - textpager.cli
    - textpager.settings.PrinterSettings.apply_to()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .common.units import mm_to_pt, pt_to_mm
from .errors import TextPagerError
from .layout import (
    FontFamily,
    LayoutResult,
    PageFormat,
    PageGeometry,
    RenderContext,
    TextStyle,
    compute_max_body_lines,
    paginate,
    split_lines,
)
from .layout.config import (
    DEFAULT_BODY_STYLE,
    DEFAULT_FOOTER_STYLE,
    DEFAULT_HEADER_STYLE,
    DEFAULT_MARGIN_MM,
    DEFAULT_MAX_PAGES,
)
from .output import DocumentBackend, RenderedDocument, ReportLabBackend, render_layout
from .printing import FileExportBackend, PrintBackend, print_document

logger = logging.getLogger(__name__)

FontLike = Union[FontFamily, str]


@dataclass(frozen=True)
class RenderResult:
    """
    Outcome of a render pass (immutable).

    A successful render of empty content has a layout with no pages and
    no document.

    Attributes:
        success: False if layout or rendering failed
        layout: Page plans, when layout succeeded
        document: Rendered output, when at least one page was drawn
        error: Failure message
    """

    success: bool
    layout: Optional[LayoutResult] = None
    document: Optional[RenderedDocument] = None
    error: Optional[str] = None

    @property
    def page_count(self) -> int:
        return self.layout.page_count if self.layout else 0


@dataclass(frozen=True)
class PrintResult:
    """
    Outcome of printing or exporting.

    Attributes:
        printed: True if the document was delivered
        cancelled: True if the user declined; not an error
        render: The underlying render result
        error: Failure message from rendering or delivery
    """

    printed: bool
    cancelled: bool
    render: RenderResult
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        """Render succeeded and delivery did not fail (cancel counts as success)."""
        return self.render.success and self.error is None


class TextPrinter:
    """
    Paginate text with a repeating header and footer.

    Configuration may change freely between render passes. Each call to
    render() reads it exactly once.

    Example:
        >>> printer = TextPrinter("line 1\\nline 2", header="Title", footer="page")
        >>> printer.set_margins(15)
        >>> printer.max_lines()
        57
        >>> printer.save(Path("out.pdf")).printed
        True
    """

    def __init__(
        self,
        content: Optional[str] = None,
        header: Optional[str] = None,
        footer: Optional[str] = None,
    ) -> None:
        self.content = content
        self.header = header
        self.footer = footer

        self._page_format = PageFormat.A4
        self._body = DEFAULT_BODY_STYLE
        self._header_style = DEFAULT_HEADER_STYLE
        self._footer_style = DEFAULT_FOOTER_STYLE

        # Stored in points, exposed in millimetres
        self._margin_top = mm_to_pt(DEFAULT_MARGIN_MM)
        self._margin_bottom = mm_to_pt(DEFAULT_MARGIN_MM)
        self._margin_left = mm_to_pt(DEFAULT_MARGIN_MM)

        self.max_pages = DEFAULT_MAX_PAGES
        self.title: Optional[str] = None

    # ------------------------------------------------------------------
    # Page format and margins
    # ------------------------------------------------------------------

    @property
    def page_format(self) -> PageFormat:
        return self._page_format

    @page_format.setter
    def page_format(self, value: Union[PageFormat, str]) -> None:
        self._page_format = value if isinstance(value, PageFormat) else PageFormat.from_name(value)

    @property
    def margin_top(self) -> float:
        """Top margin in mm."""
        return pt_to_mm(self._margin_top)

    @margin_top.setter
    def margin_top(self, mm: float) -> None:
        self._margin_top = mm_to_pt(mm)

    @property
    def margin_bottom(self) -> float:
        """Bottom margin in mm."""
        return pt_to_mm(self._margin_bottom)

    @margin_bottom.setter
    def margin_bottom(self, mm: float) -> None:
        self._margin_bottom = mm_to_pt(mm)

    @property
    def margin_left(self) -> float:
        """Left margin in mm; mirrored on the right for centering."""
        return pt_to_mm(self._margin_left)

    @margin_left.setter
    def margin_left(self, mm: float) -> None:
        self._margin_left = mm_to_pt(mm)

    def set_margins(self, mm: float) -> None:
        """Set top, bottom and left margins to the same size in mm."""
        self.margin_left = mm
        self.margin_bottom = mm
        self.margin_top = mm

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------

    @property
    def font(self) -> FontFamily:
        return self._body.font

    @font.setter
    def font(self, value: FontLike) -> None:
        self._body = TextStyle(_to_font(value), self._body.size)

    @property
    def font_size(self) -> int:
        return self._body.size

    @font_size.setter
    def font_size(self, size: int) -> None:
        self._body = TextStyle(self._body.font, size)

    @property
    def header_font(self) -> FontFamily:
        return self._header_style.font

    @header_font.setter
    def header_font(self, value: FontLike) -> None:
        self._header_style = TextStyle(_to_font(value), self._header_style.size)

    @property
    def header_font_size(self) -> int:
        return self._header_style.size

    @header_font_size.setter
    def header_font_size(self, size: int) -> None:
        self._header_style = TextStyle(self._header_style.font, size)

    @property
    def footer_font(self) -> FontFamily:
        return self._footer_style.font

    @footer_font.setter
    def footer_font(self, value: FontLike) -> None:
        self._footer_style = TextStyle(_to_font(value), self._footer_style.size)

    @property
    def footer_font_size(self) -> int:
        return self._footer_style.size

    @footer_font_size.setter
    def footer_font_size(self, size: int) -> None:
        self._footer_style = TextStyle(self._footer_style.font, size)

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def geometry(self) -> PageGeometry:
        width, height = self._page_format.size
        return PageGeometry(
            page_width=width,
            page_height=height,
            margin_top=self._margin_top,
            margin_bottom=self._margin_bottom,
            margin_left=self._margin_left,
        )

    def render_context(self) -> RenderContext:
        """Snapshot the current configuration."""
        return RenderContext(
            geometry=self.geometry(),
            body=self._body,
            header=self._header_style,
            footer=self._footer_style,
            content_lines=split_lines(self.content),
            header_lines=split_lines(self.header),
            footer_lines=split_lines(self.footer),
            max_pages=self.max_pages,
        )

    def max_lines(self) -> int:
        """
        Body lines that fit on one page with the current configuration.

        May be zero or negative for degenerate geometry.
        """
        return compute_max_body_lines(self.render_context())

    def render(self, backend: Optional[DocumentBackend] = None) -> RenderResult:
        """
        Paginate and draw the content.

        Failures never propagate: they are logged and reported through
        RenderResult.success and RenderResult.error.

        Args:
            backend: Document backend (default: ReportLab PDF)

        Returns:
            RenderResult
        """
        ctx = self.render_context()
        backend = backend or ReportLabBackend()

        try:
            layout = paginate(ctx, backend.metrics)
            if layout.is_empty:
                logger.warning("Content is empty, nothing rendered")
                return RenderResult(success=True, layout=layout)
            document = render_layout(layout, backend, title=self.title)
        except TextPagerError as e:
            logger.error(f"Render failed: {e}")
            return RenderResult(success=False, error=str(e))
        except Exception as e:
            logger.exception(f"Render failed with unexpected error: {e}")
            return RenderResult(success=False, error=f"{type(e).__name__}: {e}")

        return RenderResult(success=True, layout=layout, document=document)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def print(
        self,
        backend: Optional[PrintBackend] = None,
        document_backend: Optional[DocumentBackend] = None,
    ) -> PrintResult:
        """
        Render and hand the document to a print/export backend.

        Args:
            backend: Print target (default: system print dialog via Qt)
            document_backend: Document backend (default: ReportLab PDF)

        Returns:
            PrintResult; printed is True only if the document was delivered
        """
        result = self.render(document_backend)
        if not result.success:
            return PrintResult(printed=False, cancelled=False, render=result, error=result.error)

        if result.document is None:
            logger.warning("No pages to print")
            return PrintResult(printed=False, cancelled=False, render=result)

        if backend is None:
            from .printing.qt import QtPrintBackend
            backend = QtPrintBackend()

        try:
            printed = print_document(result.document, backend)
        except TextPagerError as e:
            logger.error(f"Printing failed: {e}")
            return PrintResult(printed=False, cancelled=False, render=result, error=str(e))

        return PrintResult(printed=printed, cancelled=not printed, render=result)

    def save(self, path: Path, document_backend: Optional[DocumentBackend] = None) -> PrintResult:
        """Render and write the document to path."""
        return self.print(FileExportBackend(Path(path)), document_backend)


def _to_font(value: FontLike) -> FontFamily:
    return value if isinstance(value, FontFamily) else FontFamily.from_name(value)
