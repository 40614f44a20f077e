"""
Module: output.renderer

Purpose:
    Replay a LayoutResult onto a PageCanvas. Each PagePlan becomes one
    page with a single text block; placements are reached with relative
    cursor moves and font changes are emitted only when the font or size
    differs from the previous line.

Key Functions:
    - render_layout(): Main rendering function

Key Classes:
    - RenderedDocument: Serialized document plus page count

Dependencies:
    - output.interfaces: DocumentBackend, PageCanvas
    - layout.models: LayoutResult, PagePlan

Used By:
    - printer.TextPrinter.render()
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from textpager.errors import BackendError, TextPagerError
from textpager.layout.config import FontFamily
from textpager.layout.models import LayoutResult, PagePlan

from .interfaces import DocumentBackend, PageCanvas

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedDocument:
    """
    Result of rendering a layout.

    Attributes:
        data: Serialized document
        page_count: Number of pages
        media_type: MIME type of data
    """

    data: bytes
    page_count: int
    media_type: str = "application/pdf"

    def __len__(self) -> int:
        return len(self.data)


def render_layout(
    layout: LayoutResult,
    backend: DocumentBackend,
    *,
    title: Optional[str] = None,
) -> RenderedDocument:
    """
    Render every page of a layout through a backend.

    The canvas is closed on every exit path, including failures part
    way through a page.

    Args:
        layout: Layout result from the paginator
        backend: Document backend to draw with
        title: Optional document title

    Returns:
        RenderedDocument with the serialized output

    Raises:
        BackendError: If the backend fails at any step
    """
    try:
        canvas = backend.create_document(title=title)
    except TextPagerError:
        raise
    except Exception as e:
        raise BackendError(f"Failed to create document: {e}") from e

    with canvas:
        try:
            for page in layout.pages:
                _render_page(canvas, page)
            data = canvas.finish()
        except TextPagerError:
            raise
        except Exception as e:
            raise BackendError(f"Failed to render document: {e}") from e

    logger.info(f"Rendered {layout.page_count} pages ({len(data)} bytes)")

    return RenderedDocument(data=data, page_count=layout.page_count, media_type=backend.media_type)


@contextmanager
def text_block(canvas: PageCanvas) -> Iterator[PageCanvas]:
    """Open a text block and always close it."""
    canvas.begin_text()
    try:
        yield canvas
    finally:
        canvas.end_text()


def _render_page(canvas: PageCanvas, page: PagePlan) -> None:
    canvas.add_page(page.width, page.height)

    x, y = 0.0, 0.0
    current_font: Optional[Tuple[FontFamily, int]] = None

    with text_block(canvas):
        for placement in page.placements:
            dx = placement.x - x
            dy = placement.y - y
            if dx or dy:
                canvas.move_to(dx, dy)
                x, y = placement.x, placement.y

            font = (placement.font, placement.size)
            if font != current_font:
                canvas.set_font(*font)
                current_font = font

            canvas.draw_text(placement.text)

    logger.debug(f"Drew page {page.index} ({len(page.placements)} lines)")
