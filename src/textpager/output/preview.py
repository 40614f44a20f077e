"""
Module: output.preview

Purpose:
    Rasterise a finished PDF into page images for export.

Key Functions:
    - render_page_images(): PDF bytes -> PIL images
    - export_page_images(): PDF bytes -> PNG files on disk

Dependencies:
    - fitz (PyMuPDF): PDF rendering
    - PIL.Image: Image handling

Used By:
    - textpager.cli: --png-dir export
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import fitz
from PIL import Image

from textpager.errors import BackendError

logger = logging.getLogger(__name__)

DEFAULT_DPI = 150


def render_page_images(pdf_bytes: bytes, dpi: int = DEFAULT_DPI) -> List[Image.Image]:
    """
    Render every page of a PDF to an RGB image.

    Args:
        pdf_bytes: Serialized PDF
        dpi: Resolution for rendering. Defaults to 150.

    Returns:
        One image per page, in order

    Raises:
        ValueError: If dpi is not positive
        BackendError: If the PDF cannot be opened

    Example:
        >>> images = render_page_images(result.document.data, dpi=72)
        >>> images[0].size
        (595, 842)
    """
    if dpi <= 0:
        raise ValueError(f"dpi must be positive: {dpi}")

    try:
        doc = fitz.open(stream=pdf_bytes, filetype="pdf")
    except Exception as e:
        raise BackendError(f"Could not open PDF for rasterising: {e}") from e

    images: List[Image.Image] = []
    with doc:
        for page in doc:
            pix = page.get_pixmap(dpi=dpi, alpha=False)
            images.append(Image.frombytes("RGB", (pix.width, pix.height), pix.samples))

    logger.debug(f"Rasterised {len(images)} pages at {dpi} DPI")
    return images


def export_page_images(
    pdf_bytes: bytes,
    output_dir: Path,
    *,
    dpi: int = DEFAULT_DPI,
    prefix: str = "page",
) -> List[Path]:
    """
    Write each page of a PDF as a PNG file.

    Files are named {prefix}-001.png, {prefix}-002.png, ...

    Returns:
        Paths of the written files, in page order
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    paths: List[Path] = []
    for number, image in enumerate(render_page_images(pdf_bytes, dpi=dpi), start=1):
        path = output_dir / f"{prefix}-{number:03d}.png"
        image.save(path)
        paths.append(path)

    logger.info(f"Exported {len(paths)} page images to {output_dir}")
    return paths
