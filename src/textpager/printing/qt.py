"""
Module: printing.qt

Purpose:
    Print through the system print dialog using PySide6.
    Pages are rasterised with PyMuPDF and painted onto a QPrinter,
    scaled to the printable area with the aspect ratio kept.

Key Classes:
    - QtPrintBackend: PrintBackend showing a QPrintDialog

Dependencies:
    - PySide6 (QtPrintSupport, QtGui, QtWidgets)
    - fitz (PyMuPDF): Page rasterising
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import fitz
from PySide6.QtCore import QRect, Qt
from PySide6.QtGui import QImage, QPainter
from PySide6.QtPrintSupport import QPrintDialog, QPrinter
from PySide6.QtWidgets import QApplication, QWidget

from textpager.errors import BackendError
from textpager.output.renderer import RenderedDocument

from .backends import PrintBackend

logger = logging.getLogger(__name__)

DEFAULT_PRINT_DPI = 300


def _ensure_app() -> QApplication:
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv[:1])
    return app


class QtPrintBackend(PrintBackend):
    """
    Show the system print dialog and print on acceptance.

    Attributes:
        parent: Optional parent widget for the dialog
        dpi: Rasterising resolution
    """

    def __init__(self, parent: Optional[QWidget] = None, dpi: int = DEFAULT_PRINT_DPI) -> None:
        self.parent = parent
        self.dpi = dpi
        self._printer: Optional[QPrinter] = None

    def confirm(self, document: RenderedDocument) -> bool:
        _ensure_app()
        printer = QPrinter(QPrinter.PrinterMode.HighResolution)
        printer.setFromTo(1, document.page_count)
        dialog = QPrintDialog(printer, self.parent)
        dialog.setWindowTitle("Print")
        accepted = bool(dialog.exec())
        self._printer = printer if accepted else None
        return accepted

    def submit(self, document: RenderedDocument) -> None:
        _ensure_app()
        printer = self._printer or QPrinter(QPrinter.PrinterMode.HighResolution)

        painter = QPainter()
        if not painter.begin(printer):
            raise BackendError("Could not start print job")

        try:
            area = painter.viewport()
            with fitz.open(stream=document.data, filetype="pdf") as doc:
                for index, page in enumerate(doc):
                    if index and not printer.newPage():
                        raise BackendError(f"Printer rejected page {index + 1}")
                    pix = page.get_pixmap(dpi=self.dpi, alpha=False)
                    samples = pix.samples
                    image = QImage(samples, pix.width, pix.height, pix.stride, QImage.Format.Format_RGB888)
                    size = image.size()
                    size.scale(area.size(), Qt.AspectRatioMode.KeepAspectRatio)
                    painter.drawImage(QRect(area.x(), area.y(), size.width(), size.height()), image)
        finally:
            painter.end()
            self._printer = None

        logger.info(f"Printed {document.page_count} pages")
