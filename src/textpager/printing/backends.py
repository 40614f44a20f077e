"""
Module: printing.backends

Purpose:
    Hand a finished document to a printer or an export target.
    Confirmation is injected so the flow runs without a display; a
    declined confirmation is a normal outcome, not an error.

Key Functions:
    - print_document(): Confirm, then submit

Key Classes:
    - PrintBackend: Interface for print/export targets
    - FileExportBackend: Write the document to a file
    - CallbackPrintBackend: Confirm and submit via callables

Used By:
    - printer.TextPrinter.print()
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Optional

from textpager.errors import BackendError, TextPagerError
from textpager.output.renderer import RenderedDocument

logger = logging.getLogger(__name__)

ConfirmCallback = Callable[[RenderedDocument], bool]


def always_confirm(document: RenderedDocument) -> bool:
    return True


class PrintBackend(ABC):
    """Interface for print/export targets."""

    @abstractmethod
    def confirm(self, document: RenderedDocument) -> bool:
        """
        Ask whether to go ahead.

        Returns:
            False if the user declined
        """
        pass

    @abstractmethod
    def submit(self, document: RenderedDocument) -> None:
        """
        Print or export the document.

        Raises:
            BackendError: If the document could not be delivered
        """
        pass


class FileExportBackend(PrintBackend):
    """
    Write the document to a file.

    Attributes:
        path: Output file; parent directories are created
    """

    def __init__(self, path: Path, confirm: Optional[ConfirmCallback] = None) -> None:
        self.path = Path(path)
        self._confirm = confirm or always_confirm

    def confirm(self, document: RenderedDocument) -> bool:
        return self._confirm(document)

    def submit(self, document: RenderedDocument) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_bytes(document.data)
        except OSError as e:
            raise BackendError(f"Failed to write {self.path}: {e}") from e
        logger.info(f"Wrote {document.page_count} pages to {self.path}")


class CallbackPrintBackend(PrintBackend):
    """
    Print backend assembled from two callables.

    Example:
        >>> sent = []
        >>> backend = CallbackPrintBackend(sent.append, confirm=lambda doc: True)
    """

    def __init__(
        self,
        sink: Callable[[RenderedDocument], None],
        confirm: Optional[ConfirmCallback] = None,
    ) -> None:
        self._sink = sink
        self._confirm = confirm or always_confirm

    def confirm(self, document: RenderedDocument) -> bool:
        return self._confirm(document)

    def submit(self, document: RenderedDocument) -> None:
        self._sink(document)


def print_document(document: RenderedDocument, backend: PrintBackend) -> bool:
    """
    Confirm with the backend, then submit the document.

    Args:
        document: Rendered document
        backend: Print/export target

    Returns:
        True if submitted, False if the user declined

    Raises:
        BackendError: If confirmation or submission fails
    """
    try:
        if not backend.confirm(document):
            logger.info("Printing cancelled by user")
            return False
        backend.submit(document)
    except TextPagerError:
        raise
    except Exception as e:
        raise BackendError(f"Print backend failed: {e}") from e

    logger.info(f"Submitted {document.page_count} pages to {type(backend).__name__}")
    return True
