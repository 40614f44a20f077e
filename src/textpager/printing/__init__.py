"""
Module: textpager.printing

Purpose:
    Print/export backends for finished documents.

Key Functions:
    - print_document(): Confirm, then submit

Key Classes:
    - PrintBackend: Interface
    - FileExportBackend: Write to disk
    - CallbackPrintBackend: Callable-based backend

The Qt dialog backend lives in textpager.printing.qt and is imported
on demand so PySide6 is only loaded when printing interactively.
"""

from .backends import (
    PrintBackend,
    FileExportBackend,
    CallbackPrintBackend,
    print_document,
    always_confirm,
)

__all__ = [
    "PrintBackend",
    "FileExportBackend",
    "CallbackPrintBackend",
    "print_document",
    "always_confirm",
]
