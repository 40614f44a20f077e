"""
Settings persistence for the printer.

Printer configuration (page format, fonts, margins) is stored as JSON.
Malformed data never raises on load: unreadable files and invalid
fields fall back to defaults and are logged.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from .layout.config import (
    DEFAULT_BODY_STYLE,
    DEFAULT_FOOTER_STYLE,
    DEFAULT_HEADER_STYLE,
    DEFAULT_MARGIN_MM,
    FontFamily,
    PageFormat,
)
from .printer import TextPrinter

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1


@dataclass
class PrinterSettings:
    page_format: str = PageFormat.A4.value
    font: str = DEFAULT_BODY_STYLE.font.value
    font_size: int = DEFAULT_BODY_STYLE.size
    header_font: str = DEFAULT_HEADER_STYLE.font.value
    header_font_size: int = DEFAULT_HEADER_STYLE.size
    footer_font: str = DEFAULT_FOOTER_STYLE.font.value
    footer_font_size: int = DEFAULT_FOOTER_STYLE.size
    margin_top_mm: float = DEFAULT_MARGIN_MM
    margin_bottom_mm: float = DEFAULT_MARGIN_MM
    margin_left_mm: float = DEFAULT_MARGIN_MM
    schema_version: int = SCHEMA_VERSION

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "PrinterSettings":
        """
        Build settings from a JSON payload.

        Unknown keys are ignored; a field with the wrong type or an
        unknown font/format name keeps its default.
        """
        settings = cls()
        for f in fields(cls):
            if f.name not in raw:
                continue
            value = raw[f.name]
            try:
                setattr(settings, f.name, _coerce(f.name, value))
            except (TypeError, ValueError) as e:
                logger.warning(f"Ignoring invalid setting {f.name}={value!r}: {e}")
        return settings

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_printer(cls, printer: TextPrinter) -> "PrinterSettings":
        return cls(
            page_format=printer.page_format.value,
            font=printer.font.value,
            font_size=printer.font_size,
            header_font=printer.header_font.value,
            header_font_size=printer.header_font_size,
            footer_font=printer.footer_font.value,
            footer_font_size=printer.footer_font_size,
            margin_top_mm=printer.margin_top,
            margin_bottom_mm=printer.margin_bottom,
            margin_left_mm=printer.margin_left,
        )

    def apply_to(self, printer: TextPrinter) -> TextPrinter:
        """Copy these settings onto printer (text is left untouched)."""
        printer.page_format = self.page_format
        printer.font = self.font
        printer.font_size = self.font_size
        printer.header_font = self.header_font
        printer.header_font_size = self.header_font_size
        printer.footer_font = self.footer_font
        printer.footer_font_size = self.footer_font_size
        printer.margin_top = self.margin_top_mm
        printer.margin_bottom = self.margin_bottom_mm
        printer.margin_left = self.margin_left_mm
        return printer


def _coerce(name: str, value: Any) -> Any:
    if name == "page_format":
        return PageFormat.from_name(str(value)).value
    if name.endswith("font"):
        return FontFamily.from_name(str(value)).value
    if name.endswith("_size") or name == "schema_version":
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError("expected an integer")
        return value
    if name.endswith("_mm"):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError("expected a number")
        return float(value)
    return value


class SettingsStore:
    """Lightweight JSON-backed store for printer settings."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self.load_error: Optional[str] = None

    def load(self) -> PrinterSettings:
        """
        Load settings, falling back to defaults.

        Sets load_error when the file exists but cannot be used.
        """
        self.load_error = None
        if not self.path.exists():
            return PrinterSettings()

        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            self.load_error = f"Settings file is corrupted: {e}"
        except OSError as e:
            self.load_error = f"Failed to read settings: {e}"
        else:
            if isinstance(raw, dict):
                return PrinterSettings.from_dict(raw)
            self.load_error = "Settings file does not contain an object"

        logger.warning(f"{self.load_error} ({self.path}); using defaults")
        return PrinterSettings()

    def save(self, settings: PrinterSettings) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(settings.to_dict(), indent=2), encoding="utf-8")
        logger.debug(f"Saved settings to {self.path}")
