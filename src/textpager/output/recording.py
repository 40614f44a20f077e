"""In-memory backend that records draw commands instead of writing a file.

Tracks the text cursor the way a PDF text block does, so every recorded
command carries absolute page coordinates. Used for dry runs and tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from textpager.errors import BackendError
from textpager.layout.config import FontFamily

from .interfaces import DocumentBackend, FontMetricsProvider, PageCanvas


@dataclass(frozen=True)
class DrawCommand:
    """A string drawn at an absolute baseline position."""

    text: str
    x: float
    y: float
    font: Optional[FontFamily]
    size: float


@dataclass
class RecordedPage:
    width: float
    height: float
    commands: List[DrawCommand] = field(default_factory=list)
    text_blocks: int = 0

    @property
    def texts(self) -> List[str]:
        return [c.text for c in self.commands]


class FixedWidthMetrics(FontMetricsProvider):
    """
    Metrics where every character has the same advance width.

    Attributes:
        units_per_char: Glyph width in 1/1000 em
    """

    def __init__(self, units_per_char: float = 500.0) -> None:
        self.units_per_char = units_per_char

    def measure_width(self, text: str, font: FontFamily, size: float) -> float:
        return len(text) * self.units_per_char / 1000.0 * size


class RecordingCanvas(PageCanvas):
    """Canvas that keeps every command in memory."""

    def __init__(self, title: Optional[str] = None) -> None:
        self.title = title
        self.pages: List[RecordedPage] = []
        self.closed = False
        self.finished = False
        self._in_text = False
        self._line_start: Tuple[float, float] = (0.0, 0.0)
        self._font: Optional[FontFamily] = None
        self._size: float = 0.0

    def add_page(self, width: float, height: float) -> None:
        self._check_open()
        self.pages.append(RecordedPage(width=width, height=height))

    def begin_text(self) -> None:
        self._check_open()
        if not self.pages:
            raise BackendError("begin_text called before add_page")
        self._in_text = True
        self._line_start = (0.0, 0.0)
        self.pages[-1].text_blocks += 1

    def move_to(self, dx: float, dy: float) -> None:
        self._require_text()
        x, y = self._line_start
        self._line_start = (x + dx, y + dy)

    def set_font(self, font: FontFamily, size: float) -> None:
        self._require_text()
        self._font = font
        self._size = size

    def draw_text(self, text: str) -> None:
        self._require_text()
        x, y = self._line_start
        self.pages[-1].commands.append(DrawCommand(text, x, y, self._font, self._size))

    def end_text(self) -> None:
        self._in_text = False

    def finish(self) -> bytes:
        """Return a plain-text listing of all pages and commands."""
        self._check_open()
        self.finished = True
        out: List[str] = []
        for number, page in enumerate(self.pages, start=1):
            out.append(f"page {number} {page.width:.2f}x{page.height:.2f}")
            for cmd in page.commands:
                font = cmd.font.value if cmd.font else "-"
                out.append(f"  {cmd.x:8.2f} {cmd.y:8.2f} {font} {cmd.size:g} {cmd.text}")
        return ("\n".join(out) + "\n").encode("utf-8")

    def close(self) -> None:
        self.closed = True
        self._in_text = False

    @property
    def commands(self) -> List[DrawCommand]:
        """All commands across pages, in order."""
        return [c for page in self.pages for c in page.commands]

    def _check_open(self) -> None:
        if self.closed:
            raise BackendError("Canvas is closed")

    def _require_text(self) -> None:
        self._check_open()
        if not self._in_text:
            raise BackendError("No open text block")


class RecordingBackend(DocumentBackend):
    """
    Backend producing RecordingCanvas documents.

    Attributes:
        documents: Every canvas created, most recent last
        on_create: Optional hook called with each new canvas
    """

    media_type = "text/plain"

    def __init__(
        self,
        metrics: Optional[FontMetricsProvider] = None,
        on_create: Optional[Callable[[RecordingCanvas], None]] = None,
    ) -> None:
        self._metrics = metrics or FixedWidthMetrics()
        self.on_create = on_create
        self.documents: List[RecordingCanvas] = []

    @property
    def metrics(self) -> FontMetricsProvider:
        return self._metrics

    def create_document(self, title: Optional[str] = None) -> PageCanvas:
        doc = RecordingCanvas(title=title)
        self.documents.append(doc)
        if self.on_create:
            self.on_create(doc)
        return doc

    @property
    def last(self) -> RecordingCanvas:
        if not self.documents:
            raise LookupError("No document has been created")
        return self.documents[-1]
