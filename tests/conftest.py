import pytest
import sys
from dataclasses import replace
from pathlib import Path

# Add src to sys.path so we can import textpager
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from textpager.layout import PageGeometry, RenderContext, TextStyle, FontFamily
from textpager.output import FixedWidthMetrics, RecordingBackend


# Common test fixtures
@pytest.fixture
def geometry():
    """Round-number page: 600x1000pt with 50pt margins (usable width 500)."""
    return PageGeometry(
        page_width=600,
        page_height=1000,
        margin_top=50,
        margin_bottom=50,
        margin_left=50,
    )


@pytest.fixture
def metrics():
    """Every character is 500 units (half an em) wide."""
    return FixedWidthMetrics(units_per_char=500)


@pytest.fixture
def recording_backend(metrics):
    return RecordingBackend(metrics=metrics)


@pytest.fixture
def make_context(geometry):
    """Factory for render contexts with body 10pt, header 20pt, footer 10pt."""
    def _create(content=None, header=None, footer=None, **overrides):
        params = dict(
            body=TextStyle(FontFamily.HELVETICA, 10),
            header=TextStyle(FontFamily.HELVETICA_BOLD, 20),
            footer=TextStyle(FontFamily.HELVETICA, 10),
        )
        params.update(overrides)
        geo = params.pop("geometry", geometry)
        return replace(RenderContext.from_text(geo, content, header, footer), **params)
    return _create


@pytest.fixture
def numbered_lines():
    """Factory for content strings of numbered lines."""
    def _create(count: int) -> str:
        return "\n".join(f"line {i}" for i in range(1, count + 1))
    return _create
