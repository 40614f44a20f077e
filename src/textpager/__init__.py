"""Top-level package for textpager.

Paginates plain text into fixed-size printable pages with a repeating
header and footer.

Provides subpackages:
- textpager.layout – capacity, centering and the page-fill loop
- textpager.output – canvas abstractions and the ReportLab backend
- textpager.printing – print/export backends
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.1.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    try:
        from importlib.metadata import version as pkg_version
        return pkg_version("textpager")
    except Exception:
        return "0.0.0"


__version__ = _get_version()

from .errors import (  # noqa: E402
    TextPagerError,
    MeasurementError,
    BackendError,
    DegenerateGeometryError,
)
from .printer import TextPrinter, RenderResult, PrintResult  # noqa: E402

__all__: list[str] = [
    "__version__",
    "TextPrinter",
    "RenderResult",
    "PrintResult",
    "TextPagerError",
    "MeasurementError",
    "BackendError",
    "DegenerateGeometryError",
]
