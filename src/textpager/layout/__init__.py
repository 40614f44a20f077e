"""
Module: textpager.layout

Purpose:
    Pagination and layout engine.
    Converts header/body/footer text into positioned page plans.

Key Functions:
    - paginate(): Arrange content lines onto pages
    - compute_max_body_lines(): Body lines per page
    - center_offset(): Horizontal centering

Key Classes:
    - RenderContext: Immutable render snapshot
    - PageGeometry: Page size and margins
    - TextStyle: Font and size for one role
    - PagePlan: Single page layout plan

Dependencies:
    - reportlab.lib.pagesizes: Page format presets

Used By:
    - textpager.printer: Engine facade
"""

from .config import (
    PageFormat,
    FontFamily,
    TextStyle,
    PageGeometry,
    RenderContext,
    split_lines,
)
from .models import TextRole, TextPlacement, PagePlan, LayoutResult
from .capacity import compute_max_body_lines, header_body_gap, footer_body_gap
from .centering import center_offset, header_centering_style, footer_centering_style
from .paginator import paginate

__all__ = [
    # Config
    "PageFormat",
    "FontFamily",
    "TextStyle",
    "PageGeometry",
    "RenderContext",
    "split_lines",
    # Models
    "TextRole",
    "TextPlacement",
    "PagePlan",
    "LayoutResult",
    # Functions
    "compute_max_body_lines",
    "header_body_gap",
    "footer_body_gap",
    "center_offset",
    "header_centering_style",
    "footer_centering_style",
    "paginate",
]
