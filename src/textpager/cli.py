"""
Command-line entry point.

Examples:
    textpager notes.txt --header "Meeting notes" --footer "Confidential" -o notes.pdf
    textpager notes.txt --margin 15 --png-dir preview/
    textpager notes.txt --print
    textpager notes.txt --max-lines
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .layout.config import FontFamily, PageFormat
from .errors import TextPagerError
from .output.preview import DEFAULT_DPI, export_page_images
from .printer import PrintResult, TextPrinter
from .settings import PrinterSettings, SettingsStore

logger = logging.getLogger("textpager")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textpager",
        description="Paginate a plain text file into printable pages with a repeating header and footer.",
    )
    parser.add_argument("content", type=str, help="Text file to paginate ('-' reads stdin)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    text = parser.add_argument_group("header and footer")
    header = text.add_mutually_exclusive_group()
    header.add_argument("--header", type=str, help="Header text (use \\n for line breaks)")
    header.add_argument("--header-file", type=Path, help="Read header text from a file")
    footer = text.add_mutually_exclusive_group()
    footer.add_argument("--footer", type=str, help="Footer text (use \\n for line breaks)")
    footer.add_argument("--footer-file", type=Path, help="Read footer text from a file")

    page = parser.add_argument_group("page")
    page.add_argument("--settings", type=Path, help="JSON settings file (flags override it)")
    page.add_argument("--save-settings", action="store_true", help="Write the effective settings back to --settings")
    page.add_argument("--format", dest="page_format", choices=[f.value for f in PageFormat], type=str.upper)
    page.add_argument("--margin", type=float, help="Top, bottom and left margin in mm")
    page.add_argument("--margin-top", type=float, help="Top margin in mm")
    page.add_argument("--margin-bottom", type=float, help="Bottom margin in mm")
    page.add_argument("--margin-left", type=float, help="Left margin in mm")

    fonts = parser.add_argument_group("fonts")
    font_names = [f.value for f in FontFamily]
    fonts.add_argument("--font", choices=font_names, help="Body font")
    fonts.add_argument("--font-size", type=int, help="Body font size in pt")
    fonts.add_argument("--header-font", choices=font_names)
    fonts.add_argument("--header-font-size", type=int)
    fonts.add_argument("--footer-font", choices=font_names)
    fonts.add_argument("--footer-font-size", type=int)

    out = parser.add_argument_group("output")
    out.add_argument("-o", "--output", type=Path, help="PDF output path (default: CONTENT with .pdf suffix)")
    out.add_argument("--png-dir", type=Path, help="Also export each page as PNG into this directory")
    out.add_argument("--dpi", type=int, default=DEFAULT_DPI, help="Resolution for --png-dir (default: %(default)s)")
    out.add_argument("--print", dest="send_to_printer", action="store_true", help="Open the system print dialog")
    out.add_argument("--max-lines", action="store_true", help="Print body lines per page and exit")

    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def configure_printer(args: argparse.Namespace, content: str) -> TextPrinter:
    """Build a printer from settings file plus command-line overrides."""
    printer = TextPrinter(
        content,
        header=_read_text_option(args.header, args.header_file),
        footer=_read_text_option(args.footer, args.footer_file),
    )

    if args.settings:
        store = SettingsStore(args.settings)
        store.load().apply_to(printer)

    if args.page_format:
        printer.page_format = args.page_format
    if args.margin is not None:
        printer.set_margins(args.margin)
    if args.margin_top is not None:
        printer.margin_top = args.margin_top
    if args.margin_bottom is not None:
        printer.margin_bottom = args.margin_bottom
    if args.margin_left is not None:
        printer.margin_left = args.margin_left

    for option in ("font", "font_size", "header_font", "header_font_size", "footer_font", "footer_font_size"):
        value = getattr(args, option)
        if value is not None:
            setattr(printer, option, value)

    return printer


def _read_text_option(inline: Optional[str], path: Optional[Path]) -> Optional[str]:
    if path is not None:
        return path.read_text(encoding="utf-8")
    if inline is not None:
        return inline.replace("\\n", "\n")
    return None


def _read_content(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.save_settings and not args.settings:
        parser.error("--save-settings requires --settings")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    try:
        content = _read_content(args.content)
        printer = configure_printer(args, content)
    except OSError as e:
        logger.error(f"Could not read input: {e}")
        return 1
    except ValueError as e:
        logger.error(str(e))
        return 1

    if args.save_settings:
        SettingsStore(args.settings).save(PrinterSettings.from_printer(printer))

    if args.max_lines:
        print(printer.max_lines())
        return 0

    if args.send_to_printer:
        result = printer.print()
    else:
        output = args.output or _default_output(args.content)
        result = printer.save(output)

    if not result.success:
        logger.error(f"Failed: {result.error}")
        return 1
    if result.cancelled:
        logger.info("Cancelled, nothing printed")
        return 0

    if args.png_dir and result.render.document is not None:
        try:
            export_page_images(result.render.document.data, args.png_dir, dpi=args.dpi)
        except (TextPagerError, OSError, ValueError) as e:
            logger.error(f"PNG export failed: {e}")
            return 1

    _report(result)
    return 0


def _default_output(content: str) -> Path:
    if content == "-":
        return Path("output.pdf")
    return Path(content).with_suffix(".pdf")


def _report(result: PrintResult) -> None:
    render = result.render
    if render.layout is not None:
        logger.info(f"{render.page_count} pages, {render.layout.capacity} lines per page")


if __name__ == "__main__":
    raise SystemExit(main())
