"""
Tests for the TextPrinter facade.
"""

import logging
from unittest.mock import MagicMock

import pytest

from textpager import BackendError, TextPrinter
from textpager.common.units import mm_to_pt
from textpager.layout import FontFamily, PageFormat
from textpager.output import RecordingBackend
from textpager.printing import CallbackPrintBackend


@pytest.fixture
def printer(numbered_lines):
    return TextPrinter(numbered_lines(130), header="Title", footer="Footer")


class TestTextPrinterConfig:
    """Configuration properties."""

    def test_init_when_defaults_then_default_settings(self):
        # Act
        printer = TextPrinter()

        # Assert
        assert printer.page_format is PageFormat.A4
        assert printer.margin_top == pytest.approx(20)
        assert printer.margin_bottom == pytest.approx(20)
        assert printer.margin_left == pytest.approx(20)
        assert (printer.font, printer.font_size) == (FontFamily.HELVETICA, 12)
        assert (printer.header_font, printer.header_font_size) == (FontFamily.HELVETICA_BOLD, 20)
        assert (printer.footer_font, printer.footer_font_size) == (FontFamily.HELVETICA, 10)

    def test_margin_when_set_in_mm_then_stored_in_points(self):
        # Arrange
        printer = TextPrinter()

        # Act
        printer.margin_top = 15
        printer.margin_left = 10

        # Assert
        assert printer.margin_top == pytest.approx(15)
        geometry = printer.geometry()
        assert geometry.margin_top == pytest.approx(mm_to_pt(15))
        assert geometry.margin_left == pytest.approx(mm_to_pt(10))
        assert geometry.margin_bottom == pytest.approx(mm_to_pt(20))

    def test_set_margins_when_called_then_all_three_updated(self):
        printer = TextPrinter()
        printer.set_margins(12.5)
        assert [printer.margin_top, printer.margin_bottom, printer.margin_left] == pytest.approx([12.5] * 3)

    def test_font_when_set_by_name_then_resolved(self):
        # Arrange
        printer = TextPrinter()

        # Act
        printer.font = "courier"
        printer.header_font = "Times-Bold"
        printer.footer_font = FontFamily.TIMES

        # Assert
        assert printer.font is FontFamily.COURIER
        assert printer.header_font is FontFamily.TIMES_BOLD
        assert printer.footer_font is FontFamily.TIMES

    def test_font_when_size_changed_then_family_kept(self):
        printer = TextPrinter()
        printer.font = FontFamily.COURIER
        printer.font_size = 9
        assert (printer.font, printer.font_size) == (FontFamily.COURIER, 9)

    def test_font_when_unknown_name_then_raises_error(self):
        with pytest.raises(ValueError):
            TextPrinter().font = "Papyrus"

    def test_page_format_when_set_by_name_then_geometry_follows(self):
        # Arrange
        printer = TextPrinter()

        # Act
        printer.page_format = "letter"

        # Assert
        assert printer.page_format is PageFormat.LETTER
        assert printer.geometry().page_width == pytest.approx(612)
        assert printer.geometry().page_height == pytest.approx(792)


class TestTextPrinterMaxLines:
    """Tests for max_lines()."""

    def test_max_lines_when_defaults_then_58(self):
        assert TextPrinter().max_lines() == 58

    def test_max_lines_when_header_footer_and_15mm_margins_then_57(self):
        # Arrange
        printer = TextPrinter("x", header="Title", footer="page")

        # Act
        printer.set_margins(15)

        # Assert
        assert printer.max_lines() == 57

    def test_max_lines_when_margins_too_large_then_not_positive(self):
        printer = TextPrinter("x")
        printer.set_margins(200)
        assert printer.max_lines() <= 0


class TestTextPrinterRender:
    """Tests for render()."""

    def test_render_when_content_then_success_with_document(self, printer):
        # Act
        result = printer.render(RecordingBackend())

        # Assert
        assert result.success
        assert result.error is None
        assert result.page_count == 3  # 55 + 55 + 20
        assert result.document.page_count == 3
        assert result.layout.body_lines == printer.render_context().content_lines

    def test_render_when_default_backend_then_pdf(self):
        result = TextPrinter("hello").render()
        assert result.document.data.startswith(b"%PDF")

    @pytest.mark.parametrize("content", [None, "", "\n\n"])
    def test_render_when_empty_then_success_without_document(self, content, caplog):
        # Act
        with caplog.at_level(logging.WARNING):
            result = TextPrinter(content, header="Title").render(RecordingBackend())

        # Assert
        assert result.success
        assert result.document is None
        assert result.page_count == 0
        assert "Content is empty" in caplog.text

    def test_render_when_geometry_degenerate_then_failure_not_exception(self, printer, caplog):
        # Arrange
        printer.set_margins(200)

        # Act
        with caplog.at_level(logging.ERROR):
            result = printer.render(RecordingBackend())

        # Assert
        assert not result.success
        assert result.document is None
        assert "body lines" in result.error
        assert "Render failed" in caplog.text

    def test_render_when_page_limit_exceeded_then_failure(self, printer):
        printer.max_pages = 2
        result = printer.render(RecordingBackend())
        assert not result.success
        assert "limit 2" in result.error

    def test_render_when_title_set_then_passed_to_document(self, printer):
        # Arrange
        backend = RecordingBackend()
        printer.title = "Minutes"

        # Act
        printer.render(backend)

        # Assert
        assert backend.last.title == "Minutes"

    def test_render_when_metrics_raise_key_error_then_lines_left_aligned(self, caplog):
        # Arrange
        metrics = MagicMock()
        metrics.measure_width.side_effect = KeyError("no glyph")
        backend = RecordingBackend(metrics=metrics)
        printer = TextPrinter("a", header="H", footer="F")

        # Act
        with caplog.at_level(logging.WARNING):
            result = printer.render(backend)

        # Assert
        assert result.success
        margin = printer.geometry().margin_left
        header, body, footer = backend.last.commands
        assert (header.text, header.x) == ("H", margin)
        assert (footer.text, footer.x) == ("F", margin)
        assert "Could not measure" in caplog.text

    def test_render_when_metrics_return_garbage_then_failure_not_exception(self):
        # Arrange
        metrics = MagicMock()
        metrics.measure_width.return_value = None
        printer = TextPrinter("a", header="H")

        # Act
        result = printer.render(RecordingBackend(metrics=metrics))

        # Assert
        assert not result.success
        assert result.document is None
        assert result.error.startswith("TypeError")


class TestTextPrinterSnapshot:
    """Configuration is read once per render pass."""

    def test_render_context_when_printer_changed_later_then_snapshot_unchanged(self, printer):
        # Arrange
        ctx = printer.render_context()

        # Act
        printer.content = "changed"
        printer.font_size = 30
        printer.set_margins(5)

        # Assert
        assert len(ctx.content_lines) == 130
        assert ctx.body.size == 12
        assert ctx.geometry.margin_top == pytest.approx(mm_to_pt(20))

    def test_render_when_config_mutated_mid_render_then_pass_unaffected(self, printer):
        # Arrange
        backend = RecordingBackend(on_create=lambda doc: setattr(printer, "content", "other"))

        # Act
        result = printer.render(backend)

        # Assert
        assert result.page_count == 3
        assert "line 130" in backend.last.pages[-1].texts


class TestTextPrinterPrint:
    """Tests for print() and save()."""

    def test_print_when_confirmed_then_printed(self, printer):
        # Arrange
        sent = []

        # Act
        result = printer.print(CallbackPrintBackend(sent.append), RecordingBackend())

        # Assert
        assert result.printed
        assert not result.cancelled
        assert result.success
        assert sent == [result.render.document]

    def test_print_when_declined_then_cancelled_not_error(self, printer):
        # Arrange
        sink = MagicMock()

        # Act
        result = printer.print(CallbackPrintBackend(sink, confirm=lambda doc: False), RecordingBackend())

        # Assert
        assert not result.printed
        assert result.cancelled
        assert result.success
        sink.assert_not_called()

    def test_print_when_backend_fails_then_error_reported(self, printer):
        # Arrange
        sink = MagicMock(side_effect=BackendError("out of paper"))

        # Act
        result = printer.print(CallbackPrintBackend(sink), RecordingBackend())

        # Assert
        assert not result.printed
        assert not result.cancelled
        assert not result.success
        assert result.error == "out of paper"

    def test_print_when_render_fails_then_backend_not_used(self, printer):
        # Arrange
        printer.set_margins(200)
        sink = MagicMock()

        # Act
        result = printer.print(CallbackPrintBackend(sink), RecordingBackend())

        # Assert
        assert not result.success
        assert result.error
        sink.assert_not_called()

    def test_print_when_empty_content_then_nothing_printed(self):
        # Arrange
        sink = MagicMock()

        # Act
        result = TextPrinter("").print(CallbackPrintBackend(sink), RecordingBackend())

        # Assert
        assert result.success
        assert not result.printed
        assert not result.cancelled
        sink.assert_not_called()

    def test_save_when_called_then_pdf_written(self, printer, tmp_path):
        # Arrange
        path = tmp_path / "out" / "notes.pdf"

        # Act
        result = printer.save(path)

        # Assert
        assert result.printed
        assert path.read_bytes().startswith(b"%PDF")
