"""
Tests for the command-line entry point.
"""

import io
import json

import pytest

from textpager import PrintResult, RenderResult, TextPrinter
from textpager.cli import build_parser, main


@pytest.fixture
def content_file(tmp_path, numbered_lines):
    path = tmp_path / "notes.txt"
    path.write_text(numbered_lines(80), encoding="utf-8")
    return path


class TestCliOutput:
    """PDF and PNG output."""

    def test_main_when_output_given_then_pdf_written(self, content_file, tmp_path):
        # Arrange
        out = tmp_path / "result.pdf"

        # Act
        code = main([str(content_file), "-o", str(out), "--header", "Title", "--footer", "page"])

        # Assert
        assert code == 0
        assert out.read_bytes().startswith(b"%PDF")

    def test_main_when_no_output_then_next_to_input(self, content_file):
        code = main([str(content_file)])
        assert code == 0
        assert content_file.with_suffix(".pdf").exists()

    def test_main_when_stdin_then_content_read(self, monkeypatch, tmp_path):
        # Arrange
        monkeypatch.setattr("sys.stdin", io.StringIO("from\nstdin\n"))
        out = tmp_path / "stdin.pdf"

        # Act
        code = main(["-", "-o", str(out)])

        # Assert
        assert code == 0
        assert out.exists()

    def test_main_when_png_dir_then_page_images_exported(self, content_file, tmp_path):
        # Arrange
        png_dir = tmp_path / "png"

        # Act
        code = main([str(content_file), "-o", str(tmp_path / "x.pdf"), "--png-dir", str(png_dir), "--dpi", "36"])

        # Assert: 80 lines at 58 per page
        assert code == 0
        assert sorted(p.name for p in png_dir.iterdir()) == ["page-001.png", "page-002.png"]

    def test_main_when_print_cancelled_then_exit_zero(self, content_file, monkeypatch):
        # Arrange
        cancelled = PrintResult(printed=False, cancelled=True, render=RenderResult(success=True))
        monkeypatch.setattr(TextPrinter, "print", lambda self, *args, **kwargs: cancelled)

        # Act & Assert
        assert main([str(content_file), "--print"]) == 0


class TestCliMaxLines:
    """--max-lines reports capacity with the effective configuration."""

    def test_max_lines_when_defaults_then_58(self, content_file, capsys):
        assert main([str(content_file), "--max-lines"]) == 0
        assert capsys.readouterr().out.strip() == "58"

    def test_max_lines_when_escaped_newline_in_header_then_two_header_lines(self, content_file, capsys):
        """(728.5 - 2*20 - 20 - 12) / 12 = 54.7."""
        main([str(content_file), "--max-lines", "--header", "A\\nB"])
        assert capsys.readouterr().out.strip() == "54"

    def test_max_lines_when_header_file_then_read_from_file(self, content_file, tmp_path, capsys):
        # Arrange
        header = tmp_path / "header.txt"
        header.write_text("A\nB\n", encoding="utf-8")

        # Act
        main([str(content_file), "--max-lines", "--header-file", str(header)])

        # Assert
        assert capsys.readouterr().out.strip() == "54"

    def test_max_lines_when_settings_file_then_applied(self, content_file, tmp_path, capsys):
        """(728.5 - 20 - 24) / 24 = 28.5."""
        # Arrange
        settings = tmp_path / "settings.json"
        settings.write_text(json.dumps({"font_size": 24}), encoding="utf-8")

        # Act
        main([str(content_file), "--max-lines", "--settings", str(settings)])

        # Assert
        assert capsys.readouterr().out.strip() == "28"

    def test_max_lines_when_flag_and_settings_then_flag_wins(self, content_file, tmp_path, capsys):
        # Arrange
        settings = tmp_path / "settings.json"
        settings.write_text(json.dumps({"font_size": 24}), encoding="utf-8")

        # Act
        main([str(content_file), "--max-lines", "--settings", str(settings), "--font-size", "12"])

        # Assert
        assert capsys.readouterr().out.strip() == "58"

    def test_main_when_save_settings_then_effective_settings_written(self, content_file, tmp_path):
        # Arrange
        settings = tmp_path / "settings.json"

        # Act
        main([str(content_file), "--max-lines", "--settings", str(settings), "--save-settings", "--margin", "15"])

        # Assert
        saved = json.loads(settings.read_text(encoding="utf-8"))
        assert saved["margin_top_mm"] == pytest.approx(15)
        assert saved["margin_left_mm"] == pytest.approx(15)


class TestCliErrors:
    """Exit codes for bad input."""

    def test_main_when_margins_too_large_then_exit_one(self, content_file, tmp_path):
        out = tmp_path / "x.pdf"
        assert main([str(content_file), "-o", str(out), "--margin", "200"]) == 1
        assert not out.exists()

    def test_main_when_input_missing_then_exit_one(self, tmp_path):
        assert main([str(tmp_path / "nope.txt")]) == 1

    def test_parser_when_unknown_format_then_exits(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["notes.txt", "--format", "B5"])

    def test_parser_when_format_lowercase_then_accepted(self):
        args = build_parser().parse_args(["notes.txt", "--format", "a5"])
        assert args.page_format == "A5"

    def test_parser_when_header_and_header_file_then_exits(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["notes.txt", "--header", "x", "--header-file", "h.txt"])

    def test_main_when_save_settings_without_settings_then_exits(self, content_file, capsys):
        # Act
        with pytest.raises(SystemExit) as exc_info:
            main([str(content_file), "--max-lines", "--save-settings"])

        # Assert
        assert exc_info.value.code == 2
        assert "--save-settings requires --settings" in capsys.readouterr().err
