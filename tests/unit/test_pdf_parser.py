"""Unit tests for PDF parser module."""

from unittest.mock import MagicMock, patch

import pytest
import pytest_check as check

from deepseek_chat.errors import ExtractionError
from deepseek_chat.parsing.pdf_parser import PDFParseError, parse_pdf

FAKE_PDF = b"%PDF-1.4\n%fake body for a patched reader"


def _fake_reader(*page_texts: str | Exception) -> MagicMock:
    """Build a PdfReader stand-in whose pages return (or raise) the given values."""
    pages = []
    for value in page_texts:
        page = MagicMock()
        if isinstance(value, Exception):
            page.extract_text.side_effect = value
        else:
            page.extract_text.return_value = value
        pages.append(page)
    reader = MagicMock()
    reader.pages = pages
    return reader


class TestParsePdfValid:
    """Tests for successful PDF parsing."""

    def test_joins_pages_in_order_with_markers(self) -> None:
        """Page texts appear in page order, each after its page marker."""
        reader = _fake_reader("Introduction", "Results", "Conclusion")
        with patch("deepseek_chat.parsing.pdf_parser.PdfReader", return_value=reader):
            result = parse_pdf(FAKE_PDF)

        check.equal(
            result.text,
            "=== Page 1 ===\nIntroduction\n\n"
            "=== Page 2 ===\nResults\n\n"
            "=== Page 3 ===\nConclusion",
        )
        check.equal(result.pages, 3)

    def test_skips_pages_without_text(self) -> None:
        """Empty pages are left out but numbering follows the real page index."""
        reader = _fake_reader("First", "   ", "Third")
        with patch("deepseek_chat.parsing.pdf_parser.PdfReader", return_value=reader):
            result = parse_pdf(FAKE_PDF)

        check.is_in("=== Page 1 ===\nFirst", result.text)
        check.is_in("=== Page 3 ===\nThird", result.text)
        check.is_not_in("=== Page 2 ===", result.text)

    def test_blank_pdf_succeeds_with_empty_text(self, blank_pdf_bytes: bytes) -> None:
        """A real PDF with blank pages parses to empty text."""
        result = parse_pdf(blank_pdf_bytes)

        check.equal(result.pages, 2)
        check.equal(result.text, "")


class TestParsePdfRejection:
    """Tests for PDF validation and rejection."""

    def test_rejects_empty_bytes(self) -> None:
        """Empty bytes raises PDFParseError."""
        with pytest.raises(PDFParseError, match="Empty file"):
            parse_pdf(b"")

    def test_rejects_non_pdf_file(self) -> None:
        """Bytes without a PDF header raise PDFParseError."""
        with pytest.raises(PDFParseError, match="Invalid PDF"):
            parse_pdf(b"This is plain text with a .pdf extension")

    def test_unreadable_document_raises(self) -> None:
        """A reader failure is wrapped in PDFParseError."""
        with (
            patch(
                "deepseek_chat.parsing.pdf_parser.PdfReader",
                side_effect=RuntimeError("broken xref"),
            ),
            pytest.raises(PDFParseError, match="Failed to read PDF"),
        ):
            parse_pdf(FAKE_PDF)

    def test_page_failure_raises(self) -> None:
        """An exception from any page fails the whole document."""
        reader = _fake_reader("Fine", ValueError("bad font"))
        with (
            patch("deepseek_chat.parsing.pdf_parser.PdfReader", return_value=reader),
            pytest.raises(PDFParseError, match="page 2"),
        ):
            parse_pdf(FAKE_PDF)

    def test_parse_error_is_extraction_error(self) -> None:
        """PDFParseError belongs to the extraction error family."""
        check.is_true(issubclass(PDFParseError, ExtractionError))
