"""Unit tests for DOCX parser module."""

import pytest

from deepseek_chat.parsing.docx_parser import DocxParseError, parse_docx


def test_extracts_paragraph_text(docx_bytes: bytes) -> None:
    """Paragraphs are returned in document order."""
    assert parse_docx(docx_bytes) == "Quarterly report\n\nRevenue grew by 12 percent."


def test_rejects_empty_bytes() -> None:
    """Empty bytes raises DocxParseError."""
    with pytest.raises(DocxParseError, match="Empty file"):
        parse_docx(b"")


def test_rejects_non_docx_bytes() -> None:
    """Bytes that are not a DOCX package raise DocxParseError."""
    with pytest.raises(DocxParseError, match="Failed to read DOCX"):
        parse_docx(b"definitely not a zip archive")
