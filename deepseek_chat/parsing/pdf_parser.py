"""PDF text extraction using pypdf.

Pages are read in order and prefixed with a page marker so the model can
refer to them.
"""

import io
import logging

from pydantic import BaseModel, Field
from pypdf import PdfReader
from pypdf.errors import PdfReadError

from deepseek_chat.errors import ExtractionError

logger = logging.getLogger(__name__)

PDF_MAGIC_BYTES = b"%PDF"
PAGE_MARKER = "=== Page {number} ==="


class PDFContent(BaseModel):
    """Text decoded from a PDF attachment.

    Attributes:
        text: Marked page texts, empty if no page had any text.
        pages: Number of pages in the document.
    """

    text: str
    pages: int = Field(ge=0)


class PDFParseError(ExtractionError):
    """Raised when a PDF cannot be opened or a page cannot be decoded."""


def _check_header(file_content: bytes) -> None:
    if not file_content:
        raise PDFParseError("Empty file provided")
    if not file_content.lstrip()[:10].startswith(PDF_MAGIC_BYTES):
        raise PDFParseError("Invalid PDF: file does not start with PDF header")


def _open(file_content: bytes) -> PdfReader:
    try:
        return PdfReader(io.BytesIO(file_content))
    except PdfReadError as e:
        raise PDFParseError(f"Corrupt or invalid PDF: {e}") from e
    except Exception as e:
        raise PDFParseError(f"Failed to read PDF: {e}") from e


def _page_text(reader: PdfReader, number: int) -> str:
    try:
        return reader.pages[number - 1].extract_text() or ""
    except Exception as e:
        raise PDFParseError(f"Failed to extract text from page {number}: {e}") from e


def parse_pdf(file_content: bytes) -> PDFContent:
    """Extract the text of every page, in page order.

    Pages without text are skipped. The others are joined by a blank line,
    each starting with its ``=== Page N ===`` marker. A single failing page
    fails the whole document.

    Args:
        file_content: Raw bytes of the PDF file.

    Returns:
        PDFContent with the marked text and the page count.

    Raises:
        PDFParseError: If the file is not a readable PDF or a page fails.
    """
    _check_header(file_content)
    reader = _open(file_content)
    try:
        total = len(reader.pages)
    except Exception as e:
        raise PDFParseError(f"Failed to read PDF: {e}") from e

    sections: list[str] = []
    for number in range(1, total + 1):
        page_text = _page_text(reader, number)
        if page_text.strip():
            sections.append(f"{PAGE_MARKER.format(number=number)}\n{page_text}")

    if not sections:
        logger.warning(f"No extractable text in {total} page(s), likely a scanned document")

    return PDFContent(text="\n\n".join(sections), pages=total)
