"""DOCX parsing module using python-docx."""

import io
import logging

from docx import Document

from deepseek_chat.errors import ExtractionError

logger = logging.getLogger(__name__)


class DocxParseError(ExtractionError):
    """Raised when a DOCX document cannot be decoded."""

    pass


def parse_docx(file_content: bytes) -> str:
    """Extract the raw text of a DOCX document.

    Paragraphs are separated by a blank line. Table rows follow the body
    paragraphs with their non-empty cells joined by tabs.

    Args:
        file_content: Raw bytes of the .docx file.

    Returns:
        The document text, empty if the document has no text.

    Raises:
        DocxParseError: If the bytes are not a readable DOCX package.
    """
    if not file_content:
        raise DocxParseError("Empty file provided")

    try:
        document = Document(io.BytesIO(file_content))
    except Exception as e:
        raise DocxParseError(f"Failed to read DOCX: {e}") from e

    parts = [para.text for para in document.paragraphs if para.text.strip()]

    for table in document.tables:
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
            if cells:
                parts.append("\t".join(cells))

    return "\n\n".join(parts)
