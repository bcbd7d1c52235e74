"""Attachment parsing utilities.

Turns user-selected files into attachments the chat can send.

Responsibilities:
    - Classification by MIME type and extension (image, PDF, DOCX, text)
    - PDF text extraction with pypdf, page by page
    - DOCX text extraction with python-docx
    - Fallback text when extraction fails

Output is plain text ready to be appended to the outgoing message.
"""

from deepseek_chat.parsing.docx_parser import DocxParseError, parse_docx
from deepseek_chat.parsing.ingest import (
    Ingested,
    IngestResult,
    Rejected,
    classify,
    ingest_file,
    ingest_files,
    summarize,
)
from deepseek_chat.parsing.pdf_parser import PDFContent, PDFParseError, parse_pdf

__all__ = [
    "DocxParseError",
    "IngestResult",
    "Ingested",
    "PDFContent",
    "PDFParseError",
    "Rejected",
    "classify",
    "ingest_file",
    "ingest_files",
    "parse_docx",
    "parse_pdf",
    "summarize",
]
