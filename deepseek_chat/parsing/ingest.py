"""Attachment ingestion: classification and per-file text extraction.

Each selected file yields one IngestResult. Unsupported files are rejected,
failed extractions degrade to fallback text, and nothing here touches the
network. Results are aggregated once by ``summarize``.
"""

import asyncio
import base64
import logging
from typing import Literal

from pydantic import BaseModel

from deepseek_chat.errors import UnsupportedFileTypeError
from deepseek_chat.models.schemas import Attachment, AttachmentKind, RawFile
from deepseek_chat.parsing.docx_parser import DocxParseError, parse_docx
from deepseek_chat.parsing.pdf_parser import PDFParseError, parse_pdf

logger = logging.getLogger(__name__)

DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
ACCEPTED_TYPES = "image/*,application/pdf,.pdf,.docx,text/plain,.txt"
PDF_FALLBACK_TEXT = (
    'PDF file "{filename}" was uploaded, but its text could not be extracted. '
    "Please describe its content or ask your question about the PDF."
)


class Ingested(BaseModel):
    """A file that became an attachment.

    Attributes:
        attachment: The ingested attachment.
        degraded: True when extraction failed and fallback text was used.
        reason: Why extraction degraded, if it did.
    """

    status: Literal["ingested"] = "ingested"
    attachment: Attachment
    degraded: bool = False
    reason: str | None = None


class Rejected(BaseModel):
    """A file that was skipped because its type is not supported."""

    status: Literal["rejected"] = "rejected"
    filename: str
    reason: str


IngestResult = Ingested | Rejected


def classify(mime_type: str | None, filename: str) -> AttachmentKind | None:
    """Classify a file by MIME type and filename extension.

    Args:
        mime_type: MIME type reported for the file (may be empty).
        filename: Original filename.

    Returns:
        The attachment kind, or None if the file is not supported.
    """
    mime = (mime_type or "").lower()
    name = filename.lower()

    if mime.startswith("image/"):
        return AttachmentKind.IMAGE
    if mime == "application/pdf" or name.endswith(".pdf"):
        return AttachmentKind.PDF
    if mime == DOCX_MIME_TYPE or name.endswith(".docx"):
        return AttachmentKind.DOCX
    if mime == "text/plain" or name.endswith(".txt"):
        return AttachmentKind.TEXT
    return None


def encode_data_url(content: bytes, mime_type: str) -> str:
    """Encode image bytes as a base64 data URL for previews."""
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{mime_type or 'application/octet-stream'};base64,{encoded}"


async def _extract_pdf(raw: RawFile) -> tuple[str, str | None]:
    try:
        pdf_content = await asyncio.to_thread(parse_pdf, raw.content)
    except PDFParseError as e:
        logger.warning(f"PDF parse error for {raw.filename}: {e}")
        return PDF_FALLBACK_TEXT.format(filename=raw.filename), str(e)
    logger.info(
        f"PDF text extracted ({len(pdf_content.text)} chars, "
        f"{pdf_content.pages} pages): {raw.filename}"
    )
    return pdf_content.text, None


async def _extract_docx(raw: RawFile) -> tuple[str, str | None]:
    try:
        text = await asyncio.to_thread(parse_docx, raw.content)
    except DocxParseError as e:
        logger.exception(f"DOCX parse error for {raw.filename}")
        return "", str(e)
    logger.info(f"DOCX text extracted ({len(text)} chars): {raw.filename}")
    return text, None


async def ingest_file(raw: RawFile) -> IngestResult:
    """Turn one selected file into an attachment or a rejection.

    Args:
        raw: The selected file.

    Returns:
        Ingested with the attachment, or Rejected for unsupported types.
    """
    kind = classify(raw.mime_type, raw.filename)
    if kind is None:
        error = UnsupportedFileTypeError(raw.filename)
        logger.info(f"Skipping file: {error}")
        return Rejected(filename=raw.filename, reason=str(error))

    common = {"filename": raw.filename, "mime_type": raw.mime_type, "content": raw.content}

    if kind is AttachmentKind.IMAGE:
        attachment = Attachment(
            kind=kind,
            preview_reference=encode_data_url(raw.content, raw.mime_type),
            **common,
        )
        logger.info(f"Image processed: {raw.filename}")
        return Ingested(attachment=attachment)

    if kind is AttachmentKind.PDF:
        text, failure = await _extract_pdf(raw)
    elif kind is AttachmentKind.DOCX:
        text, failure = await _extract_docx(raw)
    else:
        text, failure = raw.content.decode("utf-8", errors="replace"), None
        logger.info(f"Text file read ({len(text)} chars): {raw.filename}")

    attachment = Attachment(kind=kind, extracted_text=text, **common)
    return Ingested(attachment=attachment, degraded=failure is not None, reason=failure)


async def ingest_files(files: list[RawFile]) -> list[IngestResult]:
    """Ingest files one at a time, keeping selection order."""
    logger.info(f"Processing {len(files)} files...")
    results: list[IngestResult] = []
    for raw in files:
        results.append(await ingest_file(raw))
    return results


def summarize(results: list[IngestResult]) -> tuple[list[Attachment], list[str]]:
    """Split ingestion results into attachments and user-visible notices.

    Args:
        results: Per-file results in selection order.

    Returns:
        Tuple of (accepted attachments, notices for rejected/degraded files).
    """
    attachments: list[Attachment] = []
    notices: list[str] = []
    for result in results:
        if isinstance(result, Rejected):
            notices.append(result.reason)
            continue
        attachments.append(result.attachment)
        if result.degraded:
            notices.append(f"Could not extract text from {result.attachment.filename}")
    return attachments, notices
