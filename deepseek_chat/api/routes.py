"""Chat completion and attachment upload endpoints.

The chat route proxies a conversation to the hosted model with server-side
credentials. The upload route runs a single file through the ingestor.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, UploadFile, status

from deepseek_chat.client.completion import RemoteCompletionClient, get_completion_client
from deepseek_chat.errors import MissingCredentialError, RemoteRequestError
from deepseek_chat.models.schemas import (
    AttachmentResponse,
    ChatRequest,
    ChatResponse,
    RawFile,
)
from deepseek_chat.parsing.ingest import Rejected, ingest_file

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])

MAX_UPLOAD_SIZE = 10 * 1024 * 1024  # 10MB


def _validate_filename(filename: str | None) -> str:
    """Validate that the upload carries a filename.

    Args:
        filename: The uploaded filename.

    Returns:
        The validated filename.

    Raises:
        HTTPException: 400 if the filename is missing.
    """
    if not filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Filename is required",
        )
    return filename


async def _read_and_validate_size(file: UploadFile) -> bytes:
    """Read file content and validate size.

    Args:
        file: The uploaded file.

    Returns:
        File content as bytes.

    Raises:
        HTTPException: 413 if file exceeds size limit.
    """
    content = await file.read()

    if len(content) > MAX_UPLOAD_SIZE:
        size_mb = len(content) / (1024 * 1024)
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)",
        )

    return content


@router.post("/chat", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    client: RemoteCompletionClient = Depends(get_completion_client),
) -> ChatResponse:
    """Send a conversation to the selected model and return its reply.

    Raises:
        422: Invalid payload (empty messages, last message not from user).
        500: No API key configured for the selected model.
        502: The remote provider failed or returned a non-2xx status.
    """
    logger.info(f"Chat request: model={request.model.value}, messages={len(request.messages)}")

    try:
        reply = await client.complete(request.messages, request.model)
    except MissingCredentialError as e:
        logger.error(f"Chat request rejected: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        ) from e
    except RemoteRequestError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        ) from e

    return ChatResponse(reply=reply, model=request.model)


@router.post("/upload", response_model=AttachmentResponse)
async def upload_attachment(file: UploadFile) -> AttachmentResponse:
    """Upload one file and return its classification and extracted text.

    Args:
        file: The uploaded file (multipart/form-data).

    Returns:
        AttachmentResponse with kind, extracted text or preview reference.

    Raises:
        400: Missing filename or unsupported file type.
        413: File exceeds 10MB limit.
    """
    filename = _validate_filename(file.filename)
    content = await _read_and_validate_size(file)

    result = await ingest_file(
        RawFile(filename=filename, content=content, mime_type=file.content_type or "")
    )
    if isinstance(result, Rejected):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=result.reason,
        )

    attachment = result.attachment
    logger.info(f"Ingested attachment: {filename} ({attachment.kind.value})")

    return AttachmentResponse(
        filename=filename,
        kind=attachment.kind,
        extracted_text=attachment.extracted_text,
        preview_reference=attachment.preview_reference,
        degraded=result.degraded,
    )
