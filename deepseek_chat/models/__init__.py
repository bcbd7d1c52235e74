"""Pydantic models for attachments, conversation turns and API payloads.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - Attachment: Ingested file with preview or extracted text
    - ConversationTurn: One message of the transcript
    - ChatMessage: Entry of the outgoing messages array
    - ChatRequest / ChatResponse: Chat completion endpoint payloads
    - AttachmentResponse: Upload endpoint payload
"""

from deepseek_chat.models.schemas import (
    Attachment,
    AttachmentKind,
    AttachmentResponse,
    ChatMessage,
    ChatRequest,
    ChatResponse,
    ConversationTurn,
    ModelSelector,
    RawFile,
    Role,
)

__all__ = [
    "Attachment",
    "AttachmentKind",
    "AttachmentResponse",
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "ConversationTurn",
    "ModelSelector",
    "RawFile",
    "Role",
]
