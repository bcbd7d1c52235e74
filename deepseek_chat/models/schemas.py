import uuid
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class AttachmentKind(str, Enum):
    """Classified category of an attachment."""

    IMAGE = "image"
    PDF = "pdf"
    DOCX = "docx"
    TEXT = "text"


class Role(str, Enum):
    """Speaker of a conversation turn."""

    USER = "user"
    ASSISTANT = "assistant"


class ModelSelector(str, Enum):
    """The two supported chat models."""

    DEEPSEEK_V3 = "deepseek-v3"
    DEEPSEEK_R1 = "deepseek-r1"


def _new_id() -> str:
    return uuid.uuid4().hex


class RawFile(BaseModel):
    """A user-selected file before ingestion.

    Attributes:
        filename: Original file name including extension.
        content: Raw bytes of the file.
        mime_type: MIME type reported by the browser (may be empty).
    """

    filename: str
    content: bytes
    mime_type: str = ""


class Attachment(BaseModel):
    """A selected file plus its derived preview or extracted text.

    Image attachments carry only a preview reference (a base64 data URL).
    Every other kind carries only extracted text, which may be empty.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    filename: str
    mime_type: str = ""
    content: bytes = Field(repr=False)
    kind: AttachmentKind
    preview_reference: str | None = Field(default=None, repr=False)
    extracted_text: str | None = Field(default=None, repr=False)

    @model_validator(mode="after")
    def check_payload_matches_kind(self) -> "Attachment":
        """Enforce exactly one of preview_reference / extracted_text per kind."""
        if self.kind is AttachmentKind.IMAGE:
            if self.preview_reference is None or self.extracted_text is not None:
                raise ValueError("image attachments carry a preview reference only")
        elif self.extracted_text is None or self.preview_reference is not None:
            raise ValueError(f"{self.kind.value} attachments carry extracted text only")
        return self


class ConversationTurn(BaseModel):
    """One message in the conversation. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    role: Role
    text: str
    created_at: datetime = Field(default_factory=datetime.now)


class ChatMessage(BaseModel):
    """A single entry of the outgoing ``messages`` array.

    Attributes:
        role: The speaker identifier (system, user or assistant).
        content: The message text.
    """

    role: str = Field(..., pattern="^(system|user|assistant)$")
    content: str


class ChatRequest(BaseModel):
    """Request payload for the chat completion endpoint.

    Attributes:
        model: Which of the two supported models to use.
        messages: Conversation history ending with the new user message.
    """

    model: ModelSelector = ModelSelector.DEEPSEEK_V3
    messages: list[ChatMessage] = Field(..., min_length=1)

    @field_validator("messages")
    @classmethod
    def last_message_from_user(cls, v: list[ChatMessage]) -> list[ChatMessage]:
        """Reject histories that do not end with a user message."""
        if v[-1].role != Role.USER.value:
            raise ValueError("the last message must have role 'user'")
        return v


class ChatResponse(BaseModel):
    """Reply from the remote model.

    Attributes:
        reply: The assistant's reply text.
        model: The model selector that produced it.
    """

    reply: str
    model: ModelSelector


class AttachmentResponse(BaseModel):
    """Response after attachment upload processing.

    Attributes:
        filename: Name of the uploaded file.
        kind: Classified attachment kind.
        extracted_text: Extracted text for documents, None for images.
        preview_reference: Data URL for images, None for documents.
        degraded: Whether extraction failed and a fallback was used.
    """

    filename: str
    kind: AttachmentKind
    extracted_text: str | None = None
    preview_reference: str | None = None
    degraded: bool = False
