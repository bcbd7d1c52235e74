"""Outgoing message assembly.

Pure functions of the current input state: the same text and attachments
always produce the same message.
"""

from collections.abc import Sequence

from deepseek_chat.models.schemas import Attachment, AttachmentKind, ChatMessage, ConversationTurn

ATTACHMENT_PLACEHOLDER = "[Attachment added]"


def display_text(text: str, attachments: Sequence[Attachment]) -> str:
    """Text shown for the user turn: trimmed input or the attachment placeholder."""
    trimmed = text.strip()
    if trimmed:
        return trimmed
    return ATTACHMENT_PLACEHOLDER if attachments else ""


def assemble_message(text: str, attachments: Sequence[Attachment]) -> str:
    """Merge typed text with attachment content into one outgoing message.

    Document attachments contribute their full extracted text under a
    separator naming the file. Images contribute only a summary line with
    their filenames; their bytes are not sent.

    Args:
        text: The text typed by the user.
        attachments: Ingested attachments in selection order.

    Returns:
        The message content, empty if there is neither text nor attachments.
    """
    content = display_text(text, attachments)

    doc_text = "\n\n".join(
        f"\n\n--- File: {a.filename} ---\n{a.extracted_text}"
        for a in attachments
        if a.kind is not AttachmentKind.IMAGE and a.extracted_text
    )
    if doc_text:
        content += doc_text

    images = [a for a in attachments if a.kind is AttachmentKind.IMAGE]
    if images:
        names = ", ".join(a.filename for a in images)
        content += f"\n\n[{len(images)} image(s) attached: {names}]"

    return content


def build_request_messages(
    history: Sequence[ConversationTurn], content: str
) -> list[ChatMessage]:
    """Prior turns in order, followed by the new user message."""
    messages = [ChatMessage(role=turn.role.value, content=turn.text) for turn in history]
    messages.append(ChatMessage(role="user", content=content))
    return messages
