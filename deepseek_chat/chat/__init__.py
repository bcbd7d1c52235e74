"""Conversation state and message assembly.

Responsibilities:
    - Append-only conversation store
    - Assembly of typed text and attachment text into one message
    - Session orchestration: ingest, assemble, call, record
"""

from deepseek_chat.chat.assembler import (
    ATTACHMENT_PLACEHOLDER,
    assemble_message,
    build_request_messages,
    display_text,
)
from deepseek_chat.chat.session import ChatSession
from deepseek_chat.chat.store import ConversationStore

__all__ = [
    "ATTACHMENT_PLACEHOLDER",
    "ChatSession",
    "ConversationStore",
    "assemble_message",
    "build_request_messages",
    "display_text",
]
