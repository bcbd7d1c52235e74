"""Unit tests for outgoing message assembly."""

import pytest_check as check

from deepseek_chat.chat.assembler import (
    ATTACHMENT_PLACEHOLDER,
    assemble_message,
    build_request_messages,
    display_text,
)
from deepseek_chat.models.schemas import Attachment, AttachmentKind, ConversationTurn, Role


def _doc(filename: str, text: str, kind: AttachmentKind = AttachmentKind.TEXT) -> Attachment:
    return Attachment(filename=filename, content=text.encode(), kind=kind, extracted_text=text)


def _image(filename: str) -> Attachment:
    return Attachment(
        filename=filename,
        mime_type="image/png",
        content=b"img",
        kind=AttachmentKind.IMAGE,
        preview_reference="data:image/png;base64,aW1n",
    )


class TestDisplayText:
    """Tests for the text shown in the user turn."""

    def test_trims_typed_text(self) -> None:
        """Typed text is trimmed."""
        assert display_text("  Hallo \n", []) == "Hallo"

    def test_placeholder_when_only_attachments(self) -> None:
        """Empty text with attachments uses the placeholder."""
        assert display_text("   ", [_image("a.png")]) == ATTACHMENT_PLACEHOLDER

    def test_empty_without_anything(self) -> None:
        """No text and no attachments gives an empty string."""
        assert display_text("", []) == ""


class TestAssembleMessage:
    """Tests for merging typed text with attachment content."""

    def test_text_only(self) -> None:
        """Without attachments the message is the trimmed text."""
        assert assemble_message(" Hallo ", []) == "Hallo"

    def test_document_blocks_follow_text_in_order(self) -> None:
        """Each document adds a labeled block in attachment order."""
        message = assemble_message(
            "Summarize",
            [_doc("a.txt", "alpha"), _doc("b.pdf", "beta", AttachmentKind.PDF)],
        )

        assert message == (
            "Summarize"
            "\n\n--- File: a.txt ---\nalpha"
            "\n\n"
            "\n\n--- File: b.pdf ---\nbeta"
        )

    def test_documents_are_never_truncated(self) -> None:
        """The full extracted text is included."""
        long_text = "word " * 50_000
        message = assemble_message("Read this", [_doc("long.txt", long_text)])

        assert message.endswith(long_text)

    def test_documents_without_text_are_skipped(self) -> None:
        """Attachments with empty extracted text add no block."""
        message = assemble_message("Hi", [_doc("empty.docx", "", AttachmentKind.DOCX)])

        assert message == "Hi"

    def test_images_add_summary_line(self) -> None:
        """Images are summarized by count and filename, never inlined."""
        message = assemble_message("Look", [_image("a.png"), _image("b.jpg")])

        check.equal(message, "Look\n\n[2 image(s) attached: a.png, b.jpg]")
        check.is_not_in("base64", message)

    def test_empty_text_with_attachment_is_not_empty(self) -> None:
        """The placeholder keeps attachment-only messages non-empty."""
        message = assemble_message("", [_doc("notes.txt", "content")])

        check.is_true(message.startswith(ATTACHMENT_PLACEHOLDER))
        check.is_in("--- File: notes.txt ---\ncontent", message)

    def test_documents_before_image_summary(self) -> None:
        """Document blocks come before the image summary line."""
        message = assemble_message("Q", [_image("pic.png"), _doc("n.txt", "body")])

        assert message.index("--- File: n.txt ---") < message.index("[1 image(s) attached")

    def test_assembly_is_repeatable(self) -> None:
        """Assembling the same state twice gives identical output."""
        attachments = [_doc("a.txt", "alpha"), _image("b.png")]

        assert assemble_message("x", attachments) == assemble_message("x", attachments)


class TestBuildRequestMessages:
    """Tests for history + new message composition."""

    def test_history_in_turn_order_then_new_message(self) -> None:
        """Prior turns keep their order and the new user message comes last."""
        history = [
            ConversationTurn(role=Role.ASSISTANT, text="Hello!"),
            ConversationTurn(role=Role.USER, text="Hi"),
            ConversationTurn(role=Role.ASSISTANT, text="How can I help?"),
        ]

        messages = build_request_messages(history, "Explain pypdf")

        check.equal(
            [(m.role, m.content) for m in messages],
            [
                ("assistant", "Hello!"),
                ("user", "Hi"),
                ("assistant", "How can I help?"),
                ("user", "Explain pypdf"),
            ],
        )

    def test_empty_history(self) -> None:
        """Without history only the new message is sent."""
        messages = build_request_messages([], "Hallo")

        assert [m.model_dump() for m in messages] == [{"role": "user", "content": "Hallo"}]
