"""Chat session orchestration.

Ties the attachment ingestor, message assembler, completion client and
conversation store together for one browser session.
"""

import logging
from collections.abc import Callable

from deepseek_chat.chat.assembler import assemble_message, build_request_messages, display_text
from deepseek_chat.chat.store import ConversationStore
from deepseek_chat.client.completion import MODEL_PROFILES, RemoteCompletionClient
from deepseek_chat.errors import CompletionError
from deepseek_chat.models.schemas import Attachment, ConversationTurn, ModelSelector, RawFile, Role
from deepseek_chat.parsing.ingest import ingest_files, summarize

logger = logging.getLogger(__name__)


class ChatSession:
    """Manages chat state for a user session.

    Holds the conversation store, the pending attachments and the loading
    flag. All mutation happens from the single event-handling context.
    """

    def __init__(self, model: ModelSelector, client: RemoteCompletionClient) -> None:
        self.model = model
        self.store = ConversationStore()
        self.attachments: list[Attachment] = []
        self.is_loading: bool = False
        self._client = client
        self.store.add(Role.ASSISTANT, self.greeting)

    @property
    def greeting(self) -> str:
        name = MODEL_PROFILES[self.model].display_name
        return f"Hello! I am an AI chatbot powered by {name}."

    async def add_files(self, files: list[RawFile]) -> list[str]:
        """Ingest selected files and keep the accepted ones.

        Args:
            files: Selected files in selection order.

        Returns:
            Notices for rejected or degraded files, to show the user.
        """
        results = await ingest_files(files)
        attachments, notices = summarize(results)
        self.attachments.extend(attachments)
        logger.info(f"Added {len(attachments)} attachments")
        return notices

    def remove_attachment(self, attachment_id: str) -> None:
        self.attachments = [a for a in self.attachments if a.id != attachment_id]

    def can_submit(self, text: str) -> bool:
        return not self.is_loading and bool(text.strip() or self.attachments)

    async def submit(
        self,
        text: str,
        on_pending: Callable[[], None] | None = None,
    ) -> ConversationTurn | None:
        """Send typed text plus pending attachments and record the reply.

        The user turn shows the typed text only; the request carries the
        assembled content. Failures become an assistant turn starting with
        ``Error:``. Pending attachments are cleared whatever the outcome.

        Args:
            text: The text typed by the user.
            on_pending: Called once the user turn is recorded, before the call.

        Returns:
            The assistant turn appended, or None if nothing was submitted.
        """
        if not self.can_submit(text):
            return None

        attachments, self.attachments = self.attachments, []
        history = self.store.snapshot()
        self.store.add(Role.USER, display_text(text, attachments))
        self.is_loading = True

        try:
            content = assemble_message(text, attachments)
            logger.info(
                f"Submitting message ({len(content)} chars, {len(attachments)} attachments)"
            )
            messages = build_request_messages(history, content)
            if on_pending is not None:
                on_pending()
            reply = await self._client.complete(messages, self.model)
            return self.store.add(Role.ASSISTANT, reply)
        except CompletionError as e:
            logger.error(f"Chat error: {e}")
            return self.store.add(Role.ASSISTANT, f"Error: {e}")
        finally:
            self.is_loading = False
            self.attachments = []
