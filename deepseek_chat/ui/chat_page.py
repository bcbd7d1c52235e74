"""NiceGUI chat interface with attachment support."""

from nicegui import events, ui

from deepseek_chat.chat.session import ChatSession
from deepseek_chat.client.completion import MODEL_PROFILES, get_completion_client
from deepseek_chat.models.schemas import (
    Attachment,
    AttachmentKind,
    ConversationTurn,
    ModelSelector,
    Role,
)
from deepseek_chat.parsing.ingest import ACCEPTED_TYPES
from deepseek_chat.ui.markdown import markdown_to_html, plain_to_html
from deepseek_chat.ui.uploads import read_uploads

MODEL_PATHS: dict[ModelSelector, str] = {
    ModelSelector.DEEPSEEK_V3: "/",
    ModelSelector.DEEPSEEK_R1: "/deepseek-r1",
}

MAX_UPLOAD_SIZE = 10 * 1024 * 1024  # 10MB

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<link href="https://fonts.googleapis.com/icon?family=Material+Icons" rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f5f5f5; min-height: 100vh; }

    .app-container {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        overflow: hidden;
    }

    .header { background: linear-gradient(135deg, #4d6bfe 0%, #1e3a8a 100%); }

    .model-tab { color: rgba(255, 255, 255, 0.7); }
    .model-tab-active { background: rgba(255, 255, 255, 0.2); color: white; }

    .message-user {
        background: linear-gradient(135deg, #4d6bfe 0%, #1e3a8a 100%);
        color: white;
        border-radius: 18px 18px 4px 18px;
    }

    .message-assistant {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
    }

    .avatar-user { background: linear-gradient(135deg, #4d6bfe 0%, #1e3a8a 100%); }
    .avatar-assistant { background: #6b7280; }

    .typing-dot {
        width: 8px; height: 8px;
        background: #4d6bfe;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }

    .input-box {
        background: #f9fafb;
        border: 1px solid #e5e7eb;
        border-radius: 12px;
        transition: border-color 0.2s;
    }
    .input-box:focus-within { border-color: #4d6bfe; }

    .send-btn { background: linear-gradient(135deg, #4d6bfe 0%, #1e3a8a 100%) !important; }

    .attachment-chip { background: #eef2ff; border-radius: 8px; }

    /* Markdown styling */
    .message-assistant strong { font-weight: 600; }
    .message-assistant em { font-style: italic; }
    .message-assistant pre { margin: 0.5rem 0; }
    .message-assistant code { font-family: 'Menlo', 'Monaco', monospace; }
    .message-assistant ul, .message-assistant ol { margin: 0.5rem 0; }
    .message-assistant a { color: #4f46e5; }
</style>
"""

_KIND_ICONS = {
    AttachmentKind.PDF: "picture_as_pdf",
    AttachmentKind.DOCX: "description",
    AttachmentKind.TEXT: "article",
}


def build_chat_page(model: ModelSelector) -> None:
    """Render the chat page for one model."""
    ui.add_head_html(CUSTOM_CSS)
    session = ChatSession(model, get_completion_client())
    profile = MODEL_PROFILES[model]

    messages_container: ui.column
    attachments_row: ui.row
    input_field: ui.textarea
    send_btn: ui.button

    def render_avatar(is_user: bool) -> None:
        css = "avatar-user" if is_user else "avatar-assistant"
        icon = "person" if is_user else "smart_toy"
        avatar_classes = f"w-9 h-9 rounded-full flex items-center justify-center {css}"
        with ui.element("div").classes(avatar_classes):
            ui.icon(icon).classes("text-white text-lg")

    def render_message(turn: ConversationTurn) -> None:
        is_user = turn.role is Role.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-assistant"

        with ui.row().classes(f"w-full {align} gap-3 items-end"):
            if not is_user:
                render_avatar(False)
            with ui.column().classes("max-w-[70%] gap-1"):
                with ui.element("div").classes(f"px-4 py-3 {bubble}"):
                    # Render markdown for assistant, literal text for user
                    content = plain_to_html(turn.text) if is_user else markdown_to_html(turn.text)
                    ui.html(content, sanitize=False).classes("text-sm leading-relaxed")
                ui.label(turn.created_at.strftime("%I:%M %p")).classes(
                    f"text-[10px] text-gray-400 {'self-end' if is_user else 'self-start'}"
                )
            if is_user:
                render_avatar(True)

    def render_status_indicator() -> None:
        with ui.row().classes("w-full justify-start gap-3 items-end"):
            render_avatar(False)
            with ui.element("div").classes("message-assistant px-4 py-3"):
                with ui.row().classes("items-center gap-2"):
                    with ui.row().classes("gap-1"):
                        for _ in range(3):
                            ui.element("div").classes("typing-dot")
                    ui.label("Thinking...").classes("text-sm text-gray-500 italic")

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            for turn in session.store.snapshot():
                render_message(turn)
            if session.is_loading:
                render_status_indicator()

    def render_attachment(attachment: Attachment) -> None:
        with ui.row().classes("attachment-chip items-center gap-2 px-2 py-1"):
            if attachment.kind is AttachmentKind.IMAGE:
                ui.image(attachment.preview_reference).classes("w-8 h-8 rounded")
            else:
                ui.icon(_KIND_ICONS[attachment.kind]).classes("text-indigo-500")
            ui.label(attachment.filename).classes("text-xs max-w-[10rem] truncate")
            ui.button(
                icon="close",
                on_click=lambda a=attachment: remove_attachment(a.id),
            ).props("flat round dense size=xs")

    def refresh_attachments() -> None:
        attachments_row.clear()
        with attachments_row:
            for attachment in session.attachments:
                render_attachment(attachment)
        attachments_row.set_visibility(bool(session.attachments))

    def remove_attachment(attachment_id: str) -> None:
        session.remove_attachment(attachment_id)
        refresh_attachments()

    async def handle_upload(e: events.MultiUploadEventArguments) -> None:
        # One batch per selection so files are ingested in order
        for notice in await session.add_files(await read_uploads(e.files)):
            ui.notify(notice, type="warning")
        refresh_attachments()

    async def send_message() -> None:
        text = input_field.value or ""
        if not session.can_submit(text):
            return

        input_field.value = ""
        send_btn.disable()

        def on_pending() -> None:
            """Show the user turn and the typing indicator while the call is in flight."""
            refresh_messages()
            refresh_attachments()

        try:
            await session.submit(text, on_pending=on_pending)
        finally:
            send_btn.enable()
            refresh_messages()
            refresh_attachments()

    def new_chat() -> None:
        nonlocal session
        session = ChatSession(model, get_completion_client())
        refresh_messages()
        refresh_attachments()

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-3xl mx-auto app-container").style(
            "height: calc(100vh - 4rem)"
        ),
    ):
        # Header with model tabs
        with ui.row().classes("w-full header px-5 py-4 items-center justify-between"):
            with ui.row().classes("items-center gap-3"):
                ui.icon("smart_toy").classes("text-white text-3xl")
                ui.label(profile.display_name).classes("text-lg font-semibold text-white")
            with ui.row().classes("items-center gap-2"):
                for selector, path in MODEL_PATHS.items():
                    tab_css = "model-tab-active" if selector is model else "model-tab"
                    ui.button(
                        MODEL_PROFILES[selector].display_name,
                        on_click=lambda p=path: ui.navigate.to(p),
                    ).props("flat no-caps").classes(f"rounded-md text-sm {tab_css}")
                ui.button(icon="add", on_click=new_chat).props("flat round color=white")

        # Messages
        with (
            ui.scroll_area().classes("flex-grow w-full bg-gray-50"),
            ui.column().classes("w-full p-5"),
        ):
            messages_container = ui.column().classes("w-full gap-4")

        # Pending attachments
        attachments_row = ui.row().classes("w-full px-4 pt-3 gap-2 flex-wrap")

        # Input
        with ui.row().classes("w-full p-4 gap-3 items-end bg-white border-t"):
            ui.upload(
                on_multi_upload=handle_upload,
                multiple=True,
                auto_upload=True,
                max_file_size=MAX_UPLOAD_SIZE,
                on_rejected=lambda: ui.notify("File too large (max 10MB)", type="warning"),
            ).props(f'accept="{ACCEPTED_TYPES}" flat dense').classes("w-48")
            with ui.element("div").classes("flex-grow input-box px-3 py-2"):
                input_field = (
                    ui.textarea(placeholder="Type a message...")
                    .props("autogrow borderless dense rows=1")
                    .classes("w-full")
                    .on("keydown.enter.prevent", send_message)
                )
            send_btn = (
                ui.button(icon="send", on_click=send_message)
                .props("round unelevated")
                .classes("send-btn")
            )

    refresh_messages()
    refresh_attachments()


@ui.page("/")
def deepseek_v3_page() -> None:
    """Chat page for DeepSeek V3."""
    build_chat_page(ModelSelector.DEEPSEEK_V3)


@ui.page("/deepseek-r1")
def deepseek_r1_page() -> None:
    """Chat page for DeepSeek R1."""
    build_chat_page(ModelSelector.DEEPSEEK_R1)


def main() -> None:
    ui.run(title="DeepSeek Chat", port=8080, reload=False)


if __name__ == "__main__":
    main()
