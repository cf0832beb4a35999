"""NiceGUI interface: document ingestion view and conversation view."""

import html
import logging
import re

from nicegui import events, ui

from src import __version__
from src.client.backend import get_backend_client
from src.conversation.engine import ConversationEngine
from src.ingestion.uploader import Uploader
from src.models.schemas import Exchange, IngestMode, PdfFile, Role
from src.session.controller import SessionController, View

logger = logging.getLogger(__name__)

APP_TITLE = "ResearchCore"


def markdown_to_html(text: str) -> str:
    """Convert markdown to HTML for chat display.

    Supports: bold, italic, inline code, code blocks, links, lists.
    """
    # Escape HTML entities, quotes included, first
    text = html.escape(text, quote=True)

    text = re.sub(
        r"```(\w*)\n?([\s\S]*?)```",
        r'<pre class="bg-gray-900 text-gray-100 rounded-lg p-3 my-2 overflow-x-auto text-xs"><code>\2</code></pre>',
        text,
    )
    text = re.sub(
        r"`([^`]+)`",
        r'<code class="bg-white/10 text-pink-300 px-1.5 py-0.5 rounded text-xs">\1</code>',
        text,
    )

    text = re.sub(r"\*\*(.+?)\*\*", r"<strong>\1</strong>", text)
    text = re.sub(r"__(.+?)__", r"<strong>\1</strong>", text)
    text = re.sub(r"\*([^*]+)\*", r"<em>\1</em>", text)
    text = re.sub(r"(?<!\w)_([^_]+)_(?!\w)", r"<em>\1</em>", text)

    text = re.sub(
        r"\[([^\]]+)\]\((https?://[^)\s]+)\)",
        r'<a href="\2" class="text-purple-300 underline" target="_blank">\1</a>',
        text,
    )

    text = _wrap_list_items(text, r"^[-*]\s+", "ul", "list-disc")
    text = _wrap_list_items(text, r"^\d+\.\s+", "ol", "list-decimal")

    return text.replace("\n", "<br>")


def _wrap_list_items(text: str, marker: str, tag: str, style: str) -> str:
    """Group consecutive list lines matching ``marker`` into one list element."""
    in_list = False
    result = []
    for line in text.split("\n"):
        stripped = line.strip()
        if re.match(marker, stripped):
            if not in_list:
                result.append(f'<{tag} class="{style} list-inside my-2 space-y-1">')
                in_list = True
            result.append(f"<li>{re.sub(marker, '', stripped)}</li>")
        else:
            if in_list:
                result.append(f"</{tag}>")
                in_list = False
            result.append(line)
    if in_list:
        result.append(f"</{tag}>")
    return "\n".join(result)


CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #0a0a0a; color: white; min-height: 100vh; }

    .glass {
        background: rgba(255, 255, 255, 0.05);
        border: 1px solid rgba(255, 255, 255, 0.1);
        border-radius: 16px;
        backdrop-filter: blur(16px);
    }

    .brand { background: linear-gradient(135deg, #9333ea 0%, #2563eb 100%); }

    .message-user {
        background: rgba(37, 99, 235, 0.2);
        border: 1px solid rgba(59, 130, 246, 0.3);
        border-radius: 16px 4px 16px 16px;
    }

    .message-assistant {
        background: rgba(255, 255, 255, 0.05);
        border: 1px solid rgba(255, 255, 255, 0.1);
        border-radius: 4px 16px 16px 16px;
    }

    .avatar-user { background: linear-gradient(135deg, #3b82f6 0%, #06b6d4 100%); }
    .avatar-assistant { background: linear-gradient(135deg, #a855f7 0%, #ec4899 100%); }

    .typing-dot {
        width: 8px; height: 8px;
        background: #c084fc;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }

    .error-banner {
        background: rgba(239, 68, 68, 0.1);
        border: 1px solid rgba(239, 68, 68, 0.2);
        color: #fecaca;
        border-radius: 8px;
    }
</style>
"""


def render_avatar(role: Role) -> None:
    is_user = role is Role.USER
    css = "avatar-user" if is_user else "avatar-assistant"
    icon = "person" if is_user else "smart_toy"
    with ui.element("div").classes(
        f"w-8 h-8 rounded-full flex items-center justify-center shrink-0 {css}"
    ):
        ui.icon(icon).classes("text-white text-base")


def render_message(exchange: Exchange) -> None:
    is_user = exchange.role is Role.USER
    align = "justify-end" if is_user else "justify-start"
    bubble = "message-user" if is_user else "message-assistant"

    with ui.row().classes(f"w-full {align} gap-3 items-start no-wrap"):
        if not is_user:
            render_avatar(exchange.role)
        with ui.element("div").classes(f"px-4 py-3 max-w-[80%] {bubble}"):
            # Render markdown for assistant, plain text for user
            if is_user:
                content = html.escape(exchange.content).replace("\n", "<br>")
            else:
                content = markdown_to_html(exchange.content)
            ui.html(content, sanitize=False).classes("text-sm leading-relaxed text-gray-100")
        if is_user:
            render_avatar(exchange.role)


def render_pending_indicator() -> None:
    """Typing dots shown while an answer is pending. Not a transcript entry."""
    with ui.row().classes("w-full justify-start gap-3 items-start"):
        render_avatar(Role.ASSISTANT)
        with ui.element("div").classes("message-assistant px-4 py-3"):
            with ui.row().classes("gap-1 items-center"):
                for _ in range(3):
                    ui.element("div").classes("typing-dot")


def upload_label(has_file: bool) -> str:
    """Drop zone prompt, reworded once a file is already chosen."""
    if has_file:
        return "Drop another PDF here, or click to browse, to replace it"
    return "Drag & drop your research paper here, or click to browse"


def render_ingestion(controller: SessionController) -> None:
    """Upload area with PDF and URL modes.

    A fresh Uploader is built every time this view is shown, so the draft
    of a previous ingestion never survives into the next one.
    """

    def on_uploader_change() -> None:
        file_area.refresh()
        submit_buttons.refresh()
        error_banner.refresh()

    uploader = Uploader(
        get_backend_client(),
        on_complete=controller.activate,
        on_change=on_uploader_change,
    )

    async def handle_upload(e: events.UploadEventArguments) -> None:
        content = await e.file.read()
        logger.debug(f"Picked {e.file.name} ({e.file.content_type}, {len(content)} bytes)")
        uploader.select_file(
            PdfFile(name=e.file.name, content_type=e.file.content_type or "", content=content)
        )

    @ui.refreshable
    def file_area() -> None:
        file = uploader.draft.file
        if file is not None:
            with ui.row().classes(
                "items-center gap-3 p-4 rounded-lg bg-blue-500/20 border border-blue-500/50"
            ):
                ui.icon("description").classes("text-3xl text-blue-400")
                with ui.column().classes("gap-0"):
                    ui.label(file.name).classes("text-sm font-medium text-white")
                    ui.label(file.size_label).classes("text-xs text-gray-400")
                ui.button(icon="close", on_click=uploader.clear_file).props(
                    "flat round dense color=red-4"
                )

        # Stays visible with a chosen file so a new drop replaces it
        ui.upload(
            label=upload_label(file is not None),
            on_upload=handle_upload,
            auto_upload=True,
            max_files=1,
        ).props('accept=.pdf flat bordered color="blue-9"').classes("w-full")

    @ui.refreshable
    def submit_buttons() -> None:
        is_pdf = uploader.mode is IngestMode.PDF
        if is_pdf and uploader.draft.file is None:
            return
        if uploader.uploading:
            label = "Processing..."
        else:
            label = "Start Analysis" if is_pdf else "Fetch & Analyze"
        button = ui.button(label, on_click=uploader.submit).classes(
            "w-full py-3 brand text-white rounded-xl"
        )
        if uploader.uploading:
            button.props("loading")
        button.set_enabled(uploader.can_submit)

    @ui.refreshable
    def error_banner() -> None:
        if uploader.error:
            with ui.row().classes("w-full items-center gap-2 p-3 text-sm error-banner"):
                ui.icon("error_outline").classes("text-red-500")
                ui.label(uploader.error)

    with ui.column().classes("w-full max-w-2xl mx-auto items-stretch gap-6"):
        with ui.column().classes("w-full items-center text-center gap-4"):
            ui.label("Chat with your Research").classes("text-5xl font-bold tracking-tight")
            ui.label(
                "Upload a paper or paste a URL to instantly extract insights, summaries, "
                "and answers strictly grounded in the text."
            ).classes("text-xl text-gray-400")

        with ui.column().classes("w-full glass p-6 gap-4"):
            ui.toggle(
                {IngestMode.PDF: "Upload PDF", IngestMode.URL: "Paper URL"},
                value=uploader.mode,
                on_change=lambda e: uploader.set_mode(e.value),
            ).props("spread no-caps toggle-color=purple-7").classes("w-full")

            with ui.column().classes("w-full gap-4").bind_visibility_from(
                uploader, "mode", backward=lambda mode: mode is IngestMode.PDF
            ):
                file_area()

            with ui.column().classes("w-full gap-2").bind_visibility_from(
                uploader, "mode", backward=lambda mode: mode is IngestMode.URL
            ):
                ui.input(
                    label="Research Paper URL",
                    placeholder="https://arxiv.org/pdf/...",
                    on_change=lambda e: uploader.set_url(e.value),
                ).props("dark outlined").classes("w-full")

            submit_buttons()
            error_banner()


def render_conversation(controller: SessionController, engine: ConversationEngine) -> None:
    """Transcript, pending indicator and question box for one session."""
    scroll: ui.scroll_area

    @ui.refreshable
    def messages() -> None:
        for exchange in engine.transcript:
            render_message(exchange)
        if engine.is_pending:
            render_pending_indicator()

    def on_engine_change() -> None:
        messages.refresh()
        send_btn.set_enabled(engine.can_submit)
        scroll.scroll_to(percent=1.0)

    async def send() -> None:
        engine.input_text = input_field.value or ""
        await engine.submit()

    def on_input(e: events.ValueChangeEventArguments) -> None:
        engine.input_text = e.value or ""
        send_btn.set_enabled(engine.can_submit)

    with ui.column().classes("w-full max-w-4xl mx-auto glass gap-0 overflow-hidden").style(
        "height: 600px"
    ):
        with ui.row().classes(
            "w-full px-4 py-3 items-center justify-between border-b border-white/10 bg-black/20"
        ):
            with ui.row().classes("items-center gap-2"):
                ui.icon("auto_awesome").classes("text-yellow-400")
                ui.label(engine.session.display_name).classes(
                    "text-gray-200 font-medium truncate max-w-xs"
                )
            ui.button("Change Document", on_click=controller.discard).props(
                "flat dense no-caps size=sm color=grey-6"
            )

        with ui.scroll_area().classes("flex-grow w-full") as scroll:
            with ui.column().classes("w-full p-4 gap-6"):
                messages()

        with ui.row().classes("w-full p-4 gap-2 items-center no-wrap border-t border-white/10 bg-black/20"):
            input_field = (
                ui.input(
                    placeholder="Ask a question about the paper...",
                    on_change=on_input,
                )
                .props("dark outlined dense")
                .classes("flex-grow")
                .bind_value(engine, "input_text")
                .on("keydown.enter.prevent", send)
            )
            send_btn = ui.button(icon="send", on_click=send).props("flat round color=white")
            send_btn.set_enabled(engine.can_submit)

    engine.on_change = on_engine_change
    scroll.scroll_to(percent=1.0)


@ui.page("/")
def chat_page() -> None:
    """Main page. One SessionController per browser tab."""
    ui.add_head_html(CUSTOM_CSS)

    controller = SessionController(get_backend_client(), on_change=lambda: content.refresh())

    @ui.refreshable
    def content() -> None:
        if controller.view is View.INGESTION or controller.engine is None:
            render_ingestion(controller)
        else:
            render_conversation(controller, controller.engine)

    with ui.column().classes("w-full max-w-6xl mx-auto px-4 py-8 min-h-screen gap-12"):
        with ui.row().classes("w-full items-center justify-between"):
            with ui.row().classes("items-center gap-3"):
                with ui.element("div").classes("p-2 rounded-lg brand"):
                    ui.icon("auto_awesome").classes("text-white text-2xl")
                ui.label(APP_TITLE).classes("text-2xl font-bold")
            ui.label(f"v{__version__}").classes("text-sm text-gray-500")

        with ui.column().classes("w-full flex-grow items-center justify-center"):
            content()

