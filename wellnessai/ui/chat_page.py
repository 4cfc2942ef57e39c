"""NiceGUI chat page with the simulated streaming reveal."""

import html

from nicegui import ui

from wellnessai.chat.controller import ChatController, ChatState
from wellnessai.context import AppContext
from wellnessai.models.chat import Message
from wellnessai.ui.layout import guard, page_frame
from wellnessai.ui.markdown import markdown_to_html
from wellnessai.ui.notifier import UiNotifier

SUGGESTIONS = [
    "How can I improve my sleep?",
    "Suggest a healthy meal plan",
    "Help me manage stress",
    "Create a workout routine",
]
VOICE_TRANSCRIPT = "This is a simulated voice message about my wellness goals."


def _avatar(is_user: bool) -> None:
    color = "bg-emerald-500" if is_user else "bg-gray-500"
    with ui.element("div").classes(f"w-9 h-9 rounded-full flex items-center justify-center {color}"):
        ui.icon("person" if is_user else "spa").classes("text-white text-lg")


def _bubble(content_html: str, is_user: bool, time: str = "") -> ui.html:
    align = "justify-end" if is_user else "justify-start"
    with ui.row().classes(f"w-full {align} gap-3 items-end"):
        if not is_user:
            _avatar(False)
        with ui.column().classes("max-w-[70%] gap-1"):
            with ui.element("div").classes(
                f"px-4 py-3 {'message-user' if is_user else 'message-assistant'}"
            ):
                body = ui.html(content_html, sanitize=False).classes("text-sm leading-relaxed")
            if time:
                ui.label(time).classes("text-[10px] text-gray-400")
        if is_user:
            _avatar(True)
    return body


def _render_message(message: Message) -> None:
    is_user = message.role == "user"
    content = (
        html.escape(message.content).replace("\n", "<br>")
        if is_user
        else markdown_to_html(message.content)
    )
    _bubble(content, is_user, message.timestamp.strftime("%I:%M %p"))


def register_chat_page(ctx: AppContext) -> None:
    @ui.page("/chat")
    async def chat_page() -> None:
        if not guard(ctx):
            return
        page_frame(ctx)

        rendered = {"count": -1}

        def on_change() -> None:
            if len(controller.messages) != rendered["count"]:
                messages_view.refresh()
            streaming_body.set_content(markdown_to_html(controller.streaming_text))
            streaming_row.set_visibility(controller.state is ChatState.STREAMING)
            thinking.set_visibility(controller.state is ChatState.SENDING)
            stop_btn.set_visibility(controller.state is ChatState.STREAMING)
            send_btn.set_enabled(not controller.is_busy)

        controller = ChatController(
            ctx.chat,
            ctx.usage,
            UiNotifier(),
            pacing=ctx.config.stream_pacing,
            on_change=on_change,
        )

        @ui.refreshable
        def messages_view() -> None:
            rendered["count"] = len(controller.messages)
            if not controller.messages:
                with ui.column().classes("w-full items-center py-12 gap-3"):
                    ui.label("Welcome to WellnessAI!").classes("text-lg font-semibold")
                    ui.label(
                        "Ask me about mental health, nutrition, exercise, sleep, "
                        "or any wellness-related topics."
                    ).classes("text-gray-500")
                    with ui.row().classes("gap-2 justify-center"):
                        for suggestion in SUGGESTIONS:
                            ui.button(
                                suggestion, on_click=lambda s=suggestion: controller.submit(s)
                            ).props("outline no-caps size=sm")
                return
            for message in controller.messages:
                _render_message(message)

        async def send() -> None:
            text = input_field.value or ""
            input_field.value = ""
            await controller.submit(text)

        async def send_voice() -> None:
            ui.notify("Voice message processed!", type="positive")
            await controller.submit(VOICE_TRANSCRIPT, voice=True)

        with ui.column().classes("w-full max-w-4xl mx-auto p-4 gap-4"):
            with ui.row().classes("w-full items-center justify-between"):
                with ui.column().classes("gap-0"):
                    ui.label("Chat with WellnessAI").classes("text-2xl font-bold")
                    ui.label("Your personal AI wellness assistant is here to help").classes(
                        "text-gray-500"
                    )
                ui.button("Clear History", icon="delete", on_click=controller.clear_history).props(
                    "outline no-caps"
                )

            with ui.card().classes("w-full p-0"):
                with ui.scroll_area().classes("w-full h-[60vh] bg-gray-50"):
                    with ui.column().classes("w-full p-5 gap-4"):
                        messages_view()
                        with ui.row().classes("w-full justify-start gap-3 items-end") as thinking:
                            _avatar(False)
                            ui.spinner("dots", size="lg").classes("text-emerald-500")
                        with ui.column().classes("w-full") as streaming_row:
                            streaming_body = _bubble("", is_user=False)

                with ui.row().classes("w-full p-4 gap-3 items-end border-t bg-white"):
                    input_field = (
                        ui.textarea(placeholder="Type a message...")
                        .props("autogrow borderless dense rows=1")
                        .classes("flex-grow")
                        .on("keydown.enter.prevent", send)
                    )
                    ui.button(icon="mic", on_click=send_voice).props("flat round")
                    stop_btn = ui.button(icon="stop", on_click=controller.stop).props(
                        "round unelevated color=red"
                    )
                    send_btn = ui.button(icon="send", on_click=send).props("round unelevated")

        thinking.set_visibility(False)
        streaming_row.set_visibility(False)
        stop_btn.set_visibility(False)
        await controller.load_history()
        messages_view.refresh()
