"""Document list and document detail pages."""

from nicegui import ui

from wellnessai.context import AppContext
from wellnessai.models.documents import DOCUMENT_TYPES, DocumentInsights, UpdateDocumentRequest
from wellnessai.ui.layout import guard, page_frame
from wellnessai.ui.notifier import UiNotifier
from wellnessai.views.documents import DocumentDetailView, DocumentsView

TYPE_LABELS = {doc_type: doc_type.replace("_", " ").title() for doc_type in DOCUMENT_TYPES}


def _insights_panel(insights: DocumentInsights) -> None:
    with ui.card().classes("w-full p-4 gap-2 bg-emerald-50"):
        ui.label("AI Insights").classes("font-semibold")
        if insights.summary:
            ui.label(insights.summary).classes("text-sm")
        for title, items in [
            ("Recommendations", insights.recommendations),
            ("Risk factors", insights.risk_factors),
        ]:
            if items:
                ui.label(title).classes("text-sm font-medium mt-2")
                for item in items:
                    ui.label(f"• {item}").classes("text-sm text-gray-700")
        if insights.keywords:
            with ui.row().classes("gap-1"):
                for keyword in insights.keywords:
                    ui.badge(keyword).props("outline")


def register_documents_pages(ctx: AppContext) -> None:
    @ui.page("/documents")
    async def documents_page() -> None:
        if not guard(ctx):
            return
        page_frame(ctx)
        view = DocumentsView(ctx.documents, UiNotifier())

        @ui.refreshable
        def stats_view() -> None:
            if view.stats is None:
                return
            with ui.row().classes("gap-4"):
                ui.label(f"{view.stats.total_documents} documents").classes("text-sm text-gray-500")
                ui.label(f"{view.stats.total_words} words").classes("text-sm text-gray-500")

        @ui.refreshable
        def list_view() -> None:
            if not view.filtered_documents:
                ui.label("No documents yet.").classes("text-gray-500")
                return
            for doc in view.filtered_documents:
                with ui.card().classes("w-full p-4 gap-1"):
                    with ui.row().classes("w-full items-center justify-between"):
                        ui.link(doc.title, f"/documents/{doc.id}").classes("font-semibold")
                        ui.badge(TYPE_LABELS.get(doc.type, doc.type))
                    ui.label(doc.content[:200]).classes("text-sm text-gray-600")
                    with ui.row().classes("gap-2"):
                        ui.button(
                            "Insights", icon="psychology",
                            on_click=lambda d=doc: view.generate_insights(d.content, d.type),
                        ).props("flat no-caps size=sm")
                        ui.button(icon="delete", on_click=lambda d=doc: delete(d.id)).props(
                            "flat round color=red size=sm"
                        )

        async def refresh_all() -> None:
            stats_view.refresh()
            list_view.refresh()

        async def delete(document_id: str) -> None:
            if await view.delete(document_id):
                await refresh_all()

        async def search() -> None:
            view.search_query = search_input.value or ""
            await view.search()
            list_view.refresh()

        def set_type(value: str) -> None:
            view.selected_type = value or None
            list_view.refresh()

        with ui.dialog() as create_dialog, ui.card().classes("w-[36rem] gap-2"):
            ui.label("New document").classes("text-lg font-semibold")
            title = ui.input("Title", placeholder="Enter a descriptive title...").classes("w-full")
            doc_type = ui.select(TYPE_LABELS, value="note", label="Type").classes("w-full")
            content = ui.textarea(
                "Content",
                placeholder="Describe your symptoms, notes, or health information in detail...",
            ).classes("w-full")
            tags = ui.input("Tags (comma separated)").classes("w-full")

            async def create() -> None:
                tag_list = [t.strip() for t in (tags.value or "").split(",") if t.strip()]
                created = await view.create(
                    title.value or "", content.value or "", doc_type.value, tag_list
                )
                if created is not None:
                    create_dialog.close()
                    title.value = content.value = tags.value = ""
                    await refresh_all()

            with ui.row().classes("w-full justify-end"):
                ui.button("Cancel", on_click=create_dialog.close).props("flat")
                ui.button("Create", on_click=create)

        with ui.column().classes("w-full max-w-5xl mx-auto p-4 gap-4"):
            with ui.row().classes("w-full items-center justify-between"):
                with ui.column().classes("gap-0"):
                    ui.label("Wellness Documents").classes("text-2xl font-bold")
                    stats_view()
                ui.button("New Document", icon="add", on_click=create_dialog.open)
            with ui.row().classes("w-full items-center gap-3"):
                search_input = ui.input(placeholder="Search your wellness documents...").classes(
                    "flex-grow"
                ).on("keydown.enter", search)
                ui.select(
                    {"": "All types", **TYPE_LABELS}, value="",
                    on_change=lambda e: set_type(e.value),
                ).classes("w-40")
                ui.button("Search", icon="search", on_click=search)
            list_view()

        await view.load()
        await refresh_all()

    @ui.page("/documents/{document_id}")
    async def document_detail_page(document_id: str) -> None:
        if not guard(ctx):
            return
        page_frame(ctx)
        view = DocumentDetailView(ctx.documents, UiNotifier(), document_id)
        redirect = await view.load()
        if redirect:
            ui.navigate.to(redirect)
            return
        doc = view.document

        @ui.refreshable
        def insights_view() -> None:
            if view.insights is not None:
                _insights_panel(view.insights)
                ui.button("Save Insights", icon="save", on_click=view.save_insights).props(
                    "outline no-caps"
                )

        async def generate() -> None:
            await view.generate_insights()
            insights_view.refresh()

        async def save() -> None:
            await view.save(UpdateDocumentRequest(
                title=title.value or "",
                content=content.value or "",
                type=doc_type.value,
                tags=doc.tags,
                status=status.value,
                metadata=doc.metadata,
            ))

        with ui.column().classes("w-full max-w-4xl mx-auto p-4 gap-3"):
            ui.button("Back", icon="arrow_back", on_click=lambda: ui.navigate.to("/documents")).props(
                "flat no-caps"
            )
            title = ui.input("Title", value=doc.title).classes("w-full text-lg")
            with ui.row().classes("w-full no-wrap"):
                doc_type = ui.select(TYPE_LABELS, value=doc.type, label="Type").classes("flex-grow")
                status = ui.select(
                    {"draft": "Draft", "published": "Published", "archived": "Archived"},
                    value=doc.status, label="Status",
                ).classes("flex-grow")
            content = ui.textarea("Content", value=doc.content).props("autogrow").classes("w-full")
            if doc.tags:
                with ui.row().classes("gap-1"):
                    for tag in doc.tags:
                        ui.badge(tag).props("outline")
            with ui.row().classes("gap-2"):
                ui.button("Save", icon="save", on_click=save)
                ui.button("Generate Insights", icon="psychology", on_click=generate).props("outline")
            insights_view()
