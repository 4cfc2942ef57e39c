"""Unit tests for DocumentsView and DocumentDetailView."""

import json

import httpx
import pytest_check as check

from wellnessai.api import DocumentsApi
from wellnessai.models.documents import UpdateDocumentRequest
from wellnessai.views import DocumentDetailView, DocumentsView


def _doc(**overrides) -> dict:
    data = {
        "id": "d1",
        "title": "Sleep journal",
        "content": "Woke up twice, felt tired.",
        "type": "note",
        "tags": ["sleep"],
        "status": "draft",
        "wordCount": 5,
        "createdAt": "2024-01-01T08:00:00Z",
        "updatedAt": "2024-01-01T08:00:00Z",
    }
    data.update(overrides)
    return data


INSIGHTS = {
    "summary": "Fragmented sleep",
    "recommendations": ["Keep a regular bedtime"],
    "riskFactors": [],
    "keywords": ["sleep"],
    "sentiment": "neutral",
}


class DocumentsServer:
    def __init__(self, insights_status: int = 200, update_status: int = 200) -> None:
        self.insights_status = insights_status
        self.update_status = update_status
        self.calls: list[tuple[str, str, dict | None]] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path.removeprefix("/wellness-documents")
        body = json.loads(request.content) if request.content else None
        self.calls.append((request.method, path, body))

        if path == "" and request.method == "GET":
            return httpx.Response(200, json=[_doc(), _doc(id="d2", type="symptom", title="Headache")])
        if path == "" and request.method == "POST":
            return httpx.Response(201, json=_doc(id="d3", **{k: v for k, v in body.items() if k != "id"}))
        if path == "/stats":
            return httpx.Response(200, json={"totalDocuments": 2, "totalWords": 10})
        if path == "/search":
            return httpx.Response(200, json=[_doc(id="d2", type="symptom", title="Headache")])
        if path == "/generate-insights":
            return httpx.Response(200, json=INSIGHTS)
        if path == "/d1/insights":
            return httpx.Response(self.insights_status, json=_doc(aiInsights=INSIGHTS))
        if path == "/d1" and request.method == "GET":
            return httpx.Response(200, json=_doc())
        if path == "/d1" and request.method == "PUT":
            return httpx.Response(self.update_status, json=_doc(**body))
        if path == "/missing":
            return httpx.Response(404, json={"message": "Document not found"})
        if request.method == "DELETE":
            return httpx.Response(200, json={"message": "deleted"})
        return httpx.Response(404, json={})


class TestDocumentsView:
    async def test_load_and_type_filter(self, make_client, notifier) -> None:
        async with make_client(DocumentsServer()) as client:
            view = DocumentsView(DocumentsApi(client), notifier)
            await view.load()

        check.equal(len(view.documents), 2)
        check.equal(view.stats.total_documents, 2)
        view.selected_type = "symptom"
        check.equal([d.id for d in view.filtered_documents], ["d2"])

    async def test_blank_search_reloads_all(self, make_client, notifier) -> None:
        server = DocumentsServer()
        async with make_client(server) as client:
            view = DocumentsView(DocumentsApi(client), notifier)
            view.search_query = "  "
            await view.search()
            view.search_query = "head"
            await view.search()

        check.equal([path for _, path, _ in server.calls], ["", "/search"])
        check.equal([d.id for d in view.documents], ["d2"])

    async def test_create_requires_fields(self, make_client, notifier) -> None:
        server = DocumentsServer()
        async with make_client(server) as client:
            view = DocumentsView(DocumentsApi(client), notifier)
            created = await view.create("Title", "   ")

        check.is_none(created)
        check.equal(server.calls, [])
        check.equal(notifier.errors, ["Please fill in all required fields"])

    async def test_create_and_delete(self, make_client, notifier) -> None:
        server = DocumentsServer()
        async with make_client(server) as client:
            view = DocumentsView(DocumentsApi(client), notifier)
            created = await view.create("Water", "Drank 2L", "note", ["hydration"])
            deleted = await view.delete("d1")

        check.equal(created.id, "d3")
        check.equal(created.tags, ["hydration"])
        check.is_true(deleted)
        check.equal(notifier.successes, ["Document created successfully", "Document deleted"])


class TestDocumentDetailView:
    async def test_missing_document_redirects(self, make_client, notifier) -> None:
        async with make_client(DocumentsServer()) as client:
            view = DocumentDetailView(DocumentsApi(client), notifier, "missing")
            redirect = await view.load()

        check.equal(redirect, "/documents")
        check.equal(notifier.errors, ["Failed to load document"])

    async def test_save_requires_fields(self, make_client, notifier) -> None:
        async with make_client(DocumentsServer()) as client:
            view = DocumentDetailView(DocumentsApi(client), notifier, "d1")
            await view.load()
            saved = await view.save(UpdateDocumentRequest(title="", content="x"))

        check.is_false(saved)
        check.equal(notifier.errors, ["Please fill in all required fields"])

    async def test_generate_and_save_insights(self, make_client, notifier) -> None:
        async with make_client(DocumentsServer()) as client:
            view = DocumentDetailView(DocumentsApi(client), notifier, "d1")
            await view.load()
            await view.generate_insights()
            saved = await view.save_insights()

        check.is_true(saved)
        check.equal(view.insights.summary, "Fragmented sleep")
        check.equal(view.document.ai_insights.summary, "Fragmented sleep")
        check.equal(
            notifier.successes, ["AI insights generated successfully!", "Insights saved successfully!"]
        )

    async def test_insights_save_falls_back_to_update(self, make_client, notifier) -> None:
        server = DocumentsServer(insights_status=404)
        async with make_client(server) as client:
            view = DocumentDetailView(DocumentsApi(client), notifier, "d1")
            await view.load()
            await view.generate_insights()
            saved = await view.save_insights()

        check.is_true(saved)
        check.is_in(("PUT", "/d1"), [(m, p) for m, p, _ in server.calls])
        check.equal(notifier.successes[-1], "Document updated successfully!")
        check.is_not_none(view.insights)

    async def test_both_saves_fail_keeps_insights_local(self, make_client, notifier) -> None:
        server = DocumentsServer(insights_status=500, update_status=500)
        async with make_client(server) as client:
            view = DocumentDetailView(DocumentsApi(client), notifier, "d1")
            await view.load()
            await view.generate_insights()
            saved = await view.save_insights()

        check.is_false(saved)
        check.equal(notifier.errors, ["Failed to save insights. Insights are stored locally."])
        check.equal(view.insights.summary, "Fragmented sleep")
