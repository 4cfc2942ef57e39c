"""Document list and document detail view-models."""

import asyncio
import logging

from wellnessai.api.documents import DocumentsApi
from wellnessai.api.errors import ApiError
from wellnessai.models.documents import (
    CreateDocumentRequest,
    DocumentInsights,
    DocumentStats,
    DocumentType,
    GenerateInsightsRequest,
    InsightContext,
    SearchParams,
    UpdateDocumentRequest,
    WellnessDocument,
)
from wellnessai.views.notify import Notifier

logger = logging.getLogger(__name__)


def _insight_request(content: str, doc_type: DocumentType | None) -> GenerateInsightsRequest:
    return GenerateInsightsRequest(
        content=content,
        type=doc_type,
        context=InsightContext(health_conditions=[], medications=[]),
    )


class DocumentsView:
    """Document list page: load, search, create, delete."""

    def __init__(self, documents_api: DocumentsApi, notifier: Notifier) -> None:
        self._api = documents_api
        self._notifier = notifier
        self.documents: list[WellnessDocument] = []
        self.stats: DocumentStats | None = None
        self.search_query = ""
        self.selected_type: DocumentType | None = None
        self.is_loading = False
        self.is_creating = False
        self.last_insights: DocumentInsights | None = None

    @property
    def filtered_documents(self) -> list[WellnessDocument]:
        if self.selected_type is None:
            return list(self.documents)
        return [doc for doc in self.documents if doc.type == self.selected_type]

    async def load(self) -> None:
        await asyncio.gather(self.load_documents(), self.load_stats())

    async def load_documents(self) -> None:
        self.is_loading = True
        try:
            self.documents = await self._api.get_documents()
        except ApiError as e:
            logger.error(f"Failed to load documents: {e}")
            self._notifier.error("Failed to load documents")
        finally:
            self.is_loading = False

    async def load_stats(self) -> None:
        # Stats are decorative; failures are only logged
        try:
            self.stats = await self._api.get_stats()
        except ApiError as e:
            logger.error(f"Failed to load stats: {e}")

    async def search(self) -> None:
        if not self.search_query.strip():
            await self.load_documents()
            return
        try:
            self.documents = await self._api.search_documents(
                SearchParams(q=self.search_query.strip(), type=self.selected_type)
            )
        except ApiError as e:
            logger.error(f"Search failed: {e}")
            self._notifier.error("Search failed")

    async def create(
        self,
        title: str,
        content: str,
        doc_type: DocumentType = "note",
        tags: list[str] | None = None,
    ) -> WellnessDocument | None:
        if not title.strip() or not content.strip():
            self._notifier.error("Please fill in all required fields")
            return None
        self.is_creating = True
        try:
            document = await self._api.create_document(
                CreateDocumentRequest(title=title, content=content, type=doc_type, tags=tags or [])
            )
        except ApiError as e:
            logger.error(f"Failed to create document: {e}")
            self._notifier.error("Failed to create document")
            return None
        finally:
            self.is_creating = False
        self._notifier.success("Document created successfully")
        await self.load()
        return document

    async def delete(self, document_id: str) -> bool:
        try:
            await self._api.delete_document(document_id)
        except ApiError as e:
            logger.error(f"Failed to delete document: {e}")
            self._notifier.error("Failed to delete document")
            return False
        self._notifier.success("Document deleted")
        await self.load()
        return True

    async def generate_insights(
        self, content: str, doc_type: DocumentType | None = None
    ) -> DocumentInsights | None:
        try:
            self.last_insights = await self._api.generate_insights(
                _insight_request(content, doc_type)
            )
        except ApiError as e:
            logger.error(f"Failed to generate insights: {e}")
            self._notifier.error("Failed to generate insights")
            return None
        self._notifier.success("Insights generated!")
        return self.last_insights


class DocumentDetailView:
    """Single document page: edit, generate and save insights.

    Generated insights are held locally until saved. When the insights
    endpoint rejects a save, the document fields are saved instead and the
    insights stay local.
    """

    def __init__(self, documents_api: DocumentsApi, notifier: Notifier, document_id: str) -> None:
        self._api = documents_api
        self._notifier = notifier
        self.document_id = document_id
        self.document: WellnessDocument | None = None
        self.insights: DocumentInsights | None = None
        self.is_loading = False
        self.is_generating = False

    async def load(self) -> str | None:
        """Fetch the document.

        Returns:
            "/documents" when it could not be loaded, None otherwise.
        """
        self.is_loading = True
        try:
            self.document = await self._api.get_document(self.document_id)
        except ApiError as e:
            logger.error(f"Failed to load document: {e}")
            self._notifier.error("Failed to load document")
            return "/documents"
        finally:
            self.is_loading = False
        self.insights = self.document.ai_insights
        return None

    async def save(self, update: UpdateDocumentRequest) -> bool:
        if not (update.title or "").strip() or not (update.content or "").strip():
            self._notifier.error("Please fill in all required fields")
            return False
        try:
            self.document = await self._api.update_document(self.document_id, update)
        except ApiError as e:
            logger.error(f"Failed to update document: {e}")
            self._notifier.error("Failed to update document")
            return False
        self._notifier.success("Document updated successfully")
        return True

    async def generate_insights(self) -> DocumentInsights | None:
        if self.document is None:
            return None
        self.is_generating = True
        try:
            self.insights = await self._api.generate_insights(
                _insight_request(self.document.content, self.document.type)
            )
        except ApiError as e:
            logger.error(f"Failed to generate insights: {e}")
            self._notifier.error("Failed to generate insights")
            return None
        finally:
            self.is_generating = False
        self._notifier.success("AI insights generated successfully!")
        return self.insights

    async def save_insights(self) -> bool:
        if self.document is None or self.insights is None:
            return False

        to_save = DocumentInsights(
            summary=self.insights.summary or "",
            recommendations=self.insights.recommendations,
            risk_factors=self.insights.risk_factors,
            keywords=self.insights.keywords,
            sentiment=self.insights.sentiment or "neutral",
        )
        try:
            self.document = await self._api.save_insights(self.document_id, to_save)
        except ApiError as e:
            logger.error(f"Failed to save insights: {e}")
        else:
            self._notifier.success("Insights saved successfully!")
            return True

        doc = self.document
        fallback = UpdateDocumentRequest(
            title=doc.title,
            content=doc.content,
            type=doc.type,
            tags=doc.tags,
            status=doc.status,
            metadata=doc.metadata,
        )
        try:
            self.document = await self._api.update_document(self.document_id, fallback)
        except ApiError as e:
            logger.error(f"Fallback save also failed: {e}")
            self._notifier.error("Failed to save insights. Insights are stored locally.")
            return False
        self._notifier.success("Document updated successfully!")
        return True
