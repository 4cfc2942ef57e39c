"""Wellness document endpoints (``/wellness-documents``).

Unlike the other resource clients, every failure here is re-raised as
``DocumentApiError`` with a machine-readable code. Cheap guard clauses
(empty/oversized title or content, missing ids) run before any request
is sent.
"""

from typing import Any, Literal

from pydantic import TypeAdapter

from wellnessai.api.client import ApiClient, parse_response, to_payload
from wellnessai.api.errors import (
    ApiError,
    DocumentApiError,
    DocumentValidationError,
    NetworkError,
    ResponseFormatError,
)
from wellnessai.models.auth import MessageResponse
from wellnessai.models.documents import (
    MAX_CONTENT_LENGTH,
    MAX_TITLE_LENGTH,
    BatchOperationResult,
    CreateDocumentRequest,
    DocumentAttachment,
    DocumentInsights,
    DocumentStats,
    DocumentStatus,
    DocumentTemplate,
    DocumentVersion,
    ExportOptions,
    GenerateInsightsRequest,
    PaginatedDocuments,
    SearchParams,
    TagCount,
    UpdateDocumentRequest,
    WellnessDocument,
)


PREFIX = "/wellness-documents"

_documents = TypeAdapter(list[WellnessDocument])
_templates = TypeAdapter(list[DocumentTemplate])
_tags = TypeAdapter(list[TagCount])
_versions = TypeAdapter(list[DocumentVersion])


def validate_document_data(data: CreateDocumentRequest | UpdateDocumentRequest) -> None:
    """Check title and content before they are sent.

    Fields that are None (not being updated) are skipped.

    Raises:
        DocumentApiError: With code VALIDATION_ERROR and one entry per bad field.
    """
    errors: list[DocumentValidationError] = []

    if data.title is not None:
        if not data.title.strip():
            errors.append(DocumentValidationError(
                field="title",
                message="Title is required and must be a non-empty string",
                code="INVALID_TITLE",
            ))
        elif len(data.title) > MAX_TITLE_LENGTH:
            errors.append(DocumentValidationError(
                field="title",
                message=f"Title must be {MAX_TITLE_LENGTH} characters or less",
                code="TITLE_TOO_LONG",
            ))

    if data.content is not None:
        if not data.content.strip():
            errors.append(DocumentValidationError(
                field="content",
                message="Content is required and must be a non-empty string",
                code="INVALID_CONTENT",
            ))
        elif len(data.content) > MAX_CONTENT_LENGTH:
            errors.append(DocumentValidationError(
                field="content",
                message=f"Content must be {MAX_CONTENT_LENGTH:,} characters or less",
                code="CONTENT_TOO_LONG",
            ))

    if errors:
        raise DocumentApiError("Validation failed", "VALIDATION_ERROR", 400, errors)


def _require_id(value: str, name: str = "Document ID", code: str = "INVALID_ID") -> None:
    if not value or not value.strip():
        raise DocumentApiError(f"{name} is required", code, 400)


def _to_document_error(error: ApiError) -> DocumentApiError:
    if isinstance(error, DocumentApiError):
        return error
    if isinstance(error, ResponseFormatError):
        return DocumentApiError(error.message, "INVALID_RESPONSE", error.status_code)
    if isinstance(error, NetworkError) or error.status_code is None:
        return DocumentApiError(error.message or "Network error", "NETWORK_ERROR")

    payload = error.payload if isinstance(error.payload, dict) else {}
    raw_errors = payload.get("validationErrors") or []
    return DocumentApiError(
        error.message or "An error occurred",
        payload.get("code") or "UNKNOWN_ERROR",
        error.status_code,
        [DocumentValidationError.model_validate(e) for e in raw_errors],
    )


def _parse(target: Any, data: Any) -> Any:
    try:
        return parse_response(target, data)
    except ResponseFormatError as e:
        raise _to_document_error(e) from e


class DocumentsApi:
    """Client for the document/journal manager."""

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    async def _call(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
    ) -> Any:
        try:
            return await self._client.request(method, path, json=json, params=params, files=files)
        except ApiError as e:
            raise _to_document_error(e) from e

    # CRUD

    async def create_document(self, request: CreateDocumentRequest) -> WellnessDocument:
        validate_document_data(request)
        return _parse(WellnessDocument, await self._call("POST", PREFIX, json=request))

    async def get_documents(self, params: SearchParams | None = None) -> list[WellnessDocument]:
        data = await self._call("GET", PREFIX, params=to_payload(params))
        return _parse(_documents, data or [])

    async def get_documents_paginated(
        self, params: SearchParams | None = None
    ) -> PaginatedDocuments:
        data = await self._call("GET", f"{PREFIX}/paginated", params=to_payload(params))
        return _parse(PaginatedDocuments, data)

    async def search_documents(self, params: SearchParams) -> list[WellnessDocument]:
        data = await self._call("GET", f"{PREFIX}/search", params=to_payload(params))
        return _parse(_documents, data or [])

    async def search_documents_paginated(self, params: SearchParams) -> PaginatedDocuments:
        data = await self._call("GET", f"{PREFIX}/search/paginated", params=to_payload(params))
        return _parse(PaginatedDocuments, data)

    async def get_stats(self, date_from: str | None = None, date_to: str | None = None) -> DocumentStats:
        params = {"dateFrom": date_from, "dateTo": date_to}
        return _parse(DocumentStats, await self._call("GET", f"{PREFIX}/stats", params=params))

    async def get_document(self, document_id: str) -> WellnessDocument:
        _require_id(document_id)
        return _parse(WellnessDocument, await self._call("GET", f"{PREFIX}/{document_id}"))

    async def update_document(
        self, document_id: str, request: UpdateDocumentRequest
    ) -> WellnessDocument:
        _require_id(document_id)
        validate_document_data(request)
        data = await self._call("PUT", f"{PREFIX}/{document_id}", json=request)
        return _parse(WellnessDocument, data)

    async def patch_document(
        self, document_id: str, request: UpdateDocumentRequest
    ) -> WellnessDocument:
        _require_id(document_id)
        data = await self._call("PATCH", f"{PREFIX}/{document_id}", json=request)
        return _parse(WellnessDocument, data)

    async def delete_document(self, document_id: str) -> MessageResponse:
        _require_id(document_id)
        data = await self._call("DELETE", f"{PREFIX}/{document_id}")
        return _parse(MessageResponse, data or {})

    async def batch_delete_documents(self, ids: list[str]) -> BatchOperationResult:
        if not ids:
            raise DocumentApiError("Document IDs array is required", "INVALID_IDS", 400)
        data = await self._call("DELETE", f"{PREFIX}/batch", json={"ids": ids})
        return _parse(BatchOperationResult, data)

    async def duplicate_document(
        self,
        document_id: str,
        title: str | None = None,
        status: DocumentStatus | None = None,
    ) -> WellnessDocument:
        _require_id(document_id)
        options = {k: v for k, v in {"title": title, "status": status}.items() if v is not None}
        data = await self._call("POST", f"{PREFIX}/{document_id}/duplicate", json=options or None)
        return _parse(WellnessDocument, data)

    # Insights

    async def generate_insights(self, request: GenerateInsightsRequest) -> DocumentInsights:
        if not request.content.strip():
            raise DocumentApiError(
                "Content is required for insight generation", "INVALID_CONTENT", 400
            )
        data = await self._call("POST", f"{PREFIX}/generate-insights", json=request)
        return _parse(DocumentInsights, data)

    async def save_insights(self, document_id: str, insights: DocumentInsights) -> WellnessDocument:
        _require_id(document_id)
        data = await self._call("POST", f"{PREFIX}/{document_id}/insights", json=insights)
        return _parse(WellnessDocument, data)

    # Templates and export

    async def get_templates(self) -> list[DocumentTemplate]:
        return _parse(_templates, await self._call("GET", f"{PREFIX}/templates") or [])

    async def create_from_template(
        self, template_id: str, overrides: dict[str, Any] | None = None
    ) -> WellnessDocument:
        _require_id(template_id, "Template ID", "INVALID_TEMPLATE_ID")
        data = await self._call("POST", f"{PREFIX}/templates/{template_id}/create", json=overrides)
        return _parse(WellnessDocument, data)

    async def export_documents(self, options: ExportOptions) -> bytes:
        try:
            return await self._client.request_bytes("POST", f"{PREFIX}/export", json=options)
        except ApiError as e:
            raise _to_document_error(e) from e

    # Attachments

    async def upload_attachment(
        self,
        document_id: str,
        filename: str,
        content: bytes,
        content_type: str = "application/octet-stream",
    ) -> DocumentAttachment:
        _require_id(document_id)
        files = {"file": (filename, content, content_type)}
        data = await self._call("POST", f"{PREFIX}/{document_id}/attachments", files=files)
        return _parse(DocumentAttachment, data)

    async def delete_attachment(self, document_id: str, attachment_id: str) -> MessageResponse:
        if not document_id or not attachment_id:
            raise DocumentApiError(
                "Document ID and attachment ID are required", "INVALID_IDS", 400
            )
        data = await self._call("DELETE", f"{PREFIX}/{document_id}/attachments/{attachment_id}")
        return _parse(MessageResponse, data or {})

    # Versions

    async def get_document_history(self, document_id: str) -> list[DocumentVersion]:
        _require_id(document_id)
        return _parse(_versions, 
            await self._call("GET", f"{PREFIX}/{document_id}/history") or []
        )

    async def revert_to_version(self, document_id: str, version: int) -> WellnessDocument:
        if not document_id or version < 1:
            raise DocumentApiError(
                "Document ID and version number are required", "INVALID_PARAMS", 400
            )
        data = await self._call("POST", f"{PREFIX}/{document_id}/revert", json={"version": version})
        return _parse(WellnessDocument, data)

    # Sharing

    async def share_document(
        self,
        document_id: str,
        user_ids: list[str],
        permissions: list[Literal["read", "write"]] | None = None,
    ) -> MessageResponse:
        if not document_id or not user_ids:
            raise DocumentApiError("Document ID and user IDs are required", "INVALID_PARAMS", 400)
        body: dict[str, Any] = {"userIds": user_ids}
        if permissions:
            body["permissions"] = permissions
        data = await self._call("POST", f"{PREFIX}/{document_id}/share", json=body)
        return _parse(MessageResponse, data or {})

    async def unshare_document(self, document_id: str, user_ids: list[str]) -> MessageResponse:
        if not document_id or not user_ids:
            raise DocumentApiError("Document ID and user IDs are required", "INVALID_PARAMS", 400)
        data = await self._call(
            "DELETE", f"{PREFIX}/{document_id}/share", json={"userIds": user_ids}
        )
        return _parse(MessageResponse, data or {})

    async def get_shared_documents(self) -> list[WellnessDocument]:
        return _parse(_documents, await self._call("GET", f"{PREFIX}/shared") or [])

    # Collections

    async def get_recent_documents(self, limit: int = 10) -> list[WellnessDocument]:
        data = await self._call("GET", f"{PREFIX}/recent", params={"limit": limit})
        return _parse(_documents, data or [])

    async def get_favorite_documents(self) -> list[WellnessDocument]:
        return _parse(_documents, await self._call("GET", f"{PREFIX}/favorites") or [])

    async def add_to_favorites(self, document_id: str) -> MessageResponse:
        _require_id(document_id)
        data = await self._call("POST", f"{PREFIX}/{document_id}/favorite")
        return _parse(MessageResponse, data or {})

    async def remove_from_favorites(self, document_id: str) -> MessageResponse:
        _require_id(document_id)
        data = await self._call("DELETE", f"{PREFIX}/{document_id}/favorite")
        return _parse(MessageResponse, data or {})

    async def get_tags(self) -> list[TagCount]:
        return _parse(_tags, await self._call("GET", f"{PREFIX}/tags") or [])

    async def get_related_documents(self, document_id: str, limit: int = 5) -> list[WellnessDocument]:
        _require_id(document_id)
        data = await self._call("GET", f"{PREFIX}/{document_id}/related", params={"limit": limit})
        return _parse(_documents, data or [])
