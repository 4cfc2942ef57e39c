"""Unit tests for document API guards and error conversion."""

import httpx
import pytest
import pytest_check as check

from wellnessai.api import DocumentApiError, DocumentsApi
from wellnessai.api.documents import validate_document_data
from wellnessai.models.documents import (
    MAX_CONTENT_LENGTH,
    MAX_TITLE_LENGTH,
    CreateDocumentRequest,
    GenerateInsightsRequest,
    UpdateDocumentRequest,
)


def _unreachable(request: httpx.Request) -> httpx.Response:
    raise AssertionError(f"unexpected request {request.method} {request.url}")


class TestValidateDocumentData:
    def test_valid_request_passes(self) -> None:
        validate_document_data(CreateDocumentRequest(title="Sleep log", content="Slept 7h"))

    def test_collects_all_field_errors(self) -> None:
        with pytest.raises(DocumentApiError) as exc_info:
            validate_document_data(CreateDocumentRequest(title="  ", content=""))

        error = exc_info.value
        check.equal(error.code, "VALIDATION_ERROR")
        check.equal(error.status_code, 400)
        check.equal([e.code for e in error.validation_errors], ["INVALID_TITLE", "INVALID_CONTENT"])

    def test_length_limits(self) -> None:
        with pytest.raises(DocumentApiError) as exc_info:
            validate_document_data(CreateDocumentRequest(
                title="t" * (MAX_TITLE_LENGTH + 1),
                content="c" * (MAX_CONTENT_LENGTH + 1),
            ))

        codes = [e.code for e in exc_info.value.validation_errors]
        check.equal(codes, ["TITLE_TOO_LONG", "CONTENT_TOO_LONG"])

    def test_partial_update_skips_missing_fields(self) -> None:
        validate_document_data(UpdateDocumentRequest(status="archived"))


class TestGuards:
    async def test_create_invalid_sends_nothing(self, make_client) -> None:
        async with make_client(_unreachable) as client:
            with pytest.raises(DocumentApiError, match="Validation failed"):
                await DocumentsApi(client).create_document(
                    CreateDocumentRequest(title="", content="x")
                )

    async def test_missing_id(self, make_client) -> None:
        async with make_client(_unreachable) as client:
            with pytest.raises(DocumentApiError) as exc_info:
                await DocumentsApi(client).get_document(" ")

        check.equal(exc_info.value.code, "INVALID_ID")

    async def test_batch_delete_needs_ids(self, make_client) -> None:
        async with make_client(_unreachable) as client:
            with pytest.raises(DocumentApiError) as exc_info:
                await DocumentsApi(client).batch_delete_documents([])

        check.equal(exc_info.value.code, "INVALID_IDS")

    async def test_insights_need_content(self, make_client) -> None:
        async with make_client(_unreachable) as client:
            with pytest.raises(DocumentApiError) as exc_info:
                await DocumentsApi(client).generate_insights(GenerateInsightsRequest(content="  "))

        check.equal(exc_info.value.code, "INVALID_CONTENT")

    async def test_revert_needs_positive_version(self, make_client) -> None:
        async with make_client(_unreachable) as client:
            with pytest.raises(DocumentApiError) as exc_info:
                await DocumentsApi(client).revert_to_version("d1", 0)

        check.equal(exc_info.value.code, "INVALID_PARAMS")


class TestErrorConversion:
    async def test_server_error_keeps_code_and_fields(self, make_client) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(422, json={
                "message": "Invalid document",
                "code": "BAD_DOC",
                "validationErrors": [
                    {"field": "title", "message": "Too short", "code": "TITLE_TOO_SHORT"},
                ],
            })

        async with make_client(handler) as client:
            with pytest.raises(DocumentApiError) as exc_info:
                await DocumentsApi(client).get_document("d1")

        error = exc_info.value
        check.equal(error.code, "BAD_DOC")
        check.equal(error.status_code, 422)
        check.equal(error.validation_errors[0].field, "title")
        check.equal(str(error), "BAD_DOC: Invalid document")

    async def test_unknown_code_defaults(self, make_client) -> None:
        async with make_client(lambda request: httpx.Response(500, json={})) as client:
            with pytest.raises(DocumentApiError) as exc_info:
                await DocumentsApi(client).get_documents()

        check.equal(exc_info.value.code, "UNKNOWN_ERROR")

    async def test_network_failure(self, make_client) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("down", request=request)

        async with make_client(handler) as client:
            with pytest.raises(DocumentApiError) as exc_info:
                await DocumentsApi(client).get_documents()

        check.equal(exc_info.value.code, "NETWORK_ERROR")
        check.is_none(exc_info.value.status_code)

    async def test_malformed_body(self, make_client) -> None:
        async with make_client(lambda request: httpx.Response(200, json=[{"title": 1}])) as client:
            with pytest.raises(DocumentApiError) as exc_info:
                await DocumentsApi(client).get_documents()

        check.equal(exc_info.value.code, "INVALID_RESPONSE")
