"""Unit tests for the ApiClient gateway.

Responses come from ``httpx.MockTransport`` handlers; no server runs.
"""

import json

import httpx
import pytest
import pytest_check as check

from wellnessai.api import ApiError, NetworkError, ResponseFormatError, UnauthorizedError
from wellnessai.api.client import parse_response, to_payload
from wellnessai.models.chat import ChatReply, ChatRequest
from wellnessai.storage import ACCESS_TOKEN_KEY, USER_KEY


class TestBearerInjection:
    async def test_attaches_stored_token(self, make_client, storage) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"ok": True})

        storage.set_item(ACCESS_TOKEN_KEY, "tok-1")
        async with make_client(handler) as client:
            await client.get("/usage")

        assert seen[0].headers["Authorization"] == "Bearer tok-1"

    async def test_token_read_on_every_request(self, make_client, storage) -> None:
        """A token stored after the client was built is still used."""
        headers: list[str | None] = []

        def handler(request: httpx.Request) -> httpx.Response:
            headers.append(request.headers.get("Authorization"))
            return httpx.Response(200, json={})

        async with make_client(handler) as client:
            await client.get("/usage")
            storage.set_item(ACCESS_TOKEN_KEY, "late")
            await client.get("/usage")

        check.equal(headers, [None, "Bearer late"])


class TestRequests:
    async def test_json_body_uses_camel_case(self, make_client) -> None:
        bodies: list[dict] = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            return httpx.Response(200, json={"conversationId": "c"})

        async with make_client(handler) as client:
            await client.post("/chat/message", ChatRequest(message="hi", conversation_id="c"))

        check.equal(bodies[0], {"message": "hi", "voice": False, "conversationId": "c"})

    async def test_none_params_dropped(self, make_client) -> None:
        urls: list[httpx.URL] = []

        def handler(request: httpx.Request) -> httpx.Response:
            urls.append(request.url)
            return httpx.Response(200, json=[])

        async with make_client(handler) as client:
            await client.get("/goals", params={"status": "active", "category": None})

        check.equal(dict(urls[0].params), {"status": "active"})

    async def test_empty_body_returns_none(self, make_client) -> None:
        async with make_client(lambda request: httpx.Response(204)) as client:
            assert await client.delete("/chat/history") is None

    def test_to_payload_passes_dicts_through(self) -> None:
        check.equal(to_payload({"a": 1}), {"a": 1})
        check.is_none(to_payload(None))


class TestErrorMapping:
    async def test_401_clears_credentials_once(self, make_client, storage) -> None:
        calls = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal calls
            calls += 1
            return httpx.Response(401, json={"message": "Token expired"})

        storage.set_item(ACCESS_TOKEN_KEY, "old")
        storage.set_item(USER_KEY, {"id": "1"})

        async with make_client(handler) as client:
            with pytest.raises(UnauthorizedError) as exc_info:
                await client.get("/auth/profile")

        check.equal(calls, 1)
        check.equal(exc_info.value.status_code, 401)
        check.equal(exc_info.value.message, "Token expired")
        check.is_none(storage.get_item(ACCESS_TOKEN_KEY))
        check.is_none(storage.get_item(USER_KEY))

    async def test_message_list_is_joined(self, make_client) -> None:
        """Validation errors that send a list of messages become one string."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"message": ["email must be an email", "password too short"]})

        async with make_client(handler) as client:
            with pytest.raises(ApiError) as exc_info:
                await client.post("/auth/register", {})

        check.equal(exc_info.value.message, "email must be an email, password too short")
        check.equal(exc_info.value.status_code, 400)

    async def test_detail_is_used_as_message(self, make_client) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(403, json={"detail": "Admin access required"})

        async with make_client(handler) as client:
            with pytest.raises(ApiError, match="Admin access required"):
                await client.get("/admin/stats")

    async def test_fallback_message_without_body(self, make_client) -> None:
        async with make_client(lambda request: httpx.Response(500, text="")) as client:
            with pytest.raises(ApiError) as exc_info:
                await client.get("/usage")

        assert exc_info.value.message == "API Error: 500"

    async def test_non_401_keeps_credentials(self, make_client, storage) -> None:
        storage.set_item(ACCESS_TOKEN_KEY, "tok")

        async with make_client(lambda request: httpx.Response(500, json={})) as client:
            with pytest.raises(ApiError):
                await client.get("/usage")

        assert storage.get_item(ACCESS_TOKEN_KEY) == "tok"

    async def test_transport_failure_is_network_error(self, make_client) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with make_client(handler) as client:
            with pytest.raises(NetworkError, match="Connection failed"):
                await client.get("/usage")


class TestParseResponse:
    def test_valid_body(self) -> None:
        reply = parse_response(ChatReply, {"conversationId": "c1", "messages": [], "tokens": 4})

        check.equal(reply.conversation_id, "c1")
        check.equal(reply.tokens, 4)

    def test_mismatched_body_is_api_error(self) -> None:
        body = {"messages": [], "tokens": "many"}

        with pytest.raises(ResponseFormatError) as exc_info:
            parse_response(ChatReply, body)

        check.is_instance(exc_info.value, ApiError)
        check.equal(exc_info.value.payload, body)
