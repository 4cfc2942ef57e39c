"""Authenticated HTTP gateway for the WellnessAI REST API.

Every outbound request goes through ``ApiClient``:

1. **Bearer injection** - the token is read from storage on each request, so a
   login or logout elsewhere takes effect immediately.
2. **401 handling** - stored credentials are cleared and ``UnauthorizedError``
   is raised. Navigation is left to the caller.
3. **Error mapping** - transport failures become ``NetworkError``, other
   4xx/5xx responses become ``ApiError``. Bodies that fail validation in
   ``parse_response`` become ``ResponseFormatError``.

There is no retry, backoff or circuit breaking.
"""

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from wellnessai.api.errors import ApiError, NetworkError, ResponseFormatError, UnauthorizedError
from wellnessai.config import ClientConfig
from wellnessai.storage import ACCESS_TOKEN_KEY, USER_KEY, KeyValueStorage

logger = logging.getLogger(__name__)

M = TypeVar("M")


def to_payload(data: BaseModel | dict[str, Any] | None) -> Any:
    """Serialise a request model to its camelCase JSON form."""
    if data is None:
        return None
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", by_alias=True, exclude_none=True)
    return data


def parse_response(target: type[M] | TypeAdapter[M], data: Any) -> M:
    """Validate a decoded response body against a model or adapter.

    Raises:
        ResponseFormatError: If the body does not match.
    """
    try:
        if isinstance(target, TypeAdapter):
            return target.validate_python(data)
        return target.model_validate(data)
    except ValidationError as e:
        logger.error(f"Unexpected response format: {e}")
        raise ResponseFormatError("Unexpected response from server", payload=data) from e


class ApiClient:
    """Thin async wrapper around ``httpx.AsyncClient``."""

    def __init__(
        self,
        config: ClientConfig,
        storage: KeyValueStorage,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Client configuration (base URL, timeout).
            storage: Where the bearer token is read from and cleared on 401.
            transport: Optional custom transport (mock backend, tests).
        """
        self._config = config
        self._storage = storage
        self._client = httpx.AsyncClient(
            base_url=config.api_base_url,
            timeout=config.request_timeout,
            transport=transport,
            event_hooks={"request": [self._attach_token]},
        )

    @property
    def storage(self) -> KeyValueStorage:
        return self._storage

    async def _attach_token(self, request: httpx.Request) -> None:
        token = self._storage.get_item(ACCESS_TOKEN_KEY)
        if token:
            request.headers["Authorization"] = f"Bearer {token}"

    def _clear_credentials(self) -> None:
        # Auto-logout on 401; the session store or views handle any redirect
        self._storage.remove_item(ACCESS_TOKEN_KEY)
        self._storage.remove_item(USER_KEY)

    async def _send(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
    ) -> httpx.Response:
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        try:
            response = await self._client.request(
                method,
                path,
                json=to_payload(json),
                params=params or None,
                files=files,
            )
        except httpx.RequestError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise NetworkError(f"Connection failed: {e}") from e

        if response.status_code == 401:
            logger.warning(f"{method} {path} returned 401, clearing stored credentials")
            self._clear_credentials()
            error = ApiError.from_response(response)
            raise UnauthorizedError(error.message, status_code=401, payload=error.payload)

        if response.is_error:
            error = ApiError.from_response(response)
            logger.error(f"{method} {path} returned {response.status_code}: {error.message}")
            raise error

        return response

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON body (None when empty)."""
        response = await self._send(method, path, json=json, params=params, files=files)
        if not response.content:
            return None
        return response.json()

    async def request_bytes(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
    ) -> bytes:
        """Send a request and return the raw response body."""
        response = await self._send(method, path, json=json)
        return response.content

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Any = None, params: dict[str, Any] | None = None) -> Any:
        return await self.request("POST", path, json=json, params=params)

    async def put(self, path: str, json: Any = None) -> Any:
        return await self.request("PUT", path, json=json)

    async def patch(self, path: str, json: Any = None) -> Any:
        return await self.request("PATCH", path, json=json)

    async def delete(self, path: str, json: Any = None) -> Any:
        return await self.request("DELETE", path, json=json)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
