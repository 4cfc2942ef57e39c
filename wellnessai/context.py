"""Application context: one place that wires config, storage, API and stores."""

import logging
from dataclasses import dataclass

import httpx

from wellnessai.api import (
    AdminApi,
    ApiClient,
    AuthApi,
    ChatApi,
    DocumentsApi,
    GoalsApi,
    SubscriptionApi,
    UsageApi,
)
from wellnessai.config import ClientConfig, get_client_config
from wellnessai.state import SessionStore, UsageStore
from wellnessai.storage import KeyValueStorage, create_storage

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Everything a page or test needs, built once and passed around."""

    config: ClientConfig
    storage: KeyValueStorage
    client: ApiClient
    session: SessionStore
    usage: UsageStore
    auth: AuthApi
    chat: ChatApi
    goals: GoalsApi
    documents: DocumentsApi
    subscription: SubscriptionApi
    usage_api: UsageApi
    admin: AdminApi

    async def aclose(self) -> None:
        await self.client.aclose()


def build_context(
    config: ClientConfig | None = None,
    storage: KeyValueStorage | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AppContext:
    """Create an ``AppContext``.

    Args:
        config: Client configuration; read from the environment when omitted.
        storage: Persisted key/value storage; derived from ``config.storage_path``
            when omitted.
        transport: Custom HTTP transport. When omitted and ``use_mock_api`` is
            set, requests go to an in-process mock backend.

    Returns:
        A fully wired context.
    """
    config = config or get_client_config()
    storage = storage if storage is not None else create_storage(config.storage_path)

    if transport is None and config.use_mock_api:
        from wellnessai.mock_api import create_app

        logger.info("Using in-process mock API")
        transport = httpx.ASGITransport(app=create_app())

    client = ApiClient(config, storage, transport=transport)
    return AppContext(
        config=config,
        storage=storage,
        client=client,
        session=SessionStore(storage),
        usage=UsageStore(),
        auth=AuthApi(client),
        chat=ChatApi(client),
        goals=GoalsApi(client),
        documents=DocumentsApi(client),
        subscription=SubscriptionApi(client),
        usage_api=UsageApi(client),
        admin=AdminApi(client),
    )
