"""Pytest fixtures and shared test configuration.

Fixtures:
    - storage: empty in-memory key/value storage
    - config: client configuration that never touches the environment
    - backend: freshly seeded mock backend state
    - ctx: application context wired to the mock API in-process
    - notifier: records toasts instead of showing them
    - make_client: builds an ``ApiClient`` over an ``httpx.MockTransport``
"""

from collections.abc import AsyncGenerator, Callable

import httpx
import pytest

from wellnessai.api import ApiClient
from wellnessai.config import ClientConfig, StreamPacing
from wellnessai.context import AppContext, build_context
from wellnessai.mock_api import MockBackend, create_app
from wellnessai.storage import MemoryStorage


class RecordingNotifier:
    """Notifier that keeps every message for assertions."""

    def __init__(self) -> None:
        self.successes: list[str] = []
        self.errors: list[str] = []
        self.infos: list[str] = []

    def success(self, message: str) -> None:
        self.successes.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)

    def info(self, message: str) -> None:
        self.infos.append(message)


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def config() -> ClientConfig:
    """Return a config with no timeouts and instant streaming."""
    return ClientConfig(
        api_base_url="http://test",
        storage_path=None,
        use_mock_api=False,
        request_timeout=None,
        stream_pacing=StreamPacing(min_delay=0, max_delay=0, sentence_pause=0, clause_pause=0),
    )


@pytest.fixture
def backend() -> MockBackend:
    return MockBackend()


@pytest.fixture
async def ctx(
    config: ClientConfig, storage: MemoryStorage, backend: MockBackend
) -> AsyncGenerator[AppContext]:
    """Create an application context served by the mock API.

    Yields:
        Context whose HTTP client talks to ``create_app(backend)``.
    """
    transport = httpx.ASGITransport(app=create_app(backend))
    context = build_context(config, storage, transport=transport)
    yield context
    await context.aclose()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def make_client(
    config: ClientConfig, storage: MemoryStorage
) -> Callable[[Callable[[httpx.Request], httpx.Response]], ApiClient]:
    """Return a factory for clients whose responses come from ``handler``."""

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> ApiClient:
        return ApiClient(config, storage, transport=httpx.MockTransport(handler))

    return factory
