"""Unit tests for SessionStore, UsageStore and startup session restore."""

import httpx
import pytest_check as check

from wellnessai.api import AuthApi
from wellnessai.models.auth import User
from wellnessai.models.usage import UsageStats
from wellnessai.state import SessionStore, UsageStore, restore_session
from wellnessai.storage import ACCESS_TOKEN_KEY, AUTH_STORE_KEY, MemoryStorage

ADMIN = User(
    id="mock-admin",
    email="admin@example.com",
    first_name="Admin",
    last_name="User",
    role="admin",
    tier="premium",
)


class TestSessionStore:
    def test_starts_anonymous(self, storage: MemoryStorage) -> None:
        session = SessionStore(storage)

        check.is_false(session.is_authenticated)
        check.is_none(session.user)
        check.is_false(session.is_admin)

    def test_set_auth_persists_token_and_snapshot(self, storage: MemoryStorage) -> None:
        session = SessionStore(storage)

        session.set_auth(ADMIN, "mock-jwt-token-admin")

        check.equal(storage.get_item(ACCESS_TOKEN_KEY), "mock-jwt-token-admin")
        check.is_true(session.is_admin)
        check.equal(session.user.name, "Admin User")
        snapshot = storage.get_item(AUTH_STORE_KEY)
        check.equal(snapshot["accessToken"], "mock-jwt-token-admin")
        check.is_true(snapshot["isAuthenticated"])
        check.equal(snapshot["user"]["firstName"], "Admin")

    def test_new_store_resumes_persisted_session(self, storage: MemoryStorage) -> None:
        SessionStore(storage).set_auth(ADMIN, "tok")

        resumed = SessionStore(storage)

        check.is_true(resumed.is_authenticated)
        check.equal(resumed.user.email, "admin@example.com")
        check.equal(resumed.state.access_token, "tok")

    def test_unreadable_snapshot_is_discarded(self) -> None:
        storage = MemoryStorage({AUTH_STORE_KEY: {"user": {"email": 5}, "isAuthenticated": True}})

        assert not SessionStore(storage).is_authenticated

    def test_logout_clears_everything(self, storage: MemoryStorage) -> None:
        session = SessionStore(storage)
        session.set_auth(ADMIN, "tok")

        session.logout()

        check.is_false(session.is_authenticated)
        check.is_none(storage.get_item(ACCESS_TOKEN_KEY))
        check.is_none(storage.get_item(AUTH_STORE_KEY))

    def test_update_user_recomputes_name(self, storage: MemoryStorage) -> None:
        session = SessionStore(storage)
        session.set_auth(ADMIN, "tok")

        session.update_user(first_name="Ada", last_name="Lovelace")

        check.equal(session.user.name, "Ada Lovelace")
        check.is_true(session.user.is_admin)
        check.equal(storage.get_item(AUTH_STORE_KEY)["user"]["name"], "Ada Lovelace")

    def test_update_user_without_user_is_noop(self, storage: MemoryStorage) -> None:
        session = SessionStore(storage)

        session.update_user(first_name="Nobody")

        assert session.user is None

    def test_subscribers_see_changes(self, storage: MemoryStorage) -> None:
        session = SessionStore(storage)
        seen: list[bool] = []
        unsubscribe = session.subscribe(lambda state: seen.append(state.is_authenticated))

        session.set_auth(ADMIN, "tok")
        unsubscribe()
        session.logout()

        check.equal(seen, [True])


class TestRestoreSession:
    async def test_without_token_makes_no_request(self, make_client, storage) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        session = SessionStore(storage)
        async with make_client(handler) as client:
            restored = await restore_session(session, AuthApi(client))

        check.is_false(restored)
        check.is_false(session.state.is_loading)

    async def test_valid_token_refreshes_user(self, make_client, storage) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=ADMIN.model_dump(mode="json", by_alias=True))

        storage.set_item(ACCESS_TOKEN_KEY, "mock-jwt-token-admin")
        session = SessionStore(storage)
        async with make_client(handler) as client:
            restored = await restore_session(session, AuthApi(client))

        check.is_true(restored)
        check.is_true(session.is_admin)
        check.equal(session.state.access_token, "mock-jwt-token-admin")
        check.is_false(session.state.is_loading)

    async def test_rejected_token_logs_out(self, make_client, storage) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"detail": "Invalid token"})

        SessionStore(storage).set_auth(ADMIN, "stale")
        session = SessionStore(storage)
        async with make_client(handler) as client:
            restored = await restore_session(session, AuthApi(client))

        check.is_false(restored)
        check.is_false(session.is_authenticated)
        check.is_none(storage.get_item(AUTH_STORE_KEY))


class TestUsageStore:
    def test_increment_before_load_is_ignored(self) -> None:
        usage = UsageStore()

        usage.increment_usage(40)

        assert usage.stats is None

    def test_increment_adds_to_counters(self) -> None:
        usage = UsageStore()
        usage.set_loading(True)
        usage.set_stats(UsageStats(tokens_used=100, tokens_limit=10000, messages_used=2))

        usage.increment_usage(60)

        check.equal(usage.stats.tokens_used, 160)
        check.equal(usage.stats.messages_used, 3)
        check.is_false(usage.state.is_loading)
