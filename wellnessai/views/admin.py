"""Admin dashboard view-model."""

import asyncio
import logging
from collections import Counter

from wellnessai.api.admin import AdminApi
from wellnessai.api.errors import ApiError
from wellnessai.models.admin import AdminMessage, AdminStats, AdminUser
from wellnessai.models.auth import Tier
from wellnessai.state.session import SessionStore
from wellnessai.views.auth import resolve_route_access
from wellnessai.views.notify import Notifier

logger = logging.getLogger(__name__)

TIERS: tuple[Tier, ...] = ("free", "premium", "business")


class AdminView:
    def __init__(self, admin_api: AdminApi, session: SessionStore, notifier: Notifier) -> None:
        self._api = admin_api
        self._session = session
        self._notifier = notifier
        self.stats: AdminStats | None = None
        self.users: list[AdminUser] = []
        self.messages: list[AdminMessage] = []
        self.search_term = ""
        self.is_loading = False

    def access_redirect(self) -> str | None:
        return resolve_route_access(self._session, require_admin=True)

    @property
    def filtered_users(self) -> list[AdminUser]:
        term = self.search_term.lower()
        return [u for u in self.users if term in u.name.lower() or term in u.email.lower()]

    @property
    def filtered_messages(self) -> list[AdminMessage]:
        term = self.search_term.lower()
        return [
            m for m in self.messages
            if term in m.user_name.lower() or term in m.content.lower()
        ]

    @property
    def tier_counts(self) -> dict[str, int]:
        counts = Counter(user.tier for user in self.users)
        return {tier: counts.get(tier, 0) for tier in TIERS}

    async def load(self) -> None:
        """Load stats, users and messages. Does nothing for non-admins."""
        if self.access_redirect() is not None:
            return
        self.is_loading = True
        try:
            self.stats, self.users, self.messages = await asyncio.gather(
                self._api.get_stats(), self._api.get_users(), self._api.get_messages()
            )
        except ApiError as e:
            logger.error(f"Failed to load admin data: {e}")
            self._notifier.error("Failed to load admin data")
        finally:
            self.is_loading = False
