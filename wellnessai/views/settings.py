"""Settings page: profile, password and usage counters."""

import logging

from pydantic import ValidationError

from wellnessai.api.auth import AuthApi
from wellnessai.api.errors import ApiError
from wellnessai.api.usage import UsageApi
from wellnessai.models.auth import ProfileUpdate
from wellnessai.models.usage import UsageStats
from wellnessai.state.session import SessionStore
from wellnessai.state.usage import UsageStore
from wellnessai.views.auth import MIN_PASSWORD_LENGTH
from wellnessai.views.notify import Notifier

logger = logging.getLogger(__name__)

UNLIMITED = -1


def format_token_usage(tokens: int) -> str:
    """Compact token count: 950, 12.5K, 2.8M. A limit of -1 is unlimited."""
    if tokens == UNLIMITED:
        return "∞"
    if tokens >= 1_000_000:
        return f"{tokens / 1_000_000:.1f}M"
    if tokens >= 1_000:
        return f"{tokens / 1_000:.1f}K"
    return str(tokens)


def usage_percent(used: int, limit: int) -> float:
    if limit == UNLIMITED or limit <= 0:
        return 0.0
    return min(used / limit * 100, 100.0)


def split_name(name: str) -> tuple[str, str]:
    first, _, last = name.strip().partition(" ")
    return first, last.strip()


class SettingsView:
    def __init__(
        self,
        auth_api: AuthApi,
        usage_api: UsageApi,
        session: SessionStore,
        usage: UsageStore,
        notifier: Notifier,
    ) -> None:
        self._auth = auth_api
        self._usage_api = usage_api
        self._session = session
        self._usage = usage
        self._notifier = notifier
        self.is_saving = False

    @property
    def stats(self) -> UsageStats | None:
        return self._usage.stats

    async def load_usage(self) -> None:
        self._usage.set_loading(True)
        try:
            self._usage.set_stats(await self._usage_api.get_usage())
        except ApiError as e:
            logger.error(f"Failed to load usage stats: {e}")
        finally:
            self._usage.set_loading(False)

    async def update_profile(self, name: str, email: str) -> bool:
        """Save the profile and mirror the change into the session user."""
        first_name, last_name = split_name(name)
        try:
            update = ProfileUpdate(first_name=first_name, last_name=last_name, email=email)
        except ValidationError:
            self._notifier.error("Please enter a valid email")
            return False

        self.is_saving = True
        try:
            await self._auth.update_profile(update)
        except ApiError as e:
            logger.error(f"Failed to update profile: {e}")
            self._notifier.error(e.message or "Failed to update profile")
            return False
        finally:
            self.is_saving = False

        self._session.update_user(first_name=first_name, last_name=last_name, email=email)
        self._notifier.success("Profile updated successfully!")
        return True

    async def change_password(
        self, current_password: str, new_password: str, confirm_password: str
    ) -> bool:
        if new_password != confirm_password:
            self._notifier.error("Passwords do not match")
            return False
        if len(new_password) < MIN_PASSWORD_LENGTH:
            self._notifier.error(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
            return False
        try:
            await self._auth.change_password(current_password, new_password)
        except ApiError as e:
            logger.error(f"Failed to change password: {e}")
            self._notifier.error(e.message or "Failed to change password")
            return False
        self._notifier.success("Password changed successfully!")
        return True
