"""Usage counters shown in the sidebar and settings page."""

import logging
from dataclasses import dataclass, replace

from wellnessai.models.usage import UsageStats
from wellnessai.state.store import Store

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UsageState:
    stats: UsageStats | None = None
    is_loading: bool = False


class UsageStore(Store[UsageState]):
    """Observable usage counters. Not persisted."""

    def __init__(self) -> None:
        super().__init__(UsageState())

    @property
    def stats(self) -> UsageStats | None:
        return self.state.stats

    def set_stats(self, stats: UsageStats) -> None:
        self._set(UsageState(stats=stats, is_loading=False))

    def increment_usage(self, tokens: int, messages: int = 1) -> None:
        """Add to the local counters. Does nothing until stats are loaded."""
        current = self.state.stats
        if current is None:
            logger.debug("Usage not loaded yet, skipping increment")
            return
        updated = current.model_copy(update={
            "tokens_used": current.tokens_used + tokens,
            "messages_used": current.messages_used + messages,
        })
        self._set(replace(self.state, stats=updated))

    def set_loading(self, loading: bool) -> None:
        self._set(replace(self.state, is_loading=loading))
