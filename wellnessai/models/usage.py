"""Usage counter models."""

import datetime as dt

from wellnessai.models.base import CamelModel


class UsageStats(CamelModel):
    """Token and message counters for the current billing period."""

    tokens_used: int = 0
    tokens_limit: int = 0
    messages_used: int = 0
    messages_limit: int = 0
    reset_date: str = ""


class UsageHistoryEntry(CamelModel):
    date: dt.date
    tokens: int = 0
    messages: int = 0
