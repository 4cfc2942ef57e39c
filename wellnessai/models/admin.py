"""Admin dashboard models."""

import datetime as dt

from wellnessai.models.auth import Tier
from wellnessai.models.base import CamelModel


class AdminStats(CamelModel):
    total_users: int = 0
    active_users: int = 0
    total_messages: int = 0
    total_tokens: int = 0
    monthly_growth: float = 0.0


class AdminUser(CamelModel):
    id: str
    name: str
    email: str
    tier: Tier = "free"
    join_date: dt.date
    last_active: dt.date
    messages_count: int = 0
    tokens_used: int = 0


class AdminMessage(CamelModel):
    """A recent chat exchange shown on the admin messages tab."""

    id: str
    user_id: str
    user_name: str
    content: str
    response: str
    timestamp: dt.datetime
    tokens: int = 0
