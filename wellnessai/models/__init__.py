"""Pydantic models for API requests and responses.

Provides type safety, validation, and camelCase wire aliases.

Models:
    - auth: User, SessionUser, login/register payloads
    - chat: Message, ChatRequest, ChatReply
    - goals: WellnessGoal variants, milestones, progress, dashboard analytics
    - documents: WellnessDocument, search, insights, templates
    - billing: Plan, Subscription, RedirectUrl
    - usage: UsageStats
    - admin: AdminStats, AdminUser, AdminMessage
"""

from wellnessai.models.auth import AuthResponse, SessionUser, User
from wellnessai.models.base import CamelModel, Envelope
from wellnessai.models.chat import ChatReply, ChatRequest, Message
from wellnessai.models.goals import WellnessGoal, parse_goal
from wellnessai.models.usage import UsageStats

__all__ = [
    "AuthResponse",
    "CamelModel",
    "ChatReply",
    "ChatRequest",
    "Envelope",
    "Message",
    "SessionUser",
    "UsageStats",
    "User",
    "WellnessGoal",
    "parse_goal",
]
