"""REST API clients for the WellnessAI backend.

One resource client per backend area, all sharing a single authenticated
``ApiClient`` gateway.

Resources:
    - AuthApi: /auth (login, register, profile, passwords)
    - ChatApi: /chat (send, stop generation, history)
    - GoalsApi: /wellness-coaching (goals, progress, analytics, AI, reports)
    - DocumentsApi: /wellness-documents (journal CRUD, search, insights)
    - SubscriptionApi: /subscription (plans, checkout, portal)
    - UsageApi: /usage
    - AdminApi: /admin
"""

from wellnessai.api.admin import AdminApi
from wellnessai.api.auth import AuthApi
from wellnessai.api.chat import ChatApi
from wellnessai.api.client import ApiClient
from wellnessai.api.documents import DocumentsApi
from wellnessai.api.errors import (
    ApiError,
    DocumentApiError,
    NetworkError,
    ResponseFormatError,
    UnauthorizedError,
)
from wellnessai.api.goals import GoalsApi
from wellnessai.api.subscription import SubscriptionApi
from wellnessai.api.usage import UsageApi

__all__ = [
    "AdminApi",
    "ApiClient",
    "ApiError",
    "AuthApi",
    "ChatApi",
    "DocumentApiError",
    "DocumentsApi",
    "GoalsApi",
    "NetworkError",
    "ResponseFormatError",
    "SubscriptionApi",
    "UnauthorizedError",
    "UsageApi",
]
