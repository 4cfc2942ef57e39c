"""Mock WellnessAI backend (FastAPI).

Endpoints:
    - /auth/*: login, register, profile, password flows
    - /chat/*: canned assistant replies and history
    - /usage: per-account counters
    - /subscription/*: plans and billing redirect URLs
    - /admin/*: dashboard stats, users and messages (admin only)
    - GET /health: Service health status
"""

from wellnessai.mock_api.app import create_app
from wellnessai.mock_api.data import MockBackend

__all__ = ["MockBackend", "create_app"]
