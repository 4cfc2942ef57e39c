"""Client-side state stores.

Stores are plain objects created per application context and passed to
whatever needs them. Each exposes ``subscribe(listener)`` for change
notifications.

Components:
    - SessionStore: current user and bearer token, persisted to storage
    - UsageStore: token and message counters
    - restore_session: startup token validation
"""

from wellnessai.state.session import SessionState, SessionStore, restore_session
from wellnessai.state.store import Store
from wellnessai.state.usage import UsageState, UsageStore

__all__ = [
    "SessionState",
    "SessionStore",
    "Store",
    "UsageState",
    "UsageStore",
    "restore_session",
]
