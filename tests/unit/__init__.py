"""Unit tests for individual components in isolation.

Coverage:
    - config/storage: environment-driven settings and persisted items
    - api/: gateway behavior (bearer, 401, error mapping) and documents guards
    - state/: session and usage stores
    - chat/: simulated streaming and the chat controller
    - views/: form validation and page logic
    - ui/: markdown rendering

HTTP is faked with ``httpx.MockTransport``. Leverages pytest-check for
multiple assertions per test.
"""
