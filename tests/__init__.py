"""Test package for the WellnessAI client.

Unit tests cover isolated logic; integration tests drive the API clients,
stores and view-models against the bundled FastAPI mock backend.

Structure:
    - unit/: Individual function and class tests
    - integration/: End-to-end workflows over the mock API

Integration tests use the real mock app through ``httpx.ASGITransport``.
Leverages pytest with pytest-check for soft assertions.
"""
