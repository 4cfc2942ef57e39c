"""WellnessAI client - wellness coaching and AI chat front end.

Combines httpx for the REST API, Pydantic for request/response models,
NiceGUI for the pages, and FastAPI for the local mock backend.

Components:
    - api: typed REST resource clients and the authenticated HTTP gateway
    - models: request/response schemas
    - state: observable session and usage stores
    - chat: chat state machine and simulated streaming reveal
    - views: page logic (forms, loading, reloads) independent of the UI toolkit
    - ui: NiceGUI pages
    - mock_api: FastAPI backend for local development and tests
"""

__version__ = "0.1.0"
