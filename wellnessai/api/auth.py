"""Authentication endpoints."""

import logging

from wellnessai.api.client import ApiClient, parse_response
from wellnessai.models.auth import (
    AuthResponse,
    ChangePasswordRequest,
    LoginRequest,
    MessageResponse,
    ProfileUpdate,
    RegisterRequest,
    ResetPasswordRequest,
    User,
)

logger = logging.getLogger(__name__)


class AuthApi:
    """Client for ``/auth/*``."""

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    async def login(self, request: LoginRequest) -> AuthResponse:
        """Exchange credentials for ``{user, accessToken}``."""
        data = await self._client.post("/auth/login", request)
        return parse_response(AuthResponse, data)

    async def register(self, request: RegisterRequest) -> AuthResponse:
        data = await self._client.post("/auth/register", request)
        return parse_response(AuthResponse, data)

    async def get_profile(self) -> User:
        data = await self._client.get("/auth/profile")
        return parse_response(User, data)

    async def update_profile(self, update: ProfileUpdate) -> MessageResponse:
        data = await self._client.put("/auth/profile", update)
        return parse_response(MessageResponse, data or {})

    async def change_password(self, current_password: str, new_password: str) -> MessageResponse:
        request = ChangePasswordRequest(
            current_password=current_password, new_password=new_password
        )
        data = await self._client.put("/auth/change-password", request)
        return parse_response(MessageResponse, data or {})

    async def forgot_password(self, email: str) -> MessageResponse:
        data = await self._client.post("/auth/forgot-password", {"email": email})
        return parse_response(MessageResponse, data or {})

    async def reset_password(self, token: str, password: str) -> MessageResponse:
        request = ResetPasswordRequest(token=token, password=password)
        data = await self._client.post("/auth/reset-password", request)
        return parse_response(MessageResponse, data or {})
