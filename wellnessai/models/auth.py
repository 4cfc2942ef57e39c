"""Authentication and user profile models."""

from datetime import datetime
from typing import Literal

from pydantic import EmailStr, Field

from wellnessai.models.base import CamelModel

Tier = Literal["free", "premium", "business"]


class User(CamelModel):
    """User record as returned by the API."""

    id: str
    email: str
    first_name: str = ""
    last_name: str = ""
    role: str = "user"
    profile_picture: str | None = None
    is_email_verified: bool = False
    last_login_at: datetime | None = None
    created_at: datetime | None = None
    tier: Tier | None = None


class SessionUser(User):
    """User plus the fields the UI derives from it.

    Attributes:
        name: "First Last" display name.
        avatar: Alias of the profile picture.
        is_admin: True when ``role == "admin"``.
    """

    name: str = ""
    avatar: str | None = None
    tier: Tier = "free"
    is_admin: bool = False

    @classmethod
    def from_user(cls, user: User) -> "SessionUser":
        data = user.model_dump(include=set(User.model_fields) - {"tier"})
        return cls(
            **data,
            name=f"{user.first_name} {user.last_name}".strip(),
            avatar=user.profile_picture,
            tier=user.tier or "free",
            is_admin=user.role == "admin",
        )


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class RegisterRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=8)
    first_name: str = Field(..., min_length=1)
    last_name: str = ""


class AuthResponse(CamelModel):
    """Credential exchange result.

    The server sends ``accessToken``; that spelling is the only one accepted.
    """

    user: User
    access_token: str = Field(..., min_length=1)


class ProfileUpdate(CamelModel):
    first_name: str | None = None
    last_name: str | None = None
    email: EmailStr | None = None
    profile_picture: str | None = None


class ChangePasswordRequest(CamelModel):
    current_password: str
    new_password: str = Field(..., min_length=8)


class ResetPasswordRequest(CamelModel):
    token: str = Field(..., min_length=1)
    password: str = Field(..., min_length=8)


class MessageResponse(CamelModel):
    message: str = ""
