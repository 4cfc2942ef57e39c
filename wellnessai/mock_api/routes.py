"""Mock REST endpoints for auth, chat, usage, subscription and admin.

Protected routes require ``Authorization: Bearer <token>``; an unknown or
missing token gets a 401 like the real API.
"""

import datetime as dt
import logging
import uuid
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Header, HTTPException, Query, Request, status
from pydantic import BaseModel

from wellnessai.mock_api.data import (
    ADMIN_MESSAGES,
    ADMIN_STATS,
    ADMIN_USERS,
    PLANS,
    Account,
    MockBackend,
)
from wellnessai.models.auth import (
    ChangePasswordRequest,
    LoginRequest,
    ProfileUpdate,
    RegisterRequest,
    ResetPasswordRequest,
)
from wellnessai.models.billing import CheckoutRequest, Subscription
from wellnessai.models.chat import ChatRequest, StopGenerationRequest

logger = logging.getLogger(__name__)

CHECKOUT_URL = "https://billing.example.com/checkout"
PORTAL_URL = "https://billing.example.com/portal"


def _wire(model: BaseModel) -> dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True)


def get_backend(request: Request) -> MockBackend:
    return request.app.state.backend


Backend = Annotated[MockBackend, Depends(get_backend)]


def current_account(
    backend: Backend,
    authorization: Annotated[str | None, Header()] = None,
) -> Account:
    """Resolve the bearer token to an account.

    Raises:
        HTTPException: 401 when the token is missing or unknown.
    """
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    account = backend.account_for_token(authorization.removeprefix("Bearer "))
    if account is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
    return account


CurrentAccount = Annotated[Account, Depends(current_account)]


def admin_account(account: CurrentAccount) -> Account:
    if account.user.role != "admin":
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return account


def _auth_response(account: Account) -> dict[str, Any]:
    return {"user": _wire(account.user), "accessToken": account.token}


# Auth

auth_router = APIRouter(prefix="/auth", tags=["auth"])


@auth_router.post("/login")
async def login(body: LoginRequest, backend: Backend) -> dict[str, Any]:
    account = backend.authenticate(body.email, body.password)
    if account is None:
        logger.info(f"Rejected login for {body.email}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid email or password"
        )
    return _auth_response(account)


@auth_router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(body: RegisterRequest, backend: Backend) -> dict[str, Any]:
    account = backend.register(body.email, body.password, body.first_name, body.last_name)
    if account is None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")
    return _auth_response(account)


@auth_router.get("/profile")
async def get_profile(account: CurrentAccount) -> dict[str, Any]:
    return _wire(account.user)


@auth_router.put("/profile")
async def update_profile(
    body: ProfileUpdate, account: CurrentAccount, backend: Backend
) -> dict[str, str]:
    changes = body.model_dump(exclude_none=True)
    if "email" in changes and not backend.rename_account(account, changes["email"]):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")
    account.user = account.user.model_copy(update=changes)
    return {"message": "Profile updated successfully"}


@auth_router.put("/change-password")
async def change_password(body: ChangePasswordRequest, account: CurrentAccount) -> dict[str, str]:
    if body.current_password != account.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Current password is incorrect"
        )
    account.password = body.new_password
    return {"message": "Password changed successfully"}


@auth_router.post("/forgot-password")
async def forgot_password(body: dict[str, str]) -> dict[str, str]:
    logger.info(f"Password reset requested for {body.get('email')}")
    return {"message": "If that email exists, a reset link has been sent"}


@auth_router.post("/reset-password")
async def reset_password(body: ResetPasswordRequest) -> dict[str, str]:
    return {"message": "Password updated successfully"}


# Chat

chat_router = APIRouter(prefix="/chat", tags=["chat"])


@chat_router.post("/message")
async def send_message(
    body: ChatRequest, account: CurrentAccount, backend: Backend
) -> dict[str, Any]:
    conversation_id, tokens = backend.reply(account, body.message)
    return {
        "conversationId": conversation_id,
        "messages": [_wire(m) for m in account.messages],
        "tokens": tokens,
    }


@chat_router.post("/stop-generation")
async def stop_generation(body: StopGenerationRequest, account: CurrentAccount) -> dict[str, str]:
    logger.info(f"Stop requested for conversation {body.conversation_id}")
    return {"message": "Generation stopped"}


@chat_router.get("/history")
async def get_history(
    account: CurrentAccount, limit: Annotated[int, Query(ge=1)] = 50
) -> list[dict[str, Any]]:
    return [_wire(m) for m in account.messages[-limit:]]


@chat_router.delete("/messages/{message_id}")
async def delete_message(message_id: str, account: CurrentAccount) -> dict[str, str]:
    remaining = [m for m in account.messages if m.id != message_id]
    if len(remaining) == len(account.messages):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Message not found")
    account.messages = remaining
    return {"message": "Message deleted"}


@chat_router.delete("/history")
async def clear_history(account: CurrentAccount) -> dict[str, str]:
    account.messages = []
    account.conversation_id = None
    return {"message": "Chat history cleared"}


# Usage

usage_router = APIRouter(prefix="/usage", tags=["usage"])


@usage_router.get("")
async def get_usage(account: CurrentAccount, backend: Backend) -> dict[str, Any]:
    return _wire(backend.usage(account))


@usage_router.get("/history")
async def get_usage_history(
    account: CurrentAccount, backend: Backend, days: Annotated[int, Query(ge=1, le=365)] = 30
) -> list[dict[str, Any]]:
    return [_wire(entry) for entry in backend.usage_history(account, days)]


# Subscription

subscription_router = APIRouter(prefix="/subscription", tags=["subscription"])


@subscription_router.get("/plans")
async def get_plans() -> list[dict[str, Any]]:
    return [_wire(plan) for plan in PLANS]


@subscription_router.get("/current")
async def get_current(account: CurrentAccount) -> dict[str, Any] | None:
    return _wire(account.subscription) if account.subscription else None


@subscription_router.post("/checkout")
async def create_checkout(body: CheckoutRequest, account: CurrentAccount) -> dict[str, str]:
    if body.plan_id not in {plan.id for plan in PLANS}:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unknown plan")
    return {"url": f"{CHECKOUT_URL}/{body.plan_id}?session={uuid.uuid4().hex}"}


@subscription_router.post("/portal")
async def create_portal(account: CurrentAccount) -> dict[str, str]:
    return {"url": f"{PORTAL_URL}?customer={account.user.id}"}


@subscription_router.post("/cancel")
async def cancel(account: CurrentAccount) -> dict[str, str]:
    if account.subscription is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No active subscription")
    account.subscription = Subscription(
        id=account.subscription.id,
        plan_id=account.subscription.plan_id,
        status="canceled",
        current_period_end=dt.date.today().isoformat(),
    )
    return {"message": "Subscription canceled"}


# Admin

admin_router = APIRouter(
    prefix="/admin", tags=["admin"], dependencies=[Depends(admin_account)]
)


@admin_router.get("/stats")
async def admin_stats() -> dict[str, Any]:
    return _wire(ADMIN_STATS)


@admin_router.get("/users")
async def admin_users() -> list[dict[str, Any]]:
    return [_wire(user) for user in ADMIN_USERS]


@admin_router.get("/messages")
async def admin_messages() -> list[dict[str, Any]]:
    return [_wire(message) for message in ADMIN_MESSAGES]


routers = [auth_router, chat_router, usage_router, subscription_router, admin_router]
