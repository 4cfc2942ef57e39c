"""Subscription and billing models."""

from typing import Literal

from wellnessai.models.base import CamelModel


class Plan(CamelModel):
    id: str
    name: str
    price: float
    interval: Literal["month", "year"]
    features: list[str] = []
    tokens_limit: int = 0
    messages_limit: int = 0
    popular: bool = False


class Subscription(CamelModel):
    id: str
    plan_id: str
    status: Literal["active", "canceled", "past_due"]
    current_period_end: str


class CheckoutRequest(CamelModel):
    plan_id: str


class RedirectUrl(CamelModel):
    """URL of an external billing page the caller should open."""

    url: str
