"""Subscription and billing endpoints."""

from pydantic import TypeAdapter

from wellnessai.api.client import ApiClient, parse_response
from wellnessai.models.billing import CheckoutRequest, Plan, RedirectUrl, Subscription

_plans = TypeAdapter(list[Plan])


class SubscriptionApi:
    """Client for ``/subscription/*``.

    Checkout and portal calls return the URL of an external billing page;
    opening it is up to the caller.
    """

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    async def get_plans(self) -> list[Plan]:
        return parse_response(_plans, await self._client.get("/subscription/plans") or [])

    async def get_current(self) -> Subscription | None:
        data = await self._client.get("/subscription/current")
        return parse_response(Subscription, data) if data else None

    async def create_checkout_session(self, plan_id: str) -> RedirectUrl:
        data = await self._client.post("/subscription/checkout", CheckoutRequest(plan_id=plan_id))
        return parse_response(RedirectUrl, data)

    async def create_portal_session(self) -> RedirectUrl:
        return parse_response(RedirectUrl, await self._client.post("/subscription/portal"))

    async def cancel(self) -> None:
        await self._client.post("/subscription/cancel")
