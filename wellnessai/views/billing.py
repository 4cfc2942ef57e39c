"""Subscription page view-model."""

import asyncio
import logging

from wellnessai.api.errors import ApiError
from wellnessai.api.subscription import SubscriptionApi
from wellnessai.models.billing import Plan, Subscription
from wellnessai.views.notify import Notifier

logger = logging.getLogger(__name__)


class SubscribeView:
    """Plans, current subscription and the billing redirects.

    Checkout and portal return the URL of the external billing page; the
    caller opens it.
    """

    def __init__(self, subscription_api: SubscriptionApi, notifier: Notifier) -> None:
        self._api = subscription_api
        self._notifier = notifier
        self.plans: list[Plan] = []
        self.current: Subscription | None = None
        self.is_loading = False
        self.subscribing_to: str | None = None

    def is_current_plan(self, plan: Plan) -> bool:
        return self.current is not None and self.current.plan_id == plan.id

    async def load(self) -> None:
        self.is_loading = True
        try:
            self.plans, self.current = await asyncio.gather(
                self._api.get_plans(), self._api.get_current()
            )
        except ApiError as e:
            logger.error(f"Failed to load subscription data: {e}")
            self._notifier.error("Failed to load subscription information")
        finally:
            self.is_loading = False

    async def subscribe(self, plan_id: str) -> str | None:
        self.subscribing_to = plan_id
        try:
            redirect = await self._api.create_checkout_session(plan_id)
        except ApiError as e:
            logger.error(f"Failed to create checkout session: {e}")
            self._notifier.error("Failed to start checkout process")
            return None
        finally:
            self.subscribing_to = None
        return redirect.url

    async def manage(self) -> str | None:
        try:
            redirect = await self._api.create_portal_session()
        except ApiError as e:
            logger.error(f"Failed to open customer portal: {e}")
            self._notifier.error("Failed to open subscription management")
            return None
        return redirect.url

    async def cancel(self) -> bool:
        try:
            await self._api.cancel()
        except ApiError as e:
            logger.error(f"Failed to cancel subscription: {e}")
            self._notifier.error("Failed to cancel subscription")
            return False
        self._notifier.success("Subscription canceled")
        await self.load()
        return True
