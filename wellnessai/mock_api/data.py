"""In-memory state of the mock backend.

Two demo accounts are seeded:

- ``admin@example.com`` / ``password123``: admin, premium tier
- ``user@example.com`` / ``password123``: regular user, free tier

Their tokens are fixed (``mock-jwt-token-admin``, ``mock-jwt-token-user``)
so a session survives a restart of the mock server.
"""

import datetime as dt
import logging
import uuid
from dataclasses import dataclass, field

from wellnessai.models.admin import AdminMessage, AdminStats, AdminUser
from wellnessai.models.auth import Tier, User
from wellnessai.models.billing import Plan, Subscription
from wellnessai.models.chat import Message
from wellnessai.models.usage import UsageHistoryEntry, UsageStats

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password123"
MOCK_REPLY = "I'm here to help you with your wellness journey. How can I assist you today?"
TOKENS_PER_WORD = 4

TIER_LIMITS: dict[str, tuple[int, int]] = {
    "free": (10_000, 50),
    "premium": (100_000, 1_000),
    "business": (-1, -1),
}


def estimate_tokens(text: str) -> int:
    """Rough token estimate used by the mock chat."""
    return len(text.split()) * TOKENS_PER_WORD


def _next_reset(today: dt.date) -> str:
    first = today.replace(day=1)
    return (first + dt.timedelta(days=32)).replace(day=1).isoformat()


@dataclass
class Account:
    user: User
    password: str
    token: str
    messages: list[Message] = field(default_factory=list)
    conversation_id: str | None = None
    tokens_used: int = 0
    messages_used: int = 0
    subscription: Subscription | None = None


PLANS = [
    Plan(
        id="free",
        name="Free",
        price=0,
        interval="month",
        features=["50 messages per month", "Basic wellness tips", "Chat history"],
        tokens_limit=TIER_LIMITS["free"][0],
        messages_limit=TIER_LIMITS["free"][1],
    ),
    Plan(
        id="premium",
        name="Premium",
        price=9.99,
        interval="month",
        features=["1,000 messages per month", "Voice messages", "Goal coaching", "AI insights"],
        tokens_limit=TIER_LIMITS["premium"][0],
        messages_limit=TIER_LIMITS["premium"][1],
        popular=True,
    ),
    Plan(
        id="business",
        name="Business",
        price=29.99,
        interval="month",
        features=["Unlimited messages", "Team dashboard", "Priority support"],
        tokens_limit=TIER_LIMITS["business"][0],
        messages_limit=TIER_LIMITS["business"][1],
    ),
]

ADMIN_STATS = AdminStats(
    total_users=1247,
    active_users=892,
    total_messages=45632,
    total_tokens=2_840_000,
    monthly_growth=23.5,
)

ADMIN_USERS = [
    AdminUser(
        id="1", name="Alice Johnson", email="alice@example.com", tier="premium",
        join_date=dt.date(2024, 1, 15), last_active=dt.date(2024, 1, 28),
        messages_count=342, tokens_used=45_000,
    ),
    AdminUser(
        id="2", name="Bob Smith", email="bob@example.com", tier="free",
        join_date=dt.date(2024, 1, 20), last_active=dt.date(2024, 1, 27),
        messages_count=89, tokens_used=12_000,
    ),
    AdminUser(
        id="3", name="Carol Williams", email="carol@example.com", tier="business",
        join_date=dt.date(2024, 1, 10), last_active=dt.date(2024, 1, 28),
        messages_count=756, tokens_used=120_000,
    ),
]

ADMIN_MESSAGES = [
    AdminMessage(
        id="1", user_id="1", user_name="Alice Johnson",
        content="Can you help me create a meditation routine?",
        response="I'd be happy to help you create a personalized meditation routine...",
        timestamp=dt.datetime(2024, 1, 28, 10, 30, tzinfo=dt.timezone.utc),
        tokens=150,
    ),
    AdminMessage(
        id="2", user_id="2", user_name="Bob Smith",
        content="What are some healthy breakfast options?",
        response="Here are some nutritious breakfast ideas that can help start your day...",
        timestamp=dt.datetime(2024, 1, 28, 9, 15, tzinfo=dt.timezone.utc),
        tokens=180,
    ),
]


class MockBackend:
    """Accounts, sessions and chat history for the mock server."""

    def __init__(self) -> None:
        self._accounts: dict[str, Account] = {}
        self._seed("admin", "admin@example.com", "Admin", "User", "admin", "premium")
        self._seed("user", "user@example.com", "Demo", "User", "user", "free")

    def _seed(
        self, key: str, email: str, first: str, last: str, role: str, tier: Tier
    ) -> None:
        user = User(
            id=f"mock-{key}",
            email=email,
            first_name=first,
            last_name=last,
            role=role,
            is_email_verified=True,
            created_at=dt.datetime(2024, 1, 1, tzinfo=dt.timezone.utc),
            tier=tier,
        )
        account = Account(user=user, password=DEMO_PASSWORD, token=f"mock-jwt-token-{key}")
        if tier != "free":
            account.subscription = Subscription(
                id=f"sub-{key}",
                plan_id=tier,
                status="active",
                current_period_end=_next_reset(dt.date.today()),
            )
        self._accounts[email] = account

    def authenticate(self, email: str, password: str) -> Account | None:
        account = self._accounts.get(email.lower())
        if account is None or account.password != password:
            return None
        account.user = account.user.model_copy(
            update={"last_login_at": dt.datetime.now(dt.timezone.utc)}
        )
        return account

    def register(self, email: str, password: str, first_name: str, last_name: str) -> Account | None:
        """Create an account; None when the email is taken."""
        email = email.lower()
        if email in self._accounts:
            return None
        user = User(
            id=f"mock-{uuid.uuid4().hex[:8]}",
            email=email,
            first_name=first_name,
            last_name=last_name,
            created_at=dt.datetime.now(dt.timezone.utc),
            tier="free",
        )
        account = Account(user=user, password=password, token=f"mock-jwt-token-{user.id}")
        self._accounts[email] = account
        logger.info(f"Registered mock account {email}")
        return account

    def account_for_token(self, token: str) -> Account | None:
        for account in self._accounts.values():
            if account.token == token:
                return account
        return None

    def rename_account(self, account: Account, email: str) -> bool:
        """Move ``account`` to a new login email. False if another account owns it."""
        email = email.lower()
        if email == account.user.email:
            return True
        if email in self._accounts:
            return False
        self._accounts.pop(account.user.email, None)
        self._accounts[email] = account
        return True

    def reply(self, account: Account, content: str) -> tuple[str, int]:
        """Append the user message and the canned reply to the history."""
        if account.conversation_id is None:
            account.conversation_id = uuid.uuid4().hex
        account.messages.append(Message(id=uuid.uuid4().hex, content=content, role="user"))
        tokens = estimate_tokens(MOCK_REPLY)
        account.messages.append(
            Message(id=uuid.uuid4().hex, content=MOCK_REPLY, role="assistant", tokens=tokens)
        )
        account.tokens_used += tokens
        account.messages_used += 1
        return account.conversation_id, tokens

    def usage(self, account: Account) -> UsageStats:
        tokens_limit, messages_limit = TIER_LIMITS[account.user.tier or "free"]
        return UsageStats(
            tokens_used=account.tokens_used,
            tokens_limit=tokens_limit,
            messages_used=account.messages_used,
            messages_limit=messages_limit,
            reset_date=_next_reset(dt.date.today()),
        )

    def usage_history(self, account: Account, days: int) -> list[UsageHistoryEntry]:
        today = dt.date.today()
        history = [UsageHistoryEntry(date=today - dt.timedelta(days=n)) for n in range(days)]
        if history:
            history[0] = UsageHistoryEntry(
                date=today, tokens=account.tokens_used, messages=account.messages_used
            )
        return history
