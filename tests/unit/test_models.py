"""Unit tests for wire models: aliases, derived fields and goal variants."""

from datetime import datetime, timezone

import pytest
import pytest_check as check
from pydantic import ValidationError

from wellnessai.models import AuthResponse, ChatReply, ChatRequest, SessionUser, User, parse_goal
from wellnessai.models.goals import ActiveGoal, CompletedGoal, Milestone, ProgressEntry


def _goal_data(**overrides) -> dict:
    data = {
        "_id": "g1",
        "userId": "u1",
        "title": "Walk more",
        "description": "Daily walks",
        "category": "physical_activity",
        "targetValue": 10000,
        "currentValue": 2500,
        "unit": "steps",
        "startDate": "2024-01-01T00:00:00Z",
        "targetDate": "2024-02-01T00:00:00Z",
        "status": "active",
    }
    data.update(overrides)
    return data


class TestAuthModels:
    def test_auth_response_reads_camel_case_token(self) -> None:
        response = AuthResponse.model_validate({
            "user": {"id": "1", "email": "a@example.com", "firstName": "Ann", "lastName": "Lee"},
            "accessToken": "tok",
        })

        check.equal(response.access_token, "tok")
        check.equal(response.user.first_name, "Ann")

    def test_auth_response_without_token_rejected(self) -> None:
        """Only the accessToken spelling is accepted."""
        with pytest.raises(ValidationError):
            AuthResponse.model_validate({
                "user": {"id": "1", "email": "a@example.com"},
                "access_token_value": "tok",
            })

    def test_session_user_derives_fields(self) -> None:
        user = User(
            id="1",
            email="admin@example.com",
            first_name="Admin",
            last_name="User",
            role="admin",
            profile_picture="https://img.example.com/a.png",
            tier="premium",
        )

        session_user = SessionUser.from_user(user)

        check.equal(session_user.name, "Admin User")
        check.equal(session_user.avatar, "https://img.example.com/a.png")
        check.is_true(session_user.is_admin)
        check.equal(session_user.tier, "premium")

    def test_session_user_defaults_to_free_tier(self) -> None:
        session_user = SessionUser.from_user(User(id="2", email="u@example.com", first_name="Solo"))

        check.equal(session_user.tier, "free")
        check.is_false(session_user.is_admin)
        check.equal(session_user.name, "Solo")

    def test_session_user_from_session_user(self) -> None:
        """Re-deriving from a SessionUser recomputes the display name."""
        original = SessionUser.from_user(User(id="3", email="x@example.com", first_name="A"))
        changed = original.model_copy(update={"last_name": "B"})

        check.equal(SessionUser.from_user(changed).name, "A B")


class TestChatModels:
    def test_chat_request_strips_message(self) -> None:
        request = ChatRequest(message="  hello  ", conversation_id="c1")

        check.equal(request.message, "hello")
        check.equal(
            request.model_dump(by_alias=True, exclude_none=True),
            {"message": "hello", "voice": False, "conversationId": "c1"},
        )

    def test_chat_request_rejects_blank(self) -> None:
        with pytest.raises(ValidationError):
            ChatRequest(message="   ")

    def test_assistant_message_is_newest_assistant(self) -> None:
        reply = ChatReply.model_validate({
            "conversationId": "c1",
            "messages": [
                {"id": "1", "content": "old", "role": "assistant"},
                {"id": "2", "content": "hi", "role": "user"},
                {"id": "3", "content": "new", "role": "assistant", "tokens": 8},
            ],
            "tokens": 8,
        })

        assert reply.assistant_message is not None
        check.equal(reply.assistant_message.id, "3")
        check.equal(reply.assistant_message.tokens, 8)

    def test_assistant_message_missing(self) -> None:
        reply = ChatReply(conversation_id="c1", messages=[])

        assert reply.assistant_message is None


class TestGoalModels:
    def test_parse_goal_picks_variant(self) -> None:
        goal = parse_goal(_goal_data())

        check.is_instance(goal, ActiveGoal)
        check.equal(goal.id, "g1")
        check.equal(goal.current_value, 2500)

    def test_completed_goal_requires_completed_at(self) -> None:
        with pytest.raises(ValidationError):
            parse_goal(_goal_data(status="completed"))

        goal = parse_goal(_goal_data(status="completed", completedAt="2024-01-20T00:00:00Z"))
        check.is_instance(goal, CompletedGoal)

    def test_unknown_status_rejected(self) -> None:
        with pytest.raises(ValidationError):
            parse_goal(_goal_data(status="archived"))

    def test_milestone_completed_at_needs_completed(self) -> None:
        with pytest.raises(ValidationError, match="completed_at"):
            Milestone(
                id="m1",
                title="Halfway",
                target_value=5000,
                target_date=datetime(2024, 1, 15, tzinfo=timezone.utc),
                completed_at=datetime(2024, 1, 10, tzinfo=timezone.utc),
            )

    def test_progress_entry_is_immutable(self) -> None:
        entry = ProgressEntry(id="p1", value=3, date=datetime.now(timezone.utc), mood=4)

        with pytest.raises(ValidationError):
            entry.value = 5

    def test_progress_mood_range(self) -> None:
        with pytest.raises(ValidationError):
            ProgressEntry(id="p1", value=1, date=datetime.now(timezone.utc), mood=6)
