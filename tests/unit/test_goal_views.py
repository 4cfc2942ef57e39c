"""Unit tests for goal helpers, the create-goal form and GoalsView."""

import json
from datetime import datetime, timedelta, timezone

import httpx
import pytest
import pytest_check as check

from wellnessai.api import GoalsApi
from wellnessai.models.goals import GoalSuggestion, SmartCriteria, parse_goal
from wellnessai.views import CreateGoalForm, GoalsView, days_remaining, progress_percentage

NOW = datetime(2024, 1, 10, 12, 0, tzinfo=timezone.utc)


def _goal(**overrides) -> dict:
    data = {
        "_id": "g1",
        "userId": "u1",
        "title": "Walk more",
        "description": "Daily walks around the park",
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


def _envelope(data: dict) -> dict:
    return {"status": 200, "message": "ok", "data": data}


def _valid_form() -> CreateGoalForm:
    return CreateGoalForm(
        title="Sleep 8 hours",
        description="Consistent bedtime",
        category="sleep",
        smart_criteria=SmartCriteria(specific="Bed by 23:00", measurable="Hours slept"),
        target_value=8,
        unit="hours",
    )


class GoalsServer:
    """Serves the coaching endpoints GoalsView uses and records writes."""

    def __init__(self) -> None:
        self.goals = [_goal(), _goal(_id="g2", title="Meditate", category="mindfulness",
                                     description="Ten minutes", unit="minutes")]
        self.writes: list[tuple[str, str, dict | None]] = []
        self.fail_create: int | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path.removeprefix("/wellness-coaching")
        body = json.loads(request.content) if request.content else None
        if request.method != "GET":
            self.writes.append((request.method, path, body))

        if path == "/dashboard":
            return httpx.Response(200, json=_envelope({"metrics": {"totalGoals": len(self.goals)}}))
        if path == "/goals" and request.method == "GET":
            return httpx.Response(200, json=_envelope({"goals": self.goals, "count": len(self.goals)}))
        if path == "/goals" and request.method == "POST":
            if self.fail_create:
                return httpx.Response(self.fail_create, json={"message": "Target date must be in the future"})
            return httpx.Response(201, json=_envelope({"goal": _goal(_id="g3")}))
        if path == "/ai/goal-suggestions":
            suggestion = {
                "title": "Evening wind-down",
                "description": "No screens before bed",
                "category": "sleep",
                "smartCriteria": {"specific": "Screens off at 22:00", "measurable": "Nights per week"},
                "targetValue": 5,
                "unit": "nights",
                "suggestedDuration": 3,
                "difficulty": "beginner",
            }
            return httpx.Response(200, json=_envelope({"suggestions": [suggestion]}))
        if path.endswith("/progress"):
            return httpx.Response(200, json=_envelope({"goal": _goal()}))
        if request.method in ("PUT", "POST"):
            return httpx.Response(200, json=_envelope({"goal": _goal()}))
        if request.method == "DELETE":
            return httpx.Response(500, json={"message": "nope"})
        return httpx.Response(404, json={"message": "not found"})


class TestHelpers:
    def test_progress_percentage_clamped(self) -> None:
        check.equal(progress_percentage(parse_goal(_goal())), 25.0)
        check.equal(progress_percentage(parse_goal(_goal(currentValue=20000))), 100.0)
        check.equal(progress_percentage(parse_goal(_goal(targetValue=0))), 0.0)

    def test_days_remaining_rounds_up(self) -> None:
        goal = parse_goal(_goal(targetDate="2024-01-12T00:00:00Z"))

        check.equal(days_remaining(goal, now=NOW), 2)
        check.equal(days_remaining(goal, now=NOW + timedelta(days=3)), -1)


class TestCreateGoalForm:
    def test_valid_form(self) -> None:
        assert _valid_form().validate() is None

    @pytest.mark.parametrize(
        ("changes", "message"),
        [
            ({"title": ""}, "Please fill in all required fields"),
            ({"unit": "  "}, "Please specify a unit of measurement (e.g., steps, minutes, kg, etc.)"),
            ({"target_value": 0}, "Please enter a valid target value greater than 0"),
            ({"target_value": None}, "Please enter a valid target value greater than 0"),
            (
                {"smart_criteria": SmartCriteria(specific="x")},
                "Please complete at least the Specific and Measurable criteria",
            ),
        ],
    )
    def test_validation_messages(self, changes: dict, message: str) -> None:
        form = _valid_form()
        for name, value in changes.items():
            setattr(form, name, value)

        assert form.validate() == message

    def test_apply_suggestion_keeps_criteria_instance(self) -> None:
        form = CreateGoalForm(category="sleep")
        criteria = form.smart_criteria
        suggestion = GoalSuggestion(
            title="Wind down",
            description="Screens off",
            category="sleep",
            smart_criteria=SmartCriteria(specific="22:00", measurable="nights"),
            target_value=5,
            unit="nights",
            suggested_duration=2,
            difficulty="beginner",
        )

        form.apply_suggestion(suggestion, now=datetime(2024, 1, 1))

        check.is_(form.smart_criteria, criteria)
        check.equal(criteria.specific, "22:00")
        check.equal(form.target_date, datetime(2024, 1, 15))
        check.equal(form.unit, "nights")

    def test_reset_clears_in_place(self) -> None:
        form = _valid_form()
        criteria = form.smart_criteria

        form.reset()

        check.equal(form.title, "")
        check.equal(form.target_value, 0.0)
        check.is_(form.smart_criteria, criteria)
        check.equal(criteria.specific, "")

    def test_to_request_trims_unit(self) -> None:
        form = _valid_form()
        form.unit = " hours "

        request = form.to_request()

        check.equal(request.unit, "hours")
        check.is_none(request.tags)


class TestGoalsView:
    async def test_load_and_search(self, make_client, notifier) -> None:
        async with make_client(GoalsServer()) as client:
            view = GoalsView(GoalsApi(client), notifier)
            await view.load()

        check.equal(view.dashboard.metrics.total_goals, 2)
        check.equal(len(view.goals), 2)
        view.search_term = "MINDFUL"
        check.equal([g.id for g in view.filtered_goals], ["g2"])
        view.search_term = "park"
        check.equal([g.id for g in view.filtered_goals], ["g1"])

    async def test_filters_sent_as_query(self, make_client, notifier) -> None:
        urls: list[httpx.URL] = []
        server = GoalsServer()

        def handler(request: httpx.Request) -> httpx.Response:
            urls.append(request.url)
            return server(request)

        async with make_client(handler) as client:
            view = GoalsView(GoalsApi(client), notifier)
            await view.set_filters(status="active", category="sleep")

        goals_url = next(u for u in urls if u.path.endswith("/goals"))
        check.equal(goals_url.params["status"], "active")
        check.equal(goals_url.params["category"], "sleep")

    async def test_invalid_form_makes_no_request(self, make_client, notifier) -> None:
        server = GoalsServer()
        async with make_client(server) as client:
            view = GoalsView(GoalsApi(client), notifier)
            created = await view.create_goal(CreateGoalForm())

        check.is_false(created)
        check.equal(server.writes, [])
        check.equal(notifier.errors, ["Please fill in all required fields"])

    async def test_create_sends_camel_case_and_reloads(self, make_client, notifier) -> None:
        server = GoalsServer()
        async with make_client(server) as client:
            view = GoalsView(GoalsApi(client), notifier)
            created = await view.create_goal(_valid_form())

        method, path, body = server.writes[0]
        check.is_true(created)
        check.equal((method, path), ("POST", "/goals"))
        check.equal(body["targetValue"], 8)
        check.equal(body["smartCriteria"]["specific"], "Bed by 23:00")
        check.equal(notifier.successes, ["Goal created successfully!"])
        check.equal(len(view.goals), 2)

    async def test_create_400_shows_server_message(self, make_client, notifier) -> None:
        server = GoalsServer()
        server.fail_create = 400
        async with make_client(server) as client:
            view = GoalsView(GoalsApi(client), notifier)
            await view.create_goal(_valid_form())

        check.equal(notifier.errors, ["Target date must be in the future"])

    async def test_create_other_error_generic(self, make_client, notifier) -> None:
        server = GoalsServer()
        server.fail_create = 500
        async with make_client(server) as client:
            view = GoalsView(GoalsApi(client), notifier)
            await view.create_goal(_valid_form())

        check.equal(notifier.errors, ["Failed to create goal. Please check all required fields."])

    async def test_suggestions_need_category(self, make_client, notifier) -> None:
        server = GoalsServer()
        async with make_client(server) as client:
            view = GoalsView(GoalsApi(client), notifier)
            none = await view.fetch_suggestions(CreateGoalForm())
            some = await view.fetch_suggestions(CreateGoalForm(category="sleep"))

        check.equal(none, [])
        check.equal(notifier.errors, ["Please select a category to get AI suggestions"])
        check.equal([s.title for s in some], ["Evening wind-down"])
        _, _, body = server.writes[0]
        check.equal(body["categories"], ["sleep"])
        check.equal(body["availableTimePerDay"], 30)

    async def test_mutations_report_outcome(self, make_client, notifier) -> None:
        async with make_client(GoalsServer()) as client:
            view = GoalsView(GoalsApi(client), notifier)
            changed = await view.change_status("g1", "paused")
            deleted = await view.delete_goal("g1")

        check.is_true(changed)
        check.is_false(deleted)
        check.equal(notifier.successes, ["Goal status changed to paused"])
        check.equal(notifier.errors, ["Failed to delete goal"])

    async def test_malformed_goal_list_notifies_once(self, make_client, notifier) -> None:
        """A completed goal without its completion date fails parsing, not the page."""
        server = GoalsServer()
        server.goals = [_goal(status="completed")]

        async with make_client(server) as client:
            view = GoalsView(GoalsApi(client), notifier)
            await view.load()

        check.equal(notifier.errors, ["Failed to load wellness dashboard"])
        check.equal(view.goals, [])
        check.is_false(view.is_loading)
