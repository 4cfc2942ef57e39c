"""Wellness coaching endpoints (``/wellness-coaching``).

Every response arrives wrapped in ``{status, message, data}``; methods
return the unwrapped ``data`` payload.
"""

from datetime import datetime
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter

from wellnessai.api.client import ApiClient, parse_response, to_payload
from wellnessai.models.base import Envelope
from wellnessai.models.goals import (
    AdaptiveAdjustment,
    AddMilestoneRequest,
    AddProgressRequest,
    AdjustmentFeedback,
    CategoryAnalytics,
    Celebration,
    CelebrationTrigger,
    ComparisonReport,
    ComparisonRequest,
    CreateGoalPayload,
    CreateGoalRequest,
    DashboardData,
    DashboardFilters,
    GenerateReportRequest,
    GoalPayload,
    GoalsPayload,
    GoalStatus,
    GoalSuggestion,
    GoalSuggestionsRequest,
    ProgressChart,
    ProgressPayload,
    StreakAnalysis,
    Timeframe,
    UpdateGoalRequest,
    WellnessGoal,
    WellnessReport,
)

PREFIX = "/wellness-coaching"

M = TypeVar("M")


def _unwrap(model: type[M] | Any, body: Any) -> M:
    return parse_response(TypeAdapter(Envelope[model]), body).data


class GoalsApi:
    """Client for goals, progress, analytics, AI features and reports."""

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    # Goal management

    async def create_goal(self, request: CreateGoalRequest) -> CreateGoalPayload:
        body = await self._client.post(f"{PREFIX}/goals", request)
        return _unwrap(CreateGoalPayload, body)

    async def get_goals(
        self,
        status: GoalStatus | None = None,
        category: str | None = None,
    ) -> list[WellnessGoal]:
        body = await self._client.get(
            f"{PREFIX}/goals", params={"status": status, "category": category}
        )
        return _unwrap(GoalsPayload, body).goals

    async def get_goal(self, goal_id: str) -> WellnessGoal:
        body = await self._client.get(f"{PREFIX}/goals/{goal_id}")
        return _unwrap(GoalPayload, body).goal

    async def update_goal(self, goal_id: str, update: UpdateGoalRequest) -> WellnessGoal:
        body = await self._client.put(f"{PREFIX}/goals/{goal_id}", update)
        return _unwrap(GoalPayload, body).goal

    async def delete_goal(self, goal_id: str) -> None:
        await self._client.delete(f"{PREFIX}/goals/{goal_id}")

    # Progress tracking

    async def add_progress(self, goal_id: str, request: AddProgressRequest) -> ProgressPayload:
        body = await self._client.post(f"{PREFIX}/goals/{goal_id}/progress", request)
        return _unwrap(ProgressPayload, body)

    async def add_milestone(self, goal_id: str, request: AddMilestoneRequest) -> WellnessGoal:
        body = await self._client.post(f"{PREFIX}/goals/{goal_id}/milestones", request)
        return _unwrap(GoalPayload, body).goal

    # Dashboard and analytics

    async def get_dashboard(self, filters: DashboardFilters | None = None) -> DashboardData:
        body = await self._client.get(f"{PREFIX}/dashboard", params=_query(filters))
        return _unwrap(DashboardData, body)

    async def get_progress_chart(
        self,
        goal_id: str | None = None,
        timeframe: Timeframe | None = None,
    ) -> ProgressChart:
        body = await self._client.get(
            f"{PREFIX}/analytics/progress-chart",
            params={"goalId": goal_id, "timeframe": timeframe},
        )
        return _unwrap(dict[str, ProgressChart], body)["chart"]

    async def get_category_analytics(self, category: str) -> CategoryAnalytics:
        body = await self._client.get(f"{PREFIX}/analytics/category/{category}")
        return _unwrap(CategoryAnalytics, body)

    async def get_streak_analysis(self) -> StreakAnalysis:
        body = await self._client.get(f"{PREFIX}/analytics/streaks")
        return _unwrap(StreakAnalysis, body)

    # AI-powered features

    async def get_goal_suggestions(self, request: GoalSuggestionsRequest) -> list[GoalSuggestion]:
        body = await self._client.post(f"{PREFIX}/ai/goal-suggestions", request)
        return _unwrap(dict[str, list[GoalSuggestion]], body)["suggestions"]

    async def get_adaptive_adjustments(self, goal_id: str) -> list[AdaptiveAdjustment]:
        body = await self._client.get(f"{PREFIX}/ai/adaptive-adjustments/{goal_id}")
        return _unwrap(dict[str, list[AdaptiveAdjustment]], body)["adjustments"]

    async def apply_adaptive_adjustment(
        self, adjustment_id: str, feedback: AdjustmentFeedback
    ) -> WellnessGoal:
        body = await self._client.post(
            f"{PREFIX}/ai/adaptive-adjustments/{adjustment_id}/apply", feedback
        )
        return _unwrap(GoalPayload, body).goal

    # Celebrations

    async def get_celebrations(self, limit: int | None = None) -> list[Celebration]:
        body = await self._client.get(f"{PREFIX}/celebrations", params={"limit": limit})
        return _unwrap(dict[str, list[Celebration]], body)["celebrations"]

    async def trigger_celebration(self, goal_id: str, trigger: CelebrationTrigger) -> Celebration:
        body = await self._client.post(f"{PREFIX}/celebrations/{goal_id}", trigger)
        return _unwrap(dict[str, Celebration], body)["celebration"]

    # Reports

    async def generate_report(self, request: GenerateReportRequest) -> WellnessReport:
        body = await self._client.post(f"{PREFIX}/reports/generate", request)
        return _unwrap(dict[str, WellnessReport], body)["report"]

    async def get_reports(self, limit: int | None = None) -> list[WellnessReport]:
        body = await self._client.get(f"{PREFIX}/reports", params={"limit": limit})
        return _unwrap(dict[str, list[WellnessReport]], body)["reports"]

    async def get_report(self, report_id: str) -> WellnessReport:
        body = await self._client.get(f"{PREFIX}/reports/{report_id}")
        return _unwrap(dict[str, WellnessReport], body)["report"]

    async def generate_weekly_report(self) -> WellnessReport:
        body = await self._client.post(f"{PREFIX}/reports/weekly")
        return _unwrap(dict[str, WellnessReport], body)["report"]

    async def generate_monthly_report(self) -> WellnessReport:
        body = await self._client.post(f"{PREFIX}/reports/monthly")
        return _unwrap(dict[str, WellnessReport], body)["report"]

    async def generate_comparison_report(self, request: ComparisonRequest) -> ComparisonReport:
        body = await self._client.post(f"{PREFIX}/reports/comparison", request)
        return _unwrap(ComparisonReport, body)

    # Utility

    async def get_categories(self) -> list[str]:
        body = await self._client.get(f"{PREFIX}/categories")
        return _unwrap(dict[str, list[str]], body)["categories"]

    async def health_check(self) -> datetime:
        body = await self._client.get(f"{PREFIX}/health-check")
        return _unwrap(dict[str, datetime], body)["timestamp"]


def _query(filters: BaseModel | None) -> dict[str, Any] | None:
    return to_payload(filters) if filters is not None else None
