"""Wellness coaching page: dashboard, goal list and the create-goal form."""

import asyncio
import logging
import math
from dataclasses import dataclass, field, fields
from datetime import datetime, timedelta

from wellnessai.api.errors import ApiError
from wellnessai.api.goals import GoalsApi
from wellnessai.models.goals import (
    AddMilestoneRequest,
    AddProgressRequest,
    CreateGoalRequest,
    DashboardData,
    DashboardFilters,
    GoalPriority,
    GoalStatus,
    GoalSuggestion,
    GoalSuggestionsRequest,
    SmartCriteria,
    UpdateGoalRequest,
    WellnessGoal,
)
from wellnessai.views.notify import Notifier

logger = logging.getLogger(__name__)

DEFAULT_GOAL_DAYS = 30


def progress_percentage(goal: WellnessGoal) -> float:
    """Share of the target reached, clamped to 0..100. A non-positive target is 0."""
    if goal.target_value <= 0:
        return 0.0
    return max(0.0, min(goal.current_value / goal.target_value * 100, 100.0))


def days_remaining(goal: WellnessGoal, now: datetime | None = None) -> int:
    """Whole days until the target date, rounded up. Negative when overdue."""
    target = goal.target_date
    now = now or datetime.now(tz=target.tzinfo)
    return math.ceil((target - now).total_seconds() / 86400)


@dataclass
class CreateGoalForm:
    """Editable state of the create-goal dialog."""

    title: str = ""
    description: str = ""
    category: str = ""
    priority: GoalPriority = "medium"
    smart_criteria: SmartCriteria = field(default_factory=SmartCriteria)
    target_value: float = 0.0
    unit: str = ""
    start_date: datetime = field(default_factory=datetime.now)
    target_date: datetime = field(
        default_factory=lambda: datetime.now() + timedelta(days=DEFAULT_GOAL_DAYS)
    )
    tags: list[str] = field(default_factory=list)

    def validate(self) -> str | None:
        """Return the first blocking problem, or None when the form can be sent."""
        if not self.title or not self.description or not self.category:
            return "Please fill in all required fields"
        if not (self.unit or "").strip():
            return "Please specify a unit of measurement (e.g., steps, minutes, kg, etc.)"
        if not self.target_value or self.target_value <= 0:
            return "Please enter a valid target value greater than 0"
        if not self.smart_criteria.specific or not self.smart_criteria.measurable:
            return "Please complete at least the Specific and Measurable criteria"
        return None

    def apply_suggestion(self, suggestion: GoalSuggestion, now: datetime | None = None) -> None:
        """Fill the form from an AI suggestion; duration is given in weeks."""
        now = now or datetime.now()
        self.title = suggestion.title
        self.description = suggestion.description
        self.category = suggestion.category
        self._set_criteria(suggestion.smart_criteria)
        self.target_value = suggestion.target_value
        self.unit = suggestion.unit
        self.target_date = now + timedelta(weeks=suggestion.suggested_duration)

    def reset(self) -> None:
        """Clear the form in place; bound widgets keep their targets."""
        blank = CreateGoalForm()
        for f in fields(self):
            if f.name != "smart_criteria":
                setattr(self, f.name, getattr(blank, f.name))
        self._set_criteria(blank.smart_criteria)

    def _set_criteria(self, criteria: SmartCriteria) -> None:
        # widgets bind to this SmartCriteria instance, so copy field by field
        for name in SmartCriteria.model_fields:
            setattr(self.smart_criteria, name, getattr(criteria, name))

    def to_request(self) -> CreateGoalRequest:
        return CreateGoalRequest(
            title=self.title,
            description=self.description,
            category=self.category,
            priority=self.priority,
            smart_criteria=self.smart_criteria,
            target_value=self.target_value,
            unit=self.unit.strip(),
            start_date=self.start_date,
            target_date=self.target_date,
            tags=self.tags or None,
        )


class GoalsView:
    """Goals page state.

    Every mutation is followed by a full reload; nothing is patched locally.
    """

    def __init__(self, goals_api: GoalsApi, notifier: Notifier) -> None:
        self._api = goals_api
        self._notifier = notifier
        self.dashboard: DashboardData | None = None
        self.goals: list[WellnessGoal] = []
        self.suggestions: list[GoalSuggestion] = []
        self.filters = DashboardFilters()
        self.search_term = ""
        self.is_loading = False

    @property
    def filtered_goals(self) -> list[WellnessGoal]:
        term = self.search_term.lower()
        if not term:
            return list(self.goals)
        return [
            goal for goal in self.goals
            if term in goal.title.lower()
            or term in goal.description.lower()
            or term in goal.category.lower()
        ]

    async def load(self) -> None:
        """Fetch dashboard and goals concurrently."""
        status = self.filters.statuses[0] if self.filters.statuses else None
        category = self.filters.categories[0] if self.filters.categories else None
        self.is_loading = True
        try:
            self.dashboard, self.goals = await asyncio.gather(
                self._api.get_dashboard(self.filters),
                self._api.get_goals(status=status, category=category),
            )
        except ApiError as e:
            logger.error(f"Error loading dashboard: {e}")
            self._notifier.error("Failed to load wellness dashboard")
        finally:
            self.is_loading = False

    async def set_filters(
        self,
        status: GoalStatus | None = None,
        category: str | None = None,
        priority: GoalPriority | None = None,
    ) -> None:
        self.filters = DashboardFilters(
            statuses=[status] if status else None,
            categories=[category] if category else None,
            priorities=[priority] if priority else None,
        )
        await self.load()

    async def clear_filters(self) -> None:
        await self.set_filters()

    async def create_goal(self, form: CreateGoalForm) -> bool:
        problem = form.validate()
        if problem:
            self._notifier.error(problem)
            return False
        try:
            await self._api.create_goal(form.to_request())
        except ApiError as e:
            logger.error(f"Error creating goal: {e}")
            self._notifier.error(
                e.message if e.status_code == 400 else
                "Failed to create goal. Please check all required fields."
            )
            return False
        self._notifier.success("Goal created successfully!")
        await self.load()
        return True

    async def fetch_suggestions(self, form: CreateGoalForm) -> list[GoalSuggestion]:
        if not form.category:
            self._notifier.error("Please select a category to get AI suggestions")
            return []
        request = GoalSuggestionsRequest(
            categories=[form.category],
            fitness_level="beginner",
            available_time_per_day=30,
            preferred_duration=4,
        )
        try:
            self.suggestions = await self._api.get_goal_suggestions(request)
        except ApiError as e:
            logger.error(f"Error getting suggestions: {e}")
            self._notifier.error("Failed to get AI suggestions")
            return []
        return self.suggestions

    async def add_progress(self, goal_id: str, request: AddProgressRequest) -> bool:
        try:
            await self._api.add_progress(goal_id, request)
        except ApiError as e:
            logger.error(f"Error adding progress: {e}")
            self._notifier.error("Failed to add progress")
            return False
        self._notifier.success("Your progress has been recorded successfully!")
        await self.load()
        return True

    async def add_milestone(self, goal_id: str, request: AddMilestoneRequest) -> bool:
        try:
            await self._api.add_milestone(goal_id, request)
        except ApiError as e:
            logger.error(f"Error adding milestone: {e}")
            self._notifier.error("Failed to add milestone")
            return False
        self._notifier.success("New milestone has been created!")
        await self.load()
        return True

    async def change_status(self, goal_id: str, status: GoalStatus) -> bool:
        try:
            await self._api.update_goal(goal_id, UpdateGoalRequest(status=status))
        except ApiError as e:
            logger.error(f"Error updating status: {e}")
            self._notifier.error("Failed to update goal status")
            return False
        self._notifier.success(f"Goal status changed to {status}")
        await self.load()
        return True

    async def delete_goal(self, goal_id: str) -> bool:
        try:
            await self._api.delete_goal(goal_id)
        except ApiError as e:
            logger.error(f"Error deleting goal: {e}")
            self._notifier.error("Failed to delete goal")
            return False
        self._notifier.success("Goal deleted")
        await self.load()
        return True
