"""Wellness coaching models: goals, milestones, progress and analytics.

``WellnessGoal`` is a discriminated union on ``status`` so that state-specific
fields (``completed_at`` on completed goals) are required exactly where they
apply. All aggregates are computed server-side; these models only carry them.
"""

from datetime import datetime
from typing import Annotated, Any, Literal

from pydantic import Field, TypeAdapter, model_validator

from wellnessai.models.base import CamelModel

GoalPriority = Literal["low", "medium", "high", "critical"]
GoalStatus = Literal["draft", "active", "paused", "completed", "abandoned"]
Timeframe = Literal["week", "month", "quarter", "year"]
Difficulty = Literal["beginner", "intermediate", "advanced"]

GOAL_CATEGORIES = (
    "physical_activity",
    "nutrition",
    "sleep",
    "mental_health",
    "stress_management",
    "weight_management",
    "medical_adherence",
    "habits",
    "mindfulness",
    "social_wellness",
    "preventive_care",
    "recovery",
)
GOAL_PRIORITIES: tuple[GoalPriority, ...] = ("low", "medium", "high", "critical")
GOAL_STATUSES: tuple[GoalStatus, ...] = ("draft", "active", "paused", "completed", "abandoned")

CATEGORY_LABELS = {category: category.replace("_", " ").title() for category in GOAL_CATEGORIES}


class SmartCriteria(CamelModel):
    specific: str = ""
    measurable: str = ""
    achievable: str = ""
    relevant: str = ""
    time_bound: str = ""


class Milestone(CamelModel):
    """Sub-target of a goal. Only the completion fields change after creation."""

    id: str
    title: str
    description: str = ""
    target_value: float
    target_date: datetime
    completed: bool = False
    completed_at: datetime | None = None
    reward: str | None = None

    @model_validator(mode="after")
    def check_completion(self) -> "Milestone":
        if self.completed_at is not None and not self.completed:
            raise ValueError("completed_at is only valid on a completed milestone")
        return self


class ProgressEntry(CamelModel, frozen=True):
    """Append-only progress log entry. Instances are immutable."""

    id: str
    value: float
    date: datetime
    notes: str | None = None
    mood: int | None = Field(default=None, ge=1, le=5)
    confidence: int | None = Field(default=None, ge=1, le=5)
    challenges: list[str] = []


class GoalPrediction(CamelModel):
    likelihood: float = Field(default=0.0, ge=0.0, le=1.0)
    timeframe: str = ""
    factors: list[str] = []


class AdjustmentRecord(CamelModel):
    date: datetime
    type: str
    original_value: Any = None
    new_value: Any = None
    reason: str = ""


class GoalAIInsights(CamelModel):
    suggestions: list[str] = []
    predictions: GoalPrediction = Field(default_factory=GoalPrediction)
    adaptive_adjustments: list[AdjustmentRecord] = []


class _GoalBase(CamelModel):
    id: str = Field(alias="_id")
    user_id: str
    title: str
    description: str = ""
    category: str
    priority: GoalPriority = "medium"
    smart_criteria: SmartCriteria = Field(default_factory=SmartCriteria)
    target_value: float
    current_value: float = 0.0
    unit: str
    start_date: datetime
    target_date: datetime
    milestones: list[Milestone] = []
    progress_entries: list[ProgressEntry] = []
    ai_insights: GoalAIInsights = Field(default_factory=GoalAIInsights)
    tags: list[str] = []
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


class DraftGoal(_GoalBase):
    status: Literal["draft"]


class ActiveGoal(_GoalBase):
    status: Literal["active"]


class PausedGoal(_GoalBase):
    status: Literal["paused"]


class CompletedGoal(_GoalBase):
    status: Literal["completed"]
    completed_at: datetime


class AbandonedGoal(_GoalBase):
    status: Literal["abandoned"]


WellnessGoal = Annotated[
    DraftGoal | ActiveGoal | PausedGoal | CompletedGoal | AbandonedGoal,
    Field(discriminator="status"),
]
goal_adapter: TypeAdapter[WellnessGoal] = TypeAdapter(WellnessGoal)


def parse_goal(data: dict[str, Any]) -> WellnessGoal:
    """Validate a raw goal document into the matching status variant."""
    return goal_adapter.validate_python(data)


# Requests


class CreateGoalRequest(CamelModel):
    title: str
    description: str
    category: str
    priority: GoalPriority = "medium"
    smart_criteria: SmartCriteria
    target_value: float
    unit: str
    start_date: datetime
    target_date: datetime
    tags: list[str] | None = None


class UpdateGoalRequest(CamelModel):
    title: str | None = None
    description: str | None = None
    priority: GoalPriority | None = None
    target_value: float | None = None
    target_date: datetime | None = None
    status: GoalStatus | None = None
    tags: list[str] | None = None


class AddProgressRequest(CamelModel):
    value: float
    date: datetime = Field(default_factory=datetime.now)
    notes: str | None = None
    mood: int | None = Field(default=None, ge=1, le=5)
    confidence: int | None = Field(default=None, ge=1, le=5)
    challenges: list[str] | None = None


class AddMilestoneRequest(CamelModel):
    title: str
    description: str = ""
    target_value: float
    target_date: datetime
    reward: str | None = None


class DashboardFilters(CamelModel):
    statuses: list[GoalStatus] | None = None
    categories: list[str] | None = None
    priorities: list[GoalPriority] | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None


class GoalSuggestionsRequest(CamelModel):
    categories: list[str]
    health_conditions: list[str] | None = None
    fitness_level: Difficulty | None = None
    available_time_per_day: int | None = None
    preferred_duration: int | None = None


class AdjustmentFeedback(CamelModel):
    accepted: bool
    rating: int | None = Field(default=None, ge=1, le=5)
    comments: str | None = None


class CelebrationTrigger(CamelModel):
    type: str
    achievement: str


class ReportPeriod(CamelModel):
    start: datetime
    end: datetime


class GenerateReportRequest(CamelModel):
    type: Literal["weekly", "monthly", "quarterly", "annual", "custom"]
    start_date: datetime | None = None
    end_date: datetime | None = None
    include_ai_insights: bool | None = None
    categories: list[str] | None = None


class ComparisonRequest(CamelModel):
    current: ReportPeriod
    previous: ReportPeriod


# Dashboard and analytics


class DashboardMetrics(CamelModel):
    total_goals: int = 0
    active_goals: int = 0
    completed_goals: int = 0
    overall_progress: float = 0.0
    streak_days: int = 0
    average_confidence: float = 0.0
    average_mood: float = 0.0
    upcoming_milestones: int = 0


class CategoryProgress(CamelModel):
    category: str
    goals: int = 0
    completed_goals: int = 0
    completion_rate: float = 0.0
    average_progress: float = 0.0
    trend: Literal["improving", "declining", "stable"] = "stable"


class NextMilestone(CamelModel):
    title: str
    target_value: float
    days_until_target: int


class GoalProgress(CamelModel):
    goal_id: str
    title: str
    category: str
    current_value: float
    target_value: float
    unit: str
    progress_percentage: float
    days_remaining: int
    on_track: bool
    recent_trend: Literal["positive", "negative", "stable"] = "stable"
    next_milestone: NextMilestone | None = None


class ChartDataset(CamelModel):
    label: str
    data: list[float]
    background_color: str | None = None
    border_color: str | None = None
    type: str | None = None


class ProgressChart(CamelModel):
    labels: list[str] = []
    datasets: list[ChartDataset] = []


class DashboardCharts(CamelModel):
    overall: ProgressChart = Field(default_factory=ProgressChart)
    by_category: ProgressChart = Field(default_factory=ProgressChart)
    mood: ProgressChart = Field(default_factory=ProgressChart)
    confidence: ProgressChart = Field(default_factory=ProgressChart)


class Insight(CamelModel):
    type: Literal["success", "warning", "info", "celebration"]
    title: str
    message: str
    actionable: bool = False
    action: str | None = None
    goal_id: str | None = None


class UpcomingDeadline(CamelModel):
    goal_id: str
    title: str
    type: Literal["goal", "milestone"]
    days_remaining: int
    urgency: GoalPriority


class RecentAchievement(CamelModel):
    type: Literal["goal_completed", "milestone_reached", "streak_achieved", "improvement"]
    title: str
    date: datetime
    goal_id: str | None = None


class DashboardData(CamelModel):
    metrics: DashboardMetrics = Field(default_factory=DashboardMetrics)
    category_progress: list[CategoryProgress] = []
    goal_progress: list[GoalProgress] = []
    progress_charts: DashboardCharts = Field(default_factory=DashboardCharts)
    insights: list[Insight] = []
    upcoming_deadlines: list[UpcomingDeadline] = []
    recent_achievements: list[RecentAchievement] = []


class GoalSuggestion(CamelModel):
    title: str
    description: str
    category: str
    smart_criteria: SmartCriteria
    target_value: float
    unit: str
    suggested_duration: int = Field(..., description="Suggested duration in weeks")
    difficulty: Difficulty
    benefits: list[str] = []
    prerequisites: list[str] = []
    ai_reasoning: str = ""


class AdjustmentPlan(CamelModel):
    difficulty: Literal["easy", "medium", "hard"]
    time_required: str
    steps: list[str] = []


class AdjustmentAnalysis(CamelModel):
    success_probability: float
    risk_factors: list[str] = []
    benefits: list[str] = []


class AdaptiveAdjustment(CamelModel):
    id: str
    goal_id: str
    type: Literal["timeline", "target", "approach", "milestone"]
    suggestion: str
    reasoning: str
    confidence: float
    impact: Literal["low", "medium", "high"]
    urgency: Literal["recommended", "suggested", "optional"]
    implementation: AdjustmentPlan
    ai_analysis: AdjustmentAnalysis
    created_at: datetime


class CelebrationRewards(CamelModel):
    badges: list[str] = []
    points: int = 0
    suggestions: list[str] = []


class Celebration(CamelModel):
    id: str
    type: str
    title: str
    message: str
    achievement: str = ""
    goal_id: str | None = None
    date: datetime
    personalized_message: str = ""
    encouragement_level: Literal["gentle", "enthusiastic", "motivational"] = "gentle"
    rewards: CelebrationRewards = Field(default_factory=CelebrationRewards)


class CategoryAnalytics(CamelModel):
    category: str
    total_goals: int = 0
    active_goals: int = 0
    completed_goals: int = 0
    completion_rate: float = 0.0
    average_progress: float = 0.0
    average_completion_time: float = 0.0
    trends_over_time: dict[str, list[Any]] = {}
    common_challenges: list[str] = []
    success_factors: list[str] = []
    recommendations: list[str] = []


class StreakAnalysis(CamelModel):
    current_streak: dict[str, Any] = {}
    longest_streak: dict[str, Any] = {}
    streak_history: list[dict[str, Any]] = []
    insights: dict[str, Any] = {}


class WellnessReport(CamelModel):
    id: str = Field(alias="_id")
    user_id: str
    type: str
    period: ReportPeriod
    metrics: dict[str, float] = {}
    insights: dict[str, Any] = {}
    category_breakdown: list[dict[str, Any]] = []
    celebrations: list[dict[str, Any]] = []
    generated_at: datetime
    is_public: bool = False


class ComparisonReport(CamelModel):
    current: dict[str, Any]
    previous: dict[str, Any]
    comparison: dict[str, float]
    insights: dict[str, Any] = {}
    chart_data: dict[str, list[Any]] = {}


# Payloads inside the response envelope


class GoalsPayload(CamelModel):
    goals: list[WellnessGoal]
    count: int = 0


class GoalPayload(CamelModel):
    goal: WellnessGoal


class CreateGoalPayload(CamelModel):
    goal: WellnessGoal
    celebrations: list[Celebration] = []


class ProgressPayload(CamelModel):
    goal: WellnessGoal
    celebrations: list[Celebration] = []
    adaptive_adjustments: list[AdaptiveAdjustment] = []
