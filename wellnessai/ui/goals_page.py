"""Wellness coaching page: dashboard metrics, goal cards and goal dialogs."""

from datetime import datetime, timedelta

from nicegui import ui

from wellnessai.context import AppContext
from wellnessai.models.goals import (
    CATEGORY_LABELS,
    GOAL_CATEGORIES,
    GOAL_PRIORITIES,
    GOAL_STATUSES,
    AddMilestoneRequest,
    AddProgressRequest,
    GoalSuggestion,
    WellnessGoal,
)
from wellnessai.ui.layout import guard, page_frame
from wellnessai.ui.notifier import UiNotifier
from wellnessai.views.goals import CreateGoalForm, GoalsView, days_remaining, progress_percentage

STATUS_OPTIONS = {status: status.capitalize() for status in GOAL_STATUSES}
PRIORITY_OPTIONS = {priority: priority.capitalize() for priority in GOAL_PRIORITIES}
CATEGORY_OPTIONS = {category: CATEGORY_LABELS[category] for category in GOAL_CATEGORIES}


def _due_label(days: int) -> str:
    if days < 0:
        return f"{abs(days)}d overdue"
    if days == 0:
        return "Due today"
    if days == 1:
        return "Due tomorrow"
    return f"{days}d left"


def _metric(title: str, value: str, caption: str = "") -> None:
    with ui.card().classes("flex-grow p-4 gap-1"):
        ui.label(title).classes("text-sm text-gray-500")
        ui.label(value).classes("text-2xl font-bold")
        if caption:
            ui.label(caption).classes("text-xs text-gray-400")


def register_goals_page(ctx: AppContext) -> None:
    @ui.page("/wellness-coaching")
    async def goals_page() -> None:
        if not guard(ctx):
            return
        page_frame(ctx)
        view = GoalsView(ctx.goals, UiNotifier())
        form = CreateGoalForm()

        async def reload() -> None:
            await view.load()
            dashboard_view.refresh()
            goals_view.refresh()

        @ui.refreshable
        def dashboard_view() -> None:
            data = view.dashboard
            if data is None:
                return
            metrics = data.metrics
            rate = round(metrics.completed_goals / metrics.total_goals * 100) if metrics.total_goals else 0
            with ui.row().classes("w-full gap-4"):
                _metric("Total Goals", str(metrics.total_goals), f"{metrics.active_goals} currently active")
                _metric("Completed", str(metrics.completed_goals), f"{rate}% completion rate")
                _metric("Streak", f"{metrics.streak_days} days")
                _metric("Overall Progress", f"{round(metrics.overall_progress)}%")
            if data.insights:
                with ui.card().classes("w-full p-4"):
                    ui.label("AI Insights & Recommendations").classes("font-semibold")
                    for insight in data.insights[:3]:
                        with ui.column().classes("gap-0 py-1"):
                            ui.label(insight.title).classes("font-medium")
                            ui.label(insight.message).classes("text-sm text-gray-600")
            if data.upcoming_deadlines:
                with ui.card().classes("w-full p-4"):
                    ui.label("Upcoming Deadlines").classes("font-semibold")
                    for deadline in data.upcoming_deadlines[:6]:
                        with ui.row().classes("items-center gap-2"):
                            ui.badge(_due_label(deadline.days_remaining))
                            ui.label(deadline.title)
                            ui.label("Goal" if deadline.type == "goal" else "Milestone").classes(
                                "text-xs text-gray-400"
                            )

        def goal_card(goal: WellnessGoal) -> None:
            percent = progress_percentage(goal)
            with ui.card().classes("w-full p-4 gap-2"):
                with ui.row().classes("w-full items-center justify-between"):
                    with ui.column().classes("gap-0"):
                        ui.label(goal.title).classes("font-semibold")
                        ui.label(
                            f"{CATEGORY_LABELS.get(goal.category, goal.category)} · {goal.priority}"
                        ).classes("text-xs text-gray-500")
                    ui.badge(goal.status)
                ui.label(goal.description).classes("text-sm text-gray-600")
                ui.linear_progress(value=percent / 100, show_value=False)
                with ui.row().classes("w-full justify-between text-sm"):
                    ui.label(f"{goal.current_value:g} / {goal.target_value:g} {goal.unit} ({round(percent)}%)")
                    ui.label(_due_label(days_remaining(goal)))
                with ui.row().classes("gap-2"):
                    ui.button("Add Progress", on_click=lambda: progress_dialog(goal)).props(
                        "outline no-caps size=sm"
                    )
                    ui.button("Add Milestone", on_click=lambda: milestone_dialog(goal)).props(
                        "outline no-caps size=sm"
                    )
                    ui.select(
                        STATUS_OPTIONS,
                        value=goal.status,
                        on_change=lambda e: reload_after(view.change_status(goal.id, e.value)),
                    ).props("dense outlined").classes("w-32")
                    ui.button(
                        icon="delete", on_click=lambda: reload_after(view.delete_goal(goal.id))
                    ).props("flat round color=red size=sm")

        async def reload_after(mutation) -> None:
            if await mutation:
                dashboard_view.refresh()
                goals_view.refresh()

        @ui.refreshable
        def goals_view() -> None:
            goals = view.filtered_goals
            if not goals:
                ui.label("No goals yet. Create your first wellness goal!").classes("text-gray-500")
                return
            with ui.grid(columns=2).classes("w-full gap-4"):
                for goal in goals:
                    goal_card(goal)

        def progress_dialog(goal: WellnessGoal) -> None:
            with ui.dialog() as dialog, ui.card().classes("w-96"):
                ui.label(f"Add progress to {goal.title}").classes("font-semibold")
                value = ui.number(f"Value ({goal.unit})", value=0)
                notes = ui.textarea("Notes")
                mood = ui.slider(min=1, max=5, value=3).props("label-always markers")
                confidence = ui.slider(min=1, max=5, value=3).props("label-always markers")

                async def save() -> None:
                    request = AddProgressRequest(
                        value=float(value.value or 0),
                        notes=notes.value or None,
                        mood=int(mood.value),
                        confidence=int(confidence.value),
                    )
                    if await view.add_progress(goal.id, request):
                        dialog.close()
                        dashboard_view.refresh()
                        goals_view.refresh()

                with ui.row():
                    ui.button("Cancel", on_click=dialog.close).props("flat")
                    ui.button("Save", on_click=save)
            dialog.open()

        def milestone_dialog(goal: WellnessGoal) -> None:
            with ui.dialog() as dialog, ui.card().classes("w-96"):
                ui.label(f"Add milestone to {goal.title}").classes("font-semibold")
                title = ui.input("Title")
                description = ui.textarea("Description")
                target = ui.number(f"Target ({goal.unit})", value=0)
                days = ui.number("Days from now", value=7, min=1)
                reward = ui.input("Reward (optional)")

                async def save() -> None:
                    request = AddMilestoneRequest(
                        title=title.value or "",
                        description=description.value or "",
                        target_value=float(target.value or 0),
                        target_date=datetime.now() + timedelta(days=int(days.value or 7)),
                        reward=reward.value or None,
                    )
                    if await view.add_milestone(goal.id, request):
                        dialog.close()
                        dashboard_view.refresh()
                        goals_view.refresh()

                with ui.row():
                    ui.button("Cancel", on_click=dialog.close).props("flat")
                    ui.button("Save", on_click=save)
            dialog.open()

        with ui.dialog() as create_dialog, ui.card().classes("w-[36rem] gap-2"):
            ui.label("Create Your Wellness Goal").classes("text-lg font-semibold")
            ui.input("Title").bind_value(form, "title").classes("w-full")
            ui.textarea("Description").bind_value(form, "description").classes("w-full")
            with ui.row().classes("w-full no-wrap"):
                ui.select(CATEGORY_OPTIONS, label="Category").bind_value(form, "category").classes("flex-grow")
                ui.select(PRIORITY_OPTIONS, label="Priority").bind_value(form, "priority").classes("w-40")
            with ui.row().classes("w-full no-wrap"):
                ui.number("Target value").bind_value(form, "target_value").classes("flex-grow")
                ui.input("Unit").bind_value(form, "unit").classes("flex-grow")
            ui.label("SMART criteria").classes("font-medium")
            for field, label in [
                ("specific", "Specific"),
                ("measurable", "Measurable"),
                ("achievable", "Achievable"),
                ("relevant", "Relevant"),
                ("time_bound", "Time-bound"),
            ]:
                ui.input(label).bind_value(form.smart_criteria, field).classes("w-full")

            @ui.refreshable
            def suggestions_view() -> None:
                for suggestion in view.suggestions:
                    with ui.card().classes("w-full p-3 cursor-pointer").on(
                        "click", lambda s=suggestion: apply_suggestion(s)
                    ):
                        ui.label(suggestion.title).classes("font-medium")
                        ui.label(suggestion.description).classes("text-xs text-gray-500")

            def apply_suggestion(suggestion: GoalSuggestion) -> None:
                form.apply_suggestion(suggestion)
                view.suggestions = []
                suggestions_view.refresh()

            async def fetch_suggestions() -> None:
                await view.fetch_suggestions(form)
                suggestions_view.refresh()

            async def submit() -> None:
                if await view.create_goal(form):
                    create_dialog.close()
                    form.reset()
                    dashboard_view.refresh()
                    goals_view.refresh()

            suggestions_view()
            with ui.row().classes("w-full justify-end"):
                ui.button("AI Suggestions", icon="lightbulb", on_click=fetch_suggestions).props("outline no-caps")
                ui.button("Cancel", on_click=create_dialog.close).props("flat")
                ui.button("Create Goal", on_click=submit)

        with ui.column().classes("w-full max-w-6xl mx-auto p-4 gap-4"):
            with ui.row().classes("w-full items-center justify-between"):
                with ui.column().classes("gap-0"):
                    ui.label("Wellness Coaching").classes("text-2xl font-bold")
                    ui.label(
                        "Transform your wellness journey with personalized goal tracking "
                        "and AI-powered insights"
                    ).classes("text-gray-500")
                ui.button("Create New Goal", icon="add", on_click=create_dialog.open)

            with ui.row().classes("w-full items-center gap-3"):
                status_filter = ui.select({"": "All statuses", **STATUS_OPTIONS}, value="", label="Status").classes("w-40")
                category_filter = ui.select({"": "All categories", **CATEGORY_OPTIONS}, value="", label="Category").classes("w-56")
                search = ui.input("Search goals").classes("flex-grow")

                async def apply_filters() -> None:
                    await view.set_filters(
                        status=status_filter.value or None, category=category_filter.value or None
                    )
                    dashboard_view.refresh()
                    goals_view.refresh()

                def apply_search() -> None:
                    view.search_term = search.value or ""
                    goals_view.refresh()

                status_filter.on_value_change(apply_filters)
                category_filter.on_value_change(apply_filters)
                search.on_value_change(apply_search)

            dashboard_view()
            goals_view()

        await reload()
