"""Subscription, settings and admin pages."""

from nicegui import ui

from wellnessai.context import AppContext
from wellnessai.ui.layout import guard, page_frame
from wellnessai.ui.notifier import UiNotifier
from wellnessai.views.admin import AdminView
from wellnessai.views.billing import SubscribeView
from wellnessai.views.settings import SettingsView, format_token_usage, usage_percent


def register_account_pages(ctx: AppContext) -> None:
    @ui.page("/subscribe")
    async def subscribe_page() -> None:
        if not guard(ctx):
            return
        page_frame(ctx)
        view = SubscribeView(ctx.subscription, UiNotifier())

        async def subscribe(plan_id: str) -> None:
            url = await view.subscribe(plan_id)
            if url:
                ui.navigate.to(url, new_tab=True)

        async def manage() -> None:
            url = await view.manage()
            if url:
                ui.navigate.to(url, new_tab=True)

        async def cancel() -> None:
            if await view.cancel():
                plans_view.refresh()

        @ui.refreshable
        def plans_view() -> None:
            if view.current is not None:
                with ui.card().classes("w-full p-4"):
                    with ui.row().classes("w-full items-center justify-between"):
                        ui.label(
                            f"Current plan: {view.current.plan_id} ({view.current.status}), "
                            f"renews {view.current.current_period_end}"
                        )
                        with ui.row():
                            ui.button("Manage Subscription", on_click=manage).props("outline no-caps")
                            if view.current.status == "active":
                                ui.button("Cancel", on_click=cancel).props("flat color=red no-caps")
            with ui.row().classes("w-full gap-4 items-stretch"):
                for plan in view.plans:
                    with ui.card().classes("flex-grow p-5 gap-2"):
                        with ui.row().classes("items-center gap-2"):
                            ui.label(plan.name).classes("text-lg font-semibold")
                            if plan.popular:
                                ui.badge("Most Popular")
                        ui.label(f"${plan.price:g}/{plan.interval}").classes("text-2xl font-bold")
                        for feature in plan.features:
                            with ui.row().classes("items-center gap-1"):
                                ui.icon("check").classes("text-emerald-500")
                                ui.label(feature).classes("text-sm")
                        if view.is_current_plan(plan):
                            ui.button("Current Plan").props("disable").classes("w-full")
                        else:
                            ui.button(
                                "Subscribe", on_click=lambda p=plan: subscribe(p.id)
                            ).classes("w-full")

        with ui.column().classes("w-full max-w-5xl mx-auto p-4 gap-4"):
            ui.label("Choose Your Plan").classes("text-2xl font-bold")
            ui.label(
                "Unlock the full potential of your wellness journey with our flexible "
                "subscription plans."
            ).classes("text-gray-500")
            plans_view()

        await view.load()
        plans_view.refresh()

    @ui.page("/settings")
    async def settings_page() -> None:
        if not guard(ctx):
            return
        page_frame(ctx)
        notifier = UiNotifier()
        view = SettingsView(ctx.auth, ctx.usage_api, ctx.session, ctx.usage, notifier)
        user = ctx.session.user

        @ui.refreshable
        def usage_view() -> None:
            stats = view.stats
            if stats is None:
                ui.label("Loading usage data...").classes("text-sm text-gray-500")
                return
            for label, used, limit in [
                ("Tokens", stats.tokens_used, stats.tokens_limit),
                ("Messages", stats.messages_used, stats.messages_limit),
            ]:
                ui.label(
                    f"{label}: {format_token_usage(used)} / {format_token_usage(limit)}"
                ).classes("text-sm")
                ui.linear_progress(value=usage_percent(used, limit) / 100, show_value=False)
            ui.label(f"Resets on {stats.reset_date}").classes("text-xs text-gray-400")

        unsubscribe = ctx.usage.subscribe(lambda _: usage_view.refresh())
        ui.context.client.on_disconnect(unsubscribe)

        with ui.column().classes("w-full max-w-4xl mx-auto p-4 gap-4"):
            ui.label("Settings").classes("text-2xl font-bold")
            with ui.row().classes("w-full gap-4 items-start"):
                with ui.card().classes("flex-grow p-5 gap-2"):
                    ui.label("Profile Information").classes("font-semibold")
                    name = ui.input("Full name", value=user.name if user else "").classes("w-full")
                    email = ui.input("Email", value=user.email if user else "").classes("w-full")
                    ui.button(
                        "Save Changes", icon="save",
                        on_click=lambda: view.update_profile(name.value or "", email.value or ""),
                    )
                    ui.separator()
                    ui.label("Change Password").classes("font-semibold")
                    current = ui.input("Current password", password=True).classes("w-full")
                    new = ui.input("New password", password=True).classes("w-full")
                    confirm = ui.input("Confirm new password", password=True).classes("w-full")
                    ui.button(
                        "Update Password",
                        on_click=lambda: view.change_password(
                            current.value or "", new.value or "", confirm.value or ""
                        ),
                    ).props("outline")
                with ui.card().classes("w-80 p-5 gap-2"):
                    ui.label("Usage This Month").classes("font-semibold")
                    if user is not None:
                        ui.badge(user.tier.capitalize())
                    usage_view()

        await view.load_usage()

    @ui.page("/admin")
    async def admin_page() -> None:
        if not guard(ctx, require_admin=True):
            return
        page_frame(ctx)
        view = AdminView(ctx.admin, ctx.session, UiNotifier())

        @ui.refreshable
        def overview() -> None:
            if view.stats is None:
                return
            stats = view.stats
            with ui.row().classes("w-full gap-4"):
                for title, value in [
                    ("Total Users", f"{stats.total_users:,}"),
                    ("Active Users", f"{stats.active_users:,}"),
                    ("Messages", f"{stats.total_messages:,}"),
                    ("Tokens", format_token_usage(stats.total_tokens)),
                    ("Monthly Growth", f"+{stats.monthly_growth}%"),
                ]:
                    with ui.card().classes("flex-grow p-4 gap-1"):
                        ui.label(title).classes("text-sm text-gray-500")
                        ui.label(value).classes("text-2xl font-bold")
            with ui.row().classes("gap-4"):
                for tier, count in view.tier_counts.items():
                    ui.label(f"{tier.capitalize()}: {count}").classes("text-sm")

        @ui.refreshable
        def users_table() -> None:
            ui.table(
                columns=[
                    {"name": "name", "label": "Name", "field": "name"},
                    {"name": "email", "label": "Email", "field": "email"},
                    {"name": "tier", "label": "Tier", "field": "tier"},
                    {"name": "joinDate", "label": "Joined", "field": "joinDate"},
                    {"name": "messagesCount", "label": "Messages", "field": "messagesCount"},
                    {"name": "tokensUsed", "label": "Tokens", "field": "tokensUsed"},
                ],
                rows=[u.model_dump(mode="json", by_alias=True) for u in view.filtered_users],
                row_key="id",
            ).classes("w-full")
            for message in view.filtered_messages:
                with ui.card().classes("w-full p-3 gap-1"):
                    ui.label(f"{message.user_name}: {message.content}").classes("text-sm font-medium")
                    ui.label(message.response).classes("text-sm text-gray-600")

        def search(value: str) -> None:
            view.search_term = value or ""
            users_table.refresh()

        with ui.column().classes("w-full max-w-6xl mx-auto p-4 gap-4"):
            ui.label("Admin Dashboard").classes("text-2xl font-bold")
            ui.label("Monitor system usage, manage users, and view analytics").classes(
                "text-gray-500"
            )
            overview()
            ui.input("Search users or messages", on_change=lambda e: search(e.value)).classes(
                "w-full"
            )
            users_table()

        await view.load()
        overview.refresh()
        users_table.refresh()
