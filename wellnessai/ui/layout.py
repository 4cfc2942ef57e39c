"""Shared page chrome: styles, navigation bar and the access guard."""

from nicegui import ui

from wellnessai.context import AppContext
from wellnessai.views.auth import resolve_route_access

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f5f7f6; min-height: 100vh; }

    .brand { background: linear-gradient(135deg, #10b981 0%, #0ea5e9 100%); }

    .message-user {
        background: linear-gradient(135deg, #10b981 0%, #0ea5e9 100%);
        color: white;
        border-radius: 18px 18px 4px 18px;
    }

    .message-assistant {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
    }

    .message-assistant strong { font-weight: 600; }
    .message-assistant code { font-family: 'Menlo', 'Monaco', monospace; }
</style>
"""

NAV_LINKS = [
    ("Chat", "/chat", "forum"),
    ("Coaching", "/wellness-coaching", "flag"),
    ("Documents", "/documents", "description"),
    ("Plans", "/subscribe", "workspace_premium"),
    ("Settings", "/settings", "settings"),
]


def page_frame(ctx: AppContext) -> None:
    """Add styles and the top navigation bar for a signed-in user."""
    ui.add_head_html(CUSTOM_CSS)

    def logout() -> None:
        ctx.session.logout()
        ui.navigate.to("/login")

    with ui.header().classes("brand items-center justify-between px-6"):
        with ui.row().classes("items-center gap-2"):
            ui.icon("spa").classes("text-white text-2xl")
            ui.label("WellnessAI").classes("text-lg font-semibold text-white")
        with ui.row().classes("items-center gap-1"):
            for label, target, icon in NAV_LINKS:
                ui.button(label, icon=icon, on_click=lambda t=target: ui.navigate.to(t)).props(
                    "flat color=white no-caps"
                )
            if ctx.session.is_admin:
                ui.button("Admin", icon="shield", on_click=lambda: ui.navigate.to("/admin")).props(
                    "flat color=white no-caps"
                )
            user = ctx.session.user
            if user is not None:
                ui.label(f"{user.name or user.email} ({user.tier})").classes(
                    "text-white/80 text-sm ml-4"
                )
            ui.button(icon="logout", on_click=logout).props("flat round color=white")


def guard(ctx: AppContext, require_admin: bool = False) -> bool:
    """Redirect away from a protected page when needed.

    Returns:
        True when the page may render.
    """
    redirect = resolve_route_access(ctx.session, require_admin=require_admin)
    if redirect is not None:
        ui.navigate.to(redirect)
        return False
    return True
