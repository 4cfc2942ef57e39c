"""Landing, login, registration and password reset pages."""

from nicegui import ui

from wellnessai.context import AppContext
from wellnessai.ui.layout import CUSTOM_CSS
from wellnessai.ui.notifier import UiNotifier
from wellnessai.views.auth import ForgotPasswordView, LoginView, RegisterView, ResetPasswordView


def _auth_card(title: str, subtitle: str) -> ui.card:
    ui.add_head_html(CUSTOM_CSS)
    with ui.column().classes("w-full min-h-screen items-center justify-center"):
        card = ui.card().classes("w-96 p-6 gap-3")
        with card:
            with ui.row().classes("items-center gap-2"):
                ui.icon("spa").classes("text-emerald-500 text-3xl")
                ui.label(title).classes("text-xl font-semibold")
            ui.label(subtitle).classes("text-sm text-gray-500")
    return card


def register_auth_pages(ctx: AppContext) -> None:
    @ui.page("/")
    def landing_page() -> None:
        if ctx.session.is_authenticated:
            ui.navigate.to("/chat")
            return
        with _auth_card("WellnessAI", "Your personal AI wellness assistant"):
            ui.button("Sign in", on_click=lambda: ui.navigate.to("/login")).classes("w-full")
            ui.button("Create account", on_click=lambda: ui.navigate.to("/register")).props(
                "outline"
            ).classes("w-full")

    @ui.page("/login")
    def login_page() -> None:
        view = LoginView(ctx.auth, ctx.session, UiNotifier())
        with _auth_card("Welcome back", "Sign in to continue your wellness journey"):
            error = ui.label().classes("text-sm text-red-600")
            email = ui.input("Email").classes("w-full")
            password = ui.input("Password", password=True, password_toggle_button=True).classes(
                "w-full"
            )

            async def submit() -> None:
                button.disable()
                target = await view.submit(email.value or "", password.value or "")
                button.enable()
                error.set_text(view.error)
                if target:
                    ui.navigate.to(target)

            button = ui.button("Sign in", on_click=submit).classes("w-full")
            password.on("keydown.enter", submit)
            with ui.row().classes("w-full justify-between text-sm"):
                ui.link("Forgot password?", "/forgot-password")
                ui.link("Create account", "/register")

    @ui.page("/register")
    def register_page() -> None:
        view = RegisterView(ctx.auth, UiNotifier())
        with _auth_card("Create your account", "Start your wellness journey today"):
            error = ui.label().classes("text-sm text-red-600")
            with ui.row().classes("w-full no-wrap"):
                first = ui.input("First name").classes("flex-grow")
                last = ui.input("Last name").classes("flex-grow")
            email = ui.input("Email").classes("w-full")
            password = ui.input("Password", password=True).classes("w-full")
            confirm = ui.input("Confirm password", password=True).classes("w-full")

            async def submit() -> None:
                target = await view.submit(
                    first.value or "", last.value or "", email.value or "",
                    password.value or "", confirm.value or "",
                )
                error.set_text(view.error)
                if target:
                    ui.navigate.to(target)

            ui.button("Create account", on_click=submit).classes("w-full")
            ui.link("Already have an account? Sign in", "/login").classes("text-sm")

    @ui.page("/forgot-password")
    def forgot_password_page() -> None:
        view = ForgotPasswordView(ctx.auth, UiNotifier())
        with _auth_card("Reset your password", "Enter your email to receive a reset link"):
            error = ui.label().classes("text-sm text-red-600")
            email = ui.input("Email").classes("w-full")

            async def submit() -> None:
                await view.submit(email.value or "")
                error.set_text(view.error)
                if view.sent:
                    form.set_visibility(False)
                    sent.set_visibility(True)

            with ui.column().classes("w-full") as form:
                ui.button("Send reset link", on_click=submit).classes("w-full")
            sent = ui.label(
                "We've sent a password reset link to your email address. "
                "Please check your inbox and follow the instructions."
            ).classes("text-sm text-gray-600")
            sent.set_visibility(False)
            ui.link("Back to sign in", "/login").classes("text-sm")

    @ui.page("/reset-password")
    def reset_password_page(token: str | None = None) -> None:
        view = ResetPasswordView(ctx.auth, UiNotifier(), token)
        if view.redirect:
            ui.navigate.to(view.redirect)
            return
        with _auth_card("Set new password", "Enter your new password"):
            error = ui.label().classes("text-sm text-red-600")
            password = ui.input("New password", password=True).classes("w-full")
            confirm = ui.input("Confirm password", password=True).classes("w-full")

            async def submit() -> None:
                target = await view.submit(password.value or "", confirm.value or "")
                error.set_text(view.error)
                if target:
                    ui.navigate.to(target)

            ui.button("Update password", on_click=submit).classes("w-full")
