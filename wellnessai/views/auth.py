"""Login, registration and password reset view-models, plus the route guard."""

import logging

from pydantic import ValidationError

from wellnessai.api.auth import AuthApi
from wellnessai.api.errors import ApiError
from wellnessai.models.auth import LoginRequest, RegisterRequest
from wellnessai.state.session import SessionStore
from wellnessai.views.notify import Notifier

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8
DEFAULT_REDIRECT = "/chat"


def resolve_route_access(session: SessionStore, require_admin: bool = False) -> str | None:
    """Decide whether a protected page may render.

    A session whose stored token was cleared by a 401 counts as anonymous
    and is logged out here.

    Returns:
        "/login" for anonymous users, "/" for non-admins on admin pages,
        None when access is allowed.
    """
    if session.is_authenticated and not session.stored_token:
        logger.info("Stored token is gone, ending session")
        session.logout()
    if not session.is_authenticated:
        return "/login"
    if require_admin and not session.is_admin:
        return "/"
    return None


class _FormView:
    def __init__(self, auth_api: AuthApi, notifier: Notifier) -> None:
        self._api = auth_api
        self._notifier = notifier
        self.is_loading = False
        self.error = ""


class LoginView(_FormView):
    def __init__(
        self,
        auth_api: AuthApi,
        session: SessionStore,
        notifier: Notifier,
        redirect_to: str = DEFAULT_REDIRECT,
    ) -> None:
        super().__init__(auth_api, notifier)
        self._session = session
        self.redirect_to = redirect_to

    async def submit(self, email: str, password: str) -> str | None:
        """Log in and store the session.

        Returns:
            Path to navigate to on success, None on failure (see ``error``).
        """
        self.error = ""
        try:
            request = LoginRequest(email=email, password=password)
        except ValidationError:
            self.error = "Please enter a valid email and password"
            return None

        self.is_loading = True
        try:
            response = await self._api.login(request)
        except ApiError as e:
            logger.error(f"Login error: {e}")
            self.error = e.message or "Login failed. Please try again."
            return None
        finally:
            self.is_loading = False

        self._session.set_auth(response.user, response.access_token)
        self._notifier.success("Welcome back!")
        return self.redirect_to


class RegisterView(_FormView):
    async def submit(
        self,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
        confirm_password: str,
    ) -> str | None:
        """Create an account. The user signs in afterwards.

        Returns:
            "/login" on success, None on failure (see ``error``).
        """
        self.error = ""
        if password != confirm_password:
            self.error = "Passwords do not match"
            return None
        if len(password) < MIN_PASSWORD_LENGTH:
            self.error = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            return None
        try:
            request = RegisterRequest(
                email=email, password=password, first_name=first_name, last_name=last_name
            )
        except ValidationError:
            self.error = "Please enter your name and a valid email"
            return None

        self.is_loading = True
        try:
            await self._api.register(request)
        except ApiError as e:
            logger.error(f"Registration error: {e}")
            self.error = e.message or "Registration failed. Please try again."
            return None
        finally:
            self.is_loading = False

        self._notifier.success("Account created successfully! Please sign in to continue.")
        return "/login"


class ForgotPasswordView(_FormView):
    def __init__(self, auth_api: AuthApi, notifier: Notifier) -> None:
        super().__init__(auth_api, notifier)
        self.sent = False

    async def submit(self, email: str) -> bool:
        self.error = ""
        self.is_loading = True
        try:
            await self._api.forgot_password(email)
        except ApiError as e:
            logger.error(f"Forgot password error: {e}")
            self.error = e.message or "Failed to send reset email."
            return False
        finally:
            self.is_loading = False
        self.sent = True
        self._notifier.success("Reset link sent to your email!")
        return True


class ResetPasswordView(_FormView):
    """Set a new password from the emailed reset token.

    Without a token the page sends the user back to ``/forgot-password``.
    """

    def __init__(self, auth_api: AuthApi, notifier: Notifier, token: str | None) -> None:
        super().__init__(auth_api, notifier)
        self.token = token

    @property
    def redirect(self) -> str | None:
        return None if self.token else "/forgot-password"

    async def submit(self, password: str, confirm_password: str) -> str | None:
        self.error = ""
        if password != confirm_password:
            self.error = "Passwords do not match"
            return None
        if not self.token:
            self.error = "Invalid reset token"
            return None
        if len(password) < MIN_PASSWORD_LENGTH:
            self.error = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            return None

        self.is_loading = True
        try:
            await self._api.reset_password(self.token, password)
        except ApiError as e:
            logger.error(f"Reset password error: {e}")
            self.error = e.message or "Failed to reset password."
            return None
        finally:
            self.is_loading = False
        self._notifier.success("Password updated successfully!")
        return "/login"
