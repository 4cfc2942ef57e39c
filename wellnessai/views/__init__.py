"""Framework-free page view-models.

Each view holds a page's state and talks to the API modules; the NiceGUI
pages only bind widgets to them.

Components:
    - auth: login, register, password reset, route guard
    - goals: wellness coaching dashboard and create-goal form
    - documents: document list and detail pages
    - billing: subscription plans and billing redirects
    - settings: profile, password and usage
    - admin: admin dashboard
    - notify: Notifier protocol
"""

from wellnessai.views.admin import AdminView
from wellnessai.views.auth import (
    ForgotPasswordView,
    LoginView,
    RegisterView,
    ResetPasswordView,
    resolve_route_access,
)
from wellnessai.views.billing import SubscribeView
from wellnessai.views.documents import DocumentDetailView, DocumentsView
from wellnessai.views.goals import CreateGoalForm, GoalsView, days_remaining, progress_percentage
from wellnessai.views.notify import LoggingNotifier, Notifier
from wellnessai.views.settings import SettingsView

__all__ = [
    "AdminView",
    "CreateGoalForm",
    "DocumentDetailView",
    "DocumentsView",
    "ForgotPasswordView",
    "GoalsView",
    "LoggingNotifier",
    "LoginView",
    "Notifier",
    "RegisterView",
    "ResetPasswordView",
    "SettingsView",
    "SubscribeView",
    "days_remaining",
    "progress_percentage",
    "resolve_route_access",
]
