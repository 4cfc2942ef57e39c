"""NiceGUI front end.

Pages are thin: each binds widgets to a view-model from
``wellnessai.views`` and refreshes after it changes.

Components:
    - register_pages: registers every route against one AppContext
    - markdown_to_html: chat bubble rendering
"""

from wellnessai.context import AppContext
from wellnessai.ui.account_pages import register_account_pages
from wellnessai.ui.auth_pages import register_auth_pages
from wellnessai.ui.chat_page import register_chat_page
from wellnessai.ui.documents_pages import register_documents_pages
from wellnessai.ui.goals_page import register_goals_page
from wellnessai.ui.markdown import markdown_to_html


def register_pages(ctx: AppContext) -> None:
    """Register all routes. Must run before ``ui.run``/``ui.run_with``."""
    register_auth_pages(ctx)
    register_chat_page(ctx)
    register_goals_page(ctx)
    register_documents_pages(ctx)
    register_account_pages(ctx)


__all__ = ["markdown_to_html", "register_pages"]
