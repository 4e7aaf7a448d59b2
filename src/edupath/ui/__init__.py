"""Terminal UI module for EduPath.

Provides a Textual-based shell with routed pages and the study assistant.

Module structure (each module hides a design decision):
- routes.py: Navigable surface (path -> page)
- pages.py: Static page content and navigation bar
- widgets.py: Chat widget, message list, input bar, log panel
- styles.py: CSS styling (layout decisions)
- themes.py: Color palettes and theme configuration
- formatting.py: Timestamp and math cleanup for display
- app.py: Application orchestration (user interaction flow)
"""

from .app import EduPathApp, run_textual_tui
from .config import LogLevel
from .routes import NOT_FOUND, ROUTES, Route, resolve_route
from .widgets import ChatHistoryWidget, ChatInputBar, ChatWidget, DebugPanel

__all__ = [
    "ChatHistoryWidget",
    "ChatInputBar",
    "ChatWidget",
    "DebugPanel",
    "EduPathApp",
    "LogLevel",
    "NOT_FOUND",
    "ROUTES",
    "Route",
    "resolve_route",
    "run_textual_tui",
]
