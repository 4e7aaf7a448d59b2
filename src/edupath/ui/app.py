"""Main Textual TUI application.

Orchestrates the page shell and the globally mounted study assistant.
"""

import asyncio
import contextlib

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import ContentSwitcher, Footer, Header

from ..assistant import GenerationClient
from ..chat import ChatSession
from .config import APP_TITLE, LogLevel
from .pages import PAGES, Navigate, NavBar
from .routes import Route, resolve_route
from .styles import APP_CSS
from .themes import EDUPATH_DARK
from .widgets import ChatWidget, DebugPanel


class EduPathApp(App):
    """EduPath shell: routed pages plus the assistant chat widget."""

    CSS = APP_CSS
    TITLE = APP_TITLE

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+t", "toggle_chat", "Chat"),
        Binding("escape", "close_chat", "Close Chat", show=False),
        Binding("ctrl+d", "toggle_debug", "Log"),
        Binding("ctrl+r", "copy_last_response", "Copy Response"),
    ]

    def __init__(
        self,
        client: GenerationClient,
        initial_path: str = "/",
        log_level: str | None = None,
    ) -> None:
        super().__init__()
        self._client = client
        self._log_level = log_level
        self.session = ChatSession(client)
        self.current_route: Route = resolve_route(initial_path)

    def _gateway_label(self) -> str:
        settings = getattr(self._client, "settings", None)
        if settings is not None and not settings.has_credential:
            return "offline tips"
        return getattr(self._client, "model", "gateway")

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield NavBar(id="navbar")
        with ContentSwitcher(initial=self.current_route.page_id, id="pages"):
            for page_cls in PAGES:
                yield page_cls()
        yield DebugPanel(id="debug-panel")
        yield ChatWidget(self.session, id="chat-widget")
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(EDUPATH_DARK)
        self.theme = "edupath-dark"

        self._client.set_debug_callback(self._route_debug)
        self.session.set_debug_callback(self._route_debug)

        # Configure log panel if --log-level was passed
        if self._log_level is not None:
            log_panel = self.query_one("#debug-panel", DebugPanel)
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        self._update_subtitle()

    def _update_subtitle(self) -> None:
        self.sub_title = f"{self.current_route.title} | {self._gateway_label()}"

    def _route_debug(self, level: str, component: str, message: str) -> None:
        """Route debug callback messages to the log panel."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        log_panel.write_entry(component, message, LogLevel.from_string(level))

    def navigate(self, path: str) -> Route:
        """Show the page for `path` (the not-found page if unknown)."""
        route = resolve_route(path)
        self.query_one("#pages", ContentSwitcher).current = route.page_id
        self.current_route = route
        self._update_subtitle()
        self._route_debug("debug", "TUI", f"Navigated to {path} -> {route.page_id}")
        return route

    def on_navigate(self, event: Navigate) -> None:
        self.navigate(event.path)

    def action_toggle_chat(self) -> None:
        """Open or close the assistant."""
        self.session.toggle()

    def action_close_chat(self) -> None:
        self.session.close()

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)

    def action_copy_last_response(self) -> None:
        """Copy last assistant response to clipboard."""
        response = self.session.conversation.last_response()
        if response:
            self.copy_to_clipboard(response)
            self.notify("Response copied")
        else:
            self.notify("No response to copy", severity="warning")


async def run_textual_tui(
    client: GenerationClient,
    initial_path: str = "/",
    log_level: str | None = None,
) -> None:
    """Run the Textual TUI.

    Args:
        client: Generation client used by the assistant
        initial_path: Route shown at startup
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = EduPathApp(client=client, initial_path=initial_path, log_level=log_level)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
    finally:
        with contextlib.suppress(RuntimeError):
            await client.close()
