"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Chat message rendering and auto-scroll
- Draft input and send gating while a reply is pending
- Log rendering and level filtering
"""

from datetime import datetime

from textual import work
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Button, Input, LoadingIndicator, Markdown, RichLog, Static

from ..chat import ChatSession, Conversation, Message
from .config import (
    CHAT_LAUNCHER_LABEL,
    CHAT_PLACEHOLDER,
    CHAT_SUBTITLE,
    CHAT_TITLE,
    LOG_TIMESTAMP_FORMAT,
    LogLevel,
)
from .formatting import clean_latex, format_timestamp, truncate


class MessageBubble(Vertical):
    """A single rendered chat message."""

    def __init__(self, message: Message, **kwargs) -> None:
        border_class = "user-message" if message.is_user else "assistant-message"
        super().__init__(classes=f"chat-message {border_class}", **kwargs)
        self.message = message

    def compose(self) -> ComposeResult:
        content = self.message.content
        if self.message.is_user:
            yield Static(content, markup=False, classes="message-content")
        else:
            cleaned = clean_latex(content)
            if "\n" in cleaned.strip() and "```" not in cleaned:
                # Multi-line text without code fences - Static keeps line breaks
                yield Static(cleaned, markup=False, classes="message-content")
            else:
                yield Markdown(cleaned, classes="message-content")
        yield Static(format_timestamp(self.message.timestamp), classes="message-time")


class ChatHistoryWidget(VerticalScroll):
    """Scrollable message list that follows the newest message."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._rendered = 0

    @property
    def rendered_count(self) -> int:
        """Number of messages mounted so far."""
        return self._rendered

    def sync(self, conversation: Conversation) -> int:
        """Mount messages that are not rendered yet.

        The log is append-only, so only the tail beyond what is already
        mounted needs rendering. Scrolls to the newest message when
        anything was added.

        Returns:
            Number of newly mounted messages
        """
        new_messages = conversation.messages[self._rendered:]
        if not new_messages:
            return 0
        self.mount_all(MessageBubble(msg) for msg in new_messages)
        self._rendered += len(new_messages)
        self.scroll_to_latest()
        return len(new_messages)

    def scroll_to_latest(self) -> None:
        """Scroll to the bottom. A no-op when already there."""
        self.call_after_refresh(self.scroll_end, animate=False)


class ChatInputBar(Horizontal):
    """Single-line draft input with a Send button."""

    def compose(self) -> ComposeResult:
        yield Input(placeholder=CHAT_PLACEHOLDER, id="chat-input")
        yield Button("Send", id="send-btn", variant="success", disabled=True)

    @property
    def input(self) -> Input:
        return self.query_one("#chat-input", Input)

    @property
    def send_button(self) -> Button:
        return self.query_one("#send-btn", Button)

    def show_state(self, draft: str, busy: bool, can_submit: bool) -> None:
        """Reflect session state: draft text and gating."""
        if self.input.value != draft:
            self.input.value = draft
        self.input.disabled = busy
        self.send_button.disabled = not can_submit

    def focus_input(self) -> None:
        """Focus the text input."""
        self.input.focus()


class ChatWidget(Vertical):
    """Floating assistant: launcher button plus the chat panel.

    Renders a ChatSession and forwards user actions to it. All state lives
    in the session; this widget re-syncs on every session change.
    """

    def __init__(self, session: ChatSession, **kwargs) -> None:
        super().__init__(**kwargs)
        self.session = session
        self._unsubscribe = None
        self._was_visible = False

    def compose(self) -> ComposeResult:
        with Vertical(id="chat-panel"):
            with Horizontal(id="chat-header"):
                with Vertical(id="chat-header-text"):
                    yield Static(CHAT_TITLE, id="chat-title")
                    yield Static(CHAT_SUBTITLE, id="chat-subtitle")
                yield Button("X", id="chat-close-btn", variant="default")
            yield ChatHistoryWidget(id="chat-history")
            yield LoadingIndicator(id="chat-loading")
            yield ChatInputBar(id="chat-input-bar")
        yield Button(CHAT_LAUNCHER_LABEL, id="chat-launcher", variant="primary")

    def on_mount(self) -> None:
        self._unsubscribe = self.session.subscribe(self._sync)
        # Nested children (input bar contents) finish mounting after this handler
        self.call_after_refresh(self._sync)

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    @property
    def history(self) -> ChatHistoryWidget:
        return self.query_one("#chat-history", ChatHistoryWidget)

    def _sync(self) -> None:
        """Bring the widget tree in line with the session."""
        session = self.session
        self.query_one("#chat-panel").display = session.visible
        self.query_one("#chat-launcher", Button).display = not session.visible

        # Messages render while closed too, so replies that arrive
        # after closing are there on reopen
        self.history.sync(session.conversation)
        self.query_one("#chat-loading", LoadingIndicator).display = session.busy

        input_bar = self.query_one("#chat-input-bar", ChatInputBar)
        input_bar.show_state(session.draft, session.busy, session.can_submit)

        if session.visible and not self._was_visible:
            self.history.scroll_to_latest()
            input_bar.focus_input()
        elif session.visible and not session.busy and self.app.focused is None:
            input_bar.focus_input()
        self._was_visible = session.visible

    def open(self) -> None:
        self.session.open()

    def close(self) -> None:
        self.session.close()

    def toggle(self) -> bool:
        return self.session.toggle()

    def submit_draft(self) -> bool:
        """Submit the current draft.

        Returns:
            True if a round-trip was started
        """
        text = self.session.begin_submit()
        if text is None:
            return False
        self._run_round_trip(text)
        return True

    @work(group="chat-round-trip")
    async def _run_round_trip(self, text: str) -> None:
        """Wait for the reply in a background async worker."""
        await self.session.complete(text)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id == "chat-launcher":
            event.stop()
            self.open()
        elif button_id == "chat-close-btn":
            event.stop()
            self.close()
        elif button_id == "send-btn":
            event.stop()
            self.submit_draft()

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self.session.update_draft(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.submit_draft()


class DebugPanel(RichLog):
    """Log panel for diagnostics with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Diagnostics"

    LEVEL_COLORS = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    COMPONENT_COLORS = {
        "TUI": "cyan",
        "Chat": "green",
        "Gateway": "magenta",
    }

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=True,
            **kwargs
        )
        self._log_level = log_level
        self._entries: list[tuple[int, str, str]] = []

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    @property
    def entries(self) -> list[tuple[int, str, str]]:
        """Entries that passed the level filter: (level, component, message)."""
        return list(self._entries)

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def write_entry(self, component: str, message: str, level: int = LogLevel.DEBUG) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, Chat, Gateway)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        self._entries.append((level, component, message))
        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        level_color = self.LEVEL_COLORS.get(level, "white")
        comp_color = self.COMPONENT_COLORS.get(component, "white")
        safe_message = truncate(message).replace("[", "\\[")

        self.write(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{LogLevel.name(level):<7}[/] "
            f"[{comp_color}]\\[{component}][/] {safe_message}"
        )

    def debug(self, component: str, message: str) -> None:
        self.write_entry(component, message, LogLevel.DEBUG)

    def info(self, component: str, message: str) -> None:
        self.write_entry(component, message, LogLevel.INFO)

    def warning(self, component: str, message: str) -> None:
        self.write_entry(component, message, LogLevel.WARNING)

    def error(self, component: str, message: str) -> None:
        self.write_entry(component, message, LogLevel.ERROR)

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
