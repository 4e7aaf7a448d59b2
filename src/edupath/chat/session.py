"""Chat session state machine.

Owns the conversation, draft input, visibility and the busy state of one
chat widget. Rendering code subscribes to changes; it never mutates the
conversation directly.

State transitions:
    IDLE --submit--> SENDING --reply or failure--> IDLE

Submissions while SENDING (or with a blank draft) are ignored.
"""

import asyncio
from collections.abc import Callable
from typing import Any

from ..assistant.base import GenerationClient
from .conversation import Conversation
from .models import Role, SessionState

Listener = Callable[[], None]


class ChatSession:
    """Conversation state plus the single in-flight round-trip.

    The round-trip coroutine (`complete`) is the only writer of assistant
    messages and of the SENDING -> IDLE transition.
    """

    def __init__(
        self,
        client: GenerationClient,
        conversation: Conversation | None = None,
    ) -> None:
        self._client = client
        self._conversation = conversation or Conversation()
        self._state = SessionState.IDLE
        self._draft = ""
        self._visible = False
        self._listeners: list[Listener] = []
        self._pending: asyncio.Task[None] | None = None
        self._debug_callback: Any = None

    @property
    def conversation(self) -> Conversation:
        return self._conversation

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def busy(self) -> bool:
        """True strictly between a submission and its reply."""
        return self._state is SessionState.SENDING

    @property
    def draft(self) -> str:
        return self._draft

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def can_submit(self) -> bool:
        """Whether `submit()` would currently do anything."""
        return bool(self._draft.strip()) and not self.busy

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener.

        Returns:
            Callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback for diagnostics.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "Chat", message)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    def open(self) -> None:
        if not self._visible:
            self._visible = True
            self._notify()

    def close(self) -> None:
        if self._visible:
            self._visible = False
            self._notify()

    def toggle(self) -> bool:
        """Flip visibility. Returns the new state."""
        if self._visible:
            self.close()
        else:
            self.open()
        return self._visible

    def update_draft(self, text: str) -> None:
        if text != self._draft:
            self._draft = text
            self._notify()

    def begin_submit(self) -> str | None:
        """Run the synchronous half of a submission.

        Appends the user message, clears the draft and enters SENDING.

        Returns:
            The trimmed text to send, or None if the submission was ignored
        """
        text = self._draft.strip()
        if not text or self.busy:
            return None

        self._conversation.append(Role.USER, text)
        self._draft = ""
        self._state = SessionState.SENDING
        self._notify()
        return text

    async def complete(self, text: str) -> None:
        """Fetch the reply for `text` and finish the round-trip.

        Exceptions escaping the client are logged and swallowed: nothing is
        appended and the session returns to IDLE so the user can resubmit.

        Raises:
            RuntimeError: If no submission is in flight
        """
        if not self.busy:
            raise RuntimeError("complete() called without a pending submission")

        try:
            reply = await self._client.generate(text)
        except Exception as e:
            self._debug("error", f"Round-trip abandoned: {type(e).__name__}: {e}")
        else:
            self._conversation.append(Role.ASSISTANT, reply)
        finally:
            self._state = SessionState.IDLE
            self._notify()

    def submit(self) -> "asyncio.Task[None] | None":
        """Submit the draft and start the round-trip in the background.

        Must be called from a running event loop.

        Returns:
            Task running the round-trip, or None if the submission was ignored
        """
        text = self.begin_submit()
        if text is None:
            return None

        self._debug("debug", f"Submitted: '{text[:50]}'")
        self._pending = asyncio.create_task(self.complete(text))
        return self._pending

    async def wait_idle(self) -> None:
        """Wait for the in-flight round-trip started by `submit()`, if any."""
        if self._pending is not None:
            await self._pending
            self._pending = None

    async def ask(self, text: str) -> str | None:
        """Submit `text` and wait for the reply.

        Returns:
            Content of the assistant reply, or None if nothing was appended
        """
        before = len(self._conversation)
        self.update_draft(text)
        if self.submit() is None:
            return None
        await self.wait_idle()
        if len(self._conversation) == before + 2:
            return self._conversation.last.content
        return None
