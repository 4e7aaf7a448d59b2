"""Ordered message log for one chat session.

Hides the storage of messages: callers can read and iterate,
but only the owning session appends.
"""

from collections.abc import Iterator

from .models import Message, Role

GREETING = (
    "Hi! I'm your EduPath study assistant. I can help you with JEE, NEET, "
    "and BTech subjects. What would you like to know?"
)


class Conversation:
    """Append-only sequence of messages, oldest first.

    Always starts with exactly one assistant greeting.
    """

    def __init__(self, greeting: str = GREETING) -> None:
        self._messages: list[Message] = [Message(role=Role.ASSISTANT, content=greeting)]

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(tuple(self._messages))

    def __getitem__(self, index: int) -> Message:
        return self._messages[index]

    @property
    def messages(self) -> tuple[Message, ...]:
        """Read-only snapshot of the log."""
        return tuple(self._messages)

    @property
    def last(self) -> Message:
        return self._messages[-1]

    @property
    def user_count(self) -> int:
        return sum(1 for msg in self._messages if msg.role is Role.USER)

    @property
    def assistant_count(self) -> int:
        return sum(1 for msg in self._messages if msg.role is Role.ASSISTANT)

    def append(self, role: Role, content: str) -> Message:
        """Create a message and add it to the end of the log.

        Args:
            role: Author of the message
            content: Message text

        Returns:
            The newly created message
        """
        msg = Message(role=role, content=content)
        self._messages.append(msg)
        return msg

    def last_response(self) -> str | None:
        """Get the content of the latest assistant message."""
        for msg in reversed(self._messages):
            if msg.role is Role.ASSISTANT:
                return msg.content
        return None
