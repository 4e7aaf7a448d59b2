"""Data models for the conversation.

These models define a single chat message and the session states,
independent of how the conversation is rendered.
"""

import itertools
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# Process-wide id source; ids are never reused and sort by creation order
_message_ids = itertools.count(1)


def next_message_id() -> str:
    """Return a fresh message identifier."""
    return str(next(_message_ids))


class Role(str, Enum):
    """Author of a message."""

    USER = "user"
    ASSISTANT = "assistant"


class SessionState(str, Enum):
    """Round-trip state of a chat session."""

    IDLE = "idle"        # Accepting submissions
    SENDING = "sending"  # Waiting for the assistant reply


class Message(BaseModel):
    """One entry in the conversation."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=next_message_id, description="Unique message identifier")
    role: Role = Field(description="Author of the message")
    content: str = Field(description="Plain text content")
    timestamp: datetime = Field(default_factory=datetime.now)

    @property
    def is_user(self) -> bool:
        return self.role is Role.USER
