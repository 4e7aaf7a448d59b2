"""Conversation module for the EduPath assistant.

Provides the message log and the session state machine behind the chat widget.
"""

from .conversation import GREETING, Conversation
from .models import Message, Role, SessionState
from .session import ChatSession

__all__ = [
    "ChatSession",
    "Conversation",
    "GREETING",
    "Message",
    "Role",
    "SessionState",
]
