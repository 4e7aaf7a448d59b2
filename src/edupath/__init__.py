"""
EduPath: a terminal education shell with an embedded exam-prep study assistant.

Each module hides a specific design decision: the conversation state
machine (chat), the text-generation gateway (assistant) and the
presentation (ui).
"""

__version__ = "0.1.0"

from .assistant import GatewaySettings, GenerationClient, create_generation_client
from .chat import ChatSession, Conversation, Message, Role, SessionState

__all__ = [
    "ChatSession",
    "Conversation",
    "GatewaySettings",
    "GenerationClient",
    "Message",
    "Role",
    "SessionState",
    "create_generation_client",
]
