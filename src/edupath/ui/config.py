"""UI configuration constants.

Centralizes labels and configuration values for the UI module.
"""


class LogLevel:
    """Log panel severities.

    Debug callbacks report levels by name ("debug", "info", "warning",
    "error"); the panel compares their rank against its threshold.
    """

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    _RANKS = {"debug": DEBUG, "info": INFO, "warning": WARNING, "error": ERROR}

    @classmethod
    def name(cls, level: int) -> str:
        """Display label for a rank, e.g. 30 -> "WARNING"."""
        for label, rank in cls._RANKS.items():
            if rank == level:
                return label.upper()
        return "UNKNOWN"

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Rank of a level name, case-insensitive. Unknown names rank as DEBUG."""
        return cls._RANKS.get(level_str.strip().lower(), cls.DEBUG)


# Message timestamps (hour:minute, two digits each)
MESSAGE_TIMESTAMP_FORMAT = "%H:%M"

# Log panel configuration
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
LOG_MAX_MESSAGE_LENGTH = 500  # Characters before truncating log messages

# Chat widget labels
CHAT_TITLE = "EduPath Assistant"
CHAT_SUBTITLE = "Always here to help"
CHAT_PLACEHOLDER = "Ask me anything..."
CHAT_LAUNCHER_LABEL = "Chat"

APP_TITLE = "EduPath"
