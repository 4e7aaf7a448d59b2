from abc import ABC, abstractmethod
from typing import Any


class GenerationClient(ABC):
    """Abstract base class for text-generation clients.

    This module hides the design decision of which gateway answers the
    student. Implementations must handle:
    - HTTP client setup and authentication
    - Request/response format conversion
    - Turning every gateway failure into a canned reply

    `generate` never raises for gateway-level failures; an exception that
    escapes it is a defect in the client.

    Supports async context manager protocol for proper resource cleanup:
        async with client:
            reply = await client.generate("What is entropy?")
    """

    _debug_callback: Any = None

    @abstractmethod
    async def generate(self, user_text: str) -> str:
        """Turn one piece of user text into one piece of response text.

        Args:
            user_text: The student's trimmed question

        Returns:
            Gateway-derived answer or a fallback reply
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""
        pass

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback for diagnostics.

        Args:
            callback: Callable(level: str, component: str, message: str)
                      level: 'debug', 'info', 'warning', 'error'
                      component: Source component name
                      message: Log message
        """
        self._debug_callback = callback

    def _debug(self, level: str, component: str, message: str) -> None:
        """Send a debug log message if callback is set."""
        if self._debug_callback:
            self._debug_callback(level, component, message)

    async def __aenter__(self) -> "GenerationClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
