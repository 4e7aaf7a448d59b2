from .base import GenerationClient
from .config import GatewaySettings, get_settings
from .factory import create_generation_client
from .gemini import GeminiGatewayClient
from .prompts import (
    EMPTY_RESPONSE_FALLBACK,
    NO_CREDENTIAL_FALLBACK,
    TRANSPORT_FAILURE_FALLBACK,
)

__all__ = [
    "EMPTY_RESPONSE_FALLBACK",
    "GatewaySettings",
    "GeminiGatewayClient",
    "GenerationClient",
    "NO_CREDENTIAL_FALLBACK",
    "TRANSPORT_FAILURE_FALLBACK",
    "create_generation_client",
    "get_settings",
]
