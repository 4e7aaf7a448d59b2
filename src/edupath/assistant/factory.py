from typing import Any

from .base import GenerationClient
from .config import GatewaySettings, get_settings


def create_generation_client(
    settings: GatewaySettings | None = None,
    provider: str = "gemini",
    **config: Any
) -> GenerationClient:
    """Create a generation client instance.

    This factory function hides the instantiation logic for different gateways.

    Args:
        settings: Gateway configuration (default: resolved from environment)
        provider: Gateway type (currently only 'gemini')
        **config: Client-specific configuration
            For Gemini:
                - http_client: httpx.AsyncClient | None

    Returns:
        Initialized generation client

    Raises:
        ValueError: If provider type is not supported

    Examples:
        >>> client = create_generation_client(GatewaySettings(api_key="..."))
    """
    provider_lower = provider.lower()

    if provider_lower == "gemini":
        from .gemini import GeminiGatewayClient
        return GeminiGatewayClient(settings or get_settings(), **config)

    raise ValueError(
        f"Unsupported provider: {provider}. "
        f"Supported providers: 'gemini'"
    )
