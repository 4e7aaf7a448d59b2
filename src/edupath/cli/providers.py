"""Provider factory functions for CLI.

Centralizes creation of the generation client from environment variables.
Hides configuration details from command implementations.
"""

from rich.console import Console

from ..assistant import GenerationClient, create_generation_client, get_settings

# Default console for output
_console = Console()


def get_generation_client(console: Console | None = None) -> GenerationClient:
    """Create the generation client from environment variables.

    A missing credential is not an error: the assistant answers with
    canned study tips instead.

    Args:
        console: Optional Rich console for output

    Returns:
        Generation client instance

    Environment variables:
        GEMINI_API_KEY: Gateway credential (optional)
        EDUPATH_GATEWAY_URL: Gateway base URL
        EDUPATH_GATEWAY_MODEL: Model name (default: gemini-pro)
    """
    con = console or _console
    settings = get_settings()
    if not settings.has_credential:
        con.print("[yellow]Warning: GEMINI_API_KEY not set, assistant will reply with study tips[/yellow]")
    return create_generation_client(settings)
