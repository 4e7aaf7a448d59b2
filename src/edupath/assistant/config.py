"""Gateway configuration.

Resolves the gateway credential and endpoint once per process. The client
receives the resolved settings object; nothing reads the environment at
call time, so tests can substitute their own settings.
"""

import os
from collections.abc import Mapping
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_GATEWAY_URL = "https://generativelanguage.googleapis.com"
DEFAULT_GATEWAY_MODEL = "gemini-pro"
# Seconds to wait for response data; connect and pool waits are bounded separately
DEFAULT_GATEWAY_TIMEOUT = 120.0

# Checked in order; the second name matches the web build's variable
API_KEY_VARIABLES = ("GEMINI_API_KEY", "VITE_GEMINI_API_KEY")


class GatewaySettings(BaseModel):
    """Immutable text-generation gateway configuration."""

    model_config = ConfigDict(frozen=True)

    api_key: str | None = Field(default=None, repr=False, description="Gateway credential")
    base_url: str = Field(default=DEFAULT_GATEWAY_URL, description="Scheme and host of the gateway")
    model: str = Field(default=DEFAULT_GATEWAY_MODEL, description="Model name in the request path")
    timeout: float = Field(default=DEFAULT_GATEWAY_TIMEOUT, gt=0, description="Read timeout in seconds")

    @field_validator("api_key")
    @classmethod
    def _blank_key_is_missing(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def has_credential(self) -> bool:
        return self.api_key is not None

    @property
    def endpoint(self) -> str:
        """URL of the generateContent call, without the credential."""
        return f"{self.base_url}/v1beta/models/{self.model}:generateContent"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "GatewaySettings":
        """Build settings from environment variables.

        Environment variables:
            GEMINI_API_KEY / VITE_GEMINI_API_KEY: Gateway credential (optional)
            EDUPATH_GATEWAY_URL: Gateway base URL
            EDUPATH_GATEWAY_MODEL: Model name (default: gemini-pro)
            EDUPATH_GATEWAY_TIMEOUT: Read timeout in seconds (default: 120)
        """
        env = os.environ if environ is None else environ
        api_key = next((env[name] for name in API_KEY_VARIABLES if env.get(name, "").strip()), None)
        return cls(
            api_key=api_key,
            base_url=env.get("EDUPATH_GATEWAY_URL", DEFAULT_GATEWAY_URL),
            model=env.get("EDUPATH_GATEWAY_MODEL", DEFAULT_GATEWAY_MODEL),
            timeout=env.get("EDUPATH_GATEWAY_TIMEOUT", DEFAULT_GATEWAY_TIMEOUT),
        )


@lru_cache(maxsize=1)
def get_settings() -> GatewaySettings:
    """Resolve settings from the environment once for the process lifetime."""
    return GatewaySettings.from_env()
