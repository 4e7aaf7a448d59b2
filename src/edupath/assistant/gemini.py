"""Gemini generateContent gateway client.

Calls the Gemini REST endpoint directly with httpx:

    POST {base_url}/v1beta/models/{model}:generateContent?key={credential}

Hidden design decisions:
- Prompt construction (tutoring preamble + question)
- Response shape extraction (candidates[0].content.parts[0].text)
- Mapping of missing credential, malformed responses and transport
  errors to fixed fallback replies

One request per question, no retries. Reads wait up to `settings.timeout`
seconds; connecting is bounded by CONNECT_TIMEOUT.
"""

import httpx
from pydantic import ValidationError

from .base import GenerationClient
from .config import GatewaySettings
from .models import GenerateContentRequest, GenerateContentResponse
from .prompts import (
    EMPTY_RESPONSE_FALLBACK,
    NO_CREDENTIAL_FALLBACK,
    TRANSPORT_FAILURE_FALLBACK,
    build_study_prompt,
)

COMPONENT = "Gateway"
CONNECT_TIMEOUT = 3.0


class GeminiGatewayClient(GenerationClient):
    """Generation client backed by the Gemini REST gateway."""

    def __init__(
        self,
        settings: GatewaySettings,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initialize the gateway client.

        Args:
            settings: Resolved gateway configuration
            http_client: Optional preconfigured client (closed by its owner)
        """
        self._settings = settings
        self._http_client = http_client
        self._owns_client = http_client is None

    @property
    def settings(self) -> GatewaySettings:
        return self._settings

    @property
    def model(self) -> str:
        """Get the configured model name."""
        return self._settings.model

    def _client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            timeout = httpx.Timeout(
                connect=CONNECT_TIMEOUT,
                read=self._settings.timeout,
                write=self._settings.timeout,
                pool=CONNECT_TIMEOUT,
            )
            self._http_client = httpx.AsyncClient(timeout=timeout)
        return self._http_client

    async def generate(self, user_text: str) -> str:
        """Ask the gateway for an answer to `user_text`.

        Returns:
            The first generated text span, or a fallback reply
        """
        if not self._settings.has_credential:
            self._debug("info", COMPONENT, "No API key configured, replying with study tips")
            return NO_CREDENTIAL_FALLBACK

        request = GenerateContentRequest.from_prompt(build_study_prompt(user_text))
        self._debug("debug", COMPONENT, f"POST {self._settings.endpoint} ({len(user_text)} chars)")

        try:
            response = await self._client().post(
                self._settings.endpoint,
                params={"key": self._settings.api_key},
                headers={"Content-Type": "application/json"},
                json=request.to_payload(),
            )
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            self._debug("error", COMPONENT, f"Error calling Gemini API: {type(e).__name__}: {e}")
            return TRANSPORT_FAILURE_FALLBACK

        return self._extract_text(data, status_code=response.status_code)

    def _extract_text(self, data: object, status_code: int) -> str:
        """Pull the answer out of a decoded response body."""
        try:
            text = GenerateContentResponse.model_validate(data).first_text()
        except ValidationError as e:
            self._debug(
                "warning", COMPONENT,
                f"Malformed response (HTTP {status_code}): {e.error_count()} validation error(s)"
            )
            return EMPTY_RESPONSE_FALLBACK

        if text is None:
            self._debug("warning", COMPONENT, f"Response has no candidate text (HTTP {status_code})")
            return EMPTY_RESPONSE_FALLBACK
        if not text:
            self._debug("warning", COMPONENT, f"Response text is empty (HTTP {status_code})")
            return EMPTY_RESPONSE_FALLBACK

        self._debug("debug", COMPONENT, f"Received {len(text)} chars")
        return text

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
