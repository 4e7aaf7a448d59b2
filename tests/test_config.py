"""Unit tests for gateway configuration and prompts."""
import pytest
from pydantic import ValidationError

from edupath.assistant import (
    EMPTY_RESPONSE_FALLBACK,
    NO_CREDENTIAL_FALLBACK,
    TRANSPORT_FAILURE_FALLBACK,
    GatewaySettings,
)
from edupath.assistant.config import DEFAULT_GATEWAY_MODEL, DEFAULT_GATEWAY_TIMEOUT, DEFAULT_GATEWAY_URL
from edupath.assistant.prompts import FALLBACK_REPLIES, build_study_prompt, clear_cache


class TestGatewaySettings:
    """Tests for GatewaySettings."""

    def test_defaults(self):
        settings = GatewaySettings()

        assert settings.api_key is None
        assert not settings.has_credential
        assert settings.base_url == DEFAULT_GATEWAY_URL
        assert settings.model == DEFAULT_GATEWAY_MODEL
        assert settings.endpoint == (
            "https://generativelanguage.googleapis.com/v1beta/models/gemini-pro:generateContent"
        )

    def test_from_env(self):
        settings = GatewaySettings.from_env({
            "GEMINI_API_KEY": "abc",
            "EDUPATH_GATEWAY_URL": "http://gateway.local/",
            "EDUPATH_GATEWAY_MODEL": "gemini-1.5-pro",
        })

        assert settings.api_key == "abc"
        assert settings.endpoint == "http://gateway.local/v1beta/models/gemini-1.5-pro:generateContent"

    def test_from_env_accepts_web_variable(self):
        settings = GatewaySettings.from_env({"VITE_GEMINI_API_KEY": "vite-key"})
        assert settings.api_key == "vite-key"

    def test_from_env_prefers_primary_variable(self):
        settings = GatewaySettings.from_env({"GEMINI_API_KEY": "main", "VITE_GEMINI_API_KEY": "vite"})
        assert settings.api_key == "main"

    @pytest.mark.parametrize("value", ["", "  ", "\n"])
    def test_blank_key_is_missing(self, value):
        assert not GatewaySettings.from_env({"GEMINI_API_KEY": value}).has_credential

    def test_timeout(self):
        assert GatewaySettings().timeout == DEFAULT_GATEWAY_TIMEOUT
        assert GatewaySettings.from_env({"EDUPATH_GATEWAY_TIMEOUT": "45"}).timeout == 45.0

    @pytest.mark.parametrize("value", [0, -1])
    def test_timeout_must_be_positive(self, value):
        with pytest.raises(ValidationError):
            GatewaySettings(timeout=value)

    def test_empty_environment(self):
        assert GatewaySettings.from_env({}) == GatewaySettings()

    def test_settings_are_immutable(self):
        settings = GatewaySettings(api_key="abc")
        with pytest.raises(ValidationError):
            settings.api_key = "other"  # type: ignore[misc]

    def test_key_hidden_from_repr(self):
        assert "secret" not in repr(GatewaySettings(api_key="secret"))


class TestPrompts:
    """Tests for the tutoring prompt and canned replies."""

    def test_question_embedded_in_preamble(self):
        clear_cache()
        prompt = build_study_prompt("Explain Le Chatelier's principle")

        assert prompt.startswith("You are an expert educational assistant")
        assert "Student's question: Explain Le Chatelier's principle\n" in prompt
        assert prompt.endswith("with examples where appropriate.")

    def test_braces_in_question_kept(self):
        assert "f(x) = {x^2}" in build_study_prompt("f(x) = {x^2}")

    def test_working_directory_override(self, tmp_path, monkeypatch):
        (tmp_path / "prompts").mkdir()
        (tmp_path / "prompts" / "study_assistant.txt").write_text("Tutor. Q: {question}")
        monkeypatch.chdir(tmp_path)
        clear_cache()
        try:
            assert build_study_prompt("why?") == "Tutor. Q: why?"
        finally:
            clear_cache()

    def test_fallbacks_are_distinct(self):
        assert len(set(FALLBACK_REPLIES)) == 3

    def test_study_tips_have_five_bullets(self):
        bullets = [line for line in NO_CREDENTIAL_FALLBACK.splitlines() if line.startswith("• ")]
        assert len(bullets) == 5
        assert "Gemini API key" in NO_CREDENTIAL_FALLBACK

    def test_apologies(self):
        assert "rephrasing" in EMPTY_RESPONSE_FALLBACK
        assert "technical difficulties" in TRANSPORT_FAILURE_FALLBACK
