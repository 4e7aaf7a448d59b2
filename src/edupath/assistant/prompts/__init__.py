"""Prompt and canned-reply module.

Externalizes the tutoring prompt to a text file for easy customization.
Prompts can be overridden by placing files in the working directory.
The fallback replies are fixed strings and live here as constants.
"""

from functools import lru_cache
from pathlib import Path

# Default prompts directory (package location)
_PROMPTS_DIR = Path(__file__).parent

QUESTION_PLACEHOLDER = "{question}"

NO_CREDENTIAL_FALLBACK = (
    "I'm here to help! To enable AI-powered responses, please add your Gemini API key "
    "to the .env file. In the meantime, I can provide general study tips:\n\n"
    "• Create a study schedule and stick to it\n"
    "• Practice regularly with mock tests\n"
    "• Focus on understanding concepts, not just memorization\n"
    "• Take regular breaks to avoid burnout\n"
    "• Review your mistakes and learn from them\n\n"
    "What specific topic would you like help with?"
)

EMPTY_RESPONSE_FALLBACK = (
    "I apologize, but I'm having trouble generating a response right now. "
    "Please try rephrasing your question."
)

TRANSPORT_FAILURE_FALLBACK = (
    "I'm experiencing some technical difficulties. Please try again in a moment."
)

FALLBACK_REPLIES = (NO_CREDENTIAL_FALLBACK, EMPTY_RESPONSE_FALLBACK, TRANSPORT_FAILURE_FALLBACK)


@lru_cache(maxsize=16)
def load_prompt(name: str) -> str:
    """Load a prompt from file.

    Search order:
    1. Current working directory: ./prompts/{name}.txt
    2. Package prompts directory: edupath/assistant/prompts/{name}.txt

    Args:
        name: Prompt name (without .txt extension)

    Returns:
        Prompt text content

    Raises:
        FileNotFoundError: If prompt file not found in any location
    """
    filename = f"{name}.txt"

    # Check working directory first (allows user overrides)
    local_path = Path.cwd() / "prompts" / filename
    if local_path.exists():
        return local_path.read_text(encoding="utf-8")

    package_path = _PROMPTS_DIR / filename
    if package_path.exists():
        return package_path.read_text(encoding="utf-8")

    raise FileNotFoundError(
        f"Prompt '{name}' not found. Searched:\n"
        f"  - {local_path}\n"
        f"  - {package_path}"
    )


def build_study_prompt(question: str) -> str:
    """Embed a student's question in the tutoring prompt."""
    template = load_prompt("study_assistant").rstrip()
    if QUESTION_PLACEHOLDER not in template:
        return f"{template}\n\nStudent's question: {question}"
    return template.replace(QUESTION_PLACEHOLDER, question)


def clear_cache() -> None:
    """Clear the prompt cache (useful after modifying prompt files)."""
    load_prompt.cache_clear()


__all__ = [
    "EMPTY_RESPONSE_FALLBACK",
    "FALLBACK_REPLIES",
    "NO_CREDENTIAL_FALLBACK",
    "TRANSPORT_FAILURE_FALLBACK",
    "build_study_prompt",
    "clear_cache",
    "load_prompt",
]
