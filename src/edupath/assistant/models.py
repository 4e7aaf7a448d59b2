"""Wire models for the generateContent call.

Only the fields the assistant reads or writes are modelled; anything else
in a gateway response is ignored.
"""

from typing import Any

from pydantic import BaseModel, Field


class Part(BaseModel):
    """A single text span."""

    text: str | None = None


class Content(BaseModel):
    """A list of parts produced or consumed by the model."""

    parts: list[Part] = Field(default_factory=list)


class CandidateContent(BaseModel):
    """Content of a generated answer; parts are checked one at a time."""

    parts: list[Any] = Field(default_factory=list)


class Candidate(BaseModel):
    """One generated answer."""

    content: CandidateContent | None = None


class GenerateContentRequest(BaseModel):
    """Request body: one content entry holding one text part."""

    contents: list[Content]

    @classmethod
    def from_prompt(cls, prompt: str) -> "GenerateContentRequest":
        return cls(contents=[Content(parts=[Part(text=prompt)])])

    def to_payload(self) -> dict:
        return self.model_dump(exclude_none=True)


class GenerateContentResponse(BaseModel):
    """Response body of the gateway."""

    candidates: list[Any] = Field(default_factory=list)

    def first_text(self) -> str | None:
        """Get `candidates[0].content.parts[0].text`.

        Only the elements on that path are validated; later candidates and
        parts may have any shape.

        Returns:
            The text (possibly empty), or None if any level of the path is missing

        Raises:
            ValidationError: An element on the path has the wrong shape
        """
        if not self.candidates:
            return None
        content = Candidate.model_validate(self.candidates[0]).content
        if content is None or not content.parts:
            return None
        return Part.model_validate(content.parts[0]).text
