"""Data models for match output."""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

Method = Literal["exact", "fuzzy", "consonant", "none"]
MAX_ALTERNATIVES = 3


class Alternative(BaseModel):
    """A runner-up supplier label with its fuzzy confidence."""

    color: str
    confidence: int = Field(ge=0, le=100)


class MatchResult(BaseModel):
    """Outcome of resolving one of our color labels against a supplier list."""

    matched: bool
    matchedColor: str | None = None
    confidence: int = Field(default=0, ge=0, le=100)
    method: Method = "none"
    needsReview: bool = True
    alternatives: list[Alternative] = Field(default_factory=list, max_length=MAX_ALTERNATIVES)

    @model_validator(mode="after")
    def _check_matched_color(self) -> "MatchResult":
        if self.matched != (self.matchedColor is not None):
            raise ValueError("matchedColor must be set if and only if matched is true")
        return self
