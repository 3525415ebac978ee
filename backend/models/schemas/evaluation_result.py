"""Structured verdict returned by the LLM for one candidate profile."""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class Verdict(str, Enum):
    """Fit classification labels, strongest to weakest."""
    STRONG_FIT = "STRONG FIT"
    GOOD_FIT = "GOOD FIT"
    POSSIBLE_FIT = "POSSIBLE FIT"
    WEAK_FIT = "WEAK FIT"
    NO_FIT = "NO FIT"

    @classmethod
    def from_label(cls, label: str) -> "Verdict":
        """Map a free-text label to a tier, falling back to POSSIBLE FIT."""
        try:
            return cls(label.strip().upper())
        except ValueError:
            return cls.POSSIBLE_FIT


class EvaluationResult(BaseModel):
    """The six-field record the rubric asks the model to return.

    Every field is required. The verdict stays a plain string so that an
    unrecognized label still renders (see ``tier``).
    """
    score: int = Field(..., ge=0, le=100, strict=True)
    verdict: str
    summary: str
    strengths: list[str]
    gaps: list[str]
    recommendation: str

    @field_validator("verdict")
    @classmethod
    def _normalize_verdict(cls, value: str) -> str:
        return value.strip().upper()

    @property
    def tier(self) -> Verdict:
        return Verdict.from_label(self.verdict)
