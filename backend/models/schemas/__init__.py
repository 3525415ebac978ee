"""Pydantic contracts shared by the evaluation client and the page."""

from models.schemas.evaluation_result import EvaluationResult, Verdict
from models.schemas.verdict_style import ScoreRing, VerdictStyle

__all__ = [
    "EvaluationResult",
    "Verdict",
    "ScoreRing",
    "VerdictStyle",
]
