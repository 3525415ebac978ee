"""Display styling for verdict tiers and the circular score indicator."""

from pydantic import BaseModel


class VerdictStyle(BaseModel):
    color: str
    bg: str
    border: str


class ScoreRing(BaseModel):
    """SVG geometry for the score ring (0-100 scale)."""
    score: int
    size: int = 140
    radius: int = 54
    stroke_width: int = 10
    circumference: float
    offset: float
    fill: float  # 0.0-1.0
    color: str

    @property
    def center(self) -> float:
        return self.size / 2
