"""Verdict tier styling and score ring geometry."""

import json
import math
from functools import lru_cache
from pathlib import Path

from config import settings
from models.schemas.evaluation_result import Verdict
from models.schemas.verdict_style import ScoreRing, VerdictStyle
from resources import VERDICT_STYLES_FILE

RING_RADIUS = 54
RING_SIZE = 140
RING_STROKE = 10

# Score ring color thresholds (independent of the verdict tier)
RING_STRONG = (75, "#16a34a")
RING_MEDIUM = (55, "#d97706")
RING_WEAK_COLOR = "#dc2626"


@lru_cache(maxsize=8)
def _read_styles(path: str) -> dict[Verdict, VerdictStyle]:
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    styles = {Verdict(label): VerdictStyle.model_validate(value) for label, value in raw.items()}
    missing = set(Verdict) - set(styles)
    if missing:
        names = ", ".join(sorted(v.value for v in missing))
        raise ValueError(f"Verdict style table {path} is missing: {names}")
    return styles


def load_verdict_styles(path: str | None = None) -> dict[Verdict, VerdictStyle]:
    """Load the style table keyed by verdict; every tier must be present."""
    return _read_styles(path or settings.verdict_styles_path or str(VERDICT_STYLES_FILE))


def style_for(verdict: str | Verdict) -> VerdictStyle:
    """Style for a verdict label. Unknown labels use the POSSIBLE FIT tier."""
    tier = verdict if isinstance(verdict, Verdict) else Verdict.from_label(verdict)
    return load_verdict_styles()[tier]


def ring_color(score: int) -> str:
    if score >= RING_STRONG[0]:
        return RING_STRONG[1]
    if score >= RING_MEDIUM[0]:
        return RING_MEDIUM[1]
    return RING_WEAK_COLOR


def score_ring(score: int) -> ScoreRing:
    """Geometry for a 0-100 score; out-of-range values are clamped."""
    clamped = min(100, max(0, int(score)))
    circumference = 2 * math.pi * RING_RADIUS
    fill = clamped / 100
    return ScoreRing(
        score=clamped,
        size=RING_SIZE,
        radius=RING_RADIUS,
        stroke_width=RING_STROKE,
        circumference=round(circumference, 3),
        offset=round(circumference - fill * circumference, 3),
        fill=fill,
        color=ring_color(clamped),
    )
