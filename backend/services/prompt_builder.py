"""Instruction template loading and prompt assembly for Gemini calls."""

from functools import lru_cache
from pathlib import Path

from config import settings
from resources import RUBRIC_FILE


@lru_cache(maxsize=8)
def _read_template(path: str) -> str:
    return Path(path).read_text(encoding="utf-8").strip()


def load_instruction_template(path: str | None = None) -> str:
    """Load the rubric: role framing, job description, hiring criteria and output shape.

    Resolution order: explicit ``path``, then ``settings.rubric_path``, then
    the rubric shipped in ``resources/``.
    """
    return _read_template(path or settings.rubric_path or str(RUBRIC_FILE))


def build_evaluation_prompt(profile_text: str, template: str | None = None) -> str:
    """Prepend the instruction template to the candidate profile."""
    if template is None:
        template = load_instruction_template()

    return f"""{template}

Evaluate this candidate profile:

{profile_text}"""
