"""Evaluate one candidate profile against the configured rubric.

Flow:
    profile text -> instruction template + profile -> Gemini -> first text
    segment -> fence stripping -> validated EvaluationResult
"""

import logging

from config import settings
from models.schemas.evaluation_result import EvaluationResult
from services import gemini_client, prompt_builder, response_parser
from services.errors import EvaluationFailure, InvalidProfile

logger = logging.getLogger(__name__)


def has_content(text: str | None) -> bool:
    return bool(text and text.strip())


def check_profile(text: str | None) -> None:
    """Raise InvalidProfile for blank text or text over the configured limit."""
    if not has_content(text):
        raise InvalidProfile("Profile text cannot be empty")
    if len(text) > settings.max_profile_chars:
        raise InvalidProfile(f"Profile too long (max {settings.max_profile_chars} chars)")


async def evaluate(profile_text: str) -> EvaluationResult:
    """Run a single evaluation. Raises InvalidProfile for unusable input, EvaluationFailure on any call failure."""
    check_profile(profile_text)

    prompt = prompt_builder.build_evaluation_prompt(profile_text)
    logger.info("Evaluating candidate profile (%d chars)", len(profile_text))

    try:
        text = await gemini_client.generate_text(prompt)
        result = response_parser.parse_evaluation(text)
    except EvaluationFailure as e:
        logger.warning("Candidate evaluation failed [%s]: %s", e.kind, e)
        raise

    logger.info("Candidate evaluated: score=%d verdict=%s", result.score, result.verdict)
    return result
