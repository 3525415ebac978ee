"""Turn raw model output into an EvaluationResult."""

import json
import logging
import re

from pydantic import ValidationError

from models.schemas.evaluation_result import EvaluationResult
from services.errors import ParseError

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```(?:json)?")


def strip_code_fences(text: str) -> str:
    """Remove markdown code-fence markers the model may wrap its JSON in."""
    return _FENCE_RE.sub("", text).strip()


def parse_evaluation(text: str) -> EvaluationResult:
    """Parse and validate the six-field record. Raises ParseError."""
    clean = strip_code_fences(text)

    try:
        data = json.loads(clean)
    except json.JSONDecodeError as e:
        logger.error("Failed to parse Gemini response as JSON: %s", e)
        raise ParseError(f"Response is not valid JSON: {e}", raw_text=text) from e

    if not isinstance(data, dict):
        raise ParseError(
            f"Expected a JSON object, got {type(data).__name__}", raw_text=text
        )

    try:
        return EvaluationResult.model_validate(data)
    except ValidationError as e:
        logger.error("Gemini response failed validation: %s", e)
        raise ParseError(f"Response does not match the evaluation shape: {e}", raw_text=text) from e
