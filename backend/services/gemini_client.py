"""Google Gemini API wrapper with error handling."""

import logging
from typing import Any

import httpx
from google import genai
from google.genai import errors, types

from config import settings
from services.errors import BadResponse, ConfigurationError, EvaluationFailure, NetworkError

logger = logging.getLogger(__name__)

_client: genai.Client | None = None


def get_client() -> genai.Client:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - candidate evaluation disabled")
        raise ConfigurationError("GEMINI_API_KEY is not configured")
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


def extract_text(response: Any) -> str:
    """Return the first generated text segment of a generateContent response."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        raise BadResponse("Response contained no candidates")

    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) or []
    if not parts:
        raise BadResponse("First candidate has no content parts")

    text = getattr(parts[0], "text", None)
    if not text or not text.strip():
        raise BadResponse("First content part has no text")
    return text


async def generate_text(prompt: str) -> str:
    """Send a prompt to Gemini and return the raw generated text."""
    client = get_client()

    try:
        response = await client.aio.models.generate_content(
            model=settings.gemini_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=settings.temperature,
            ),
        )
    except errors.UnknownApiResponseError as e:
        logger.error("Gemini returned an unreadable response: %s", e)
        raise BadResponse(f"Gemini response could not be decoded: {e}") from e
    except errors.APIError as e:
        logger.error("Gemini API error (%s): %s", e.code, e)
        raise BadResponse(f"Gemini returned an error: {e}", status_code=e.code) from e
    except (httpx.HTTPError, OSError) as e:
        logger.error("Gemini transport error: %s", e)
        raise NetworkError(f"Could not reach Gemini: {e}") from e
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        raise EvaluationFailure(f"Gemini call failed: {e}") from e

    return extract_text(response)
