"""Failure taxonomy for a candidate evaluation call.

Every variant derives from ``EvaluationFailure`` so the page can catch one
type and show one message, while logs, the JSON API and tests can still
tell causes apart through ``kind``.
"""

GENERIC_ERROR = "Error analyzing the profile. Please check your API key and try again."


class EvaluationFailure(Exception):
    kind = "unknown"


class ConfigurationError(EvaluationFailure):
    """No Gemini API key is configured."""
    kind = "configuration"


class NetworkError(EvaluationFailure):
    """The request never produced an HTTP response."""
    kind = "network"


class BadResponse(EvaluationFailure):
    """Non-success status, or a response without a text segment."""
    kind = "bad_response"

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(EvaluationFailure):
    """The generated text is not a valid evaluation record."""
    kind = "parse"

    def __init__(self, message: str, raw_text: str = ""):
        super().__init__(message)
        self.raw_text = raw_text


class InvalidProfile(ValueError):
    """Profile text is blank or longer than ``settings.max_profile_chars``."""
