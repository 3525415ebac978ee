import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-pro"
    temperature: float = 0.3
    max_profile_chars: int = 50000
    # The page is same-origin; this only matters for browser clients of /api/evaluate
    cors_origins: list[str] = ["http://localhost:8000", "http://127.0.0.1:8000"]
    debug: bool = False

    # Evaluation rubric and verdict style table; empty means the packaged resource
    rubric_path: str = ""
    verdict_styles_path: str = ""
    role_title: str = "Finance Operations Control Analyst"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
