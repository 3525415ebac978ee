"""Shared test configuration, sample payloads and Gemini stubs."""

import json

import pytest

from config import settings
from services import gemini_client


SAMPLE_PROFILE = """
Jane Smith
Finance Operations Analyst at PayFlow (fintech) - 3 years
- Daily reconciliation of 200k+ card transactions across 6 payment providers
- Built SQL checks that cut unmatched items by 40%
- Proposed an automated balance validation that reduced month-end close by 2 days

Accountant at Smith & Co - 1 year (AR/AP)

Education: BSc Finance, University of Lisbon
Skills: Excel (advanced), SQL, Power BI, Python (basic)
"""

SAMPLE_RESULT = {
    "score": 82,
    "verdict": "STRONG FIT",
    "summary": "Three years of fintech reconciliation with measurable impact.",
    "strengths": ["High-volume reconciliation", "SQL automation", "P&L exposure"],
    "gaps": ["Limited BI dashboard ownership"],
    "recommendation": "Move forward to a first interview.",
}


@pytest.fixture
def sample_profile() -> str:
    return SAMPLE_PROFILE


@pytest.fixture
def sample_result() -> dict:
    return dict(SAMPLE_RESULT)


@pytest.fixture
def sample_json() -> str:
    return json.dumps(SAMPLE_RESULT)


@pytest.fixture
def api_key(monkeypatch):
    """Pretend an API key is configured and start from a fresh client."""
    monkeypatch.setattr(settings, "gemini_api_key", "test-key")
    monkeypatch.setattr(gemini_client, "_client", None)
    return "test-key"


@pytest.fixture
def fake_generate(monkeypatch):
    """Stub gemini_client.generate_text; set ``.reply`` or ``.error`` per test."""

    class FakeGenerate:
        def __init__(self):
            self.reply = json.dumps(SAMPLE_RESULT)
            self.error = None
            self.prompts = []

        async def __call__(self, prompt):
            self.prompts.append(prompt)
            if self.error is not None:
                raise self.error
            return self.reply

    fake = FakeGenerate()
    monkeypatch.setattr(gemini_client, "generate_text", fake)
    return fake
