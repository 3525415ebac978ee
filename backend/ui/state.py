"""Page state machine for the single-page candidate scanner.

    idle -> loading -> result | error -> idle (reset)

A new submission is also accepted from the result or error phase; it
replaces whatever was shown before.
"""

from enum import Enum

from pydantic import BaseModel

from models.schemas.evaluation_result import EvaluationResult
from services.candidate_evaluator import has_content
from services.errors import GENERIC_ERROR


class Phase(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"
    RESULT = "result"


class InvalidTransition(RuntimeError):
    pass


class PageState(BaseModel):
    phase: Phase = Phase.IDLE
    profile: str = ""
    result: EvaluationResult | None = None
    error: str | None = None

    @property
    def can_submit(self) -> bool:
        return self.phase != Phase.LOADING and has_content(self.profile)

    def begin(self, profile: str) -> bool:
        """Start an evaluation. Returns False (and changes nothing) for blank input or while loading."""
        if self.phase == Phase.LOADING or not has_content(profile):
            return False
        self.phase = Phase.LOADING
        self.profile = profile
        self.result = None
        self.error = None
        return True

    def succeed(self, result: EvaluationResult) -> None:
        self._expect(Phase.LOADING)
        self.phase = Phase.RESULT
        self.result = result

    def fail(self, message: str = GENERIC_ERROR) -> None:
        self._expect(Phase.LOADING)
        self.phase = Phase.ERROR
        self.error = message

    def reset(self) -> None:
        if self.phase == Phase.LOADING:
            raise InvalidTransition("Cannot reset while an evaluation is in flight")
        self.phase = Phase.IDLE
        self.profile = ""
        self.result = None
        self.error = None

    def _expect(self, phase: Phase) -> None:
        if self.phase != phase:
            raise InvalidTransition(f"Expected phase {phase.value}, got {self.phase.value}")
