from pydantic import BaseModel, Field


class EvaluateRequest(BaseModel):
    # Length limit is settings.max_profile_chars, checked by candidate_evaluator
    profile_text: str = Field(..., description="Pasted candidate profile text")
