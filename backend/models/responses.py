from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"
    gemini_configured: bool = False
    model: str = ""


class ErrorResponse(BaseModel):
    detail: str
    error: str = ""
