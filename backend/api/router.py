from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from config import settings
from models.requests import EvaluateRequest
from models.responses import ErrorResponse, HealthResponse
from models.schemas.evaluation_result import EvaluationResult
from services import candidate_evaluator
from services.errors import GENERIC_ERROR, EvaluationFailure, InvalidProfile

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(
        status="ok",
        gemini_configured=bool(settings.gemini_api_key),
        model=settings.gemini_model,
    )


@router.post(
    "/api/evaluate",
    response_model=EvaluationResult,
    responses={502: {"model": ErrorResponse}},
)
async def evaluate(body: EvaluateRequest):
    try:
        return await candidate_evaluator.evaluate(body.profile_text)
    except InvalidProfile as e:
        raise HTTPException(status_code=400, detail=str(e))
    except EvaluationFailure as e:
        return JSONResponse(
            status_code=502,
            content=ErrorResponse(detail=GENERIC_ERROR, error=e.kind).model_dump(),
        )
