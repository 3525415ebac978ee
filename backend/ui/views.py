"""Server-rendered page: input form, loading panel, error banner, result cards."""

import logging
from pathlib import Path

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from config import settings
from services import candidate_evaluator
from services.errors import EvaluationFailure, InvalidProfile
from ui.state import PageState, Phase
from ui.styles import score_ring, style_for

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

router = APIRouter()


def render(request: Request, state: PageState) -> HTMLResponse:
    context = {
        "state": state,
        "phase": Phase,
        "role_title": settings.role_title,
        "style": style_for(state.result.tier) if state.result else None,
        "ring": score_ring(state.result.score) if state.result else None,
    }
    return templates.TemplateResponse(request, "index.html", context)


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    return render(request, PageState())


@router.post("/", response_class=HTMLResponse)
async def submit(request: Request, profile: str = Form("")):
    state = PageState(profile=profile)
    if not state.begin(profile):
        # Blank input: nothing is sent, the page stays idle
        return render(request, state)

    try:
        result = await candidate_evaluator.evaluate(profile)
    except InvalidProfile as e:
        state.fail(str(e))
    except EvaluationFailure as e:
        logger.error("Evaluation failed [%s]: %s", e.kind, e)
        state.fail()
    else:
        state.succeed(result)
    return render(request, state)


@router.post("/reset", response_class=HTMLResponse)
async def reset(request: Request, profile: str = Form("")):
    # Only offered from the result view; posts the scan form so the profile is cleared here
    state = PageState(phase=Phase.RESULT, profile=profile)
    state.reset()
    return render(request, state)
