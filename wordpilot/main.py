import os
import json
import logging
from typing import Any, List

from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from .config import configure_logging
from .corrector import TextCorrector
from .highlight import highlight_segments
from .models import CorrectionRequest, CorrectionResponse, Mode

logger = logging.getLogger(__name__)

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")

app = FastAPI(title="Word Pilot")
templates = Jinja2Templates(directory=TEMPLATES_DIR)


class EscapedJSONResponse(JSONResponse):
    # echoed input may hold lone surrogates, which UTF-8 cannot encode raw
    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=True, allow_nan=False, separators=(",", ":")).encode("ascii")


_corrector = None


def get_corrector() -> TextCorrector:
    global _corrector
    if _corrector is None:
        _corrector = TextCorrector()
    return _corrector


def _parse_mode(value) -> Mode:
    try:
        return Mode(value)
    except ValueError:
        return Mode.CORRECT_ENGLISH


def _render(request: Request, mode: Mode, text: str = "", result=None, notice=None):
    segments = highlight_segments(result.corrected_text, result.untranslatable_words) if result else []
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "modes": list(Mode),
            "mode": mode,
            "input": text,
            "result": result,
            "segments": segments,
            "notice": notice,
        },
    )


@app.get("/", response_class=HTMLResponse)
async def home(request: Request):
    return _render(request, Mode.CORRECT_ENGLISH)


@app.post("/", response_class=HTMLResponse)
async def correct_form(request: Request, corrector: TextCorrector = Depends(get_corrector)):
    form = await request.form()
    text = str(form.get("text") or "")
    mode = _parse_mode(form.get("mode"))

    notices: List[str] = []
    result = await corrector.correct(text, mode, notify=notices.append)
    return _render(request, mode, text, result, notices[0] if notices else None)


@app.post("/correct", response_model=CorrectionResponse, response_class=EscapedJSONResponse)
async def correct(request: CorrectionRequest, corrector: TextCorrector = Depends(get_corrector)):
    notices: List[str] = []
    result = await corrector.correct(request.text, request.mode, notify=notices.append)
    response = CorrectionResponse(
        **result.model_dump(),
        mode=request.mode,
        notice=notices[0] if notices else None,
    )
    return EscapedJSONResponse(response.model_dump(mode="json"))


@app.get("/healthz")
def healthz(corrector: TextCorrector = Depends(get_corrector)):
    return {"status": "ok", "model": corrector.settings.model}


@app.on_event("startup")
async def startup_event():
    configure_logging()
    logger.info("Word Pilot ready, model=%s", get_corrector().settings.model)
