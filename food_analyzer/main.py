"""Main FastAPI application."""

import asyncio
import base64
import logging
import os
import sys
import time
from typing import Optional, Union

from fastapi import FastAPI, File, Form, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from food_analyzer import services
from food_analyzer.config import ALLOW_ALL_ORIGINS, CORS_ORIGINS, LOG_LEVEL
from food_analyzer.errors import (
    AnalysisError,
    MissingInput,
    UpstreamFailure,
    register_error_handlers,
)
from food_analyzer.presentation import MODE_INFO, build_result_view
from food_analyzer.schemas import (
    AnalysisMode,
    AnalyzeRequest,
    ErrorResponse,
    MarkdownResult,
    QuickScanResult,
)

# -----------------------------------
# App setup
# -----------------------------------

app = FastAPI(title="Food Calorie Analyzer")

logging.basicConfig(
    level=LOG_LEVEL,
    stream=sys.stdout,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=not ALLOW_ALL_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

templates = Jinja2Templates(directory=os.path.join(os.path.dirname(__file__), "templates"))

ANALYZERS = {
    AnalysisMode.QUICK: services.quick_scan,
    AnalysisMode.DETAILED: services.detailed_scan,
    AnalysisMode.LLAVA: services.llava_scan,
}

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


async def run_analysis(
    mode: AnalysisMode, image: Optional[str]
) -> Union[QuickScanResult, MarkdownResult]:
    """Shared request path for every analysis mode: validate, call upstream, time it."""
    if not image or not image.strip():
        raise MissingInput()

    total_start = time.time()
    logging.info("[PIPELINE] Starting %s scan, image_len=%s", mode.value, len(image))

    try:
        result = await asyncio.to_thread(ANALYZERS[mode], image)
    except Exception as e:
        logging.exception("Error in %s scan", mode.value)
        raise UpstreamFailure() from e

    total_ms = round((time.time() - total_start) * 1000, 2)
    logging.info("[PIPELINE] %s scan completed successfully, total time: %sms", mode.value, total_ms)
    return result


# -----------------------------------
# Health
# -----------------------------------

@app.get("/health")
def health():
    return {"status": "ok"}


# -----------------------------------
# JSON API
# -----------------------------------

@app.post(
    "/api/food-analysis/quick-scan",
    response_model=QuickScanResult,
    responses=ERROR_RESPONSES,
)
async def quick_scan(payload: AnalyzeRequest):
    """BLIP-2 caption + calorie table lookup."""
    return await run_analysis(AnalysisMode.QUICK, payload.image)


@app.post(
    "/api/food-analysis/detailed-scan",
    response_model=MarkdownResult,
    responses=ERROR_RESPONSES,
)
async def detailed_scan(payload: AnalyzeRequest):
    """GPT-4o vision nutritional markdown."""
    return await run_analysis(AnalysisMode.DETAILED, payload.image)


@app.post(
    "/api/food-analysis/llava-scan",
    response_model=MarkdownResult,
    responses=ERROR_RESPONSES,
)
async def llava_scan(payload: AnalyzeRequest):
    """LLaVA descriptive markdown."""
    return await run_analysis(AnalysisMode.LLAVA, payload.image)


# -----------------------------------
# Upload page
# -----------------------------------

def _render_page(request: Request, selected: AnalysisMode, view=None, error=None, status_code=200):
    return templates.TemplateResponse(
        request,
        "index.html",
        {"modes": MODE_INFO, "selected": selected, "view": view, "error": error},
        status_code=status_code,
    )


async def _to_data_url(image: Optional[UploadFile]) -> Optional[str]:
    if image is None:
        return None
    content = await image.read()
    if not content:
        return None
    content_type = image.content_type or "image/jpeg"
    return f"data:{content_type};base64,{base64.b64encode(content).decode('utf-8')}"


@app.get("/", response_class=HTMLResponse)
async def index(request: Request):
    return _render_page(request, AnalysisMode.QUICK)


@app.post("/scan", response_class=HTMLResponse)
async def scan(
    request: Request,
    analysis_type: str = Form(AnalysisMode.QUICK.value),
    image: UploadFile = File(None),
):
    try:
        mode = AnalysisMode(analysis_type)
    except ValueError:
        logging.warning("Unknown analysis_type=%r, using quick scan", analysis_type)
        mode = AnalysisMode.QUICK

    try:
        result = await run_analysis(mode, await _to_data_url(image))
    except AnalysisError as e:
        return _render_page(request, mode, error=e.message, status_code=e.status_code)

    return _render_page(request, mode, view=build_result_view(result, mode))
