"""Error taxonomy for the analysis endpoints and its HTTP mapping."""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AnalysisError(Exception):
    status_code = 500
    message = "Failed to analyze food"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class MissingInput(AnalysisError):
    """Client supplied no image."""

    status_code = 400
    message = "Image is required"


class UpstreamFailure(AnalysisError):
    """The hosted model call failed or returned unusable data."""

    status_code = 500
    message = "Failed to analyze food"


async def _analysis_error_handler(request: Request, exc: AnalysisError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Unparsable or non-object body: no image was supplied
    logger.warning("Rejected request to %s: %s", request.url.path, exc.errors())
    return await _analysis_error_handler(request, MissingInput())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AnalysisError, _analysis_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
