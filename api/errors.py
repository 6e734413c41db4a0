import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

logger = logging.getLogger(__name__)


PROMPT_REQUIRED = "Prompt is required"
ADVICE_FAILED = "Failed to get advice from AI. Check backend logs."
PAGE_LOAD_FAILED = "Error loading page."


class ApiError(Exception):
    """Error rendered to the caller as {"error": message}."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"[{status_code}] {message}")


class PageLoadError(Exception):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Could not load page {path}")


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def page_load_error_handler(request: Request, exc: PageLoadError) -> PlainTextResponse:
    return PlainTextResponse(PAGE_LOAD_FAILED, status_code=500)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # The relay body has a single field, so any malformed body means no usable prompt.
    logger.info("Rejected request body path=%s errors=%d", request.url.path, len(exc.errors()))
    return JSONResponse(status_code=400, content={"error": PROMPT_REQUIRED})


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(PageLoadError, page_load_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
