"""Global error handling. Every error body is a problem detail: {"title", "detail"}."""

import logging
from collections.abc import Callable
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = logging.getLogger(__name__)

PROBLEM_MEDIA_TYPE = "application/problem+json"
GENERIC_ERROR_TITLE = "Error"
GENERIC_ERROR_DETAIL = "An error occurred while processing this request."


def problem_response(status_code: int, title: str, detail: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"title": title, "detail": detail},
        media_type=PROBLEM_MEDIA_TYPE,
    )


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Turn unexpected exceptions into a generic 500 problem detail.

    Runs inside the user middleware stack, so outer middleware (CORS) still
    decorates the response. Internal details stay in the log.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(
                "Unhandled exception on %s: %s", request.url.path, exc, exc_info=True
            )
            return problem_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                GENERIC_ERROR_TITLE,
                GENERIC_ERROR_DETAIL,
            )


def register_error_handlers(app: FastAPI) -> None:
    """Register HTTP and request validation handlers plus the catch-all middleware.
    Call before adding CORS so the catch-all sits inside it.
    """

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        title = HTTPStatus(exc.status_code).phrase
        detail = exc.detail if isinstance(exc.detail, str) else title
        return problem_response(exc.status_code, title, detail)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        detail = "; ".join(
            f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}" for e in exc.errors()
        )
        return problem_response(
            status.HTTP_400_BAD_REQUEST, "Invalid request", detail or "Invalid request data"
        )

    app.add_middleware(UnhandledErrorMiddleware)
