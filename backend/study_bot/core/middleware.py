# study_bot/core/middleware.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from ..utils.errors import APIError, ErrorCode, error_body

logger = logging.getLogger(__name__)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        try:
            response = await call_next(request)
            return response
        except Exception as e:
            logger.exception(f"Unexpected Error: {str(e)}")
            return JSONResponse(
                status_code=500,
                content=error_body(ErrorCode.INTERNAL_ERROR, "An unexpected error occurred")
            )


async def api_error_handler(request: Request, exc: APIError):
    logger.error(f"API Error [{exc.error_code}] {request.url.path}: {exc.error_message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.status_code), str(exc.detail))
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Validation Error {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=422,
        content=error_body(
            ErrorCode.VALIDATION_ERROR,
            "Invalid request",
            {"issues": [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()]}
        )
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_middleware(ErrorHandlingMiddleware)
