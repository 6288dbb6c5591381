"""
API Errors
==========

Every failure leaves the API as JSON {message, error}: `message` names the
operation that failed, `error` carries the underlying detail.
"""
import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from user_api.application.dto.user_dto import ErrorResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Raised by controllers; rendered by the handler below."""

    def __init__(self, status_code: int, message: str, error: Optional[str] = None):
        self.status_code = status_code
        self.message = message
        self.error = error
        super().__init__(message if error is None else f"{message}: {error}")


def _error_response(status_code: int, message: str, error: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(message=message, error=error)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return _error_response(exc.status_code, exc.message, exc.error)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Bodies that are not a JSON object are client errors (400), not 422."""
    details = "; ".join(str(err.get("msg", err)) for err in exc.errors())
    logger.debug(f"Rejected request body on {request.method} {request.url.path}: {details}")
    return _error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body", details)


def register_exception_handlers(application: FastAPI) -> None:
    application.add_exception_handler(ApiError, api_error_handler)
    application.add_exception_handler(RequestValidationError, request_validation_error_handler)
