"""FastAPI exception handlers for converting TinyHouseError to HTTP responses.

The ErrorCode-to-HTTP status mapping follows REST conventions:
- 400 Bad Request: Malformed input
- 401 Unauthorized: Viewer required
- 402 Payment Required: Stripe rejected the Connect request
- 502 Bad Gateway: Stripe API failure
- 503 Service Unavailable: Stripe credentials missing

Usage:
    from api.exceptions import register_exception_handlers
    register_exception_handlers(app)
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_402_PAYMENT_REQUIRED,
    HTTP_502_BAD_GATEWAY,
    HTTP_503_SERVICE_UNAVAILABLE,
)

from api.models.common import format_validation_errors
from shared.models.errors import ErrorCode, TinyHouseError

logger = logging.getLogger(__name__)

# Unprocessable request; the Starlette constant name differs between versions
HTTP_422 = 422

ERROR_CODE_TO_HTTP_STATUS: dict[ErrorCode, int] = {
    ErrorCode.INVALID_AUTHORIZATION_CODE: HTTP_400_BAD_REQUEST,
    ErrorCode.VIEWER_REQUIRED: HTTP_401_UNAUTHORIZED,
    ErrorCode.STRIPE_CONNECT_FAILED: HTTP_402_PAYMENT_REQUIRED,
    ErrorCode.STRIPE_API_ERROR: HTTP_502_BAD_GATEWAY,
    ErrorCode.STRIPE_NOT_CONFIGURED: HTTP_503_SERVICE_UNAVAILABLE,
}


def get_http_status_for_error(code: ErrorCode) -> int:
    """Get HTTP status code for an ErrorCode (400 if not explicitly mapped)."""
    return ERROR_CODE_TO_HTTP_STATUS.get(code, HTTP_400_BAD_REQUEST)


async def tinyhouse_error_handler(request: Request, exc: TinyHouseError) -> JSONResponse:
    """Convert a TinyHouseError to a JSON ErrorResponse."""
    status_code = get_http_status_for_error(exc.code)
    logger.warning(
        "%s %s failed with %s", request.method, request.url.path, exc.code.value
    )

    return JSONResponse(
        status_code=status_code,
        content=exc.to_error_response().model_dump(mode="json"),
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Wrap request validation errors in the standard error structure."""
    return JSONResponse(
        status_code=HTTP_422,
        content=format_validation_errors(list(exc.errors())).model_dump(mode="json"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(TinyHouseError, tinyhouse_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
