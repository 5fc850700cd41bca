"""FastAPI exception handlers for converting StorefrontError to HTTP responses.

Domain errors raised by services become JSON ``ErrorResponse`` bodies with a
status derived from their ``ErrorCode``:
- 400 Bad Request: invalid order payloads, unverifiable webhooks
- 500 Internal Server Error: missing configuration, Stripe failures

Usage:
    from storefront_api.exceptions import register_exception_handlers
    register_exception_handlers(app)
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from storefront_shared.models.errors import ErrorCode, StorefrontError

# Map ErrorCode to HTTP status codes
ERROR_CODE_TO_HTTP_STATUS: dict[ErrorCode, int] = {
    ErrorCode.PAYMENTS_NOT_CONFIGURED: HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.STRIPE_API_ERROR: HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.INVALID_WEBHOOK_SIGNATURE: HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_WEBHOOK_PAYLOAD: HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_ORDER: HTTP_400_BAD_REQUEST,
}


def get_http_status_for_error(code: ErrorCode) -> int:
    """Get HTTP status code for an ErrorCode.

    Args:
        code: The ErrorCode to map

    Returns:
        HTTP status code, defaults to 500 if not explicitly mapped.
    """
    return ERROR_CODE_TO_HTTP_STATUS.get(code, HTTP_500_INTERNAL_SERVER_ERROR)


async def storefront_error_handler(request: Request, exc: StorefrontError) -> JSONResponse:
    """Handle StorefrontError exceptions and convert to JSON response.

    Args:
        request: The incoming request (unused but required by FastAPI)
        exc: The StorefrontError exception

    Returns:
        JSONResponse with error details and appropriate status code.
    """
    return JSONResponse(
        status_code=get_http_status_for_error(exc.code),
        content=exc.to_response().model_dump(mode="json"),
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request validation failures as 400 ErrorResponse bodies.

    ``details`` maps each failing location (e.g. ``body.price``) to
    pydantic's messages for it, joined with "; " when there are several.
    """
    details: dict[str, str] = {}
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()))
        msg = err.get("msg", "")
        details[loc] = f"{details[loc]}; {msg}" if loc in details else msg
    error = StorefrontError(ErrorCode.INVALID_ORDER, details=details)
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content=error.to_response().model_dump(mode="json"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app.

    Unexpected exceptions are left to FastAPI's default 500 handling.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(StorefrontError, storefront_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
