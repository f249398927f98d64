import logging
import traceback
from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from room_booking.utils.exceptions import AppException, ErrorCode, ErrorKind

logger = logging.getLogger(__name__)


# ─── Kind → HTTP status ───────────────────────────────────────────────────────
STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND:        status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT:         status.HTTP_409_CONFLICT,
    ErrorKind.INVALID_DURATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.OVERLAP:          status.HTTP_409_CONFLICT,
    ErrorKind.PAST_SCHEDULE:    status.HTTP_400_BAD_REQUEST,
}


def _error_body(code: str, details: list | None = None, field: str | None = None) -> dict:
    return {"code": code, "details": details, "field": field}


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Translate a booking-core rejection into the standard error envelope."""
    status_code = STATUS_BY_KIND[exc.kind]
    logger.info(f"{request.method} {request.url.path} rejected [{exc.kind.value}]: {exc.message}")
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "message": exc.message,
            "error": _error_body(exc.kind.value, field=exc.field),
        }
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Handle Pydantic validation errors (422).
    Converts FastAPI's default validation error format into our standardized format.
    """
    details = []
    for error in exc.errors():
        # loc is a tuple like ("body", "employeeEmail")
        loc = error.get("loc", [])
        field = ".".join(str(l) for l in loc if l != "body") if loc else "unknown"
        details.append({
            "field": field,
            "message": error.get("msg", "Invalid value"),
        })

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "success": False,
            "message": "Validation error. Please check your input.",
            "error": _error_body(ErrorCode.VALIDATION_ERROR, details=details),
        }
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Catch-all handler for unexpected exceptions, storage failures included.
    Logs the full traceback, returns a safe 500 response.
    """
    logger.error(
        f"Unhandled exception on {request.method} {request.url}\n"
        f"{''.join(traceback.format_exception(type(exc), exc, exc.__traceback__))}"
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "message": "An unexpected error occurred. Please try again later.",
            "error": _error_body(ErrorCode.INTERNAL_SERVER_ERROR),
        }
    )
