"""
Exception handlers mapping the error taxonomy onto HTTP responses.
"""
import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from receipt_points.errors import DecodeError, ReceiptNotFound

logger = logging.getLogger(__name__)


def _error_details(exc: RequestValidationError) -> list[dict]:
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]


def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if any(err.get("type") == "json_invalid" for err in errors):
        return decode_error_response(request, DecodeError("Request body is not valid JSON"))
    logger.warning("Rejected %s %s: %d validation errors", request.method, request.url.path, len(errors))
    return JSONResponse(
        status_code=422,
        content={"error": "Validation error", "details": _error_details(exc)},
    )


def decode_error_response(request: Request, exc: DecodeError) -> JSONResponse:
    logger.warning("Malformed receipt on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=400,
        content={"error": "Malformed receipt", "details": str(exc)},
    )


def not_found_handler(request: Request, exc: ReceiptNotFound):
    logger.warning("Receipt not found: %s", exc.receipt_id)
    return JSONResponse(
        status_code=404,
        content={"error": "Receipt not found", "details": exc.receipt_id},
    )


def generic_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "details": str(exc)},
    )


def register_exception_handlers(app) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ReceiptNotFound, not_found_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
