"""Exception handlers turning errors into structured JSON responses.

Every failure leaves the API as ``{"error", "message", "details"}`` so
clients can branch on the code without parsing text.
"""

import logging
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from ..exceptions import PromptbankError, ErrorCode

logger = logging.getLogger(__name__)

_PYDANTIC_VALUE_ERROR_PREFIX = "Value error, "


async def promptbank_exception_handler(request: Request, exc: PromptbankError) -> JSONResponse:
    """Log the error and return its JSON form with the matching status code."""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        f"PromptbankError: {exc.error_code.value}",
        extra={
            "error_code": exc.error_code.value,
            "path": request.url.path,
            "method": request.method,
            "details": exc.details,
            "status_code": exc.status_code
        }
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request body/query schema failures as VALIDATION_ERROR.

    The message is the first failure, e.g. "Title is required"; the full
    list stays available under ``details.errors``.
    """
    errors = exc.errors()
    first = errors[0] if errors else {}
    message = str(first.get("msg", "Invalid request"))
    if message.startswith(_PYDANTIC_VALUE_ERROR_PREFIX):
        message = message[len(_PYDANTIC_VALUE_ERROR_PREFIX):]
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query")]
    field = ".".join(loc) or None

    logger.warning(
        "Request validation failed",
        extra={"path": request.url.path, "method": request.method, "field": field},
    )

    details = {"errors": [
        {"loc": [str(p) for p in e.get("loc", ())], "msg": str(e.get("msg", ""))} for e in errors
    ]}
    if field:
        details["field"] = field
    return JSONResponse(
        status_code=400,
        content={
            "error": ErrorCode.VALIDATION_ERROR.value,
            "message": message,
            "details": details,
        },
    )
