from datetime import datetime, timezone
from http import HTTPStatus
from typing import Dict, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic.alias_generators import to_camel
from starlette.exceptions import HTTPException as StarletteHTTPException

from inventory_api.utils.logger import get_logger

log = get_logger("api")

_VALUE_ERROR_PREFIX = "Value error, "

# bodies made of one field report its error as the top-level message too
_SINGLE_FIELD_BODIES = {"quantity"}


class ApiError(HTTPException):
    """HTTPException carrying the error label shown in the response body."""

    def __init__(
        self,
        status_code: int,
        error: str,
        message: str,
        validation_errors: Optional[Dict[str, str]] = None,
    ):
        super().__init__(status_code=status_code, detail=message)
        self.error = error
        self.validation_errors = validation_errors


def error_body(
    status: int,
    error: str,
    message: str,
    validation_errors: Optional[Dict[str, str]] = None,
) -> dict:
    body = {
        "status": status,
        "error": error,
        "message": message,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    if validation_errors:
        body["validationErrors"] = validation_errors
    return body


def _field_errors(exc: RequestValidationError) -> Dict[str, str]:
    """
    Map pydantic errors to {field: message}. Body errors are keyed by the
    JSON field name; errors about the body as a whole are keyed "body".
    """
    out: Dict[str, str] = {}
    for err in exc.errors():
        loc = err.get("loc") or ()
        field = loc[1] if len(loc) > 1 and isinstance(loc[1], str) else "body"
        # defaults that fail validation are reported under the python name
        if "_" in field:
            field = to_camel(field)
        msg = str(err.get("msg", "Invalid value"))
        if msg.startswith(_VALUE_ERROR_PREFIX):
            msg = msg[len(_VALUE_ERROR_PREFIX):]
        out.setdefault(field, msg)
    return out


async def api_error_handler(request: Request, exc: ApiError):
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, exc.error, exc.detail, exc.validation_errors),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        message = f"Route {request.url.path} not found"
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, HTTPStatus(exc.status_code).phrase, message),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # a path parameter that failed to parse is the product id
    if any((err.get("loc") or ("",))[0] == "path" for err in exc.errors()):
        return JSONResponse(
            status_code=400,
            content=error_body(400, "Bad Request", "Invalid product ID"),
        )
    errors = _field_errors(exc)
    message = "Invalid input data"
    if len(errors) == 1 and set(errors) <= _SINGLE_FIELD_BODIES:
        message = next(iter(errors.values()))
    return JSONResponse(
        status_code=400,
        content=error_body(400, "Validation Failed", message, errors),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    log.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=error_body(500, "Internal Server Error", "An unexpected error occurred"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
