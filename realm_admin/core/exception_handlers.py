"""HTTP mapping for domain and framework errors.

Every error body has the shape {"error", "message", "details"?}. Batch
import failures are not errors here: they are reported in the import
response itself.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from realm_admin.core.config import get_settings
from realm_admin.domain.exceptions import RealmAdminException

logger = logging.getLogger(__name__)

# error_code -> status; anything unlisted is a client error (400).
_STATUS_BY_ERROR_CODE: dict[str, int] = {
    "AUTHENTICATION_ERROR": 401,
    "PERMISSION_DENIED": 403,
    "REALM_NOT_FOUND": 404,
    "RESOURCE_NOT_FOUND": 404,
    "VALIDATION_ERROR": 400,
    # Stored data references a kind nobody can load: a server-side fault.
    "UNKNOWN_AUDIT_KIND": 500,
    "SERVICE_UNAVAILABLE": 503,
}


def _status_for(exc: RealmAdminException) -> int:
    return _STATUS_BY_ERROR_CODE.get(exc.error_code, 400)


def _error_body(error: str, message: Any, details: Any = None) -> dict[str, Any]:
    body: dict[str, Any] = {"error": error, "message": message}
    if details is not None:
        body["details"] = details
    return body


async def _handle_realm_admin_error(
    request: Request, exc: RealmAdminException
) -> JSONResponse:
    status = _status_for(exc)
    if status >= 500:
        logger.error("%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.error_code)
    return JSONResponse(status_code=status, content=exc.to_dict())


async def _handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # pydantic puts exception instances in ctx; stringify them for JSON.
    errors = [
        {**err, "ctx": {k: str(v) for k, v in err["ctx"].items()}} if "ctx" in err else err
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=422,
        content=_error_body("VALIDATION_ERROR", "Request validation failed", errors),
    )


async def _handle_http_error(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body("HTTP_ERROR", exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    """Last resort. The exception text is only exposed in debug mode."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    message = str(exc) if get_settings().debug else "Internal server error"
    return JSONResponse(status_code=500, content=_error_body("INTERNAL_ERROR", message))


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers above on app (call once from create_app)."""
    app.add_exception_handler(RealmAdminException, _handle_realm_admin_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation)
    app.add_exception_handler(StarletteHTTPException, _handle_http_error)
    app.add_exception_handler(Exception, _handle_unexpected)
