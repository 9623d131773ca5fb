"""Translate domain and validation errors into structured API responses."""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from notifications.notification.notification import ForbiddenError
from protean.exceptions import ObjectNotFoundError, ValidationError

logger = structlog.get_logger(__name__)


def error_response(status_code: int, code: str, message: str, details=None) -> JSONResponse:
    body = {"error": {"code": code, "message": message}}
    if details:
        body["error"]["details"] = details
    return JSONResponse(status_code=status_code, content=body)


async def handle_not_found(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return error_response(404, "NOT_FOUND", "Notification not found")


async def handle_forbidden(request: Request, exc: ForbiddenError) -> JSONResponse:
    logger.warning("Forbidden request", path=request.url.path, error=str(exc))
    return error_response(403, "FORBIDDEN", str(exc))


async def handle_domain_validation(request: Request, exc: ValidationError) -> JSONResponse:
    return error_response(400, "VALIDATION_ERROR", "Validation failed", exc.messages)


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = {".".join(str(part) for part in err["loc"]): err["msg"] for err in exc.errors()}
    return error_response(400, "VALIDATION_ERROR", "Validation failed", details)


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", path=request.url.path, method=request.method)
    return error_response(500, "INTERNAL_ERROR", "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ObjectNotFoundError, handle_not_found)
    app.add_exception_handler(ForbiddenError, handle_forbidden)
    app.add_exception_handler(ValidationError, handle_domain_validation)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(Exception, handle_unexpected)
