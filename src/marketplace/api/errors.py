"""HTTP mapping for domain errors.

Protean's own handlers are registered first, then the marketplace mapping
is layered on top so every error class has a fixed status code:

    ValidationError      -> 400
    AuthenticationError  -> 401
    PermissionDenied     -> 403
    ObjectNotFoundError  -> 404
    ConflictError        -> 409
    ExpectedVersionError -> 409 (a concurrent write won)
    InvariantViolation   -> 500
    anything else        -> 500 with a generic message
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ExpectedVersionError, ObjectNotFoundError, ValidationError
from protean.integrations.fastapi import register_exception_handlers as register_protean_exception_handlers

from marketplace.shared.errors import (
    AuthenticationError,
    ConflictError,
    InvariantViolation,
    PermissionDenied,
)

logger = structlog.get_logger(__name__)


async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": exc.messages})


async def _not_found(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": exc.messages})


async def _conflict(request: Request, exc: ConflictError) -> JSONResponse:
    return JSONResponse(status_code=409, content={"error": exc.message})


async def _concurrent_update(request: Request, exc: ExpectedVersionError) -> JSONResponse:
    logger.warning("Concurrent update rejected", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=409, content={"error": "The resource was modified concurrently, please retry"})


async def _unauthenticated(request: Request, exc: AuthenticationError) -> JSONResponse:
    return JSONResponse(
        status_code=401,
        content={"error": exc.message},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def _forbidden(request: Request, exc: PermissionDenied) -> JSONResponse:
    return JSONResponse(status_code=403, content={"error": exc.message})


async def _invariant_violation(request: Request, exc: InvariantViolation) -> JSONResponse:
    logger.error("Invariant violated", path=request.url.path, error=exc.message, **exc.context)
    return JSONResponse(status_code=500, content={"error": "Internal error"})


async def _unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", path=request.url.path)
    return JSONResponse(status_code=500, content={"error": "An unexpected error occurred"})


def register_exception_handlers(app: FastAPI) -> None:
    register_protean_exception_handlers(app)

    app.add_exception_handler(ValidationError, _validation_error)
    app.add_exception_handler(ObjectNotFoundError, _not_found)
    app.add_exception_handler(ConflictError, _conflict)
    app.add_exception_handler(ExpectedVersionError, _concurrent_update)
    app.add_exception_handler(AuthenticationError, _unauthenticated)
    app.add_exception_handler(PermissionDenied, _forbidden)
    app.add_exception_handler(InvariantViolation, _invariant_violation)
    app.add_exception_handler(Exception, _unexpected)
