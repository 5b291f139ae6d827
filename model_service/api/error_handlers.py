"""Error Handlers: global exception handlers funnelling into the error translator.

Invariants:
    - ModelServiceError -> envelope for its kind
    - RequestValidationError -> VALIDATION_ERROR for field violations,
      INVALID_JSON when the body cannot be read as the expected object
    - Starlette HTTPException (unknown route, wrong method) -> NOT_FOUND or BAD_REQUEST
      with the exception's headers (e.g. Allow on a wrong method) kept
    - Exception (catch-all) -> UNEXPECTED_ERROR, never leaks internal details

Design Decisions:
    - Every handler builds its response through core.errors.translate()
    - Trace id read from request.state and passed explicitly to the translator
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from model_service.core.errors import (
    ErrorKind, FieldViolation, InvalidArgumentError, MalformedPayloadError,
    ModelServiceError, ResourceNotFoundError, ValidationFailedError, translate,
)
from model_service.schemas.model import FIELD_REQUIRED_ERROR

logger = logging.getLogger(__name__)

FIELD_CONSTRAINT_ERRORS = frozenset({FIELD_REQUIRED_ERROR})


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def request_trace_id(request: Request) -> str | None:
    return getattr(request.state, "trace_id", None)


def error_response(
    request: Request, exc: BaseException, headers: dict[str, str] | None = None,
) -> JSONResponse:
    envelope = translate(exc, request.url.path, request_trace_id(request))
    return JSONResponse(
        status_code=envelope.status, content=envelope.to_response(),
        headers=headers,
    )


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ModelServiceError)
    async def domain_error_handler(request: Request, exc: ModelServiceError):
        """Handle typed service/infrastructure errors."""
        if exc.kind is ErrorKind.UNEXPECTED:
            logger.error(
                f"{type(exc).__name__}: {exc.message}",
                extra={"path": request.url.path, "trace_id": request_trace_id(request)},
                exc_info=exc,
            )
        else:
            logger.warning(
                f"{type(exc).__name__}: {exc.message}",
                extra={"error_code": exc.kind.value, "path": request.url.path},
            )
        return error_response(request, exc)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return error_response(request, to_domain_error(exc))


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Handle routing-level HTTP errors raised by Starlette."""
        return error_response(
            request, _from_http_exception(request, exc), headers=exc.headers,
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            extra={"path": request.url.path, "trace_id": request_trace_id(request)},
            exc_info=exc,
        )
        return error_response(request, exc)


def to_domain_error(exc: RequestValidationError) -> ModelServiceError:
    """Classify request validation errors into the service taxonomy."""
    violations = []
    for error in exc.errors():
        location, *field_path = error["loc"] or ("body",)
        if location == "body" and error["type"] not in FIELD_CONSTRAINT_ERRORS:
            return MalformedPayloadError()
        field = ".".join(str(part) for part in field_path) or str(location)
        violations.append(FieldViolation(field, error["msg"]))
    return ValidationFailedError(violations)


def _from_http_exception(
    request: Request, exc: StarletteHTTPException,
) -> Exception:
    if exc.status_code == 404:
        return ResourceNotFoundError(
            f"No handler found for {request.method} {request.url.path}.",
        )
    if 400 <= exc.status_code < 500:
        return InvalidArgumentError(str(exc.detail))
    return exc
