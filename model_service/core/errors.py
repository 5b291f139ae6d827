"""Error Taxonomy & Translator: typed failures and the single client-facing error envelope.

Invariants:
    - Every failure carries exactly one ErrorKind (6 kinds, closed set)
    - translate() is total: anything without a kind resolves to UNEXPECTED
    - UNEXPECTED and MALFORMED_PAYLOAD use fixed messages (cause never leaked)
    - Envelope traceId falls back to "unknown" when no trace id is bound
    - CONFLICT maps to 400/BAD_REQUEST, not 409

Design Decisions:
    - Kind as a discriminant on the exception, looked up once in TRANSLATIONS
    - Pure module: no FastAPI/Starlette imports, trace id passed in explicitly
"""

from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus


UNKNOWN_TRACE_ID = "unknown"
INVALID_JSON_MESSAGE = "Invalid JSON body."
UNEXPECTED_MESSAGE = "Unexpected error."


class ErrorKind(str, Enum):
    """Failure kinds recognized at the API boundary."""
    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    VALIDATION_FAILED = "validation_failed"
    MALFORMED_PAYLOAD = "malformed_payload"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class FieldViolation:
    """One field-level validation failure."""
    field: str
    reason: str

    def format(self) -> str:
        return f"{self.field}: {self.reason}"


class ModelServiceError(Exception):
    """Base exception for all typed Model Service failures."""

    kind: ErrorKind = ErrorKind.UNEXPECTED

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidArgumentError(ModelServiceError):
    """Caller input violates a precondition (missing id, absent payload)."""
    kind = ErrorKind.INVALID_ARGUMENT


class ResourceNotFoundError(ModelServiceError):
    """Referenced resource does not exist."""
    kind = ErrorKind.NOT_FOUND


class ConflictError(ModelServiceError):
    """Create collides with an existing id."""
    kind = ErrorKind.CONFLICT


class ValidationFailedError(ModelServiceError):
    """Payload failed field-level validation before reaching the service."""
    kind = ErrorKind.VALIDATION_FAILED

    def __init__(self, violations: list[FieldViolation]):
        super().__init__("; ".join(v.format() for v in violations))
        self.violations = list(violations)


class MalformedPayloadError(ModelServiceError):
    """Request body could not be parsed into the expected shape."""
    kind = ErrorKind.MALFORMED_PAYLOAD

    def __init__(self, message: str = INVALID_JSON_MESSAGE):
        super().__init__(message)


# ─── Infrastructure Errors (500-level) ──────────────────────────

class RepositoryError(ModelServiceError):
    """Backing store operation failed."""
    kind = ErrorKind.UNEXPECTED

    def __init__(self, message: str, operation: str):
        super().__init__(f"Repository {operation} failed: {message}")
        self.operation = operation


# ─── Translation ────────────────────────────────────────────────

@dataclass(frozen=True)
class Translation:
    status: HTTPStatus
    code: str
    fixed_message: str | None = None


TRANSLATIONS: dict[ErrorKind, Translation] = {
    ErrorKind.INVALID_ARGUMENT: Translation(HTTPStatus.BAD_REQUEST, "BAD_REQUEST"),
    ErrorKind.NOT_FOUND: Translation(HTTPStatus.NOT_FOUND, "NOT_FOUND"),
    ErrorKind.CONFLICT: Translation(HTTPStatus.BAD_REQUEST, "BAD_REQUEST"),
    ErrorKind.VALIDATION_FAILED: Translation(
        HTTPStatus.BAD_REQUEST, "VALIDATION_ERROR",
    ),
    ErrorKind.MALFORMED_PAYLOAD: Translation(
        HTTPStatus.BAD_REQUEST, "INVALID_JSON", INVALID_JSON_MESSAGE,
    ),
    ErrorKind.UNEXPECTED: Translation(
        HTTPStatus.INTERNAL_SERVER_ERROR, "UNEXPECTED_ERROR", UNEXPECTED_MESSAGE,
    ),
}


@dataclass(frozen=True)
class ErrorEnvelope:
    """Client-facing error shape. Built per failed request, never persisted."""
    status: int
    error: str
    code: str
    message: str
    path: str
    trace_id: str

    def to_response(self) -> dict:
        return {
            "status": self.status,
            "error": self.error,
            "code": self.code,
            "message": self.message,
            "path": self.path,
            "traceId": self.trace_id,
        }


def classify(exc: BaseException) -> ErrorKind:
    """Resolve the failure kind of any exception."""
    kind = getattr(exc, "kind", None)
    if isinstance(kind, ErrorKind):
        return kind
    return ErrorKind.UNEXPECTED


def translate(
    exc: BaseException, path: str, trace_id: str | None = None,
) -> ErrorEnvelope:
    """Translate any exception into the error envelope."""
    kind = classify(exc)
    translation = TRANSLATIONS[kind]
    message = translation.fixed_message
    if message is None:
        message = getattr(exc, "message", None) or str(exc)
    return ErrorEnvelope(
        status=translation.status.value,
        error=translation.status.phrase,
        code=translation.code,
        message=message,
        path=path,
        trace_id=trace_id or UNKNOWN_TRACE_ID,
    )
