"""Auth Gate: per-request shared-secret decision.

Invariants:
    - Blank/unset secret -> DISABLED, every request proceeds, no header checked
    - Secret set -> PUBLIC_PATHS bypass, everything else needs an exact
      (case-sensitive) header value match or is REJECTED
    - Decision is per request, nothing is remembered between requests

Design Decisions:
    - Pure function over a header mapping: the Starlette middleware in
      api/middleware.py only applies the decision
    - "/**" suffix matches the prefix itself and anything below it
"""

import hmac
from enum import Enum
from typing import Mapping

DEFAULT_API_KEY_HEADER = "X-API-Key"

PUBLIC_PATHS: tuple[str, ...] = (
    "/",
    "/actuator/health",
    "/actuator/info",
    "/actuator/metrics",
    "/docs/**",
    "/redoc/**",
    "/openapi.json",
    "/admin/**",
)


class AuthDecision(str, Enum):
    DISABLED = "disabled"
    PUBLIC = "public"
    AUTHENTICATED = "authenticated"
    REJECTED = "rejected"

    @property
    def allowed(self) -> bool:
        return self is not AuthDecision.REJECTED


def is_public_path(path: str, patterns: tuple[str, ...] = PUBLIC_PATHS) -> bool:
    for pattern in patterns:
        if pattern.endswith("/**"):
            prefix = pattern[:-3]
            if path == prefix or path.startswith(prefix + "/"):
                return True
        elif path == pattern:
            return True
    return False


def is_enabled(secret: str | None) -> bool:
    return bool(secret and secret.strip())


def decide(
    secret: str | None,
    header_name: str | None,
    path: str,
    headers: Mapping[str, str],
) -> AuthDecision:
    """Decide whether a request may proceed."""
    if not is_enabled(secret):
        return AuthDecision.DISABLED
    if is_public_path(path):
        return AuthDecision.PUBLIC
    provided = headers.get(header_name or DEFAULT_API_KEY_HEADER)
    if provided is None:
        return AuthDecision.REJECTED
    if not hmac.compare_digest(provided.encode(), secret.encode()):
        return AuthDecision.REJECTED
    return AuthDecision.AUTHENTICATED
