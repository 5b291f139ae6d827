"""Request Middleware: trace id binding, auth gate, CORS registration.

Invariants:
    - Trace id bound per request on request.state and in trace_id_var, reset afterwards
    - Incoming trace header reused when present, otherwise a fresh uuid4 hex
    - Rejected requests get 401 with an empty body and never reach a route
    - CORS middleware registered only when at least one origin is configured

Design Decisions:
    - Middleware order (outermost first): trace id -> CORS -> auth gate;
      rejections carry a trace header, preflights bypass the gate
"""

import logging
import uuid

from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from model_service.config import Settings
from model_service.core import auth_gate
from model_service.infrastructure.observability import trace_id_var

logger = logging.getLogger(__name__)

API_KEY_PRINCIPAL = "api-key"
CORS_ALLOWED_METHODS = ["GET", "POST", "DELETE"]


class TraceIdMiddleware(BaseHTTPMiddleware):
    """Bind a correlation id to the request for logging and error envelopes."""

    def __init__(self, app, header_name: str = "X-Trace-Id"):
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next):
        trace_id = request.headers.get(self.header_name) or uuid.uuid4().hex
        request.state.trace_id = trace_id
        token = trace_id_var.set(trace_id)
        try:
            response = await call_next(request)
        finally:
            trace_id_var.reset(token)
        response.headers[self.header_name] = trace_id
        return response


class ApiKeyAuthMiddleware(BaseHTTPMiddleware):
    """Apply the shared-secret auth decision before routing."""

    def __init__(self, app, api_key: str, header_name: str):
        super().__init__(app)
        self.api_key = api_key
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next):
        decision = auth_gate.decide(
            self.api_key, self.header_name, request.url.path, request.headers,
        )
        if not decision.allowed:
            logger.warning(
                f"Rejected unauthenticated {request.method} {request.url.path}",
                extra={"path": request.url.path, "status_code": 401},
            )
            return Response(status_code=status.HTTP_401_UNAUTHORIZED)
        if decision is auth_gate.AuthDecision.AUTHENTICATED:
            request.state.principal = API_KEY_PRINCIPAL
        return await call_next(request)


def register_middleware(app: FastAPI, settings: Settings) -> None:
    """Register middleware innermost first (Starlette wraps in reverse)."""
    if auth_gate.is_enabled(settings.api_key):
        app.add_middleware(
            ApiKeyAuthMiddleware,
            api_key=settings.api_key,
            header_name=settings.api_key_header,
        )
        logger.info(f"API key auth enabled on header {settings.api_key_header}")

    origins = settings.cors_origins
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_methods=CORS_ALLOWED_METHODS,
            allow_headers=["*"],
        )

    app.add_middleware(TraceIdMiddleware, header_name=settings.trace_id_header)
