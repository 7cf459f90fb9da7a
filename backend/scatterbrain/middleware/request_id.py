"""
Scatter-Brain Backend — Request ID Middleware
==============================================

What:  Assigns a correlation ID to each request and echoes it in the response.
How:   Reuses the client's X-Request-ID when it is a short token of safe
       characters, otherwise generates an 8-character hex id; the id is
       kept in a ContextVar and in request.state.
Who:   Applied to every request via Starlette middleware.

The error handlers in main.py put the same id into every error body, so a
client reporting a failure can quote it and it matches the access log line.
Client ids are echoed into headers, logs and JSON, so anything longer than
64 characters or outside [A-Za-z0-9._:-] is replaced rather than trusted.
"""

import logging
import re
import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

# Coroutine-local: concurrent requests on one event loop each see their own id.
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-ID"

_SAFE_REQUEST_ID = re.compile(r"[A-Za-z0-9._:-]{1,64}")


def generate_request_id() -> str:
    """Return a fresh 8-character hex id."""
    return uuid.uuid4().hex[:8]


def resolve_request_id(supplied: Optional[str]) -> str:
    """Use the client's id when it is safe to echo, otherwise a fresh one."""
    if supplied and _SAFE_REQUEST_ID.fullmatch(supplied):
        return supplied
    rid = generate_request_id()
    if supplied:
        logger.debug("Replaced unusable %s header with %s", REQUEST_ID_HEADER, rid)
    return rid


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Binds a correlation id to the request for its whole lifetime."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        # Left set after the call: the outermost 500 handler still reads it.
        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
