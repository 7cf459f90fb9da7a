"""
Scatter-Brain Backend — Custom Exception Hierarchy
===================================================

What:  Application-specific exceptions for the two client-facing failure kinds.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return JSON error responses with the matching HTTP status code.
Who:   Raised by the identifier parser and the thought service.

Exception Hierarchy:
    ScatterBrainError (base)        → 500 Internal Server Error
    ├── BadRequestError             → 400 Bad Request
    │   └── MalformedIdentifierError  (path id is not a canonical UUID)
    └── NotFoundError               → 404 Not Found

Every handler is a terminal boundary: an exception raised while serving one
request is converted to a response for that request and goes no further.
"""

from typing import Any, Dict, Optional


class ScatterBrainError(Exception):
    """
    Base exception for all Scatter-Brain application errors.

    Attributes:
        message:  Client-facing error description (returned in the API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class BadRequestError(ScatterBrainError):
    """
    Raised when the client sent something that cannot be decoded.

    When:    Malformed JSON, a JSON value of the wrong shape, or a bad identifier.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "unable to parse the request",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class MalformedIdentifierError(BadRequestError):
    """
    Raised when a string is not a canonical thought identifier.

    Example:  GET /api/thoughts/not-a-uuid
    """

    def __init__(
        self,
        value: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["identifier"] = value
        super().__init__(message="unable to parse the identifier", context=ctx)
        self.value = value


class NotFoundError(ScatterBrainError):
    """
    Raised when a requested resource does not exist.

    When:    GET or PUT /api/thoughts/{id} with a well-formed but unknown id.
    HTTP:    404 Not Found

    The store answers "absent" with None; the service layer converts that
    into this exception so routes stay free of branching on lookups.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = "unable to locate resource"
        if resource_id:
            message = f"unable to locate {resource} '{resource_id}'"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
