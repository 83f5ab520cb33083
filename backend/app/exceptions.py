"""
Inkpost Backend — Custom Exception Hierarchy
==============================================

What:  Defines application-specific exceptions for the three failure kinds
       a post request can end in.
Why:   Callers and tests branch on an explicit ErrorKind instead of parsing
       message text; global handlers map each kind to one HTTP status.
How:   Each exception carries a kind, a message and an optional context dict.
       Handlers registered in main.py turn them into `{"error": message}`.
Who:   Raised by PostService; caught by the global handlers.
When:  During request processing.

Exception Hierarchy:
    InkpostError (base)
    ├── ValidationError   → 400 Bad Request (client can fix)
    ├── NotFoundError     → 404 Not Found
    └── StoreError        → 500 Internal Server Error (store message passed through)
"""

import enum
from typing import Any, Dict, Optional


class ErrorKind(str, enum.Enum):
    """Closed set of failure kinds surfaced by the post API."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    STORE_FAILURE = "store_failure"


class InkpostError(Exception):
    """
    Base exception for all Inkpost application errors.

    Attributes:
        kind:     ErrorKind used by handlers to pick the status code
        message:  Text returned to the client as the `error` field
        context:  Additional debug info (logged, never returned)
    """

    kind: ErrorKind = ErrorKind.STORE_FAILURE

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(InkpostError):
    """
    Raised when a post payload is missing a required field.

    HTTP:    400 Bad Request
    Message: fixed, so clients can match on it.
    """

    kind = ErrorKind.VALIDATION

    def __init__(
        self,
        message: str = "Title, content, and category are required",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(InkpostError):
    """
    Raised when no post exists for the requested identifier.

    The store returns None for a missing row; PostService converts that
    into this exception so the route never deals with None.
    """

    kind = ErrorKind.NOT_FOUND

    def __init__(
        self,
        resource: str = "Post",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)


class StoreError(InkpostError):
    """
    Raised when a store operation fails for any reason other than not-found.

    What:    Connection loss, malformed identifier, constraint violation, etc.
    HTTP:    500 Internal Server Error
    Message: the underlying error's text, verbatim.
    """

    kind = ErrorKind.STORE_FAILURE

    def __init__(
        self,
        message: str = "A store error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
