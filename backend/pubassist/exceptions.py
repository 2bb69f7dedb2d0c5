"""
Publication Assistant Backend - Custom Exception Hierarchy
===========================================================

What:  Application-specific exceptions for the failure kinds a resource
       controller can report.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) turn them into
       JSON error responses with the matching HTTP status code.
Who:   Raised by services; caught by the handlers in main.py.

Exception Hierarchy:
    PublicationAssistantError (base)   → 500 Internal Server Error
    ├── InvalidArgumentError           → 400 Bad Request
    ├── NotFoundError                  → 404 Not Found
    └── PreconditionFailedError        → 412 Precondition Failed

Store-level failures (sqlalchemy.exc.SQLAlchemyError) are not wrapped:
they propagate from the repository unchanged and are answered with a
generic 500 by their own handler.
"""

from typing import Any, Dict, Optional


class PublicationAssistantError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged and returned as `details`)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class InvalidArgumentError(PublicationAssistantError):
    """
    Raised when a request is missing required input.

    When:    POST/PATCH without a body, PATCH without an identifier.
    HTTP:    400 Bad Request

    Schema validation of a body that IS present stays with FastAPI (422).
    """

    def __init__(
        self,
        message: str = "Invalid argument",
        argument: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if argument:
            ctx["argument"] = argument
        super().__init__(message=message, context=ctx)
        self.argument = argument


class NotFoundError(PublicationAssistantError):
    """
    Raised when a lookup key matches no row.

    When:    GET /api/Journals/{id}, /ISSN/{issn}, /eISSN/{eissn} misses;
             PATCH for an identifier that is not stored.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        key: str = "ID",
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with {key} '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = str(resource_id)
        super().__init__(message=message, context=ctx)


class PreconditionFailedError(PublicationAssistantError):
    """
    Raised when a referenced parent entity cannot be resolved.

    When:    Creating/updating a Division whose institute_id does not exist,
             or an Institute whose faculty_id does not exist.
    HTTP:    412 Precondition Failed
    """

    def __init__(
        self,
        parent: str,
        parent_id: Any,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"Referenced {parent} with ID '{parent_id}' does not exist"
        ctx = context or {}
        ctx["parent"] = parent
        ctx["parent_id"] = str(parent_id)
        super().__init__(message=message, context=ctx)
