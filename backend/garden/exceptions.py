"""
Community Garden Backend — Custom Exception Hierarchy
======================================================

What:  Application-specific exceptions for the few failure modes that exist.
Why:   Lets the global handlers in main.py map failures to status codes
       without any try/except in services or routes.
How:   Each exception carries a message and an optional context dict.
Who:   Raised by repositories; caught only by the global handlers.

Exception Hierarchy:
    GardenError (base)
    ├── PlotNotFoundError → 404 Not Found
    └── StoreError        → 500 Internal Server Error

Propagation:
    Repositories raise. Services and routes never catch or translate;
    errors surface unchanged to the global handlers.
"""

from typing import Any, Dict, Optional


class GardenError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Human-readable error description
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


class PlotNotFoundError(GardenError):
    """
    Raised when a plot id has no row.

    When:    PlotUpdate for an unknown id, or the edit form for one.
    HTTP:    404 Not Found
    """

    def __init__(self, plot_id: int):
        self.plot_id = plot_id
        super().__init__(
            message=f"Plot {plot_id} does not exist",
            context={"plot_id": plot_id},
        )


class StoreError(GardenError):
    """
    Raised when a database operation fails.

    When:    Connection unavailable, connection lost mid-query, or a
             constraint violation (e.g. duplicate username/email).
    HTTP:    500 Internal Server Error

    The client always receives a generic message; the driver error is
    kept in `context` for server-side logging only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
