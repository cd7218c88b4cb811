"""
Centralized error messages for consistent API responses.

This module provides a single source of truth for messages produced by the
API layer itself. Domain errors carry their own detail text.
"""


class ErrorMessages:
    """Centralized error messages for consistent API responses."""

    # Validation messages
    VALIDATION_ERROR = "Validation error."

    # Server-side failures
    SERVER_ERROR = "An error occurred processing your request."
