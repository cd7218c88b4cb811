"""
Standardized error handling utilities for the tabletop API views.

Domain errors raised by the services are translated here into a single
response shape, ``{"detail": "..."}``, with one HTTP status per error class.

Key Features:
- Consistent error response formats
- One status code per domain error class, resolved through the class MRO
- Reusable error response builders
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Dict, Type

from rest_framework import status
from rest_framework.response import Response

from api.messages import ErrorMessages
from campaigns import exceptions as domain

logger = logging.getLogger(__name__)


class APIError:
    """Standard API error response builder."""

    VALIDATION_ERROR = ErrorMessages.VALIDATION_ERROR

    @staticmethod
    def validation_error(errors: Dict[str, Any]) -> Response:
        """
        Return a 400 response carrying serializer field errors.

        Args:
            errors: Field name to list of messages, as produced by DRF.
        """
        return Response(
            {"detail": APIError.VALIDATION_ERROR, "errors": errors},
            status=status.HTTP_400_BAD_REQUEST,
        )


ERROR_STATUS: Dict[Type[domain.TabletopError], int] = {
    domain.NotFound: status.HTTP_404_NOT_FOUND,
    domain.InviteNotFound: status.HTTP_404_NOT_FOUND,
    domain.NotCampaignMember: status.HTTP_403_FORBIDDEN,
    domain.NotPermitted: status.HTTP_403_FORBIDDEN,
    domain.CharacterNotOwned: status.HTTP_403_FORBIDDEN,
    domain.InvalidState: status.HTTP_400_BAD_REQUEST,
    domain.AlreadyExists: status.HTTP_409_CONFLICT,
    domain.InviteExpired: status.HTTP_400_BAD_REQUEST,
    domain.InviteRedeemed: status.HTTP_400_BAD_REQUEST,
    domain.AlreadyMember: status.HTTP_400_BAD_REQUEST,
    domain.CouldNotGenerateCode: status.HTTP_500_INTERNAL_SERVER_ERROR,
    domain.StoreError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(exc: domain.TabletopError) -> int:
    """Return the HTTP status of a domain error, falling back to 500."""
    for klass in type(exc).__mro__:
        if klass in ERROR_STATUS:
            return ERROR_STATUS[klass]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(exc: domain.TabletopError) -> Response:
    """Build the standard response for a domain error."""
    code = status_for(exc)
    if code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("%s: %s", type(exc).__name__, exc.detail)
        return Response(
            {"detail": ErrorMessages.SERVER_ERROR}, status=code
        )
    logger.debug("%s -> %d: %s", type(exc).__name__, code, exc.detail)
    return Response({"detail": exc.detail}, status=code)


def handle_tabletop_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """
    Decorator converting domain errors raised by a view into responses.

    Apply beneath ``@api_view`` so the wrapped function still receives the
    DRF request object.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except domain.TabletopError as exc:
            return error_response(exc)

    return wrapper
