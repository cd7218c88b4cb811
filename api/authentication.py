"""
Custom exception handling for the API.

This module makes sure authentication failures and domain errors escaping a
view both come back with the proper HTTP status codes.
"""

from django.contrib.auth.models import AnonymousUser
from rest_framework import status
from rest_framework.exceptions import NotAuthenticated, PermissionDenied
from rest_framework.views import exception_handler

from api.errors import error_response
from campaigns.exceptions import TabletopError


def custom_exception_handler(exc, context):
    """
    Custom exception handler that returns appropriate HTTP status codes:
    - Domain errors -> their mapped status (see ``api.errors``)
    - Anonymous user + PermissionDenied (not CSRF) -> 401 Unauthorized
    - CSRF failures -> 403 Forbidden
    - Everything else -> original status code
    """
    if isinstance(exc, TabletopError):
        return error_response(exc)

    response = exception_handler(exc, context)

    if response is not None:
        request = context.get("request")

        if request is not None:
            user = getattr(request, "user", None)

            if isinstance(exc, PermissionDenied):
                is_csrf_failure = "csrf" in str(exc).lower()
                if user and isinstance(user, AnonymousUser) and not is_csrf_failure:
                    response.status_code = status.HTTP_401_UNAUTHORIZED

            elif isinstance(exc, NotAuthenticated):
                response.status_code = status.HTTP_401_UNAUTHORIZED

    return response
