"""
Tests for the mapping of domain errors to HTTP responses.
"""

from django.test import SimpleTestCase
from rest_framework import status
from rest_framework.exceptions import NotAuthenticated

from api.authentication import custom_exception_handler
from api.errors import (
    ERROR_STATUS,
    APIError,
    error_response,
    handle_tabletop_errors,
    status_for,
)
from api.messages import ErrorMessages
from campaigns import exceptions as domain


class ErrorStatusMappingTest(SimpleTestCase):
    EXPECTED = {
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

    def test_every_error_class_has_a_status(self):
        self.assertEqual(set(ERROR_STATUS), set(self.EXPECTED))
        for klass, expected in self.EXPECTED.items():
            with self.subTest(error=klass.__name__):
                self.assertEqual(status_for(klass()), expected)

    def test_client_errors_carry_detail(self):
        response = error_response(domain.NotPermitted("Nope."))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data, {"detail": "Nope."})

    def test_default_detail(self):
        response = error_response(domain.InviteExpired())

        self.assertEqual(response.data, {"detail": "Invite expired."})

    def test_server_errors_hide_detail(self):
        response = error_response(domain.StoreError("constraint foo violated"))

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data, {"detail": ErrorMessages.SERVER_ERROR})

    def test_validation_error_shape(self):
        errors = {"name": ["Not a valid string."]}

        response = APIError.validation_error(errors)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            response.data,
            {"detail": ErrorMessages.VALIDATION_ERROR, "errors": errors},
        )

    def test_unmapped_subclass_falls_back_to_parent(self):
        class StaleScene(domain.NotFound):
            pass

        self.assertEqual(status_for(StaleScene()), status.HTTP_404_NOT_FOUND)

    def test_decorator_converts_domain_errors(self):
        @handle_tabletop_errors
        def view(request):
            raise domain.AlreadyExists("Character already in campaign.")

        response = view(None)

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(view.__name__, "view")

    def test_decorator_lets_other_errors_through(self):
        @handle_tabletop_errors
        def view(request):
            raise KeyError("boom")

        with self.assertRaises(KeyError):
            view(None)


class CustomExceptionHandlerTest(SimpleTestCase):
    def test_domain_errors_are_mapped(self):
        response = custom_exception_handler(domain.InviteNotFound(), {})

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_not_authenticated_is_401(self):
        response = custom_exception_handler(NotAuthenticated(), {"request": None})

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_unknown_exceptions_are_left_to_django(self):
        self.assertIsNone(custom_exception_handler(ValueError("x"), {}))
