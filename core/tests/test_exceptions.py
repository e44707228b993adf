from django.test import SimpleTestCase
from rest_framework import exceptions as drf_exceptions

from core.errors import (
    CapacityExceeded,
    Conflict,
    ConstraintViolation,
    Forbidden,
    NotFound,
    StoreError,
    ValidationError,
)
from core.exceptions import custom_exception_handler


class ExceptionHandlerTest(SimpleTestCase):
    context = {"view": None}

    def handle(self, exc):
        return custom_exception_handler(exc, self.context)

    def test_domain_errors_map_to_status_codes(self):
        cases = [
            (ValidationError(errors={"title": ["required"]}), 400),
            (NotFound("Project not found"), 404),
            (Forbidden(), 403),
            (Conflict(), 409),
            (CapacityExceeded(), 400),
        ]
        for exc, expected in cases:
            response = self.handle(exc)
            self.assertEqual(response.status_code, expected, type(exc).__name__)
            self.assertFalse(response.data["success"])
            self.assertEqual(response.data["status_code"], expected)
            self.assertEqual(response.data["message"], exc.message)

    def test_validation_errors_are_passed_through(self):
        response = self.handle(ValidationError(errors={"content": ["Message content cannot be empty."]}))
        self.assertEqual(response.data["errors"], {"content": ["Message content cannot be empty."]})

    def test_store_errors_do_not_leak_details(self):
        for exc in (StoreError("connection refused on 10.0.0.5"), ConstraintViolation("duplicate key")):
            with self.assertLogs("shramdaan.api", level="ERROR"):
                response = self.handle(exc)
            self.assertEqual(response.status_code, 500)
            self.assertEqual(response.data["message"], "Internal server error.")
            self.assertNotIn("10.0.0.5", str(response.data))

    def test_drf_exceptions_are_wrapped(self):
        response = self.handle(drf_exceptions.NotAuthenticated())

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.data["status_code"], 401)
        self.assertEqual(response.data["message"], "Authentication credentials were not provided.")

    def test_unknown_exceptions_become_500(self):
        with self.assertLogs("shramdaan.api", level="ERROR"):
            response = self.handle(RuntimeError("kaboom"))

        self.assertEqual(response.status_code, 500)
        self.assertNotIn("kaboom", str(response.data))
