"""Tests for the ApplicationError body shape."""

import unittest

from carrental.core.errors import EmailNotRegisteredError, InsufficientAccessError, WrongPasswordError


class TestErrorBody(unittest.TestCase):
    """ApplicationError.to_dict always yields {"error": {name, message, details}}."""

    def test_email_not_registered(self) -> None:
        body = EmailNotRegisteredError("a@x.com").to_dict()
        self.assertEqual(body["error"]["name"], "EmailNotRegisteredError")
        self.assertEqual(body["error"]["message"], "a@x.com is not registered!")
        self.assertEqual(body["error"]["details"], {"email": "a@x.com"})

    def test_details_default_to_none(self) -> None:
        self.assertIsNone(WrongPasswordError().to_dict()["error"]["details"])

    def test_insufficient_access_names_role(self) -> None:
        details = InsufficientAccessError("CUSTOMER").to_dict()["error"]["details"]
        self.assertEqual(details["role"], "CUSTOMER")
        self.assertEqual(details["reason"], "CUSTOMER is not allowed to perform this operation.")


if __name__ == "__main__":
    unittest.main()
