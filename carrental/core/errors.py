"""Application errors: each carries a name, message, optional details and HTTP status."""

from typing import Any

from fastapi import status


class ApplicationError(Exception):
    """Base class for errors that map to a structured JSON error response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Any = None, name: str | None = None) -> None:
        self.name = name or type(self).__name__
        self.message = message
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": {
                "name": self.name,
                "message": self.message,
                "details": self.details,
            }
        }


class EmailNotRegisteredError(ApplicationError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, email: str) -> None:
        super().__init__(f"{email} is not registered!", details={"email": email})


class WrongPasswordError(ApplicationError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self) -> None:
        super().__init__("Password is not correct!")


class EmailAlreadyTakenError(ApplicationError):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY

    def __init__(self, email: str) -> None:
        super().__init__(f"{email} is already taken!", details={"email": email})


class RecordNotFoundError(ApplicationError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, model_name: str) -> None:
        super().__init__(f"{model_name} not found!", details={"model": model_name})


class InsufficientAccessError(ApplicationError):
    """Token is valid but its role does not grant access to the route."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, role_name: str | None) -> None:
        super().__init__(
            "Access forbidden!",
            details={"role": role_name, "reason": f"{role_name} is not allowed to perform this operation."},
        )


class InvalidTokenError(ApplicationError):
    """Bearer token is missing, malformed, badly signed or expired.

    name is the underlying PyJWT error class (e.g. DecodeError, ExpiredSignatureError).
    """

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message, name=name)


class RoleNotConfiguredError(ApplicationError):
    """A role required by the application is missing from the roles table."""

    def __init__(self, role_name: str) -> None:
        super().__init__(
            f"Role {role_name} is not configured.",
            details={"role": role_name},
        )
