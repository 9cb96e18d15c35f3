"""Authentication controller: login, registration, current user and role checks."""

import logging
from typing import Any

import jwt
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from carrental.core.errors import (
    EmailAlreadyTakenError,
    EmailNotRegisteredError,
    InsufficientAccessError,
    InvalidTokenError,
    RecordNotFoundError,
    RoleNotConfiguredError,
    WrongPasswordError,
)
from carrental.core.security import PasswordHasher, TokenCodec
from carrental.models import Role, RoleName, User
from carrental.schemas.auth import (
    RoleResponse,
    SessionClaims,
    TokenResponse,
    UserResponse,
)
from carrental.services.stores import RoleStore, UserStore

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


class AuthenticationController:
    """
    Sequences the user/role stores, the password hasher and the token codec.

    Every failure is raised as an ApplicationError subclass; the HTTP layer maps
    it to a status code and the {"error": {...}} body.
    """

    access_control = RoleName

    def __init__(
        self,
        users: UserStore,
        roles: RoleStore,
        hasher: PasswordHasher,
        codec: TokenCodec,
    ) -> None:
        self.users = users
        self.roles = roles
        self.hasher = hasher
        self.codec = codec

    def authorize(self, authorization: str | None, role_name: str | None = None) -> SessionClaims:
        """
        Validate an Authorization header and return the token's claims.

        With role_name set, the token's role must match it exactly; otherwise
        any valid token is accepted.
        """
        token = _bearer_token(authorization)
        payload = self.decode_token(token)
        try:
            claims = SessionClaims.model_validate(payload)
        except ValidationError as e:
            raise InvalidTokenError("InvalidClaimsError", "Token payload is missing user claims") from e

        if role_name and role_name != claims.role.name:
            logger.info(
                "Access denied: user_id=%s role=%s required=%s",
                claims.id,
                claims.role.name,
                role_name,
            )
            raise InsufficientAccessError(claims.role.name)
        return claims

    def handle_login(self, email: str, password: str) -> TokenResponse:
        email = email.lower()
        user = self.users.find_by_email(email, with_role=True)
        if user is None:
            logger.warning("Login failed: email not registered")
            raise EmailNotRegisteredError(email)

        if not self.verify_password(password, user.encrypted_password):
            logger.warning("Login failed: wrong password for user_id=%s", user.id)
            raise WrongPasswordError()

        return TokenResponse(access_token=self.create_token_from_user(user, user.role))

    def handle_register(self, name: str, email: str, password: str) -> TokenResponse:
        email = email.lower()
        if self.users.find_by_email(email) is not None:
            raise EmailAlreadyTakenError(email)

        role = self.roles.find_by_name(self.access_control.CUSTOMER)
        if role is None:
            logger.error("Registration failed: role %s is missing", self.access_control.CUSTOMER)
            raise RoleNotConfiguredError(self.access_control.CUSTOMER)

        try:
            user = self.users.create(
                name=name,
                email=email,
                encrypted_password=self.encrypt_password(password),
                role_id=role.id,
            )
        except IntegrityError as e:
            # Another request registered the same email between check and insert.
            raise EmailAlreadyTakenError(email) from e

        logger.info("Registered user_id=%s", user.id)
        return TokenResponse(access_token=self.create_token_from_user(user, role))

    def handle_get_user(self, claims: SessionClaims) -> UserResponse:
        user = self.users.find_by_id(claims.id)
        if user is None:
            raise RecordNotFoundError(self.users.model_name)

        role = self.roles.find_by_id(user.role_id)
        if role is None:
            raise RecordNotFoundError(self.roles.model_name)

        return UserResponse(
            id=user.id,
            name=user.name,
            email=user.email,
            image=user.image,
            role_id=user.role_id,
            role=RoleResponse(id=role.id, name=role.name),
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def create_token_from_user(self, user: User, role: Role) -> str:
        return self.codec.sign(
            {
                "id": user.id,
                "name": user.name,
                "email": user.email,
                "image": user.image,
                "role": {
                    "id": role.id,
                    "name": role.name,
                },
            }
        )

    def decode_token(self, token: str) -> dict[str, Any]:
        """Verify token; PyJWT failures become InvalidTokenError named after the PyJWT error."""
        try:
            return self.codec.verify(token)
        except jwt.PyJWTError as e:
            raise InvalidTokenError(type(e).__name__, str(e) or "Invalid token") from e

    def encrypt_password(self, password: str) -> str:
        return self.hasher.hash(password)

    def verify_password(self, password: str, encrypted_password: str) -> bool:
        return self.hasher.verify(password, encrypted_password)


def _bearer_token(authorization: str | None) -> str:
    """Extract <token> from 'Bearer <token>'."""
    scheme, _, token = (authorization or "").strip().partition(" ")
    if scheme.lower() != BEARER_SCHEME or not token.strip():
        raise InvalidTokenError("DecodeError", "Authorization header must be 'Bearer <token>'")
    return token.strip()
