"""Login, registration, current user and the authorize() dependency factory."""

from collections.abc import Callable
from typing import Annotated

from fastapi import APIRouter, Depends, Header, Request, status
from sqlalchemy.orm import Session

from carrental.core.config import Settings, get_settings
from carrental.core.database import get_db
from carrental.core.security import PasswordHasher, TokenCodec
from carrental.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    SessionClaims,
    TokenResponse,
    UserResponse,
)
from carrental.services.authentication import AuthenticationController
from carrental.services.stores import RoleStore, UserStore

router = APIRouter()


def get_authentication_controller(
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthenticationController:
    """Dependency: controller wired to this request's session and the configured hasher/codec."""
    return AuthenticationController(
        users=UserStore(db),
        roles=RoleStore(db),
        hasher=PasswordHasher.from_settings(settings),
        codec=TokenCodec.from_settings(settings),
    )


def authorize(role_name: str | None = None) -> Callable[..., SessionClaims]:
    """
    Build a dependency that requires a valid Bearer JWT, and the given role when set.
    Failures respond 401 with {"error": {name, message, details}}.
    The decoded claims are returned and stored on request.state.user.
    """

    def dependency(
        request: Request,
        controller: Annotated[AuthenticationController, Depends(get_authentication_controller)],
        authorization: Annotated[str | None, Header()] = None,
    ) -> SessionClaims:
        claims = controller.authorize(authorization, role_name)
        request.state.user = claims
        return claims

    return dependency


@router.post("/login", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def login(
    body: LoginRequest,
    controller: Annotated[AuthenticationController, Depends(get_authentication_controller)],
) -> TokenResponse:
    """
    Authenticate with email and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <accessToken>
    """
    return controller.handle_login(body.email, body.password)


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    controller: Annotated[AuthenticationController, Depends(get_authentication_controller)],
) -> TokenResponse:
    """Create a CUSTOMER account and return an access token for it."""
    return controller.handle_register(body.name, body.email, body.password)


@router.get("/user", response_model=UserResponse)
def get_user(
    claims: Annotated[SessionClaims, Depends(authorize())],
    controller: Annotated[AuthenticationController, Depends(get_authentication_controller)],
) -> UserResponse:
    """Return the authenticated user's record (without password digest)."""
    return controller.handle_get_user(claims)
