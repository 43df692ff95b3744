"""Registration, login and the auth dependencies (get_current_user, require_admin)."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog_api.core.config import Settings, get_settings
from catalog_api.core.database import get_db
from catalog_api.core.errors import (
    Forbidden,
    InvalidCredential,
    StoreFailure,
    Unauthenticated,
    UnknownAccount,
)
from catalog_api.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from catalog_api.models.user import Role, User
from catalog_api.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    TokenClaims,
    UserPublic,
)

logger = logging.getLogger(__name__)
router = APIRouter()
security = HTTPBearer(auto_error=False)


@router.post("/register", response_model=RegisterResponse)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> RegisterResponse:
    """
    Create an account with role 'user'.

    Emails are unique at the store; a duplicate is reported as a generic server error.
    """
    user = User(
        name=body.name,
        email=body.email,
        password=hash_password(body.password, settings.BCRYPT_ROUNDS),
        role=Role.USER,
    )
    try:
        db.add(user)
        db.commit()
        db.refresh(user)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Registration failed")
        raise StoreFailure() from e
    logger.info("Registered user id=%s", user.id)
    return RegisterResponse(
        message="User registered successfully",
        user=UserPublic.model_validate(user),
    )


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> LoginResponse:
    """
    Authenticate with email and password; returns a JWT valid for one hour.
    Include the token in the Authorization header as: Bearer <token>
    """
    try:
        user = db.query(User).filter(User.email == body.email).first()
    except SQLAlchemyError as e:
        logger.exception("Login lookup failed")
        raise StoreFailure() from e
    if user is None:
        raise UnknownAccount()
    if not verify_password(body.password, user.password):
        raise InvalidCredential()

    token = create_access_token(user.id, user.role, settings)
    logger.info("User id=%s logged in", user.id)
    return LoginResponse(
        message="Logged in successfully",
        token=token,
        user=UserPublic.model_validate(user),
    )


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> TokenClaims:
    """
    Dependency: require a valid Bearer JWT and return its claims.

    The claims are trusted as issued; the user is not re-read from the database,
    so a role change only takes effect once older tokens expire.
    """
    if credentials is None:
        raise Unauthenticated()
    return decode_access_token(credentials.credentials, settings)


def require_admin(
    current_user: Annotated[TokenClaims, Depends(get_current_user)],
) -> TokenClaims:
    """Dependency: require a token with role 'admin'. Raises 403 otherwise."""
    if current_user.role != Role.ADMIN:
        raise Forbidden()
    return current_user
