"""Password hashing and JWT creation/verification for authentication."""

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt

from catalog_api.core.errors import InvalidToken, TokenExpired
from catalog_api.models.user import Role
from catalog_api.schemas.auth import TokenClaims

if TYPE_CHECKING:
    from catalog_api.core.config import Settings

# Tokens are valid for exactly one hour after issuance; there is no refresh or revocation.
ACCESS_TOKEN_TTL = timedelta(hours=1)

# bcrypt only looks at the first 72 bytes of the secret.
BCRYPT_MAX_BYTES = 72

REQUIRED_CLAIMS = ["id", "role", "iat", "exp"]


def hash_password(plain_password: str, rounds: int) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(
    user_id: int,
    role: Role | str,
    settings: "Settings",
    now: datetime | None = None,
) -> str:
    """Create a JWT access token carrying id, role, iat and exp (iat + 1 hour)."""
    issued_at = now or datetime.now(UTC)
    payload: dict[str, Any] = {
        "id": user_id,
        "role": Role(role).value,
        "iat": issued_at,
        "exp": issued_at + ACCESS_TOKEN_TTL,
    }
    return jwt.encode(
        payload,
        settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str, settings: "Settings") -> TokenClaims:
    """
    Verify signature and expiry; return the embedded id and role.
    Raises TokenExpired for an expired token and InvalidToken for anything else wrong.
    """
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET.get_secret_value(),
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise TokenExpired() from e
    except jwt.PyJWTError as e:
        raise InvalidToken() from e

    user_id = payload["id"]
    if not isinstance(user_id, int) or isinstance(user_id, bool):
        raise InvalidToken("Invalid token payload")
    try:
        role = Role(payload["role"])
    except ValueError as e:
        raise InvalidToken("Invalid token payload") from e
    return TokenClaims(id=user_id, role=role)
