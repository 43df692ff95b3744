"""Error taxonomy for the API.

Every error carries the HTTP status it maps to; ``main.py`` registers a single
handler that renders any ``ApiError`` as ``{"detail": message}``.
"""

BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


class ApiError(Exception):
    """Base for errors surfaced to clients. Defaults to a generic 500."""

    status_code: int = 500
    default_message: str = "Internal server error"
    headers: dict[str, str] | None = None

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthenticated(ApiError):
    """No bearer token was presented."""

    status_code = 401
    default_message = "Not authenticated"
    headers = BEARER_CHALLENGE


class InvalidToken(ApiError):
    """Token signature, structure or claims are invalid."""

    status_code = 401
    default_message = "Invalid token"
    headers = BEARER_CHALLENGE


class TokenExpired(ApiError):
    status_code = 401
    default_message = "Token expired"
    headers = BEARER_CHALLENGE


class Forbidden(ApiError):
    """Authenticated, but the token's role is not allowed on this route."""

    status_code = 403
    default_message = "Admin access required"


class NotFound(ApiError):
    status_code = 404
    default_message = "Not found"


class UnknownAccount(NotFound):
    """Login with an email that has no account. Reported as 400, not 404."""

    status_code = 400
    default_message = "User not found"


class InvalidCredential(ApiError):
    status_code = 401
    default_message = "Invalid password"


class StoreFailure(ApiError):
    """Any database error. The cause is logged server-side, never returned."""
