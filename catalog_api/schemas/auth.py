"""Request/response schemas for registration, login and token claims."""

from pydantic import BaseModel, Field

from catalog_api.models.user import Role


class RegisterRequest(BaseModel):
    """New account details. Role is always 'user' at registration."""

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: str = Field(..., min_length=1, max_length=255, description="Login email")
    password: str = Field(..., min_length=1, description="Password")


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str = Field(..., min_length=1, max_length=255, description="Login email")
    password: str = Field(..., min_length=1, description="Password")


class UserPublic(BaseModel):
    """User as exposed over the API (no password digest)."""

    id: int
    name: str
    email: str
    role: Role

    model_config = {"from_attributes": True}


class RegisterResponse(BaseModel):
    message: str
    user: UserPublic


class LoginResponse(BaseModel):
    """Bearer token plus the public user fields. Send as: Authorization: Bearer <token>"""

    message: str
    token: str = Field(..., description="JWT access token, valid for one hour")
    user: UserPublic


class TokenClaims(BaseModel):
    """Identity decoded from a verified token; attached to the request for handlers."""

    id: int
    role: Role
