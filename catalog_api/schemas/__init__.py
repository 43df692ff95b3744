"""Pydantic request/response schemas."""

from catalog_api.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    TokenClaims,
    UserPublic,
)
from catalog_api.schemas.health import HealthResponse
from catalog_api.schemas.products import ProductIn, ProductOut, ProductResponse
from catalog_api.schemas.users import RoleUpdateRequest, RoleUpdateResponse

__all__ = [
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "ProductIn",
    "ProductOut",
    "ProductResponse",
    "RegisterRequest",
    "RegisterResponse",
    "RoleUpdateRequest",
    "RoleUpdateResponse",
    "TokenClaims",
    "UserPublic",
]
