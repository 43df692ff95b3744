"""Schemas for admin user management."""

from pydantic import BaseModel, Field

from catalog_api.models.user import Role
from catalog_api.schemas.auth import UserPublic


class RoleUpdateRequest(BaseModel):
    """New role for a user; must be one of the known roles."""

    role: Role = Field(..., description="'user' or 'admin'")


class RoleUpdateResponse(BaseModel):
    message: str
    user: UserPublic
