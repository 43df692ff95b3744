"""Admin-only user management: list users and change roles."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog_api.api.auth import require_admin
from catalog_api.core.database import get_db
from catalog_api.core.errors import NotFound, StoreFailure
from catalog_api.models import User
from catalog_api.schemas.auth import TokenClaims, UserPublic
from catalog_api.schemas.users import RoleUpdateRequest, RoleUpdateResponse

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=list[UserPublic])
def list_users(
    _admin: Annotated[TokenClaims, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> list[UserPublic]:
    """List all users without their password digests (admin only)."""
    try:
        users = db.query(User).order_by(User.id).all()
    except SQLAlchemyError as e:
        logger.exception("Listing users failed")
        raise StoreFailure() from e
    return [UserPublic.model_validate(u) for u in users]


@router.put("/{user_id}/role", response_model=RoleUpdateResponse)
def update_user_role(
    admin: Annotated[TokenClaims, Depends(require_admin)],
    user_id: int,
    body: RoleUpdateRequest,
    db: Annotated[Session, Depends(get_db)],
) -> RoleUpdateResponse:
    """
    Set a user's role (admin only).

    Tokens already issued to that user keep their old role until they expire.
    """
    try:
        user = db.get(User, user_id)
        if user is None:
            raise NotFound("User not found")
        user.role = body.role
        db.commit()
        db.refresh(user)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Updating role for user id=%s failed", user_id)
        raise StoreFailure() from e
    logger.info("User id=%s role set to %s by user id=%s", user.id, body.role.value, admin.id)
    return RoleUpdateResponse(message="Role updated", user=UserPublic.model_validate(user))
