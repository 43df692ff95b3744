"""ORM model for application users (auth and RBAC)."""

import enum

from sqlalchemy import Column, Enum, Integer, String

from catalog_api.models.base import Base


class Role(str, enum.Enum):
    """Closed set of roles. Anything else is rejected at the boundary."""

    USER = "user"
    ADMIN = "admin"


class User(Base):
    """
    User account for JWT authentication and role-based access control.

    password holds the bcrypt digest, never the plain text.
    role: 'admin' or 'user'; a CHECK constraint keeps other values out of the table.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    role = Column(
        Enum(
            Role,
            name="user_role",
            native_enum=False,
            length=32,
            values_callable=lambda roles: [r.value for r in roles],
            validate_strings=True,
            create_constraint=True,
        ),
        nullable=False,
        default=Role.USER,
    )
