"""
Create a user (e.g. the first admin; /register only creates 'user' accounts). Run from project root:
  python -m catalog_api.scripts.create_user NAME EMAIL PASSWORD [role]
Example:
  python -m catalog_api.scripts.create_user Admin admin@example.com your-secure-password admin
"""
import argparse
import sys

from catalog_api.core.config import get_settings
from catalog_api.core.database import SessionLocal
from catalog_api.core.security import hash_password
from catalog_api.models.user import Role, User


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Catalog API user.")
    parser.add_argument("name", help="Display name (1-255 chars)")
    parser.add_argument("email", help="Login email (1-255 chars)")
    parser.add_argument("password", help="Password")
    parser.add_argument(
        "role",
        nargs="?",
        default=Role.USER.value,
        choices=[r.value for r in Role],
    )
    args = parser.parse_args(argv)

    name = args.name.strip()
    email = args.email.strip()
    if not name or len(name) > 255 or not email or len(email) > 255:
        print("Name and email must be 1-255 characters.", file=sys.stderr)
        return 1
    if not args.password:
        print("Password must not be empty.", file=sys.stderr)
        return 1

    settings = get_settings()
    db = SessionLocal()
    try:
        existing = db.query(User).filter(User.email == email).first()
        if existing:
            print(f"User with email '{email}' already exists.", file=sys.stderr)
            return 1
        user = User(
            name=name,
            email=email,
            password=hash_password(args.password, settings.BCRYPT_ROUNDS),
            role=Role(args.role),
        )
        db.add(user)
        db.commit()
        print(f"Created user '{email}' with role '{args.role}'.")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
