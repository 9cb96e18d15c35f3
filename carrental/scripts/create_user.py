"""
Create a user (e.g. the first admin). Run from project root:
  python -m carrental.scripts.create_user NAME EMAIL PASSWORD [role]
Example:
  python -m carrental.scripts.create_user "Admin" admin@example.com your-secure-password ADMIN
"""
import argparse
import logging
import sys

from carrental.core.config import get_settings
from carrental.core.database import SessionLocal
from carrental.core.logging import configure_logging
from carrental.core.security import PasswordHasher
from carrental.models import RoleName
from carrental.services.stores import RoleStore, UserStore

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a car rental user.")
    parser.add_argument("name", help="Display name (1-255 chars)")
    parser.add_argument("email", help="Email address, stored lowercased")
    parser.add_argument("password", help="Password (1-128 chars)")
    parser.add_argument("role", nargs="?", default=RoleName.CUSTOMER, choices=list(RoleName.ALL))
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    name = args.name.strip()
    email = args.email.strip().lower()
    if not name or len(name) > 255:
        logger.error("Invalid name length.")
        return 1
    if "@" not in email or len(email) > 255:
        logger.error("Invalid email address.")
        return 1
    if not args.password or len(args.password) > 128:
        logger.error("Password must be 1-128 characters.")
        return 1

    db = SessionLocal()
    try:
        users = UserStore(db)
        if users.find_by_email(email) is not None:
            logger.error("User '%s' already exists.", email)
            return 1
        role = RoleStore(db).find_by_name(args.role)
        if role is None:
            logger.error("Role '%s' is not configured; run the migrations first.", args.role)
            return 1
        user = users.create(
            name=name,
            email=email,
            encrypted_password=PasswordHasher.from_settings(settings).hash(args.password),
            role_id=role.id,
        )
        logger.info("Created user '%s' (id=%s) with role '%s'.", email, user.id, role.name)
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
