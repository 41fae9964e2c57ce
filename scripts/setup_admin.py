import argparse
import getpass
import sys
from pathlib import Path

# Ensure repo root is on sys.path when running this script directly.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from sqlalchemy import select

from inventory_api.config import get_settings
from inventory_api.core.constants import ROLE_ADMIN
from inventory_api.core.logging import setup_logging
from inventory_api.database import SessionLocal, init_db
from inventory_api.models.user import User
from inventory_api.services.user_service import create_user


def parse_args():
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Create the first admin user.")
    parser.add_argument("--name", default=settings.ADMIN_NAME)
    parser.add_argument("--email", default=settings.ADMIN_EMAIL)
    parser.add_argument(
        "--password",
        default=settings.ADMIN_PASSWORD,
        help="Defaults to ADMIN_PASSWORD; prompted for when unset.",
    )
    return parser.parse_args()


def main():
    setup_logging()
    args = parse_args()
    init_db()

    db = SessionLocal()
    try:
        existing = db.execute(select(User).where(User.role == ROLE_ADMIN).limit(1)).scalars().first()
        if existing:
            print(f"Admin user already exists: {existing.email}")
            return

        password = args.password or getpass.getpass("Admin password: ")
        admin = create_user(
            db,
            name=args.name,
            email=args.email,
            password=password,
            role=ROLE_ADMIN,
        )
        print(f"First admin user created: {admin.email}")
        print("Change the password after first login.")
    finally:
        db.close()


if __name__ == "__main__":
    main()
