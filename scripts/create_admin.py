"""
Admin account creation script.

Public sign-up only offers the athlete and coach roles; admins are
created here, against the configured database.

Usage:
    python scripts/create_admin.py admin@example.com --name 관리자 --phone 010-0000-0000
"""

import argparse
import getpass
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from app.core.errors import AuthError, ConfigurationError, DataError
from app.db.init_db import init_db
from app.main import open_store
from app.models.user import UserRole
from app.services.auth_service import AuthService


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Create an admin account")
    parser.add_argument("email")
    parser.add_argument("--name", required=True)
    parser.add_argument("--phone", required=True)
    parser.add_argument("--password", help="prompted for when omitted")
    return parser.parse_args(argv)


if __name__ == "__main__":
    args = parse_args()
    password = args.password or getpass.getpass("Password: ")
    if len(password) < 6:
        print("ERROR: password must be at least 6 characters")
        sys.exit(1)

    print("=" * 50)
    print("Training Log Admin Account")
    print("=" * 50)
    print()

    try:
        store = open_store()
        init_db(store)
        with store.session() as session:
            profile = AuthService(session, store.feed).create_account(args.email, password, name=args.name,
                                                                      phone=args.phone, role=UserRole.ADMIN, )
            print(f"SUCCESS: admin {profile.email} created (id {profile.id})")
        store.dispose()
        sys.exit(0)

    except ConfigurationError as e:
        print(f"ERROR: backend is not configured: {e.reason}")
        sys.exit(1)

    except (AuthError, DataError) as e:
        print(f"ERROR: {e.message}")
        sys.exit(1)
