"""
Database initialization script.

Run this script to create the database tables for local development.
Production schemas are managed with ``alembic upgrade head``.

Usage:
    python scripts/init_db.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from app.core.errors import ConfigurationError
from app.db.init_db import init_db
from app.main import open_store

if __name__ == "__main__":
    print("=" * 50)
    print("Training Log Database Initialization")
    print("=" * 50)
    print()

    try:
        init_db(open_store())
        print()
        print("=" * 50)
        print("SUCCESS: Database initialized!")
        print("=" * 50)
        sys.exit(0)

    except ConfigurationError as e:
        print()
        print("=" * 50)
        print("ERROR: Database initialization failed!")
        print(f"Details: {e.reason}")
        print("=" * 50)
        sys.exit(1)
