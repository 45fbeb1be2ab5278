"""
Database initialization script.

Creates the collection indexes and, when configured, the owner account.

Usage:
    python scripts/init_db.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pymongo.errors import PyMongoError

from app.core.config import settings
from app.core.errors import AppError
from app.core.logging import configure_logging
from app.db.init_db import init_db
from app.db.session import DocumentStore
from app.services.user_service import UserService

if __name__ == "__main__":
    configure_logging(settings.LOG_LEVEL)
    print("=" * 50)
    print("AMS Database Initialization")
    print("=" * 50)
    print()

    store = DocumentStore(settings.MONGODB_URI, settings.MONGODB_DB, timeout_ms=settings.MONGODB_TIMEOUT_MS)
    try:
        db = store.get_connection()
        init_db(db)
        if settings.OWNER_USERNAME and settings.OWNER_PASSWORD:
            _, created = UserService(db).init_owner()
            print(f"Owner account {'created' if created else 'already present'}")
        print()
        print("=" * 50)
        print("SUCCESS: Database initialized!")
        print("=" * 50)
        sys.exit(0)

    except (AppError, PyMongoError) as e:
        print()
        print("=" * 50)
        print("ERROR: Database initialization failed!")
        print(f"Details: {e}")
        print("=" * 50)
        sys.exit(1)
    finally:
        store.close()
