"""
Database initialization script.

Run this script to create the practice log tables.

Usage:
    python scripts/init_db.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.db.init_db import init_db

if __name__ == "__main__":
    print("=" * 50)
    print("Golf Practice Log Database Initialization")
    print("=" * 50)

    try:
        init_db()
        print("SUCCESS: Database initialized!")
        sys.exit(0)

    except Exception as e:
        print(f"ERROR: Database initialization failed!")
        print(f"Details: {e}")
        sys.exit(1)
