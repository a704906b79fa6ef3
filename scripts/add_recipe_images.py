#!/usr/bin/env python3
"""Back-fill photos for the sample catalog recipes.

Only seed recipes (no creator) without an image are touched.

Usage:
    python scripts/add_recipe_images.py
"""

import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tender.database import SessionLocal, init_db
from tender.services.catalog_seed import add_seed_images


def main():
    init_db()
    session = SessionLocal()
    try:
        updated = add_seed_images(session)
        print(f"Added images to {updated} recipes")
    except Exception as e:
        session.rollback()
        print(f"Error adding images: {e}")
        raise
    finally:
        session.close()


if __name__ == "__main__":
    main()
