#!/usr/bin/env python3
"""
Standalone database initialization script
Creates the DailyDiet tables in the database named by DATABASE_URL
"""

import sys
import logging
from pathlib import Path

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("dailydiet.init_db")


def main() -> int:
    """Create tables and report what exists afterwards"""
    from sqlalchemy import inspect

    from domain.models import engine, init_database

    try:
        init_database()
    except Exception as e:
        logger.exception(f"Failed to initialize database: {e}")
        return 1

    tables = inspect(engine).get_table_names()
    logger.info(f"Database ready with {len(tables)} tables: {', '.join(tables)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
