"""
Seed the jobs table from a CSV export.

Safe to run more than once: rows are upserted by id.

Run this script from the project root:
    python seed.py                  # reads SEED_CSV_PATH
    python seed.py path/to/Job.csv
"""

import logging
import os
import sys

# Add app to Python path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from app.core.config import settings
from app.core.database import SessionLocal, close_db
from app.core.logging_config import setup_logging
from app.services.seed import seed_jobs

logger = logging.getLogger("seed")


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    csv_path = argv[0] if argv else settings.SEED_CSV_PATH

    setup_logging(log_level=settings.LOG_LEVEL, json_logs=settings.JSON_LOGS)
    logger.info(f"Starting database seed from {csv_path}")

    db = SessionLocal()
    try:
        seed_jobs(db, csv_path)
        logger.info("Database seeded successfully")
        return 0
    except Exception as e:
        logger.error(f"Error seeding database: {e}", exc_info=True)
        return 1
    finally:
        db.close()
        close_db()


if __name__ == "__main__":
    sys.exit(main())
