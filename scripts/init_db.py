import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from config import settings  # noqa: E402
from models import init_db  # noqa: E402
from models.migrations import upgrade_db  # noqa: E402

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Create the D2C Store catalog tables")
    parser.add_argument(
        "--migrate",
        action="store_true",
        default=False,
        help="Apply Alembic migrations instead of create_all",
    )
    args = parser.parse_args()

    if args.migrate:
        logger.info("Upgrading schema to head...")
        upgrade_db(database_url=settings.database_url)
    else:
        logger.info("Creating database tables...")
        init_db()
    logger.info("✅ Catalog schema ready")


if __name__ == "__main__":
    main()
