"""
Create the users and products tables if they do not exist. Run from project root:

  python -m catalog_api.scripts.init_db

There are no migrations; existing tables are left untouched.
"""

import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from catalog_api.core.database import engine
from catalog_api.models import Base

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    """Create all tables known to Base.metadata."""
    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        logger.exception("Schema creation failed: %s", e)
        return 1
    logger.info("Tables ready: %s", ", ".join(sorted(Base.metadata.tables)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
