"""
Run the API server:

  python -m catalog_api

Binds to HOST:PORT from settings (defaults 0.0.0.0:5000).
"""

import logging
import sys

import uvicorn

from catalog_api.core.config import get_settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()
    logger.info("Starting Catalog API on http://%s:%s", settings.HOST, settings.PORT)
    uvicorn.run(
        "catalog_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.APP_ENV == "dev" and settings.DEBUG,
        log_config=None,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
