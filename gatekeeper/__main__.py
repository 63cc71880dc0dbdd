"""
Bootstrap: create tables, then serve the API. Run from project root:

  python -m gatekeeper
"""

import logging
import sys

import uvicorn

from gatekeeper.core.config import get_settings
from gatekeeper.core.database import init_db


def main() -> int:
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    logger = logging.getLogger("gatekeeper")
    try:
        init_db()
    except Exception as e:
        logger.exception("Database initialisation failed: %s", e)
        return 1
    logger.info("Serving on %s:%s (env=%s)", settings.HOST, settings.PORT, settings.APP_ENV)
    uvicorn.run("gatekeeper.main:app", host=settings.HOST, port=settings.PORT, log_config=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
