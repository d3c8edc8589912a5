#!/usr/bin/env python
"""
Run the Creative Marketplace API with uvicorn
"""
import logging
import sys

import uvicorn

from creative_marketplace.api_server import app
from creative_marketplace.config import config
from creative_marketplace.db import init_db, test_connection

logger = logging.getLogger(__name__)


if __name__ == "__main__":
    logger.info("=" * 50)
    logger.info(f"Environment: {config.ENV}")
    logger.info(f"DATABASE_URL: {'SET' if config.DATABASE_URL else 'NOT SET (database features disabled)'}")
    if config.DATABASE_URL and not test_connection():
        logger.warning("Database connection test failed - continuing without a working database")
    elif config.DATABASE_URL and config.is_dev:
        init_db()

    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(line_buffering=True)

    logger.info(f"Starting Creative Marketplace API on port {config.PORT}")
    logger.info(f"Health check endpoint: http://0.0.0.0:{config.PORT}/health")
    logger.info("=" * 50)

    uvicorn.run(
        app,
        host="0.0.0.0",
        port=config.PORT,
        log_config=None,
        access_log=True,
    )
