"""
Run the Washlava API server.

Usage:
    python -m washlava

The store connection is established in the startup hook, before uvicorn
starts listening. If it fails the process exits with status 1. SIGINT and
SIGTERM trigger uvicorn's graceful shutdown, which closes the connection.
"""

import logging
import sys

from uvicorn import Config, Server

from washlava.core.logging_config import setup_logging
from washlava.core.setting import get_settings
from washlava.main import create_app

logger = logging.getLogger("washlava")


def main() -> None:
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)

    app = create_app(settings)
    config = Config(
        app=app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        log_config=None,
    )
    server = Server(config)
    server.run()

    if not server.started:
        logger.error("Startup failed: could not connect to the document store")
        sys.exit(1)


if __name__ == "__main__":
    main()
