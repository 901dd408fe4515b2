#!/usr/bin/env python3
"""Run the StackIt API under uvicorn."""

import sys

import logfire
import uvicorn

from stackit.config import Settings
from stackit.util.logging import setup_logging
from stackit.util.observability import configure_logfire

APP_PATH = "stackit.interface.api.app:app"


def main() -> int:
    settings = Settings()

    # Both must be in place before the app module is imported by uvicorn
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting StackIt API",
        host=settings.host,
        port=settings.port,
        environment=settings.environment,
    )
    try:
        uvicorn.run(
            APP_PATH,
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception:
        logfire.exception("StackIt API failed to start")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
