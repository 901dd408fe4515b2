"""Standard-library logging setup.

Application events go through logfire. This module only decides where the
records emitted through ``logging`` by uvicorn, SQLAlchemy and asyncpg end up.
"""

import logging
import sys

from stackit.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Libraries whose INFO output is noise outside debug mode
QUIET_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "asyncpg")


def setup_logging(settings: Settings) -> None:
    """Route ``logging`` records to stdout.

    Args:
        settings: Application settings; ``debug`` selects DEBUG over INFO
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logging.basicConfig(level=level, handlers=[handler], force=True)

    library_level = logging.INFO if settings.debug else logging.WARNING
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(library_level)

    logging.getLogger("stackit").setLevel(level)
    logging.getLogger(__name__).info(
        "Logging configured (environment=%s, level=%s)",
        settings.environment,
        logging.getLevelName(level),
    )
