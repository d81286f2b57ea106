"""
Logging setup for the BookWise service.

Handlers are attached to the ``bookwise_api`` package logger rather
than the root logger, so uvicorn and test runners keep their own
configuration while catalogue operations (sign-ups, rejected edits,
cascading deletes) are still written to the console and, when
``LOG_FILE`` is set, to a file.  ``DEBUG=true`` lowers the level to
``DEBUG`` whatever ``LOG_LEVEL`` says.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import Settings, settings as default_settings

PACKAGE_LOGGER = "bookwise_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Name given to every handler attached here; used to find them again.
_HANDLER_NAME = "bookwise"


def resolve_level(config: Settings) -> int:
    """Numeric level for ``config``; unknown names fall back to ``INFO``."""
    if config.debug:
        return logging.DEBUG
    level = logging.getLevelName(config.log_level.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(config: Optional[Settings] = None) -> logging.Logger:
    """Configure and return the package logger.

    Calling it again (every ``create_app`` does) replaces the handlers
    added by the previous call, so a changed ``log_file`` takes effect
    without duplicating console output.
    """
    config = config or default_settings
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in [h for h in logger.handlers if h.get_name() == _HANDLER_NAME]:
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(resolve_level(config))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if config.log_file:
        handlers.append(logging.FileHandler(Path(config.log_file).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(
        "Logging configured for %s %s (level %s)",
        config.project_name,
        config.api_version,
        logging.getLevelName(logger.level),
    )
    return logger
