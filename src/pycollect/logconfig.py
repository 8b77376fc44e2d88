import logging
import os
from typing import Optional

TRACE = 5

logging.addLevelName(TRACE, "TRACE")

LOGGER_NAME = "pycollect"

DEFAULT_FORMAT = (
    "%(asctime)s %(levelname)s [%(name)s.%(funcName)s:%(lineno)d] - %(message)s"
)

_installed_handler: Optional[logging.Handler] = None


def get_level() -> str:
    """Get the default logging level for pycollect."""
    return os.getenv("PYCOLLECT_LOGGING_LEVEL", "WARNING")


def get_handler(
    level: Optional[str] = None, fmt: str = DEFAULT_FORMAT
) -> logging.Handler:
    """Get the default logging handler for pycollect.

    Log records are discarded unless `PYCOLLECT_USE_DEV_LOGGER` is set to `true`,
    in which case they are written to stderr."""
    handler = (
        logging.StreamHandler()
        if os.getenv("PYCOLLECT_USE_DEV_LOGGER", "").lower() == "true"
        else logging.NullHandler()
    )
    handler.setFormatter(logging.Formatter(fmt))
    handler.setLevel(level or get_level())
    return handler


def configure_root_logger(
    level: Optional[str] = None, fmt: str = DEFAULT_FORMAT
) -> logging.Logger:
    """Configure the pycollect root logger.

    Importing pycollect never calls this. Applications which want pycollect's
    default logging should call it (or `pycollect.main.init`) themselves.
    Repeated calls replace the handler installed by the previous call."""
    global _installed_handler

    level = level or get_level()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if _installed_handler is not None:
        logger.removeHandler(_installed_handler)
    _installed_handler = get_handler(level=level, fmt=fmt)
    logger.addHandler(_installed_handler)
    return logger
