import logging
from typing import Optional

# Package logger; every module logs through a child of it.
# Handlers belong to the application embedding the package.
logger = logging.getLogger("collection_driver")
logger.addHandler(logging.NullHandler())

_LEVELS = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
}


def set_log_level(level: Optional[str]) -> None:
    """Set the package logging level from a config name such as 'info'."""
    log_level = _LEVELS.get(level.upper()) if isinstance(level, str) else None
    if log_level is None:
        logger.warning(f"Unknown log level {level!r}, keeping {logging.getLevelName(logger.level)}")
        return
    logger.setLevel(log_level)
