import logging
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Create a logger with the given name and level.

    Handlers are installed once on the ``chaingate`` root logger by
    ``LogConfig``; module loggers only propagate to it.
    """
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger
