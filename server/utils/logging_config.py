import logging

import config

LOGGER_NAME = "clients"

def _configured_level():
    # getLevelName maps known names to ints; anything else falls back to INFO
    level = logging.getLevelName(config.LOG_LEVEL)
    return level if isinstance(level, int) else logging.INFO

def setup_logging(level=None):
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        fmt = logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s")
        handler.setFormatter(fmt)
        logger.addHandler(handler)
    logger.setLevel(level if level is not None else _configured_level())
    return logger
