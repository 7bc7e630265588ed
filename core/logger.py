"""
Structured logger for the HealthInfoBot service.
"""
import logging
import sys

from core.config import LOG_LEVEL

ROOT_LOGGER_NAME = "healthinfobot"


def setup_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Create the service logger with a single stdout handler.
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    logger.setLevel(LOG_LEVEL)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(LOG_LEVEL)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | [%(name)s] | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)

    return logger


def get_logger(module: str) -> logging.Logger:
    """Child logger of the service logger, e.g. `healthinfobot.database.queries`."""
    return logger.getChild(module)


logger = setup_logger()
