import sys
from typing import Optional

from loguru import logger as loguru_logger

from smart_parking.config.settings_env import settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[component]}</cyan> - <level>{message}</level>"
)


def initialize_logger(dev_mode: Optional[bool] = None, sink=None):
    """Reset loguru sinks: TRACE to stderr (or ``sink``) in dev mode, INFO otherwise."""
    if dev_mode is None:
        dev_mode = settings.DEV_MODE
    if sink is None:
        sink = sys.stderr

    loguru_logger.remove()
    loguru_logger.configure(extra={"component": "parking"})
    loguru_logger.add(sink, level="TRACE" if dev_mode else "INFO", format=LOG_FORMAT)

    return loguru_logger


def get_logger(component: str):
    return loguru_logger.bind(component=component)


# Initialize logger
logger = initialize_logger()
