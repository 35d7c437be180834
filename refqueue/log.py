import logging
from typing import Optional

import colorlog

from config.settings import Settings, get_settings

LOGGER_NAME = "refqueue"

LOG_FORMAT = "[%(asctime)s] [%(levelname)-8s] [%(name)s] %(message)s"
LOG_COLORS = {
    'DEBUG':    'cyan',
    'INFO':     'green',
    'WARNING':  'yellow',
    'ERROR':    'red',
    'CRITICAL': 'red,bg_white',
}


def build_formatter(colors: bool) -> logging.Formatter:
    if not colors:
        return logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")

    return colorlog.ColoredFormatter(
        "%(log_color)s" + LOG_FORMAT,
        datefmt="%H:%M:%S",
        reset=True,
        log_colors=LOG_COLORS,
        secondary_log_colors={},
        style='%'
    )


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Set up the package logger from settings.

    Safe to call repeatedly: the level is refreshed,
    but only one handler is ever attached.
    """
    settings = settings or get_settings()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.LOG_LEVEL)

    # Prevent duplicate handlers if re-imported
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(build_formatter(settings.LOG_COLORS))
        logger.addHandler(handler)

    return logger


def get_logger(component: str) -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAME}.{component}")
