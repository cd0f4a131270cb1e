from logging import Formatter, Logger, StreamHandler
import logging
from typing import TextIO

from config.constants import DEFAULT_LOGGER_NAME

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(component: str) -> Logger:
    """Library loggers all hang below DEFAULT_LOGGER_NAME."""
    return logging.getLogger(name=f"{DEFAULT_LOGGER_NAME}.{component}")


def setup_logger(
    level: int | str = logging.INFO,
    stream: TextIO | None = None,
) -> Logger:
    """
    Attach a console handler to the library root logger.

    Args:
        level: threshold for the root logger and its handler
        stream: where records go, stderr when not given
    """
    logger: Logger = logging.getLogger(name=DEFAULT_LOGGER_NAME)
    logger.setLevel(level)

    # Calling twice must not duplicate output
    logger.handlers.clear()

    console_handler: StreamHandler[TextIO] = logging.StreamHandler(stream=stream)
    console_handler.setLevel(level)
    console_handler.setFormatter(fmt=Formatter(fmt=LOG_FORMAT))
    logger.addHandler(hdlr=console_handler)

    return logger
