import re
from logging import Logger

from config.constants import LENGTH_PATTERN
from models.validators import validate_url
from utils.logging import get_logger

logger: Logger = get_logger(component="parse")


# Lenient parsing for source feed attributes: bad input degrades to None
def parse_length(text: str | None) -> int | None:
    if text is None:
        return None

    if not re.fullmatch(LENGTH_PATTERN, text):
        logger.debug(msg=f"Dropping non-numeric length: {text!r}")
        return None

    return int(text)


def parse_url(text: str | None) -> str | None:
    if text is None:
        return None

    try:
        return validate_url(text)
    except ValueError as e:
        logger.debug(msg=f"Dropping invalid URL {text!r}: {e}")
        return None
