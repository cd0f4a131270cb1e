from logging import Logger

from pydantic import ValidationError

from models.exceptions import MalformedDocumentError
from models.feed import JsonFeedTopLevel
from utils.logging import get_logger

logger: Logger = get_logger(component="codec")


def encode(feed: JsonFeedTopLevel) -> bytes:
    """
    Serialize a feed as a JSON Feed 1.1 document.

    Absent fields are left out. The 1.0 "author" field is never written,
    authors always go out as the 1.1 "authors" array. Lone surrogates in
    Python-built text cannot be UTF-8 encoded and are written as "?".
    """
    return feed.model_dump_json(exclude_none=True).encode("utf-8", errors="replace")


def decode(data: bytes | str) -> JsonFeedTopLevel:
    """
    Parse a JSON Feed 1.0 or 1.1 document.

    A legacy "author" object, on the feed or on an item, replaces any
    "authors" array found next to it.

    Raises:
        MalformedDocumentError: data is not a JSON object, or a field holds
            a value of the wrong type
    """
    try:
        return JsonFeedTopLevel.model_validate_json(data)
    except ValidationError as e:
        logger.debug(msg=f"Rejecting JSON Feed document: {e}")
        raise MalformedDocumentError(
            f"Malformed JSON Feed document: {e.error_count()} error(s), "
            f"first at {_error_location(e)}: {e.errors()[0]['msg']}"
        ) from e


def _error_location(error: ValidationError) -> str:
    location: tuple[int | str, ...] = error.errors()[0]["loc"]
    return ".".join(str(part) for part in location) or "<root>"
