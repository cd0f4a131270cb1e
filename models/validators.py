import re
from datetime import datetime
from typing import Any
from urllib.parse import SplitResult, urlsplit

from config.constants import (
    RFC3339_DATE_PATTERN,
    URL_FORBIDDEN_CHARS,
    URL_PERCENT_ESCAPE_PATTERN,
)


def validate_url(value: str) -> str:
    """Accept any RFC 3986 URI reference; a scheme is not required."""
    if not value:
        raise ValueError("Empty URL")

    if any(char in URL_FORBIDDEN_CHARS or not char.isprintable() for char in value):
        raise ValueError("Invalid character in URL")

    if re.search(URL_PERCENT_ESCAPE_PATTERN, value):
        raise ValueError("Invalid percent escape in URL")

    # urlsplit rejects malformed IPv6 hosts, .port rejects bad ports
    parts: SplitResult = urlsplit(value)
    if parts.netloc:
        _ = parts.port

    return value


def validate_rfc3339_text(value: Any) -> Any:
    """Dates on the wire are RFC 3339 strings, never Unix timestamps."""
    if isinstance(value, datetime):
        return value

    if not isinstance(value, str) or not re.match(RFC3339_DATE_PATTERN, value):
        raise ValueError("Date should be an RFC 3339 string")

    return value
