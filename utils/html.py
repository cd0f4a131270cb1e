import re

from config.constants import HTML_TAG_PATTERN

HTML_TAG_RE: re.Pattern[str] = re.compile(HTML_TAG_PATTERN)


def is_likely_html_fragment(text: str) -> bool:
    """True if the text holds at least one plausible HTML tag anywhere."""
    if not text:
        return False

    return HTML_TAG_RE.search(text) is not None
