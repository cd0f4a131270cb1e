JSONFEED_VERSION_URL = "https://jsonfeed.org/version/1.1"

# a tag: "<", then quoted runs or anything but quotes and ">", then ">"
HTML_TAG_PATTERN = r"<(\"[^\"]*\"|'[^']*'|[^'\">])*>"

ATOM_REL_ALTERNATE = "alternate"
ATOM_REL_SELF = "self"
ATOM_REL_HUB = "hub"
ATOM_REL_ENCLOSURE = "enclosure"

LENGTH_PATTERN = r"[+-]?[0-9]+"

# full-date part of an RFC 3339 date-time
RFC3339_DATE_PATTERN = r"[0-9]{4}-[0-9]{2}-[0-9]{2}"

# characters that may not appear unescaped anywhere in a URI reference
URL_FORBIDDEN_CHARS: set[str] = set(' "<>\\^`{|}')
URL_PERCENT_ESCAPE_PATTERN = r"%(?![0-9A-Fa-f]{2})"

DEFAULT_LOGGER_NAME = "feed_normalizer"
