from typing import TypeAlias

from models.atom import AtomFeed
from models.feed import JsonFeedTopLevel
from models.rss import RssFeed

# Any feed the normalizer accepts, exactly one of the three formats
Feed: TypeAlias = AtomFeed | RssFeed | JsonFeedTopLevel
