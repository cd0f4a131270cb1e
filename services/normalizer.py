from logging import Logger

from config.constants import (
    ATOM_REL_ALTERNATE,
    ATOM_REL_ENCLOSURE,
    ATOM_REL_HUB,
    ATOM_REL_SELF,
    JSONFEED_VERSION_URL,
)
from models.atom import AtomEntry, AtomFeed, AtomLink, AtomPerson
from models.feed import (
    JsonFeedAuthor,
    JsonFeedHub,
    JsonFeedItem,
    JsonFeedItemAttachment,
    JsonFeedTopLevel,
)
from models.rss import RssCloud, RssFeed, RssImage, RssItem
from models.source import Feed
from utils.html import is_likely_html_fragment
from utils.logging import get_logger
from utils.parse import parse_length, parse_url

logger: Logger = get_logger(component="normalizer")


def normalize(feed: Feed) -> JsonFeedTopLevel:
    """
    Convert a parsed Atom, RSS or JSON feed into a JSON Feed 1.1 document.

    Never fails on bad feed data: fields that cannot be mapped are left out.
    A JSON feed is returned as is.
    """
    if isinstance(feed, JsonFeedTopLevel):
        return feed
    if isinstance(feed, AtomFeed):
        return normalize_atom(feed)
    if isinstance(feed, RssFeed):
        return normalize_rss(feed)

    raise TypeError(f"Unsupported feed type: {type(feed).__name__}")


# Atom


def generate_atom_attachment(link: AtomLink) -> JsonFeedItemAttachment:
    return JsonFeedItemAttachment(
        url=parse_url(link.href),
        mime_type=link.type,
        size_in_bytes=parse_length(link.length),
    )


def generate_atom_item(
    entry: AtomEntry, feed_authors: list[AtomPerson] | None
) -> JsonFeedItem:
    """Map one entry. Authors come from the feed level, never from the entry."""
    authors: list[JsonFeedAuthor] | None = None
    if feed_authors is not None:
        authors = [
            JsonFeedAuthor(name=author.name, url=parse_url(author.uri))
            for author in feed_authors
        ]

    attachments: list[JsonFeedItemAttachment] = [
        generate_atom_attachment(link)
        for link in entry.links or []
        if link.rel == ATOM_REL_ENCLOSURE
    ]

    return JsonFeedItem(
        id=entry.id,
        title=entry.title,
        summary=entry.summary.value if entry.summary else None,
        date_published=entry.published,
        authors=authors,
        attachments=attachments or None,
    )


def normalize_atom(atom_feed: AtomFeed) -> JsonFeedTopLevel:
    home_page_url: str | None = None
    feed_url: str | None = None
    hubs: list[JsonFeedHub] = []

    for link in atom_feed.links or []:
        url: str | None = parse_url(link.href)
        if not url:
            continue

        if link.rel is None or link.rel == ATOM_REL_ALTERNATE:
            home_page_url = url
        elif link.rel == ATOM_REL_SELF:
            feed_url = url
        elif link.rel == ATOM_REL_HUB:
            hubs.append(JsonFeedHub(url=url))

    items: list[JsonFeedItem] = [
        generate_atom_item(entry, feed_authors=atom_feed.authors)
        for entry in atom_feed.entries or []
    ]

    logger.debug(msg=f"{atom_feed.title} - normalized {len(items)} Atom entries")

    return JsonFeedTopLevel(
        version=JSONFEED_VERSION_URL,
        title=atom_feed.title,
        description=atom_feed.subtitle.value if atom_feed.subtitle else None,
        home_page_url=home_page_url,
        feed_url=feed_url,
        hubs=hubs or None,
        items=items or None,
    )


# RSS


def generate_cloud_hub(cloud: RssCloud) -> JsonFeedHub:
    """Hub URL is domain[:port][path], concatenated as is without a scheme."""
    url_parts: list[str] = [cloud.domain or ""]

    if cloud.port is not None:
        url_parts.append(f":{cloud.port}")
    if cloud.path is not None:
        url_parts.append(cloud.path)

    return JsonFeedHub(
        type=cloud.protocol_specification, url=parse_url("".join(url_parts))
    )


def get_icon_url(image: RssImage | None) -> str | None:
    # Only square images with known dimensions make a usable icon
    if not image or image.width is None or image.height is None:
        return None
    if image.width != image.height:
        logger.debug(msg=f"Skipping non-square image {image.width}x{image.height}")
        return None

    return parse_url(image.url)


def generate_rss_item(item: RssItem) -> JsonFeedItem:
    content_html: str | None = None
    content_text: str | None = None

    # Only one of the two content fields is ever set
    if item.description is not None:
        description: str = item.description.strip()
        if is_likely_html_fragment(description):
            content_html = description
        else:
            content_text = description

    attachments: list[JsonFeedItemAttachment] | None = None
    if item.enclosure is not None:
        attachments = [
            JsonFeedItemAttachment(
                url=parse_url(item.enclosure.url),
                mime_type=item.enclosure.type,
                size_in_bytes=parse_length(item.enclosure.length),
            )
        ]

    tags: list[str] | None = None
    if item.categories is not None:
        tags = [
            category.value
            for category in item.categories
            if category.value is not None
        ]

    authors: list[JsonFeedAuthor] | None = None
    if item.author is not None:
        authors = [JsonFeedAuthor(name=item.author)]

    return JsonFeedItem(
        id=item.guid.value if item.guid else None,
        url=parse_url(item.link),
        title=item.title,
        content_html=content_html,
        content_text=content_text,
        date_published=item.pub_date,
        authors=authors,
        attachments=attachments,
        tags=tags,
    )


def normalize_rss(rss_feed: RssFeed) -> JsonFeedTopLevel:
    hubs: list[JsonFeedHub] | None = None
    if rss_feed.cloud and rss_feed.cloud.domain is not None:
        hubs = [generate_cloud_hub(rss_feed.cloud)]

    authors: list[JsonFeedAuthor] = []
    if rss_feed.web_master is not None:
        authors.append(JsonFeedAuthor(name=rss_feed.web_master))
    if rss_feed.managing_editor is not None:
        authors.append(JsonFeedAuthor(name=rss_feed.managing_editor))

    items: list[JsonFeedItem] = [
        generate_rss_item(item) for item in rss_feed.items or []
    ]

    logger.debug(msg=f"{rss_feed.title} - normalized {len(items)} RSS items")

    return JsonFeedTopLevel(
        version=JSONFEED_VERSION_URL,
        title=rss_feed.title,
        description=rss_feed.description,
        home_page_url=parse_url(rss_feed.link),
        language=rss_feed.language,
        icon=get_icon_url(rss_feed.image),
        authors=authors or None,
        hubs=hubs,
        items=items or None,
    )
