from datetime import datetime, timezone

from models.atom import AtomEntry, AtomFeed, AtomLink, AtomPerson, AtomText
from models.feed import JsonFeedAuthor, JsonFeedHub, JsonFeedItemAttachment
from services.normalizer import normalize


def _atom_feed(**kwargs) -> AtomFeed:
    return AtomFeed(
        title="Example Atom",
        subtitle=AtomText(value="All the news", type="text"),
        **kwargs,
    )


def test_feed_fields_and_version() -> None:
    json_feed = normalize(_atom_feed())

    assert json_feed.version == "https://jsonfeed.org/version/1.1"
    assert json_feed.title == "Example Atom"
    assert json_feed.description == "All the news"


def test_links_map_by_relation() -> None:
    links = [
        AtomLink(href="https://example.com/"),
        AtomLink(rel="self", href="https://example.com/atom.xml"),
        AtomLink(rel="hub", href="https://hub.example.com/"),
        AtomLink(rel="alternate", href="https://example.com/blog"),
        AtomLink(rel="hub", href="https://other-hub.example.com/"),
        AtomLink(rel="related", href="https://unrelated.example.com/"),
    ]

    json_feed = normalize(_atom_feed(links=links))

    # last alternate wins
    assert json_feed.home_page_url == "https://example.com/blog"
    assert json_feed.feed_url == "https://example.com/atom.xml"
    assert json_feed.hubs == [
        JsonFeedHub(url="https://hub.example.com/"),
        JsonFeedHub(url="https://other-hub.example.com/"),
    ]
    assert all(hub.type is None for hub in json_feed.hubs)


def test_invalid_link_href_is_skipped() -> None:
    links = [
        AtomLink(rel="alternate", href="https://example.com/"),
        AtomLink(rel="alternate", href="not a url"),
        AtomLink(rel="hub", href=""),
    ]

    json_feed = normalize(_atom_feed(links=links))

    assert json_feed.home_page_url == "https://example.com/"
    assert json_feed.hubs is None


def test_entries_are_appended_in_order() -> None:
    entries = [
        AtomEntry(id="urn:entry:1", title="first"),
        AtomEntry(id="urn:entry:2", title="second"),
    ]

    json_feed = normalize(_atom_feed(entries=entries))

    assert json_feed.items is not None
    assert [(item.id, item.title) for item in json_feed.items] == [
        ("urn:entry:1", "first"),
        ("urn:entry:2", "second"),
    ]


def test_summary_is_the_text_not_the_type() -> None:
    entry = AtomEntry(id="1", summary=AtomText(value="<b>Short</b>", type="html"))

    json_feed = normalize(_atom_feed(entries=[entry]))

    assert json_feed.items is not None
    assert json_feed.items[0].summary == "<b>Short</b>"


def test_published_becomes_date_published() -> None:
    published = datetime(2023, 12, 24, 8, 0, tzinfo=timezone.utc)

    json_feed = normalize(_atom_feed(entries=[AtomEntry(id="1", published=published)]))

    assert json_feed.items is not None
    assert json_feed.items[0].date_published == published


def test_feed_authors_are_copied_to_every_item() -> None:
    authors = [
        AtomPerson(name="Alice", uri="https://alice.example.com/"),
        AtomPerson(name="Bob", uri="not a uri"),
    ]
    entries = [
        AtomEntry(id="1", authors=[AtomPerson(name="Ignored")]),
        AtomEntry(id="2"),
    ]

    json_feed = normalize(_atom_feed(authors=authors, entries=entries))

    expected = [
        JsonFeedAuthor(name="Alice", url="https://alice.example.com/"),
        JsonFeedAuthor(name="Bob"),
    ]
    assert json_feed.items is not None
    assert [item.authors for item in json_feed.items] == [expected, expected]


def test_entry_authors_alone_are_not_read() -> None:
    entry = AtomEntry(id="1", authors=[AtomPerson(name="Entry author")])

    json_feed = normalize(_atom_feed(entries=[entry]))

    assert json_feed.items is not None
    assert json_feed.items[0].authors is None


def test_enclosure_links_become_attachments() -> None:
    links = [
        AtomLink(rel="alternate", href="https://example.com/post"),
        AtomLink(
            rel="enclosure",
            href="https://example.com/talk.mp3",
            type="audio/mpeg",
            length="12345",
        ),
        AtomLink(
            rel="enclosure",
            href="https://example.com/slides.pdf",
            type="application/pdf",
            length="unknown",
        ),
    ]

    json_feed = normalize(_atom_feed(entries=[AtomEntry(id="1", links=links)]))

    assert json_feed.items is not None
    assert json_feed.items[0].attachments == [
        JsonFeedItemAttachment(
            url="https://example.com/talk.mp3",
            mime_type="audio/mpeg",
            size_in_bytes=12345,
        ),
        JsonFeedItemAttachment(
            url="https://example.com/slides.pdf", mime_type="application/pdf"
        ),
    ]


def test_no_entries_stays_absent() -> None:
    assert normalize(_atom_feed()).items is None
    assert normalize(_atom_feed(entries=[])).items is None


def test_items_do_not_share_author_objects() -> None:
    authors = [AtomPerson(name="Alice")]
    entries = [AtomEntry(id="1"), AtomEntry(id="2")]

    json_feed = normalize(_atom_feed(authors=authors, entries=entries))

    assert json_feed.items is not None
    first, second = json_feed.items
    assert first.authors == second.authors
    assert first.authors is not second.authors
    assert first.authors[0] is not second.authors[0]
