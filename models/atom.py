"""
Parsed Atom feed tree, as handed over by an XML feed parser
See https://www.rfc-editor.org/rfc/rfc4287
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class _AtomModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class AtomText(_AtomModel):
    value: str | None = None
    type: str | None = None  # text, html or xhtml


class AtomLink(_AtomModel):
    rel: str | None = None
    href: str | None = None
    type: str | None = None
    hreflang: str | None = None
    title: str | None = None
    length: str | None = None


class AtomPerson(_AtomModel):
    name: str | None = None
    email: str | None = None
    uri: str | None = None


class AtomEntry(_AtomModel):
    id: str | None = None
    title: str | None = None
    summary: AtomText | None = None
    content: AtomText | None = None
    links: list[AtomLink] | None = None
    authors: list[AtomPerson] | None = None
    published: datetime | None = None
    updated: datetime | None = None


class AtomFeed(_AtomModel):
    id: str | None = None
    title: str | None = None
    subtitle: AtomText | None = None
    links: list[AtomLink] | None = None
    authors: list[AtomPerson] | None = None
    updated: datetime | None = None
    entries: list[AtomEntry] | None = None
