"""
Parsed RSS 2.0 channel tree, as handed over by an XML feed parser
See https://www.rssboard.org/rss-specification
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class _RssModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class RssCloud(_RssModel):
    domain: str | None = None
    port: int | None = None
    path: str | None = None
    register_procedure: str | None = None
    protocol_specification: str | None = None


class RssImage(_RssModel):
    url: str | None = None
    title: str | None = None
    link: str | None = None
    width: int | None = None
    height: int | None = None


class RssCategory(_RssModel):
    value: str | None = None
    domain: str | None = None


class RssEnclosure(_RssModel):
    url: str | None = None
    length: str | None = None
    type: str | None = None


class RssGuid(_RssModel):
    value: str | None = None
    is_perma_link: bool | None = None


class RssItem(_RssModel):
    title: str | None = None
    link: str | None = None
    description: str | None = None
    author: str | None = None
    categories: list[RssCategory] | None = None
    enclosure: RssEnclosure | None = None
    guid: RssGuid | None = None
    pub_date: datetime | None = None


class RssFeed(_RssModel):
    title: str | None = None
    link: str | None = None
    description: str | None = None
    language: str | None = None
    managing_editor: str | None = None
    web_master: str | None = None
    cloud: RssCloud | None = None
    image: RssImage | None = None
    items: list[RssItem] | None = None
