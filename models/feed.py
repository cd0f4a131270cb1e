"""
Canonical JSON Feed models, version 1.1
See https://jsonfeed.org/version/1.1
"""

from datetime import datetime
from typing import Annotated, Any, TypeAlias

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    PlainSerializer,
    StrictBool,
    StrictInt,
    StrictStr,
    model_validator,
)

from models.validators import validate_rfc3339_text, validate_url


def serialize_datetime_rfc3339(obj: datetime) -> str:
    return obj.isoformat(sep="T")


FeedUrl: TypeAlias = Annotated[StrictStr, AfterValidator(func=validate_url)]

Rfc3339DateTime: TypeAlias = Annotated[
    datetime,
    BeforeValidator(func=validate_rfc3339_text),
    PlainSerializer(func=serialize_datetime_rfc3339),
]


def fold_legacy_author(data: Any) -> Any:
    # JSON Feed 1.0 has a single "author" object, 1.1 replaced it with "authors"
    if isinstance(data, dict) and data.get("author") is not None:
        author: Any = data["author"]
        if not isinstance(author, dict | JsonFeedAuthor):
            raise ValueError(
                f"Legacy author should be an object, got {type(author).__name__}"
            )
        data = dict(data)
        data["authors"] = [data.pop("author")]
    return data


class _JsonFeedModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class JsonFeedAuthor(_JsonFeedModel):
    name: StrictStr | None = None
    url: FeedUrl | None = None
    avatar: FeedUrl | None = None


class JsonFeedHub(_JsonFeedModel):
    type: StrictStr | None = None
    url: FeedUrl | None = None


class JsonFeedItemAttachment(_JsonFeedModel):
    url: FeedUrl | None = None
    mime_type: StrictStr | None = None
    title: StrictStr | None = None
    size_in_bytes: StrictInt | None = None
    duration_in_seconds: StrictInt | None = None


class JsonFeedItem(_JsonFeedModel):
    id: StrictStr | None = None
    url: FeedUrl | None = None
    external_url: FeedUrl | None = None
    title: StrictStr | None = None
    content_html: StrictStr | None = None
    content_text: StrictStr | None = None
    summary: StrictStr | None = None
    image: FeedUrl | None = None
    banner_image: FeedUrl | None = None
    date_published: Rfc3339DateTime | None = None
    date_modified: Rfc3339DateTime | None = None
    authors: list[JsonFeedAuthor] | None = None
    tags: list[StrictStr] | None = None
    language: StrictStr | None = None
    attachments: list[JsonFeedItemAttachment] | None = None

    @model_validator(mode="before")
    @classmethod
    def merge_legacy_author(cls, data: Any) -> Any:
        return fold_legacy_author(data)


class JsonFeedTopLevel(_JsonFeedModel):
    version: StrictStr | None = None
    title: StrictStr | None = None
    home_page_url: FeedUrl | None = None
    feed_url: FeedUrl | None = None
    description: StrictStr | None = None
    user_comment: StrictStr | None = None
    next_url: FeedUrl | None = None
    icon: FeedUrl | None = None
    favicon: FeedUrl | None = None
    authors: list[JsonFeedAuthor] | None = None
    language: StrictStr | None = None
    expired: StrictBool | None = None
    hubs: list[JsonFeedHub] | None = None
    items: list[JsonFeedItem] | None = None

    @model_validator(mode="before")
    @classmethod
    def merge_legacy_author(cls, data: Any) -> Any:
        return fold_legacy_author(data)
