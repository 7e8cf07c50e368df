"""Domain models (Pydantic v2) for the payloads the service returns.

- These models describe *what* the service sends, not *how* it is fetched.
- Unknown fields are ignored so that additive API changes do not break
  decoding.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class _ApiModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Subscription(_ApiModel):
    """A feed the account is subscribed to."""

    id: int = Field(..., description="Subscription identifier.")
    feed_id: int = Field(..., description="Identifier of the underlying feed.")
    title: str | None = Field(default=None, description="Display title (user-editable).")
    feed_url: str = Field(..., description="URL of the feed document.")
    site_url: str | None = Field(default=None, description="URL of the site publishing the feed.")
    created_at: datetime | None = Field(default=None, description="Subscription creation time.")
    json_feed: dict[str, Any] | None = Field(
        default=None,
        description="JSON Feed metadata (only with `mode=extended`).",
    )


class Feed(_ApiModel):
    id: int
    title: str | None = None
    feed_url: str
    site_url: str | None = None


class FeedChoice(_ApiModel):
    """One candidate of an ambiguous feed discovery (HTTP 300)."""

    feed_url: str = Field(..., description="Feed URL to re-submit to disambiguate.")
    title: str | None = Field(default=None, description="Title advertised by the feed.")


class Enclosure(_ApiModel):
    enclosure_url: str | None = None
    enclosure_type: str | None = None
    enclosure_length: str | None = None
    itunes_duration: str | None = None
    itunes_image: str | None = None


class OriginalEntry(_ApiModel):
    author: str | None = None
    content: str | None = None
    title: str | None = None
    url: str | None = None
    entry_id: str | None = None
    published: datetime | None = None
    data: dict[str, Any] = Field(default_factory=dict)


class Entry(_ApiModel):
    """A feed item."""

    id: int
    feed_id: int
    title: str | None = None
    url: str | None = None
    extracted_content_url: str | None = None
    author: str | None = None
    content: str | None = None
    summary: str | None = None
    published: datetime | None = None
    created_at: datetime | None = None
    original: OriginalEntry | None = Field(
        default=None,
        description="Pre-update version (only with `include_original=true`).",
    )
    images: dict[str, Any] | None = None
    enclosure: Enclosure | None = Field(
        default=None,
        description="Podcast/media attachment (only with `include_enclosure=true`).",
    )
    content_diff: str | None = Field(
        default=None,
        description="HTML diff (only with `include_content_diff=true`).",
    )


class Tagging(_ApiModel):
    """Association between a feed and a tag name."""

    id: int
    feed_id: int
    name: str


class SavedSearch(_ApiModel):
    id: int
    name: str
    query: str


class Icon(_ApiModel):
    host: str
    url: str


class Authentication(_ApiModel):
    """Body of `authentication.json` (usually empty)."""

    email: str | None = None
