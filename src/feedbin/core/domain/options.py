"""Query option records.

Every field is optional and `None` means "do not send this parameter". A
boolean filter set to `False` is therefore sent as `false`, which is not
the same request as leaving it unset.

Effect per field of `EntryQuery` (`entries.json`, `feeds/{id}/entries.json`):

| field                 | if set                                   | if omitted          |
|-----------------------|------------------------------------------|---------------------|
| page                  | 1-based page number                      | first page          |
| per_page              | page size                                | service default     |
| since                 | only entries created after this instant  | no lower bound      |
| ids                   | only these entries (max 100, comma list) | all entries         |
| read                  | filter on read state                     | read and unread     |
| starred               | filter on starred state                  | starred or not      |
| mode                  | `"extended"` adds extra fields           | compact entries     |
| include_original      | add `original` to updated entries        | omitted             |
| include_enclosure     | add `enclosure`                          | omitted             |
| include_content_diff  | add `content_diff`                       | omitted             |
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from feedbin.adapters.request_builder import encode_query

MAX_READ_IDS = 100


class _QueryModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    def to_params(self) -> list[tuple[str, str]]:
        """Ordered query pairs for the fields that are set."""

        return encode_query(self.model_dump(exclude_none=True))


class EntryQuery(_QueryModel):
    page: int | None = Field(default=None, ge=1)
    per_page: int | None = Field(default=None, ge=1)
    since: datetime | None = None
    ids: list[int] | None = Field(default=None, min_length=1, max_length=MAX_READ_IDS)
    read: bool | None = None
    starred: bool | None = None
    mode: str | None = None
    include_original: bool | None = None
    include_enclosure: bool | None = None
    include_content_diff: bool | None = None


class SubscriptionQuery(_QueryModel):
    since: datetime | None = None
    mode: str | None = None


class SavedSearchQuery(_QueryModel):
    include_entries: bool | None = None
    page: int | None = Field(default=None, ge=1)
