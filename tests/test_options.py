"""Query option records: unset vs. false, list and timestamp encoding."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from feedbin.adapters.request_builder import encode_query, format_timestamp
from feedbin.core.domain.options import EntryQuery, SavedSearchQuery, SubscriptionQuery


def test_unset_fields_are_not_sent() -> None:
    assert EntryQuery().to_params() == []


def test_false_is_distinct_from_unset() -> None:
    assert EntryQuery(starred=False).to_params() == [("starred", "false")]
    assert EntryQuery(starred=True, read=False).to_params() == [("read", "false"), ("starred", "true")]


def test_ids_are_comma_joined() -> None:
    assert EntryQuery(ids=[3, 1, 2]).to_params() == [("ids", "3,1,2")]


def test_read_filter_caps_ids_at_one_hundred() -> None:
    with pytest.raises(ValidationError):
        EntryQuery(ids=list(range(101)))


def test_since_is_utc_with_microseconds() -> None:
    since = datetime(2024, 2, 3, 4, 5, 6, 789000, tzinfo=timezone(timedelta(hours=2)))

    assert SubscriptionQuery(since=since).to_params() == [("since", "2024-02-03T02:05:06.789000Z")]


def test_naive_datetimes_are_treated_as_utc() -> None:
    assert format_timestamp(datetime(2024, 1, 1)) == "2024-01-01T00:00:00.000000Z"


def test_unknown_fields_are_rejected() -> None:
    with pytest.raises(ValidationError):
        EntryQuery(unread=True)


def test_saved_search_query() -> None:
    assert SavedSearchQuery(include_entries=True, page=2).to_params() == [("include_entries", "true"), ("page", "2")]


def test_query_records_and_raw_params_encode_the_same_way() -> None:
    since = datetime(2024, 5, 6, 7, 8, 9, tzinfo=timezone.utc)
    raw = {"since": since, "ids": [1, 2], "starred": False}

    assert EntryQuery(since=since, ids=[1, 2], starred=False).to_params() == [
        ("since", "2024-05-06T07:08:09.000000Z"),
        ("ids", "1,2"),
        ("starred", "false"),
    ]
    assert encode_query(raw) == [("since", "2024-05-06T07:08:09.000000Z"), ("ids", "1,2"), ("starred", "false")]
