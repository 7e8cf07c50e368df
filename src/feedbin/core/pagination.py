"""Pagination metadata extracted from response headers.

The service paginates with an RFC 8288 style `Link` header and reports the
collection size in `X-Feedbin-Record-Count`. Both are best-effort: a missing
or malformed header yields empty fields, never an error.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Mapping

logger = logging.getLogger(__name__)

LINK_HEADER = "Link"
RECORD_COUNT_HEADER = "X-Feedbin-Record-Count"

_LINK_SEGMENT_RE = re.compile(r"<([^>]*)>\s*;\s*rel\s*=\s*\"?([^\",;]+)\"?")
_RELATIONS = ("first", "prev", "next", "last")


@dataclass(frozen=True)
class PaginationCursor:
    first: str | None = None
    prev: str | None = None
    next: str | None = None
    last: str | None = None
    total_count: int = 0

    @property
    def has_next(self) -> bool:
        return self.next is not None

    def is_empty(self) -> bool:
        return self == PaginationCursor()


def parse_link_header(value: str | None) -> dict[str, str]:
    """Return `{rel: url}` for the first/prev/next/last relations present."""

    links: dict[str, str] = {}
    if not value:
        return links
    for url, rels in _LINK_SEGMENT_RE.findall(value):
        url = url.strip()
        if not url:
            continue
        # rel may list several space-separated relation types.
        for rel in rels.split():
            rel = rel.lower()
            if rel in _RELATIONS and rel not in links:
                links[rel] = url
    if not links and value.strip():
        logger.warning("Ignoring unparseable Link header: %r", value)
    return links


def parse_record_count(value: str | None) -> int:
    if value is None or not value.strip():
        return 0
    try:
        count = int(value.strip())
    except ValueError:
        logger.warning("Ignoring malformed %s header: %r", RECORD_COUNT_HEADER, value)
        return 0
    return count if count >= 0 else 0


def extract_pagination(headers: Mapping[str, str]) -> PaginationCursor:
    """Build a `PaginationCursor` from response headers (pure function)."""

    links = parse_link_header(headers.get(LINK_HEADER))
    return PaginationCursor(
        first=links.get("first"),
        prev=links.get("prev"),
        next=links.get("next"),
        last=links.get("last"),
        total_count=parse_record_count(headers.get(RECORD_COUNT_HEADER)),
    )
