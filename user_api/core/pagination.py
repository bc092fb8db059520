"""Pagination — normalizes raw page/limit query strings into PaginationParams.

Invariants:
    - page >= 1, 1 <= limit <= 100 for every possible input
    - Unparseable or zero values fall back to the defaults (page 1, limit 10)
    - Negative values are floored to 1, never replaced by the default
    - Never raises: malformed input degrades to defaults

Design Decisions:
    - Integer-prefix parsing ("12abc" -> 12, "3.9" -> 3): lenient query handling,
      clients sending decorated numbers still get the page they meant
"""

import re

from user_api.core.domain_types import PaginationParams

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def parse_int_prefix(raw: str | None) -> int | None:
    """Parse the leading integer of raw, or None when there is none."""
    if raw is None:
        return None
    match = _INT_PREFIX.match(raw)
    if not match:
        return None
    return int(match.group(1))


def normalize_pagination(
    page: str | None, limit: str | None,
) -> PaginationParams:
    """Build PaginationParams from untrusted query strings."""
    effective_page = max(1, parse_int_prefix(page) or DEFAULT_PAGE)
    effective_limit = min(
        MAX_LIMIT, max(1, parse_int_prefix(limit) or DEFAULT_LIMIT),
    )
    return PaginationParams(page=effective_page, limit=effective_limit)
