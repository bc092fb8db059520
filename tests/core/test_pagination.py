"""Pagination normalization — page/limit query strings to PaginationParams.

Tests:
    - Defaults when parameters are absent or unparseable
    - Integer-prefix parsing of decorated numbers
    - Floor at 1 for negatives, default for zero, cap at 100 for limit
"""

import pytest

from user_api.core.domain_types import PaginationParams
from user_api.core.pagination import (
    DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT,
    normalize_pagination, parse_int_prefix,
)


# --- parse_int_prefix ---------------------------------------------------------

@pytest.mark.parametrize("raw, expected", [
    ("7", 7),
    ("  42", 42),
    ("-3", -3),
    ("+5", 5),
    ("12abc", 12),
    ("3.9", 3),
    ("0", 0),
])
def test_parse_int_prefix_reads_leading_integer(raw, expected):
    assert parse_int_prefix(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "abc", "-", " x1", "e10"])
def test_parse_int_prefix_returns_none_without_leading_digits(raw):
    assert parse_int_prefix(raw) is None


# --- normalize_pagination -----------------------------------------------------

def test_missing_params_use_defaults():
    assert normalize_pagination(None, None) == PaginationParams(
        page=DEFAULT_PAGE, limit=DEFAULT_LIMIT,
    )


def test_valid_params_pass_through():
    assert normalize_pagination("2", "5") == PaginationParams(page=2, limit=5)


def test_negative_values_floor_to_one():
    params = normalize_pagination("-1", "-5")
    assert params.page == 1
    assert params.limit == 1


def test_non_numeric_values_use_defaults():
    params = normalize_pagination("invalid", "invalid")
    assert params.page == 1
    assert params.limit == 10


def test_zero_values_use_defaults():
    params = normalize_pagination("0", "0")
    assert params.page == 1
    assert params.limit == 10


def test_limit_capped_at_max():
    assert normalize_pagination("1", "500").limit == MAX_LIMIT
    assert normalize_pagination("1", "100").limit == 100


def test_large_page_is_not_capped():
    assert normalize_pagination("9999", None).page == 9999


def test_offset_derived_from_page_and_limit():
    assert normalize_pagination("3", "20").offset == 40
