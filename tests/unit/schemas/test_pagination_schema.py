"""Unit tests for pagination parsing and shared envelopes."""

import pytest

from notehive.core.schemas.common import PageParams, PaginatedResponse, parse_pagination


class TestParsePagination:
    def test_defaults_when_missing(self):
        params = parse_pagination(None, None)
        assert params == PageParams(page=1, limit=10)

    @pytest.mark.parametrize("raw", ["abc", "", "0", "-3", "1.5", "  "])
    def test_malformed_page_falls_back_to_one(self, raw):
        assert parse_pagination(raw, "5").page == 1

    @pytest.mark.parametrize("raw", ["x", "0", "-1"])
    def test_malformed_limit_falls_back_to_default(self, raw):
        assert parse_pagination("2", raw).limit == 10

    def test_numeric_strings_are_parsed(self):
        params = parse_pagination("3", "25")
        assert params.page == 3
        assert params.limit == 25
        assert params.offset == 50

    def test_limit_is_capped(self):
        assert parse_pagination("1", "5000", max_limit=100).limit == 100

    @pytest.mark.parametrize("raw", [str(10**20), str(2**31)])
    def test_out_of_range_values_fall_back(self, raw):
        params = parse_pagination(raw, raw)
        assert params == PageParams(page=1, limit=10)

    def test_page_whose_offset_overflows_falls_back_to_one(self):
        assert parse_pagination(str(2**31 - 1), "100").page == 1
        assert parse_pagination("1000", "100").page == 1000

    def test_custom_default_limit(self):
        assert parse_pagination(None, None, default_limit=20).limit == 20


class TestPageParams:
    @pytest.mark.parametrize(
        "total,limit,expected",
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 4, 7)],
    )
    def test_total_pages_is_ceiling(self, total, limit, expected):
        assert PageParams(page=1, limit=limit).total_pages(total) == expected


def test_paginated_response_uses_camel_case():
    params = PageParams(page=2, limit=2)
    body = PaginatedResponse[int].create([5, 6], total=5, params=params)

    dumped = body.model_dump(by_alias=True)
    assert dumped == {
        "success": True,
        "count": 2,
        "total": 5,
        "totalPages": 3,
        "currentPage": 2,
        "data": [5, 6],
    }
