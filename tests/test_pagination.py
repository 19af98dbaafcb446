"""Tests for limit/cursor parsing and page windowing."""
import logging

import pytest

from core.errors import ValidationFailure
from core.pagination import (
    BIGINT_MAX,
    BIGINT_MIN,
    DEFAULT_PAGE_LIMIT,
    Page,
    parse_bigint,
    parse_cursor,
    parse_int,
    parse_limit,
    window,
)


class TestParseLimit:
    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_default(self, raw):
        assert parse_limit(raw, error_message="bad").value == DEFAULT_PAGE_LIMIT

    @pytest.mark.parametrize(
        "raw, expected",
        [("1", 1), ("50", 50), ("100", 100), ("101", 100), ("0", 1), ("-5", 1), ("99999999999999999999", 100)],
    )
    def test_clamped(self, raw, expected):
        assert parse_limit(raw, error_message="bad").value == expected

    @pytest.mark.parametrize("raw", ["abc", "NaN", "2.5", "10abc", "1_0"])
    def test_non_numeric_rejected(self, raw):
        result = parse_limit(raw, error_message="Invalid limit parameter")
        assert result.error == ValidationFailure("Invalid limit parameter")


class TestParseCursor:
    def test_missing(self):
        assert parse_cursor(None) is None
        assert parse_cursor("") is None

    def test_numeric(self):
        assert parse_cursor("17") == 17

    @pytest.mark.parametrize("raw", ["abc", "17x", "1.0", "99999999999999999999", "-9223372036854775809"])
    def test_malformed_falls_back_to_first_page(self, raw):
        assert parse_cursor(raw) is None

    def test_fallback_is_logged_at_debug(self, caplog):
        caplog.set_level(logging.DEBUG, logger="core.pagination")

        assert parse_cursor("abc") is None

        assert "cursor_ignored raw='abc'" in caplog.text
        assert all(record.levelno == logging.DEBUG for record in caplog.records)

    def test_valid_cursor_is_not_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="core.pagination")

        parse_cursor("17")
        parse_cursor(None)

        assert caplog.records == []


class TestParseBigint:
    def test_bounds(self):
        assert parse_bigint(str(BIGINT_MAX)) == BIGINT_MAX
        assert parse_bigint(str(BIGINT_MIN)) == BIGINT_MIN

    @pytest.mark.parametrize("raw", [str(BIGINT_MAX + 1), str(BIGINT_MIN - 1), "99999999999999999999", "x", None])
    def test_out_of_range_or_malformed(self, raw):
        assert parse_bigint(raw) is None


def test_parse_int_rejects_unicode_digits():
    assert parse_int("٣") is None


class TestWindow:
    def test_short_page_has_no_cursor(self):
        rows = [{"id": 1}, {"id": 2}]
        assert window(rows, 2) == Page(items=rows, next_cursor=None)

    def test_extra_row_is_dropped_and_sets_cursor(self):
        rows = [{"id": 9}, {"id": 4}, {"id": 3}]

        page = window(rows, 2)

        assert page.items == [{"id": 9}, {"id": 4}]
        assert page.next_cursor == "4"

    def test_empty(self):
        assert window([], 20) == Page()
