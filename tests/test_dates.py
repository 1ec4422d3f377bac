"""Tests for crumbs._internal.dates: HTTP-date helpers."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from crumbs._internal.dates import InvalidDate, format_http_date, from_epoch_ms, parse_http_date


class TestFormatHttpDate:
    def test_imf_fixdate(self) -> None:
        when = datetime(2015, 10, 21, 7, 28, tzinfo=UTC)
        assert format_http_date(when) == "Wed, 21 Oct 2015 07:28:00 GMT"

    def test_converts_to_utc(self) -> None:
        when = datetime(2015, 10, 21, 9, 28, tzinfo=timezone(timedelta(hours=2)))
        assert format_http_date(when) == "Wed, 21 Oct 2015 07:28:00 GMT"

    def test_drops_microseconds(self) -> None:
        when = datetime(2015, 10, 21, 7, 28, 0, 999_999, tzinfo=UTC)
        assert format_http_date(when) == "Wed, 21 Oct 2015 07:28:00 GMT"

    def test_invalid_date(self) -> None:
        assert format_http_date(InvalidDate("x")) == "Invalid Date"


class TestFromEpochMs:
    def test_zero(self) -> None:
        assert from_epoch_ms(0) == datetime(1970, 1, 1, tzinfo=UTC)

    def test_fractional_seconds(self) -> None:
        assert from_epoch_ms(1500) == datetime(1970, 1, 1, 0, 0, 1, 500_000, tzinfo=UTC)

    def test_out_of_range(self) -> None:
        assert isinstance(from_epoch_ms(1e20), InvalidDate)


class TestParseHttpDate:
    @pytest.mark.parametrize(
        "raw",
        [
            "Wed, 21 Oct 2015 07:28:00 GMT",
            "Wed, 21 Oct 2015 07:28:00 -0000",
            "Wed, 21 Oct 2015 09:28:00 +0200",
            "Wednesday, 21-Oct-15 07:28:00 GMT",
            "2015-10-21T07:28:00+00:00",
            "  Wed, 21 Oct 2015 07:28:00 GMT  ",
        ],
    )
    def test_formats(self, raw: str) -> None:
        parsed = parse_http_date(raw)
        assert parsed == datetime(2015, 10, 21, 7, 28, tzinfo=UTC)
        assert isinstance(parsed, datetime)
        assert parsed.tzinfo is UTC

    def test_naive_iso_is_utc(self) -> None:
        assert parse_http_date("2015-10-21 07:28") == datetime(2015, 10, 21, 7, 28, tzinfo=UTC)

    @pytest.mark.parametrize("raw", ["tomorrow", "", "Wed, 99 Oct 2015 07:28:00 GMT"])
    def test_unparseable(self, raw: str) -> None:
        assert parse_http_date(raw) == InvalidDate(raw)


class TestInvalidDate:
    def test_truthy(self) -> None:
        assert InvalidDate("x")

    def test_str(self) -> None:
        assert str(InvalidDate("x")) == "Invalid Date"
