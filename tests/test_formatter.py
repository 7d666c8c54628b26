"""Tests for datestring/formatter.py - Format string scanning.

This module tests:
- Literal scenarios from the format documentation
- Backslash escapes and unknown characters
- ISO-8601 (c) and RFC-2822 (r) composites
- DateFormatter configuration and naive datetimes
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from datestring.config import FormatterConfig
from datestring.formatter import DateFormatter, format_date, render
from datestring.names import NameTables

GERMAN = NameTables(
    weekdays=[
        "Sonntag",
        "Montag",
        "Dienstag",
        "Mittwoch",
        "Donnerstag",
        "Freitag",
        "Samstag",
    ],
    months=[
        "Januar",
        "Februar",
        "März",
        "April",
        "Mai",
        "Juni",
        "Juli",
        "August",
        "September",
        "Oktober",
        "November",
        "Dezember",
    ],
)


class TestFormatDate:
    """Tests for format_date - the public entry point."""

    def test_date_and_time(self, utc_datetime: datetime) -> None:
        """Formats the usual date/time pattern."""
        assert format_date(utc_datetime, "Y-m-d H:i:s") == "2018-07-09 15:33:24"

    def test_escaped_sentence(self) -> None:
        """Escaped letters render as text between tokens."""
        dt = datetime(2018, 8, 31, 21, 46, 2, tzinfo=timezone.utc)
        fmt = (
            r"\T\o\d\a\y \i\s l, \t\h\e jS \o\f F Y. "
            r"\T\h\e \c\u\r\r\e\n\t \t\i\m\e \i\s h:i:s A."
        )
        assert format_date(dt, fmt) == (
            "Today is Friday, the 31st of August 2018. "
            "The current time is 09:46:02 PM."
        )

    def test_rejects_non_datetime(self) -> None:
        """Raises TypeError for anything but a datetime."""
        with pytest.raises(TypeError, match="Expected a datetime"):
            format_date(date(2018, 7, 9), "Y")  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            format_date("2018-07-09", "Y")  # type: ignore[arg-type]


class TestEscapes:
    """Tests for backslash handling in render."""

    def test_escaped_token_is_literal(self, utc_datetime: datetime) -> None:
        """A backslash before a token prints the token character."""
        assert render(utc_datetime, "\\Y") == "Y"

    def test_escaped_non_token(self, utc_datetime: datetime) -> None:
        """Escaping a non-token drops the backslash."""
        assert render(utc_datetime, "\\#Y") == "#2018"

    def test_escaped_backslash(self, utc_datetime: datetime) -> None:
        """Two backslashes print one."""
        assert render(utc_datetime, "Y\\\\m") == "2018\\07"

    def test_trailing_backslash(self, utc_datetime: datetime) -> None:
        """A lone backslash at the end is kept."""
        assert render(utc_datetime, "Y\\") == "2018\\"

    def test_escaped_composite(self, utc_datetime: datetime) -> None:
        """Composite tokens can be escaped too."""
        assert render(utc_datetime, "\\c\\r") == "cr"

    def test_escaped_newline(self, utc_datetime: datetime) -> None:
        """Newlines are plain characters, escaped or not."""
        assert render(utc_datetime, "Y\nm\\\nd") == "2018\n07\n09"


class TestPassThrough:
    """Tests for characters outside the token table."""

    def test_punctuation(self, utc_datetime: datetime) -> None:
        """Separators are copied unchanged."""
        assert render(utc_datetime, "d/m/Y @ H#i") == "09/07/2018 @ 15#33"

    def test_unknown_letters(self, utc_datetime: datetime) -> None:
        """Letters that are not tokens are copied unchanged."""
        assert render(utc_datetime, "kqxXEJ") == "kqxXEJ"

    def test_naive_datetime_uses_host_zone(self, host_eastern: str) -> None:
        """render reads naive datetimes in the host zone."""
        dt = datetime(2018, 7, 9, 12)

        assert render(dt, "U P B") == "1531152000 -04:00 708"
        assert render(dt, "U") == format_date(dt, "U")

    def test_empty_format(self, utc_datetime: datetime) -> None:
        """An empty format gives an empty string."""
        assert render(utc_datetime, "") == ""

    def test_non_ascii(self, utc_datetime: datetime) -> None:
        """Non-ASCII characters are copied unchanged."""
        assert render(utc_datetime, "Y年n月j日") == "2018年7月9日"


class TestComposites:
    """Tests for c and r."""

    def test_iso8601(self) -> None:
        """c renders Y-m-dTH:i:sP."""
        dt = datetime(2004, 2, 12, 15, 19, 21, tzinfo=timezone.utc)
        assert render(dt, "c") == "2004-02-12T15:19:21+00:00"

    def test_rfc2822(self) -> None:
        """r renders D, d M Y H:i:s O."""
        dt = datetime(2000, 12, 21, 16, 1, 7, tzinfo=timezone(timedelta(hours=2)))
        assert render(dt, "r") == "Thu, 21 Dec 2000 16:01:07 +0200"

    def test_iso8601_is_stable(self, utc_datetime: datetime) -> None:
        """Formatting twice yields the same string."""
        assert render(utc_datetime, "c") == render(utc_datetime, "c")

    def test_composites_inside_format(self, utc_datetime: datetime) -> None:
        """Composites combine with surrounding text."""
        assert (
            render(utc_datetime, "[c]")
            == "[2018-07-09T15:33:24+00:00]"
        )

    def test_composites_use_name_tables(self, utc_datetime: datetime) -> None:
        """r uses the configured abbreviations."""
        assert render(utc_datetime, "r", GERMAN) == "Mon, 09 Jul 2018 15:33:24 +0000"
        dt = datetime(2018, 10, 2, tzinfo=timezone.utc)
        assert render(dt, "r", GERMAN) == "Die, 02 Okt 2018 00:00:00 +0000"


class TestDateFormatter:
    """Tests for DateFormatter - configured formatting."""

    def test_default_config(self, utc_datetime: datetime) -> None:
        """Uses English names by default."""
        formatter = DateFormatter()
        assert formatter.format(utc_datetime, "l F") == "Monday July"

    def test_translated_names(self) -> None:
        """Name tables replace weekday and month names."""
        formatter = DateFormatter(FormatterConfig(names=GERMAN))
        dt = datetime(2019, 10, 7, tzinfo=timezone.utc)
        assert formatter.format(dt, "l, j. M \\'y") == "Montag, 7. Okt '19"
        assert formatter.format(dt, "D F") == "Mon Oktober"

    def test_naive_datetime_uses_configured_zone(self) -> None:
        """Naive datetimes are read in the configured timezone."""
        formatter = DateFormatter(FormatterConfig(timezone="Europe/Berlin"))
        dt = datetime(2018, 7, 9, 15, 33, 24)
        assert formatter.format(dt, "Y-m-d H:i:s T P") == (
            "2018-07-09 15:33:24 CEST +02:00"
        )

    def test_aware_datetime_keeps_its_zone(self, utc_datetime: datetime) -> None:
        """The configured timezone does not convert aware datetimes."""
        formatter = DateFormatter(FormatterConfig(timezone="Europe/Berlin"))
        assert formatter.format(utc_datetime, "H:i P") == "15:33 +00:00"

    def test_resolve_attaches_zone(self) -> None:
        """resolve returns an aware datetime."""
        formatter = DateFormatter(FormatterConfig(timezone="Asia/Tokyo"))
        resolved = formatter.resolve(datetime(2018, 7, 9, 12))
        assert resolved.utcoffset() == timedelta(hours=9)
