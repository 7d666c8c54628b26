"""Format tokens: one function per format character.

Every function takes the (zone-aware) datetime and the name tables and
returns the token's value. Tokens that build on another token call it
directly instead of sharing state.
"""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from . import gregorian, zones
from .names import NameTables

TokenFunction = Callable[[datetime, NameTables], str | int]

#: Tokens expanded by formatting the datetime again with another pattern.
COMPOSITES: dict[str, str] = {
    "c": "Y-m-d\\TH:i:sP",  # ISO-8601
    "r": "D, d M Y H:i:s O",  # RFC-2822
}

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_SECOND = timedelta(seconds=1)


def _weekday_index(dt: datetime) -> int:
    """Sunday-based weekday: 0 = Sunday .. 6 = Saturday."""
    return dt.isoweekday() % 7


# Day


def day_padded(dt: datetime, names: NameTables) -> str:
    return f"{dt.day:02d}"


def weekday_short(dt: datetime, names: NameTables) -> str:
    return names.weekday(_weekday_index(dt))[:3]


def day(dt: datetime, names: NameTables) -> int:
    return dt.day


def weekday_name(dt: datetime, names: NameTables) -> str:
    return names.weekday(_weekday_index(dt))


def iso_weekday(dt: datetime, names: NameTables) -> int:
    return dt.isoweekday()


def ordinal_suffix(dt: datetime, names: NameTables) -> str:
    """English ordinal suffix for the day of the month."""
    if dt.day in (1, 21, 31):
        return "st"
    if dt.day in (2, 22):
        return "nd"
    if dt.day in (3, 23):
        return "rd"
    return "th"


def weekday_number(dt: datetime, names: NameTables) -> int:
    return _weekday_index(dt)


def day_of_year(dt: datetime, names: NameTables) -> int:
    return gregorian.day_of_year(dt.year, dt.month - 1, dt.day)


# Week


def iso_week_number(dt: datetime) -> int:
    """ISO-8601 week of the year, weeks starting on Monday.

    Days before the first Monday of a year that starts late in the week
    belong to the last week (52 or 53) of the previous year. The last days
    of December may already be week 1 of the next year.
    """
    year = dt.year
    day1 = gregorian.first_weekday(year)
    yday = gregorian.day_of_year(year, dt.month - 1, dt.day)
    days = yday - (7 - day1) if day1 > 3 else yday + day1

    if days < 0:
        if day1 == 4 or gregorian.first_weekday(year - 1) == 3:
            return 53
        return 52

    week = days // 7 + 1
    if days > 360 and week > 52:
        if day1 == 3 or gregorian.first_weekday(year + 1) == 4:
            return 53
        return 1
    return week


def iso_week(dt: datetime, names: NameTables) -> str:
    return f"{iso_week_number(dt):02d}"


# Month


def month_name(dt: datetime, names: NameTables) -> str:
    return names.month(dt.month - 1)


def month_padded(dt: datetime, names: NameTables) -> str:
    return f"{dt.month:02d}"


def month_short(dt: datetime, names: NameTables) -> str:
    return names.month(dt.month - 1)[:3]


def month_number(dt: datetime, names: NameTables) -> int:
    return dt.month


def month_days(dt: datetime, names: NameTables) -> int:
    return gregorian.days_in_month(dt.month - 1, dt.year)


# Year


def leap_year(dt: datetime, names: NameTables) -> int:
    return 1 if gregorian.is_leap_year(dt.year) else 0


def iso_year(dt: datetime, names: NameTables) -> int:
    """ISO-8601 week-numbering year."""
    week = iso_week_number(dt)
    month = dt.month - 1
    if week == 1 and month == gregorian.DECEMBER:
        return dt.year + 1
    if week >= 52 and month == gregorian.JANUARY:
        return dt.year - 1
    return dt.year


def year(dt: datetime, names: NameTables) -> int:
    return dt.year


def year_short(dt: datetime, names: NameTables) -> str:
    return str(dt.year)[-2:]


# Time


def meridiem_lower(dt: datetime, names: NameTables) -> str:
    return "am" if dt.hour < 12 else "pm"


def meridiem_upper(dt: datetime, names: NameTables) -> str:
    return "AM" if dt.hour < 12 else "PM"


def swatch_beats(dt: datetime, names: NameTables) -> str:
    """Swatch Internet Time: the day in 1000 beats, on UTC+1 (Biel Mean Time)."""
    # UTC time of day without converting, valid at both ends of the datetime range
    local = dt.hour * 3600 + dt.minute * 60 + dt.second
    seconds = (local - zones.offset_minutes(dt) * 60) % 86400 + 3600
    # floor(seconds / 86.4) without float rounding
    beats = seconds * 10 // 864
    return f"{beats % 1000:03d}"


def hour12(dt: datetime, names: NameTables) -> int:
    return dt.hour % 12 or 12


def hour24(dt: datetime, names: NameTables) -> int:
    return dt.hour


def hour12_padded(dt: datetime, names: NameTables) -> str:
    return f"{hour12(dt, names):02d}"


def hour24_padded(dt: datetime, names: NameTables) -> str:
    return f"{dt.hour:02d}"


def minutes(dt: datetime, names: NameTables) -> str:
    return f"{dt.minute:02d}"


def seconds(dt: datetime, names: NameTables) -> str:
    return f"{dt.second:02d}"


def milliseconds(dt: datetime, names: NameTables) -> str:
    return f"{dt.microsecond // 1000:03d}"


def microseconds(dt: datetime, names: NameTables) -> str:
    # Millisecond precision, padded out to six digits
    return milliseconds(dt, names) + "000"


# Timezone


def zone_identifier(dt: datetime, names: NameTables) -> str:
    return zones.zone_identifier(dt) or zone_abbreviation(dt, names)


def daylight_saving(dt: datetime, names: NameTables) -> int:
    return 1 if zones.is_dst(dt) else 0


def utc_offset(dt: datetime, names: NameTables) -> str:
    return utc_offset_colon(dt, names).replace(":", "")


def utc_offset_colon(dt: datetime, names: NameTables) -> str:
    offset = zones.offset_minutes(dt)
    sign = "+" if offset >= 0 else "-"
    hours, mins = divmod(abs(offset), 60)
    return f"{sign}{hours:02d}:{mins:02d}"


def zone_abbreviation(dt: datetime, names: NameTables) -> str:
    return zones.abbreviation(dt)


def offset_seconds(dt: datetime, names: NameTables) -> int:
    return zones.offset_minutes(dt) * 60


# Full date/time


def unix_seconds(dt: datetime, names: NameTables) -> int:
    return (dt - _EPOCH) // _SECOND


TOKENS: dict[str, TokenFunction] = {
    # Day
    "d": day_padded,
    "D": weekday_short,
    "j": day,
    "l": weekday_name,
    "N": iso_weekday,
    "S": ordinal_suffix,
    "w": weekday_number,
    "z": day_of_year,
    # Week
    "W": iso_week,
    # Month
    "F": month_name,
    "m": month_padded,
    "M": month_short,
    "n": month_number,
    "t": month_days,
    # Year
    "L": leap_year,
    "o": iso_year,
    "Y": year,
    "y": year_short,
    # Time
    "a": meridiem_lower,
    "A": meridiem_upper,
    "B": swatch_beats,
    "g": hour12,
    "G": hour24,
    "h": hour12_padded,
    "H": hour24_padded,
    "i": minutes,
    "s": seconds,
    "u": microseconds,
    "v": milliseconds,
    # Timezone
    "e": zone_identifier,
    "I": daylight_saving,
    "O": utc_offset,
    "P": utc_offset_colon,
    "T": zone_abbreviation,
    "Z": offset_seconds,
    # Full date/time
    "U": unix_seconds,
}
