"""Host timezone facilities.

Wraps what the platform exposes about timezones: the local zone via the
``time`` module, named zones via ``zoneinfo``, and the host's IANA zone
identifier when it can be found. Nothing here implements a zone database.
"""

import logging
import os
import re
import time
from datetime import datetime, timedelta, tzinfo
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger("datestring.zones")

LOCALTIME_PATH = Path("/etc/localtime")

_ZERO = timedelta(0)
_EPOCH = datetime(1970, 1, 1)

# Abbreviations that only spell out an offset, e.g. "UTC+02:00", "+04", "GMT-3"
_NUMERIC_NAME = re.compile(r"^(UTC|GMT)?[+-]\d")


class LocalTimezone(tzinfo):
    """The host's local zone as reported by ``time.localtime``.

    Unlike ``datetime.astimezone()``, which pins a single fixed offset, this
    keeps DST transitions visible per instant.
    """

    def _struct(self, dt: datetime) -> time.struct_time | None:
        wall = (dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second)
        try:
            # Instants showing this wall time, one per standard/daylight reading
            candidates = sorted({
                seconds
                for seconds in (
                    time.mktime(wall + (dt.weekday(), 0, isdst))
                    for isdst in (0, 1)
                )
                if time.localtime(seconds)[:6] == wall
            })
            if not candidates:
                # Skipped by a forward transition
                return time.localtime(time.mktime(wall + (dt.weekday(), 0, -1)))
            # Repeated wall times: fold=1 is the later instant
            return time.localtime(candidates[-1] if dt.fold else candidates[0])
        except (OverflowError, ValueError, OSError):
            return None

    def _standard_offset(self) -> timedelta:
        return timedelta(seconds=-time.timezone)

    def utcoffset(self, dt: datetime | None) -> timedelta:
        if dt is None:
            return self._standard_offset()
        tt = self._struct(dt)
        if tt is None:
            return self._standard_offset()
        return timedelta(seconds=tt.tm_gmtoff)

    def dst(self, dt: datetime | None) -> timedelta:
        if dt is None:
            return _ZERO
        tt = self._struct(dt)
        if tt is None or tt.tm_isdst <= 0:
            return _ZERO
        return timedelta(seconds=tt.tm_gmtoff) - self._standard_offset()

    def tzname(self, dt: datetime | None) -> str | None:
        if dt is None:
            return time.tzname[0]
        tt = self._struct(dt)
        if tt is None:
            return time.tzname[0]
        return tt.tm_zone

    def fromutc(self, dt: datetime) -> datetime:
        seconds = (dt.replace(tzinfo=None) - _EPOCH) // timedelta(seconds=1)
        tt = time.localtime(seconds)
        # Offset shrank since a day ago: check whether this wall time already
        # occurred before the transition
        shift = time.localtime(seconds - 86400).tm_gmtoff - tt.tm_gmtoff
        fold = 0
        if shift > 0 and time.localtime(seconds - shift)[:6] == tt[:6]:
            fold = 1
        return datetime(*tt[:6], dt.microsecond, tzinfo=self, fold=fold)

    def __repr__(self) -> str:
        return "LocalTimezone()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, LocalTimezone)

    def __hash__(self) -> int:
        return hash(LocalTimezone)


def get_zone(zone_name: str) -> ZoneInfo:
    """Load a named zone. Raises ValueError for unknown names."""
    try:
        return ZoneInfo(zone_name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone: {zone_name}") from e


def localize(dt: datetime, zone_name: str | None = None) -> datetime:
    """Attach a zone to a naive datetime; aware datetimes pass through.

    Naive values are read as wall-clock time in ``zone_name`` or, when it is
    not given, in the host's local zone.
    """
    if dt.tzinfo is not None and dt.utcoffset() is not None:
        return dt
    zone: tzinfo = get_zone(zone_name) if zone_name else LocalTimezone()
    return dt.replace(tzinfo=zone)


def host_zone_name() -> str | None:
    """IANA identifier of the host's local zone, or None if unknown."""
    tz_env = os.getenv("TZ", "").lstrip(":")
    if tz_env:
        try:
            ZoneInfo(tz_env)
            return tz_env
        except (ZoneInfoNotFoundError, ValueError):
            logger.debug(f"TZ={tz_env!r} is not an IANA zone")
            # TZ takes precedence over /etc/localtime even when it is a rule string
            return None

    try:
        target = str(LOCALTIME_PATH.resolve(strict=True))
    except (OSError, RuntimeError) as e:
        logger.debug(f"Cannot resolve {LOCALTIME_PATH}: {e}")
        return None

    _, sep, name = target.partition("zoneinfo/")
    if not sep or not name:
        logger.debug(f"{LOCALTIME_PATH} does not point into a zoneinfo tree")
        return None
    return name


def offset_minutes(dt: datetime) -> int:
    """Signed minutes between local time and UTC, east of UTC positive."""
    offset = dt.utcoffset() or _ZERO
    return int(offset.total_seconds() / 60)


def _zone_offset_at(zone: tzinfo, year: int, month: int) -> int:
    return offset_minutes(datetime(year, month, 1, tzinfo=zone))


def is_dst(dt: datetime) -> bool:
    """Whether dt falls in the summer offset of its zone's year.

    Zones with the same offset on January 1st and July 1st never observe DST.
    Otherwise the larger of the two is the summer offset.
    """
    if dt.tzinfo is None:
        return False
    january = _zone_offset_at(dt.tzinfo, dt.year, 1)
    july = _zone_offset_at(dt.tzinfo, dt.year, 7)
    if january == july:
        return False
    return offset_minutes(dt) == max(january, july)


def gmt_name(minutes: int) -> str:
    """Offset spelled as an abbreviation: UTC, GMT+2, GMT-3:30."""
    if minutes == 0:
        return "UTC"
    sign = "+" if minutes >= 0 else "-"
    hours, mins = divmod(abs(minutes), 60)
    suffix = f":{mins:02d}" if mins else ""
    return f"GMT{sign}{hours}{suffix}"


def abbreviation(dt: datetime) -> str:
    """Timezone abbreviation of dt, e.g. CEST or EST.

    Zones whose name only spells an offset get the GMT form instead.
    """
    name = dt.tzname()
    if name and not _NUMERIC_NAME.match(name):
        return name
    return gmt_name(offset_minutes(dt))


def zone_identifier(dt: datetime) -> str | None:
    """IANA identifier for dt's zone where the platform can tell."""
    zone = dt.tzinfo
    if isinstance(zone, ZoneInfo):
        return zone.key
    if isinstance(zone, LocalTimezone):
        return host_zone_name()
    return None
