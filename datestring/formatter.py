"""Render datetimes with PHP date()-style format strings.

Each character of the format is looked up in the token table; unknown
characters are copied as-is and a backslash copies the next character
literally. Escape letters that are tokens when they should appear as text,
e.g. ``l, \\t\\h\\e jS \\o\\f F Y`` gives "Friday, the 31st of August 2018".
"""

import re
from datetime import datetime

from .config import FormatterConfig
from .names import ENGLISH, NameTables
from .tokens import COMPOSITES, TOKENS
from .zones import localize

# An optionally escaped single character
_TOKEN_RE = re.compile(r"\\?(.)", re.DOTALL)


def render(dt: datetime, fmt: str, names: NameTables = ENGLISH) -> str:
    """Format a datetime. Never fails on the format string.

    Naive datetimes are read in the host's local zone.
    """
    dt = localize(dt)

    def replace(match: re.Match[str]) -> str:
        token = match.group(0)
        if len(token) == 2:
            return match.group(1)
        if token in COMPOSITES:
            return render(dt, COMPOSITES[token], names)
        compute = TOKENS.get(token)
        if compute is None:
            return token
        return str(compute(dt, names))

    return _TOKEN_RE.sub(replace, fmt)


class DateFormatter:
    """Formats datetimes with a fixed configuration."""

    def __init__(self, config: FormatterConfig | None = None) -> None:
        self.config = config or FormatterConfig()

    def resolve(self, timestamp: datetime) -> datetime:
        """Attach the configured (or host local) zone to naive timestamps."""
        if not isinstance(timestamp, datetime):
            raise TypeError(
                f"Expected a datetime, got {type(timestamp).__name__}"
            )
        return localize(timestamp, self.config.timezone)

    def format(self, timestamp: datetime, fmt: str) -> str:
        """Format timestamp according to fmt."""
        dt = self.resolve(timestamp)
        return render(dt, fmt, self.config.names)


def format_date(
    timestamp: datetime, fmt: str, config: FormatterConfig | None = None
) -> str:
    """Format a datetime according to a PHP date()-style format string.

    Naive datetimes are read in ``config.timezone`` or the host's local zone.

    Example: format_date(dt, "Y-m-d H:i:s") -> "2018-07-09 15:33:24"
    """
    return DateFormatter(config).format(timestamp, fmt)
