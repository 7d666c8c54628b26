"""datestring - PHP date()-style formatting for Python datetimes."""

from .config import FormatterConfig
from .formatter import DateFormatter, format_date, render
from .gregorian import day_of_year, days_in_month, first_weekday, is_leap_year
from .logging import setup_logging
from .names import ENGLISH, MONTH_NAMES, WEEKDAY_NAMES, NameTables
from .tokens import COMPOSITES, TOKENS, iso_week_number
from .zones import LocalTimezone, host_zone_name, localize

__all__ = [
    # Config
    "FormatterConfig",
    # Formatter
    "DateFormatter",
    "format_date",
    "render",
    # Calendar
    "day_of_year",
    "days_in_month",
    "first_weekday",
    "is_leap_year",
    # Logging
    "setup_logging",
    # Names
    "ENGLISH",
    "MONTH_NAMES",
    "WEEKDAY_NAMES",
    "NameTables",
    # Tokens
    "COMPOSITES",
    "TOKENS",
    "iso_week_number",
    # Zones
    "LocalTimezone",
    "host_zone_name",
    "localize",
]
