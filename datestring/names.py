"""Weekday and month name tables for the name-producing tokens."""

from dataclasses import dataclass

#: English names of the days of the week, Sunday first.
WEEKDAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

#: English names of the months of the year, January first.
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

DAYS_IN_WEEK = len(WEEKDAY_NAMES)
MONTHS_IN_YEAR = len(MONTH_NAMES)


@dataclass(frozen=True)
class NameTables:
    """Translatable names used by the D, l, F and M tokens.

    Weekdays must start with Sunday so they can be indexed by the
    Sunday-based weekday number (the w token).
    """

    weekdays: tuple[str, ...] = WEEKDAY_NAMES
    months: tuple[str, ...] = MONTH_NAMES

    def __post_init__(self) -> None:
        # Accept any sequence, store tuples
        object.__setattr__(self, "weekdays", tuple(self.weekdays))
        object.__setattr__(self, "months", tuple(self.months))

        if len(self.weekdays) != DAYS_IN_WEEK:
            raise ValueError(
                f"Expected {DAYS_IN_WEEK} weekday names, got {len(self.weekdays)}"
            )
        if len(self.months) != MONTHS_IN_YEAR:
            raise ValueError(
                f"Expected {MONTHS_IN_YEAR} month names, got {len(self.months)}"
            )

    @classmethod
    def from_csv(
        cls, weekdays: str | None = None, months: str | None = None
    ) -> "NameTables":
        """Build tables from comma-separated lists, English where omitted."""
        return cls(
            weekdays=_split_names(weekdays) if weekdays else WEEKDAY_NAMES,
            months=_split_names(months) if months else MONTH_NAMES,
        )

    def weekday(self, index: int) -> str:
        """Weekday name for a Sunday-based index (0 = Sunday)."""
        if not 0 <= index < DAYS_IN_WEEK:
            raise IndexError(f"Weekday index out of range: {index}")
        return self.weekdays[index]

    def month(self, index: int) -> str:
        """Month name for a zero-based index (0 = January)."""
        if not 0 <= index < MONTHS_IN_YEAR:
            raise IndexError(f"Month index out of range: {index}")
        return self.months[index]


ENGLISH = NameTables()


def _split_names(value: str) -> tuple[str, ...]:
    return tuple(name.strip() for name in value.split(","))
