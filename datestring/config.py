"""Configuration management for datestring."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from .names import NameTables
from .zones import get_zone

# Load .env from project root directory (parent of datestring/)
load_dotenv(Path(__file__).parent.parent / ".env")

logger = logging.getLogger("datestring.config")


@dataclass(frozen=True)
class FormatterConfig:
    """Name tables and zone settings used while formatting.

    ``timezone`` only applies to naive datetimes; None means the host's
    local zone.
    """

    names: NameTables = field(default_factory=NameTables)
    timezone: str | None = None

    @classmethod
    def from_env(cls) -> "FormatterConfig":
        """Load configuration from environment variables.

        Raises ValueError if a name list has the wrong length or the
        timezone is unknown.
        """
        names = NameTables.from_csv(
            weekdays=os.getenv("DATESTRING_WEEKDAYS"),
            months=os.getenv("DATESTRING_MONTHS"),
        )
        config = cls(
            names=names,
            timezone=os.getenv("DATESTRING_TIMEZONE") or None,
        )

        errors = config.validate()
        if errors:
            raise ValueError("; ".join(errors))

        logger.debug(f"Loaded config: {config.to_log_string()}")
        return config

    def validate(self) -> list[str]:
        """Validate configuration. Returns list of error messages."""
        errors: list[str] = []

        if self.timezone:
            try:
                get_zone(self.timezone)
            except ValueError as e:
                errors.append(str(e))

        for name in self.names.weekdays + self.names.months:
            if not name:
                errors.append("Empty name in weekday/month tables")
                break

        return errors

    def to_log_string(self) -> str:
        """Return loggable config string."""
        return (
            f"timezone={self.timezone or 'local'}, "
            f"weekdays={','.join(self.names.weekdays)}, "
            f"months={','.join(self.names.months)}"
        )
