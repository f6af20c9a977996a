"""Julian dates relative to the J2000 epoch."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

S_PER_JULIAN_DAY = 86400.0
DAYS_PER_CENTURY = 36525.0
E2000_JULIAN = 2451545.0
JULIAN_1970_OFFS = 2440587.5


@dataclass(frozen=True)
class JulianDate:
    """A Julian date in UTC, counted in days."""

    jd: float

    @classmethod
    def from_datetime(cls, moment: datetime) -> JulianDate:
        """Julian date of a datetime; naive values are taken as local time."""
        return cls(moment.timestamp() / S_PER_JULIAN_DAY + JULIAN_1970_OFFS)

    def e2000_days(self) -> float:
        """Days since the J2000 epoch."""
        return self.jd - E2000_JULIAN

    def e2000_centuries(self) -> float:
        """Julian centuries since the J2000 epoch."""
        return self.e2000_days() / DAYS_PER_CENTURY