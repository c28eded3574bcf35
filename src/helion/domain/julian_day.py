# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Civil date-time to Julian Day and Julian Ephemeris Day.

Meeus, "Astronomical Algorithms" (2nd ed.), Ch. 7 (Julian Day) and
Ch. 10 (dynamical time). The calendar system is an explicit argument:
proleptic Gregorian by default, proleptic Julian when ``gregorian=False``.
"""
import math
from dataclasses import dataclass
from datetime import datetime, timezone

from helion.domain.delta_t import delta_t

J2000_JD: float = 2451545.0
"""Julian Day of the J2000.0 epoch (2000-01-01 12:00 TT)."""

_SECONDS_PER_DAY: float = 86400.0
_MICROSECONDS_PER_DAY: int = 86_400_000_000
_DAYS_PER_JULIAN_CENTURY: float = 36525.0
_DAYS_PER_JULIAN_MILLENNIUM: float = 365250.0

# First day of the Gregorian calendar (1582-10-15) as an integer day number
_GREGORIAN_REFORM_DAY: int = 2299161


class InvalidDateError(ValueError):
    """Date cannot be represented by the Julian Day algorithms.

    Raised for instants before -4712-01-01 12:00 UTC (negative JD) and for
    months outside 1..12.
    """


@dataclass(frozen=True)
class CalendarInstant:
    """Civil UTC date-time with a signed, proleptic (astronomical) year.

    Year 0 is 1 BC. Unlike ``datetime.datetime`` this covers years before 1.
    """
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    microsecond: int = 0

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise InvalidDateError(f"month must be in 1..12, got {self.month}")

    @staticmethod
    def from_datetime(dt: datetime) -> "CalendarInstant":
        """Create from a datetime. Naive datetimes are treated as UTC."""
        if dt.tzinfo is not None:
            dt = dt.astimezone(timezone.utc)
        return CalendarInstant(
            dt.year, dt.month, dt.day,
            dt.hour, dt.minute, dt.second, dt.microsecond,
        )

    @property
    def fractional_day(self) -> float:
        """Day of month plus the elapsed fraction of that day."""
        return (self.day
                + self.hour / 24.0
                + self.minute / 1440.0
                + self.second / _SECONDS_PER_DAY
                + self.microsecond / _MICROSECONDS_PER_DAY)

    def isoformat(self) -> str:
        text = (f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
                f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}")
        if self.microsecond:
            text += f".{self.microsecond:06d}"
        return text + "Z"


def julian_day(instant: CalendarInstant, gregorian: bool = True) -> float:
    """Convert a civil UTC instant to Julian Day.

    Args:
        instant: Civil date-time in UTC.
        gregorian: Interpret the date in the proleptic Gregorian calendar
            (default) or, when False, the proleptic Julian calendar.

    Raises:
        InvalidDateError: If the instant precedes -4712-01-01 12:00 UTC
            (Julian calendar), i.e. the Julian Day would be negative.
    """
    y = instant.year
    m = instant.month
    if m < 3:
        y -= 1
        m += 12

    a = y // 100
    b = 2 - a + a // 4 if gregorian else 0

    jd = (math.floor(365.25 * (y + 4716))
          + math.floor(30.6001 * (m + 1))
          + instant.fractional_day + b - 1524.5)

    if jd < 0.0:
        raise InvalidDateError(
            f"{instant.isoformat()} precedes -4712-01-01T12:00Z; "
            "negative Julian Days are not supported"
        )
    return jd


def julian_ephemeris_day(instant: CalendarInstant) -> float:
    """Julian Ephemeris Day: Gregorian JD plus Delta-T for the civil month."""
    return julian_day(instant, True) + delta_t(instant.year, instant.month) / _SECONDS_PER_DAY


def julian_centuries(jde: float) -> float:
    """Julian centuries from J2000.0."""
    return (jde - J2000_JD) / _DAYS_PER_JULIAN_CENTURY


def julian_millennia(jde: float) -> float:
    """Julian millennia from J2000.0."""
    return (jde - J2000_JD) / _DAYS_PER_JULIAN_MILLENNIUM


def julian_day_to_calendar(jd: float) -> CalendarInstant:
    """Convert a Julian Day back to a civil UTC instant.

    Days before 1582-10-15 are returned in the Julian calendar, later days
    in the Gregorian calendar (Meeus Ch. 7, inverse algorithm).

    Raises:
        InvalidDateError: If ``jd`` is negative.
    """
    if jd < 0.0:
        raise InvalidDateError(f"Julian Day {jd} is negative")

    jd_plus = jd + 0.5
    z = math.floor(jd_plus)
    day_microseconds = round((jd_plus - z) * _MICROSECONDS_PER_DAY)
    if day_microseconds >= _MICROSECONDS_PER_DAY:
        z += 1
        day_microseconds = 0

    if z < _GREGORIAN_REFORM_DAY:
        a = z
    else:
        alpha = math.floor((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - alpha // 4

    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)

    day = b - d - math.floor(30.6001 * e)
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715

    seconds, microsecond = divmod(day_microseconds, 1_000_000)
    hour, seconds = divmod(seconds, 3600)
    minute, second = divmod(seconds, 60)

    return CalendarInstant(year, month, day, hour, minute, second, microsecond)
