# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Helion

Apparent position of the Sun from civil date-time: Julian Day and Julian
Ephemeris Day conversion with a piecewise Delta-T model, VSOP87D Earth
position, IAU 1980 nutation and obliquity, FK5 and aberration corrections,
right ascension, declination, equation of time, and azimuth/altitude for
an observer. Algorithms follow Meeus, "Astronomical Algorithms".
"""

from helion.domain.angles import (
    normalize_degrees,
    normalize_radians,
)
from helion.domain.delta_t import delta_t
from helion.domain.series import SeriesTable, evaluate_series
from helion.domain.coefficients import (
    EarthSeries,
    NutationTerm,
    NutationTable,
    load_earth_series,
    load_nutation_table,
)
from helion.domain.julian_day import (
    J2000_JD,
    CalendarInstant,
    InvalidDateError,
    julian_day,
    julian_ephemeris_day,
    julian_day_to_calendar,
    julian_centuries,
    julian_millennia,
)
from helion.domain.earth_position import HeliocentricPosition, earth_position
from helion.domain.nutation import (
    FundamentalArguments,
    NutationObliquity,
    fundamental_arguments,
    mean_obliquity,
    nutation_obliquity,
)
from helion.domain.solar_position import (
    GeographicLocation,
    SolarPosition,
    mean_sidereal_time,
    apparent_sidereal_time,
    solar_position,
    solar_position_at_jde,
    solar_position_series,
)

__version__ = "1.0.0"

__all__ = [
    "normalize_degrees",
    "normalize_radians",
    "delta_t",
    "SeriesTable",
    "evaluate_series",
    "EarthSeries",
    "NutationTerm",
    "NutationTable",
    "load_earth_series",
    "load_nutation_table",
    "J2000_JD",
    "CalendarInstant",
    "InvalidDateError",
    "julian_day",
    "julian_ephemeris_day",
    "julian_day_to_calendar",
    "julian_centuries",
    "julian_millennia",
    "HeliocentricPosition",
    "earth_position",
    "FundamentalArguments",
    "NutationObliquity",
    "fundamental_arguments",
    "mean_obliquity",
    "nutation_obliquity",
    "GeographicLocation",
    "SolarPosition",
    "mean_sidereal_time",
    "apparent_sidereal_time",
    "solar_position",
    "solar_position_at_jde",
    "solar_position_series",
]
