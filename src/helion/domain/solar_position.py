# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Apparent position of the Sun.

High-accuracy pipeline of Meeus, "Astronomical Algorithms" (2nd ed.):
Earth VSOP87D position (Ch. 32), geocentric conversion and FK5 correction,
nutation and aberration (Ch. 25), equatorial transform (Ch. 13),
equation of time (Ch. 28), sidereal time (Ch. 12) and horizontal
coordinates (Ch. 13).

Longitude convention: ``GeographicLocation.longitude_deg`` is the standard
east-positive longitude. Meeus measures geographic longitude positive west
of Greenwich; the sign is flipped once, when the hour angle is formed.
"""
import math
import numbers
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterator, Optional, Union

from helion.domain.angles import (
    asin_degrees,
    atan2_degrees,
    cos_degrees,
    normalize_degrees,
    sin_degrees,
    tan_degrees,
)
from helion.domain.coefficients import EarthSeries, NutationTable
from helion.domain.earth_position import earth_position
from helion.domain.julian_day import (
    J2000_JD,
    CalendarInstant,
    julian_centuries,
    julian_ephemeris_day,
)
from helion.domain.numeric import horner, round_half_up
from helion.domain.nutation import NutationObliquity, nutation_obliquity

# FK5 frame correction (Meeus Eq. 32.3)
_FK5_LONGITUDE_CORRECTION_DEG: float = -0.09033 / 3600.0
_FK5_LATITUDE_FACTOR_DEG: float = 0.03916 / 3600.0

# Constant of aberration times a = 1 AU, degrees
_ABERRATION_DEG_AU: float = 20.4898 / 3600.0

# Sun's mean longitude, powers of Julian millennia (Meeus Eq. 28.2)
_SUN_MEAN_LONGITUDE: tuple[float, ...] = (
    280.4664567, 360007.6982779, 0.03032028,
    1.0 / 49931.0, -1.0 / 15299.0, -1.0 / 1988000.0,
)
_EQUATION_OF_TIME_OFFSET_DEG: float = 0.0057183
_MINUTES_PER_DEGREE: float = 4.0

_HORIZONTAL_DECIMALS: int = 6

InstantLike = Union[CalendarInstant, datetime]


def _is_finite_number(value: object) -> bool:
    return (isinstance(value, numbers.Real)
            and not isinstance(value, bool)
            and math.isfinite(value))


@dataclass(frozen=True)
class GeographicLocation:
    """Observer position on the Earth.

    ``longitude_deg`` is east-positive (IAU convention).
    """
    latitude_deg: float
    longitude_deg: float

    @property
    def is_finite(self) -> bool:
        """Both coordinates are real, finite numbers."""
        return _is_finite_number(self.latitude_deg) and _is_finite_number(self.longitude_deg)

    @staticmethod
    def from_west_positive(latitude_deg: float, longitude_deg: float) -> "GeographicLocation":
        """Create from a longitude measured positive west of Greenwich."""
        return GeographicLocation(latitude_deg, -longitude_deg)


@dataclass(frozen=True)
class SolarPosition:
    """Apparent geocentric position of the Sun, angles in degrees.

    Azimuth is the compass bearing (0 north, 90 east, 180 south), which is
    Meeus' westward-from-south angle plus 180. Altitude is positive
    above the horizon; both are None when no observer was given.
    """
    equation_of_time_min: float
    right_ascension_deg: float
    declination_deg: float
    apparent_longitude_deg: float
    apparent_latitude_deg: float
    radius_au: float
    jde: float
    azimuth_deg: Optional[float] = None
    altitude_deg: Optional[float] = None

    @property
    def has_horizontal(self) -> bool:
        return self.azimuth_deg is not None and self.altitude_deg is not None


# --------------------------------------------------------------------------- #
# Sidereal time
# --------------------------------------------------------------------------- #

def mean_sidereal_time(jd: float) -> float:
    """Mean sidereal time at Greenwich in degrees, [0, 360) (Meeus Eq. 12.4).

    The cubic term is added; Meeus prints it with a minus sign. The two
    differ by about 0.002 deg at T = -33.
    """
    t = julian_centuries(jd)
    theta0 = (280.46061837
              + 360.98564736629 * (jd - J2000_JD)
              + 0.000387933 * t * t
              + t * t * t / 38710000.0)
    return normalize_degrees(theta0)


def apparent_sidereal_time(jd: float, nutation: NutationObliquity) -> float:
    """Apparent sidereal time at Greenwich: mean value plus the equation of the equinoxes.

    Only the mean value is reduced to [0, 360); the result may fall a few
    arcseconds outside that range.
    """
    return (mean_sidereal_time(jd)
            + nutation.longitude_deg * cos_degrees(nutation.true_obliquity_deg))


# --------------------------------------------------------------------------- #
# Pipeline
# --------------------------------------------------------------------------- #

def _equation_of_time(
    t: float,
    right_ascension_deg: float,
    nutation: NutationObliquity,
) -> float:
    """Equation of time in minutes, in (-720, 720]."""
    tau = t / 10.0
    l0 = normalize_degrees(horner(tau, _SUN_MEAN_LONGITUDE))
    e_deg = normalize_degrees(
        l0
        - _EQUATION_OF_TIME_OFFSET_DEG
        - right_ascension_deg
        + nutation.longitude_deg * cos_degrees(nutation.true_obliquity_deg)
    )
    if e_deg > 180.0:
        e_deg -= 360.0
    return e_deg * _MINUTES_PER_DEGREE


def _horizontal(
    location: GeographicLocation,
    sidereal_deg: float,
    right_ascension_deg: float,
    declination_deg: float,
) -> tuple[float, float]:
    """Azimuth (bearing from north through east) and altitude in degrees."""
    west_longitude = -location.longitude_deg
    lat = location.latitude_deg
    hour_angle = normalize_degrees(sidereal_deg - west_longitude - right_ascension_deg)

    azimuth = normalize_degrees(180.0 + atan2_degrees(
        sin_degrees(hour_angle),
        cos_degrees(hour_angle) * sin_degrees(lat)
        - tan_degrees(declination_deg) * cos_degrees(lat),
    ))
    altitude = asin_degrees(
        sin_degrees(lat) * sin_degrees(declination_deg)
        + cos_degrees(lat) * cos_degrees(declination_deg) * cos_degrees(hour_angle)
    )

    azimuth = round_half_up(azimuth, _HORIZONTAL_DECIMALS)
    if azimuth >= 360.0:
        azimuth = 0.0
    return azimuth, round_half_up(altitude, _HORIZONTAL_DECIMALS)


def solar_position_at_jde(
    jde: float,
    location: Optional[GeographicLocation] = None,
    earth_series: Optional[EarthSeries] = None,
    nutation_table: Optional[NutationTable] = None,
) -> SolarPosition:
    """Apparent solar coordinates at a Julian Ephemeris Day.

    Args:
        jde: Julian Ephemeris Day.
        location: Observer; azimuth and altitude are computed only if given
            with finite coordinates.
        earth_series: Earth VSOP87D tables (bundled tables when None).
        nutation_table: Nutation series (bundled table when None).

    Returns:
        SolarPosition. Azimuth and altitude are rounded to 6 decimals.
    """
    helio = earth_position(jde, earth_series)

    # Heliocentric Earth -> geocentric Sun
    theta = normalize_degrees(helio.longitude_deg + 180.0)
    beta = -helio.latitude_deg

    # FK5
    t = julian_centuries(jde)
    lambda_prime = theta + t * (-1.397 + t * (-0.00031 * t))
    beta += _FK5_LATITUDE_FACTOR_DEG * (cos_degrees(lambda_prime) - sin_degrees(lambda_prime))
    theta += _FK5_LONGITUDE_CORRECTION_DEG

    # Nutation and aberration
    nutation = nutation_obliquity(jde, nutation_table)
    apparent_longitude = theta + nutation.longitude_deg - _ABERRATION_DEG_AU / helio.radius_au
    epsilon = nutation.true_obliquity_deg

    right_ascension = normalize_degrees(atan2_degrees(
        sin_degrees(apparent_longitude) * cos_degrees(epsilon)
        - tan_degrees(beta) * sin_degrees(epsilon),
        cos_degrees(apparent_longitude),
    ))
    declination = asin_degrees(
        sin_degrees(beta) * cos_degrees(epsilon)
        + cos_degrees(beta) * sin_degrees(epsilon) * sin_degrees(apparent_longitude)
    )

    azimuth = altitude = None
    if location is not None and location.is_finite:
        sidereal = apparent_sidereal_time(jde, nutation)
        azimuth, altitude = _horizontal(location, sidereal, right_ascension, declination)

    return SolarPosition(
        equation_of_time_min=_equation_of_time(t, right_ascension, nutation),
        right_ascension_deg=right_ascension,
        declination_deg=declination,
        apparent_longitude_deg=normalize_degrees(apparent_longitude),
        apparent_latitude_deg=beta,
        radius_au=helio.radius_au,
        jde=jde,
        azimuth_deg=azimuth,
        altitude_deg=altitude,
    )


def _to_instant(instant: InstantLike) -> CalendarInstant:
    if isinstance(instant, datetime):
        return CalendarInstant.from_datetime(instant)
    return instant


def solar_position(
    instant: InstantLike,
    lat: Optional[float] = None,
    lon: Optional[float] = None,
    *,
    location: Optional[GeographicLocation] = None,
    earth_series: Optional[EarthSeries] = None,
    nutation_table: Optional[NutationTable] = None,
) -> SolarPosition:
    """Apparent position of the Sun for a civil UTC instant.

    The observer may be given either as ``location`` or as bare ``lat`` /
    ``lon`` degrees (longitude east-positive). Missing or non-finite
    coordinates are not an error: azimuth and altitude are left as None.

    Raises:
        InvalidDateError: If the instant precedes -4712-01-01 12:00 UTC.
        ValueError: If both ``location`` and ``lat``/``lon`` are given.
    """
    if location is not None and (lat is not None or lon is not None):
        raise ValueError("pass either location or lat/lon, not both")
    if location is None and _is_finite_number(lat) and _is_finite_number(lon):
        location = GeographicLocation(float(lat), float(lon))

    jde = julian_ephemeris_day(_to_instant(instant))
    return solar_position_at_jde(
        jde,
        location=location,
        earth_series=earth_series,
        nutation_table=nutation_table,
    )


def solar_position_series(
    start: datetime,
    stop: datetime,
    step: timedelta,
    location: Optional[GeographicLocation] = None,
    earth_series: Optional[EarthSeries] = None,
    nutation_table: Optional[NutationTable] = None,
) -> Iterator[tuple[CalendarInstant, SolarPosition]]:
    """Yield (instant, position) pairs from ``start`` to ``stop`` inclusive.

    Raises:
        ValueError: If ``step`` is not positive.
    """
    if step <= timedelta(0):
        raise ValueError(f"step must be positive, got {step}")

    current = start
    while current <= stop:
        instant = CalendarInstant.from_datetime(current)
        yield instant, solar_position(
            instant,
            location=location,
            earth_series=earth_series,
            nutation_table=nutation_table,
        )
        current += step
