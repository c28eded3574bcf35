# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Heliocentric ecliptic position of the Earth.

VSOP87D series (Meeus truncation, "Astronomical Algorithms" Ch. 32 and
Appendix III), referred to the mean ecliptic and equinox of date.
"""
import math
from dataclasses import dataclass
from typing import Optional

from helion.domain.angles import normalize_degrees, normalize_radians
from helion.domain.coefficients import EarthSeries, load_earth_series
from helion.domain.julian_day import julian_millennia
from helion.domain.series import evaluate_series


@dataclass(frozen=True)
class HeliocentricPosition:
    """Earth's heliocentric ecliptic coordinates."""
    longitude_deg: float  # L, [0, 360)
    latitude_deg: float  # B, small and signed
    radius_au: float  # R


def earth_position(jde: float, series: Optional[EarthSeries] = None) -> HeliocentricPosition:
    """Heliocentric longitude, latitude and radius vector of the Earth.

    Args:
        jde: Julian Ephemeris Day.
        series: Coefficient tables; the bundled VSOP87D tables when None.

    Returns:
        HeliocentricPosition with L in [0, 360) degrees, B in degrees and
        R in astronomical units.
    """
    if series is None:
        series = load_earth_series()

    tau = julian_millennia(jde)

    longitude_rad = normalize_radians(evaluate_series(series.longitude, tau))
    latitude_rad = evaluate_series(series.latitude, tau)
    radius_au = evaluate_series(series.radius, tau)

    return HeliocentricPosition(
        longitude_deg=normalize_degrees(math.degrees(longitude_rad)),
        latitude_deg=math.degrees(latitude_rad),
        radius_au=radius_au,
    )
