# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Nutation in longitude and obliquity, and the obliquity of the ecliptic.

IAU 1980 theory as given in Meeus, "Astronomical Algorithms" Ch. 22
(Table 22.A), with the mean obliquity from Laskar's polynomial (Eq. 22.3).

NumPy vectorized: all series terms are evaluated in one pass.
"""
from dataclasses import dataclass
from typing import Optional

import numpy as np

from helion.domain.angles import normalize_degrees
from helion.domain.coefficients import NutationTable, load_nutation_table
from helion.domain.julian_day import julian_centuries
from helion.domain.numeric import horner

# Table coefficients are in units of 0.0001 arcsec
_COEFFICIENTS_PER_DEG: float = 36_000_000.0

# Laskar (1986) mean obliquity, arcseconds, powers of U = T / 100
_MEAN_OBLIQUITY_ARCSEC: tuple[float, ...] = (
    84381.448, -4680.93, -1.55, 1999.25, -51.38,
    -249.67, -39.05, 7.12, 27.87, 5.79, 2.45,
)


@dataclass(frozen=True)
class FundamentalArguments:
    """Delaunay-type arguments of the nutation series, degrees in [0, 360)."""
    elongation_deg: float  # D, mean elongation of the Moon from the Sun
    sun_anomaly_deg: float  # M, mean anomaly of the Sun (Earth)
    moon_anomaly_deg: float  # M', mean anomaly of the Moon
    moon_latitude_deg: float  # F, Moon's argument of latitude
    node_deg: float  # Omega, longitude of the Moon's ascending node

    def as_array(self) -> np.ndarray:
        return np.array([
            self.elongation_deg,
            self.sun_anomaly_deg,
            self.moon_anomaly_deg,
            self.moon_latitude_deg,
            self.node_deg,
        ])


@dataclass(frozen=True)
class NutationObliquity:
    """Nutation and obliquity, all in degrees."""
    longitude_deg: float  # delta psi
    obliquity_deg: float  # delta epsilon
    mean_obliquity_deg: float  # epsilon 0
    true_obliquity_deg: float  # epsilon = epsilon 0 + delta epsilon


def fundamental_arguments(t: float) -> FundamentalArguments:
    """Fundamental arguments at ``t`` Julian centuries from J2000.0 (Meeus 22)."""
    return FundamentalArguments(
        elongation_deg=normalize_degrees(
            horner(t, (297.85036, 445267.111480, -0.0019142, 1.0 / 189474.0))),
        sun_anomaly_deg=normalize_degrees(
            horner(t, (357.52772, 35999.050340, -0.0001603, -1.0 / 300000.0))),
        moon_anomaly_deg=normalize_degrees(
            horner(t, (134.96298, 477198.867398, 0.0086972, 1.0 / 56250.0))),
        moon_latitude_deg=normalize_degrees(
            horner(t, (93.27191, 483202.017538, -0.0036825, 1.0 / 327270.0))),
        node_deg=normalize_degrees(
            horner(t, (125.04452, -1934.136261, 0.0020708, 1.0 / 450000.0))),
    )


def mean_obliquity(t: float) -> float:
    """Mean obliquity of the ecliptic in degrees, ``t`` in Julian centuries.

    Laskar's expression; valid over +/- 10000 years from J2000.0.
    """
    return horner(t / 100.0, _MEAN_OBLIQUITY_ARCSEC) / 3600.0


def nutation_obliquity(
    jde: float,
    table: Optional[NutationTable] = None,
) -> NutationObliquity:
    """Nutation in longitude and obliquity, and the true obliquity.

    Args:
        jde: Julian Ephemeris Day.
        table: Nutation series; the bundled 63-term table when None.

    Returns:
        NutationObliquity in degrees.
    """
    if table is None:
        table = load_nutation_table()

    t = julian_centuries(jde)
    args_deg = table.multipliers @ fundamental_arguments(t).as_array()
    args_rad = np.radians(args_deg)

    psi = table.longitude_coefficients
    eps = table.obliquity_coefficients
    delta_psi = float(np.sum((psi[:, 0] + psi[:, 1] * t) * np.sin(args_rad)))
    delta_eps = float(np.sum((eps[:, 0] + eps[:, 1] * t) * np.cos(args_rad)))
    delta_psi /= _COEFFICIENTS_PER_DEG
    delta_eps /= _COEFFICIENTS_PER_DEG

    eps0 = mean_obliquity(t)

    return NutationObliquity(
        longitude_deg=delta_psi,
        obliquity_deg=delta_eps,
        mean_obliquity_deg=eps0,
        true_obliquity_deg=eps0 + delta_eps,
    )
