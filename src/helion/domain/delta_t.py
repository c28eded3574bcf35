# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Delta-T (TT - UT) estimate from civil year and month.

Piecewise polynomial expressions of Espenak & Meeus, "Five Millennium
Canon of Solar Eclipses" (NASA/TP-2006-214141), as published at
https://eclipse.gsfc.nasa.gov/SEhelp/deltatpoly2004.html.

Each segment rounds its result to the precision of the published table for
that era (whole seconds before 1800, tenths afterwards, hundredths for
1986-2005). The rounding leaves small steps at some segment boundaries; it
is kept as-is for parity with the reference tables.
"""
import logging
from dataclasses import dataclass

from helion.domain.numeric import horner, round_half_up

logger = logging.getLogger(__name__)

# Span over which the polynomials were fitted; outside it the long-term
# parabola is an extrapolation.
_FITTED_SPAN: tuple[float, float] = (-1999.0, 3000.0)


@dataclass(frozen=True)
class _Segment:
    """Polynomial in t = (y - origin) / scale, valid for years < end_year."""
    end_year: int
    origin: float
    scale: float
    coefficients: tuple[float, ...]
    decimals: int


_SEGMENTS: tuple[_Segment, ...] = (
    _Segment(500, 0.0, 100.0,
             (10583.6, -1014.41, 33.78311, -5.952053,
              -0.1798452, 0.022174192, 0.0090316521), 0),
    _Segment(1600, 1000.0, 100.0,
             (1574.2, -556.01, 71.23472, 0.319781,
              -0.8503463, -0.005050998, 0.0083572073), 0),
    _Segment(1700, 1600.0, 1.0,
             (120.0, -0.9808, -0.01532, 1.0 / 7129.0), 0),
    _Segment(1800, 1700.0, 1.0,
             (8.83, 0.1603, -0.0059285, 0.00013336, -1.0 / 1174000.0), 0),
    _Segment(1860, 1800.0, 1.0,
             (13.72, -0.332447, 0.0068612, 0.0041116, -0.00037436,
              0.0000121272, -0.0000001699, 0.000000000875), 1),
    _Segment(1900, 1860.0, 1.0,
             (7.62, 0.5737, -0.251754, 0.01680668,
              -0.0004473624, 1.0 / 233174.0), 1),
    _Segment(1920, 1900.0, 1.0,
             (-2.79, 1.494119, -0.0598939, 0.0061966, -0.000197), 1),
    _Segment(1941, 1920.0, 1.0,
             (21.20, 0.84493, -0.076100, 0.0020936), 1),
    _Segment(1961, 1950.0, 1.0,
             (29.07, 0.407, -1.0 / 233.0, 1.0 / 2547.0), 1),
    _Segment(1986, 1975.0, 1.0,
             (45.45, 1.067, -1.0 / 260.0, -1.0 / 718.0), 1),
    _Segment(2005, 2000.0, 1.0,
             (63.86, 0.3345, -0.060374, 0.0017275,
              0.000651814, 0.00002373599), 2),
    _Segment(2050, 2000.0, 1.0,
             (62.92, 0.32217, 0.005589), 1),
)

_FIRST_SEGMENT_YEAR: int = -500
_LAST_SEGMENT_YEAR: int = 2150


def decimal_year(year: int, month: int) -> float:
    """Year fraction at the middle of the given month."""
    return year + (month - 0.5) / 12.0


def _long_term_parabola(year: float) -> float:
    """Morrison & Stephenson (2004) long-term parabola."""
    u = (year - 1820.0) / 100.0
    return -20.0 + 32.0 * u * u


def delta_t(year: int, month: int) -> float:
    """Estimate Delta-T = TT - UT in seconds for a civil year and month.

    The segment is selected on the integer ``year``; the polynomial is
    evaluated at the mid-month decimal year. Defined for any finite year.
    """
    y = decimal_year(year, month)
    if not _FITTED_SPAN[0] <= y <= _FITTED_SPAN[1]:
        logger.debug("Delta-T for %.2f is extrapolated beyond the fitted span", y)

    if year < _FIRST_SEGMENT_YEAR or year >= _LAST_SEGMENT_YEAR:
        # Whole-year argument, as in the published expression
        return round_half_up(_long_term_parabola(year), 0)

    for segment in _SEGMENTS:
        if year < segment.end_year:
            t = (y - segment.origin) / segment.scale
            return round_half_up(horner(t, segment.coefficients), segment.decimals)

    # 2050 <= year < 2150: parabola blended into the 2050 value
    return round_half_up(_long_term_parabola(y) - 0.5628 * (2150.0 - y), 1)
