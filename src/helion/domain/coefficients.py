# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Static coefficient tables for the Earth and nutation models.

Tables ship as JSON under ``helion/data`` and are loaded once into
read-only NumPy arrays. ``load_earth_series()`` and ``load_nutation_table()``
cache the bundled tables; passing an explicit ``path`` reads that file and
bypasses the cache.
"""
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Optional, Sequence

import numpy as np

from helion.domain.series import SeriesTable

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent.parent / "data"
_EARTH_SERIES_FILE = "vsop87d_earth.json"
_NUTATION_FILE = "nutation_iau1980.json"


# --------------------------------------------------------------------------- #
# Table types
# --------------------------------------------------------------------------- #

@dataclass(frozen=True)
class EarthSeries:
    """Heliocentric series for the Earth: L and B in radians, R in AU."""
    longitude: SeriesTable
    latitude: SeriesTable
    radius: SeriesTable


@dataclass(frozen=True)
class NutationTerm:
    """One periodic term of the nutation series.

    Multipliers apply to the fundamental arguments D, M, M', F, Omega.
    Coefficients are in units of 0.0001 arcsec; each contribution is
    ``(a + b * T)`` with T in Julian centuries.
    """
    d: int
    m: int
    m_prime: int
    f: int
    omega: int
    longitude_a: float
    longitude_b: float
    obliquity_a: float
    obliquity_b: float


@dataclass(frozen=True)
class NutationTable:
    """Ordered nutation terms with column arrays for vectorized evaluation."""
    terms: tuple[NutationTerm, ...]
    multipliers: np.ndarray = field(init=False, repr=False, compare=False)
    longitude_coefficients: np.ndarray = field(init=False, repr=False, compare=False)
    obliquity_coefficients: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        terms = tuple(self.terms)
        multipliers = np.array(
            [(t.d, t.m, t.m_prime, t.f, t.omega) for t in terms],
            dtype=np.float64,
        ).reshape(len(terms), 5)
        longitude = np.array(
            [(t.longitude_a, t.longitude_b) for t in terms], dtype=np.float64,
        ).reshape(len(terms), 2)
        obliquity = np.array(
            [(t.obliquity_a, t.obliquity_b) for t in terms], dtype=np.float64,
        ).reshape(len(terms), 2)
        for arr in (multipliers, longitude, obliquity):
            arr.setflags(write=False)
        object.__setattr__(self, "terms", terms)
        object.__setattr__(self, "multipliers", multipliers)
        object.__setattr__(self, "longitude_coefficients", longitude)
        object.__setattr__(self, "obliquity_coefficients", obliquity)

    def __len__(self) -> int:
        return len(self.terms)


# --------------------------------------------------------------------------- #
# Parsing
# --------------------------------------------------------------------------- #

def _parse_series(raw: Sequence, scale: float, source: Path, name: str) -> SeriesTable:
    table: dict[int, np.ndarray] = {}
    for power, rows in enumerate(raw):
        try:
            arr = np.array(rows, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise ValueError(f"{source.name}: series {name}{power} is malformed ({e})") from e
        if arr.ndim != 2 or arr.shape[1] != 3:
            raise ValueError(
                f"{source.name}: series {name}{power} must be a list of "
                f"[amplitude, phase, frequency] triples"
            )
        arr[:, 0] *= scale
        arr.setflags(write=False)
        table[power] = arr
    return MappingProxyType(table)


def _read_json(path: Path) -> dict:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def parse_earth_series(data: dict, source: Path = Path(_EARTH_SERIES_FILE)) -> EarthSeries:
    """Build an EarthSeries from the decoded JSON document."""
    try:
        scale = float(data["unit_factor"])
        series = data["series"]
        return EarthSeries(
            longitude=_parse_series(series["L"], scale, source, "L"),
            latitude=_parse_series(series["B"], scale, source, "B"),
            radius=_parse_series(series["R"], scale, source, "R"),
        )
    except KeyError as e:
        raise ValueError(f"{source.name}: missing key {e}") from e


def parse_nutation_table(data: dict, source: Path = Path(_NUTATION_FILE)) -> NutationTable:
    """Build a NutationTable from the decoded JSON document."""
    terms = []
    try:
        for entry in data["terms"]:
            psi_a, psi_b = entry["psi"]
            eps_a, eps_b = entry["eps"]
            terms.append(NutationTerm(
                d=int(entry["D"]),
                m=int(entry["M"]),
                m_prime=int(entry["Mp"]),
                f=int(entry["F"]),
                omega=int(entry["Om"]),
                longitude_a=float(psi_a),
                longitude_b=float(psi_b),
                obliquity_a=float(eps_a),
                obliquity_b=float(eps_b),
            ))
    except KeyError as e:
        raise ValueError(f"{source.name}: missing key {e}") from e
    except (TypeError, ValueError) as e:
        raise ValueError(f"{source.name}: malformed nutation term ({e})") from e
    return NutationTable(terms=tuple(terms))


# --------------------------------------------------------------------------- #
# Loading (cached)
# --------------------------------------------------------------------------- #

_CACHED_EARTH_SERIES: Optional[EarthSeries] = None
_CACHED_NUTATION_TABLE: Optional[NutationTable] = None


def load_earth_series(path: Optional[str] = None) -> EarthSeries:
    """Load the Earth VSOP87D series from the bundled JSON or a custom path."""
    global _CACHED_EARTH_SERIES

    if path is None and _CACHED_EARTH_SERIES is not None:
        return _CACHED_EARTH_SERIES

    data_path = _DATA_DIR / _EARTH_SERIES_FILE if path is None else Path(path)
    series = parse_earth_series(_read_json(data_path), data_path)
    logger.debug(
        "Loaded Earth series from %s (%d L, %d B, %d R terms)",
        data_path,
        sum(len(v) for v in series.longitude.values()),
        sum(len(v) for v in series.latitude.values()),
        sum(len(v) for v in series.radius.values()),
    )

    if path is None:
        _CACHED_EARTH_SERIES = series
    return series


def load_nutation_table(path: Optional[str] = None) -> NutationTable:
    """Load the nutation series from the bundled JSON or a custom path."""
    global _CACHED_NUTATION_TABLE

    if path is None and _CACHED_NUTATION_TABLE is not None:
        return _CACHED_NUTATION_TABLE

    data_path = _DATA_DIR / _NUTATION_FILE if path is None else Path(path)
    table = parse_nutation_table(_read_json(data_path), data_path)
    logger.debug("Loaded %d nutation terms from %s", len(table), data_path)

    if path is None:
        _CACHED_NUTATION_TABLE = table
    return table
