# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the bundled Earth and nutation coefficient tables."""
import json

import pytest

from helion.domain.coefficients import (
    EarthSeries,
    NutationTable,
    load_earth_series,
    load_nutation_table,
    parse_earth_series,
    parse_nutation_table,
)


def _term_counts(table):
    return [len(table[power]) for power in sorted(table)]


# ── Earth series ──────────────────────────────────────────────────

class TestEarthSeries:

    def test_longitude_term_counts(self):
        series = load_earth_series()
        assert _term_counts(series.longitude) == [64, 34, 20, 7, 3, 1]

    def test_latitude_term_counts(self):
        series = load_earth_series()
        assert _term_counts(series.latitude) == [5, 2]

    def test_radius_term_counts(self):
        series = load_earth_series()
        assert _term_counts(series.radius) == [40, 10, 6, 2, 1]

    def test_amplitudes_scaled(self):
        """Amplitudes are stored in units of 1e-8 and scaled on load."""
        series = load_earth_series()
        assert series.longitude[0][0, 0] == pytest.approx(1.75347046)
        assert series.radius[0][0, 0] == pytest.approx(1.00013989)

    def test_arrays_read_only(self):
        series = load_earth_series()
        with pytest.raises(ValueError):
            series.longitude[0][0, 0] = 0.0

    def test_mapping_read_only(self):
        series = load_earth_series()
        with pytest.raises(TypeError):
            series.longitude[9] = series.longitude[0]

    def test_cached(self):
        assert load_earth_series() is load_earth_series()

    def test_custom_path_bypasses_cache(self, tmp_path):
        doc = {
            "unit_factor": 1.0,
            "series": {
                "L": [[[1.0, 0.0, 0.0]]],
                "B": [[[0.0, 0.0, 0.0]]],
                "R": [[[1.0, 0.0, 0.0]]],
            },
        }
        path = tmp_path / "earth.json"
        path.write_text(json.dumps(doc), encoding="utf-8")

        custom = load_earth_series(str(path))
        assert isinstance(custom, EarthSeries)
        assert custom is not load_earth_series()
        assert _term_counts(custom.longitude) == [1]


class TestMalformedEarthSeries:

    def test_missing_key(self):
        with pytest.raises(ValueError, match="missing key"):
            parse_earth_series({"unit_factor": 1e-8, "series": {"L": [], "B": []}})

    def test_wrong_row_width(self):
        doc = {"unit_factor": 1.0, "series": {"L": [[[1.0, 2.0]]], "B": [], "R": []}}
        with pytest.raises(ValueError, match="L0"):
            parse_earth_series(doc)

    def test_non_numeric(self):
        doc = {"unit_factor": 1.0, "series": {"L": [[["x", 0.0, 0.0]]], "B": [], "R": []}}
        with pytest.raises(ValueError):
            parse_earth_series(doc)

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text(json.dumps({"series": {}}), encoding="utf-8")
        with pytest.raises(ValueError, match="broken.json"):
            load_earth_series(str(path))


# ── Nutation table ────────────────────────────────────────────────

class TestNutationTable:

    def test_term_count(self):
        assert len(load_nutation_table()) == 63

    def test_leading_term(self):
        """Largest term: argument Omega, -171996 - 174.2 T and 92025 + 8.9 T."""
        first = load_nutation_table().terms[0]
        assert (first.d, first.m, first.m_prime, first.f, first.omega) == (0, 0, 0, 0, 1)
        assert first.longitude_a == -171996.0
        assert first.longitude_b == pytest.approx(-174.2)
        assert first.obliquity_a == 92025.0
        assert first.obliquity_b == pytest.approx(8.9)

    def test_column_arrays(self):
        table = load_nutation_table()
        assert table.multipliers.shape == (63, 5)
        assert table.longitude_coefficients.shape == (63, 2)
        assert table.obliquity_coefficients.shape == (63, 2)

    def test_arrays_read_only(self):
        table = load_nutation_table()
        with pytest.raises(ValueError):
            table.multipliers[0, 0] = 9.0

    def test_cached(self):
        assert load_nutation_table() is load_nutation_table()

    def test_custom_path(self, tmp_path):
        doc = {"terms": [
            {"D": 0, "M": 0, "Mp": 0, "F": 0, "Om": 1, "psi": [-171996, -174.2], "eps": [92025, 8.9]},
        ]}
        path = tmp_path / "nutation.json"
        path.write_text(json.dumps(doc), encoding="utf-8")

        table = load_nutation_table(str(path))
        assert isinstance(table, NutationTable)
        assert len(table) == 1
        assert table is not load_nutation_table()

    def test_missing_key(self):
        with pytest.raises(ValueError, match="missing key"):
            parse_nutation_table({"terms": [{"D": 0, "M": 0, "Mp": 0, "F": 0, "psi": [1, 0], "eps": [1, 0]}]})

    def test_malformed_coefficients(self):
        with pytest.raises(ValueError):
            parse_nutation_table({"terms": [
                {"D": 0, "M": 0, "Mp": 0, "F": 0, "Om": 1, "psi": [1.0], "eps": [1.0, 0.0]},
            ]})
