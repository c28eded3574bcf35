# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for CSV solar position export."""
import csv
import logging
from datetime import datetime, timedelta, timezone

import pytest

from helion.adapters.csv_exporter import CsvSolarPositionExporter
from helion.domain.julian_day import CalendarInstant
from helion.domain.solar_position import (
    GeographicLocation,
    solar_position,
    solar_position_series,
)
from helion.ports import SolarPositionExporter

GREENWICH = GeographicLocation(51.4769, 0.0)


def _read(path):
    with open(path, newline='', encoding='utf-8') as f:
        return list(csv.DictReader(f))


class TestCsvSolarPositionExporter:

    def test_implements_port(self):
        assert isinstance(CsvSolarPositionExporter(), SolarPositionExporter)

    def test_returns_row_count(self, tmp_path):
        start = datetime(2024, 6, 20, tzinfo=timezone.utc)
        rows = solar_position_series(start, start + timedelta(hours=5), timedelta(hours=1))
        count = CsvSolarPositionExporter().export(rows, str(tmp_path / "sun.csv"))
        assert count == 6
        assert len(_read(tmp_path / "sun.csv")) == 6

    def test_header(self, tmp_path):
        path = tmp_path / "sun.csv"
        instant = CalendarInstant(2024, 6, 20, 12)
        CsvSolarPositionExporter().export([(instant, solar_position(instant))], str(path))

        with open(path, encoding='utf-8') as f:
            header = f.readline().strip().split(',')
        assert header == [
            'utc', 'jde', 'equation_of_time_min',
            'right_ascension_deg', 'declination_deg',
            'apparent_longitude_deg', 'apparent_latitude_deg', 'radius_au',
            'azimuth_deg', 'altitude_deg',
        ]

    def test_values(self, tmp_path):
        path = tmp_path / "sun.csv"
        instant = CalendarInstant(2024, 6, 20, 12)
        position = solar_position(instant, location=GREENWICH)
        CsvSolarPositionExporter().export([(instant, position)], str(path))

        row = _read(path)[0]
        assert row['utc'] == "2024-06-20T12:00:00Z"
        assert float(row['right_ascension_deg']) == pytest.approx(position.right_ascension_deg, abs=1e-6)
        assert float(row['declination_deg']) == pytest.approx(position.declination_deg, abs=1e-6)
        assert float(row['azimuth_deg']) == pytest.approx(position.azimuth_deg, abs=1e-6)
        assert float(row['altitude_deg']) == pytest.approx(position.altitude_deg, abs=1e-6)

    def test_horizontal_blank_without_observer(self, tmp_path):
        path = tmp_path / "sun.csv"
        instant = CalendarInstant(2024, 6, 20, 12)
        CsvSolarPositionExporter().export([(instant, solar_position(instant))], str(path))

        row = _read(path)[0]
        assert row['azimuth_deg'] == ''
        assert row['altitude_deg'] == ''
        assert row['declination_deg'] != ''

    def test_empty_series_warns(self, tmp_path, caplog):
        path = tmp_path / "empty.csv"
        with caplog.at_level(logging.WARNING, logger="helion.adapters.csv_exporter"):
            count = CsvSolarPositionExporter().export([], str(path))

        assert count == 0
        assert _read(path) == []
        assert any("No solar positions" in r.message for r in caplog.records)
