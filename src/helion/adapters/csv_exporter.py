# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV solar position exporter.

Writes one row per instant. External dependencies (csv, file I/O) are
confined to this adapter.
"""
import csv
import logging
from typing import Iterable

from helion.ports import SolarPositionExporter
from helion.domain.julian_day import CalendarInstant
from helion.domain.solar_position import SolarPosition

logger = logging.getLogger(__name__)

_HEADER = [
    'utc', 'jde', 'equation_of_time_min',
    'right_ascension_deg', 'declination_deg',
    'apparent_longitude_deg', 'apparent_latitude_deg', 'radius_au',
    'azimuth_deg', 'altitude_deg',
]


def _optional(value: float | None, fmt: str) -> str:
    return '' if value is None else format(value, fmt)


class CsvSolarPositionExporter(SolarPositionExporter):
    """Exports solar positions to CSV; horizontal columns are blank without an observer."""

    def export(
        self,
        rows: Iterable[tuple[CalendarInstant, SolarPosition]],
        path: str,
    ) -> int:
        count = 0
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(_HEADER)

            for instant, position in rows:
                writer.writerow([
                    instant.isoformat(),
                    f'{position.jde:.6f}',
                    f'{position.equation_of_time_min:.4f}',
                    f'{position.right_ascension_deg:.6f}',
                    f'{position.declination_deg:.6f}',
                    f'{position.apparent_longitude_deg:.6f}',
                    f'{position.apparent_latitude_deg:.8f}',
                    f'{position.radius_au:.8f}',
                    _optional(position.azimuth_deg, '.6f'),
                    _optional(position.altitude_deg, '.6f'),
                ])
                count += 1

        if count == 0:
            logger.warning("No solar positions to export; wrote header only to %s", path)
        return count
