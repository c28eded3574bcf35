# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for exporting solar position results.

Adapters implement these to write positions in different file formats.
"""
from typing import Iterable, Protocol, runtime_checkable

from helion.domain.julian_day import CalendarInstant
from helion.domain.solar_position import SolarPosition


@runtime_checkable
class SolarPositionExporter(Protocol):
    """Port for exporting a time series of solar positions to file."""

    def export(
        self,
        rows: Iterable[tuple[CalendarInstant, SolarPosition]],
        path: str,
    ) -> int:
        """
        Export (instant, position) pairs to a file.

        Args:
            rows: Instants with their computed positions, in output order.
            path: Output file path.

        Returns:
            Number of rows exported.
        """
        ...
