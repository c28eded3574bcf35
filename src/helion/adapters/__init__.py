# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for exporting solar positions.

External dependencies (csv, file I/O) are confined to this layer.
"""
from helion.adapters.csv_exporter import CsvSolarPositionExporter

__all__ = [
    "CsvSolarPositionExporter",
]
