# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Periodic series grouped by power of the time argument.

A series table maps a power index alpha to an (N, 3) array of terms
(amplitude, phase, frequency). The value of the series at time t is

    sum over alpha of  t**alpha * sum(A * cos(B + C * t))

This is the form of the VSOP87 planetary theory; the same evaluator serves
the longitude, latitude and radius series.
"""
from typing import Mapping

import numpy as np

SeriesTable = Mapping[int, np.ndarray]
"""Power index -> (N, 3) float array of (amplitude, phase, frequency)."""


def evaluate_series(table: SeriesTable, t: float) -> float:
    """Evaluate a power-indexed cosine series at time argument ``t``.

    Terms within one power are summed in table order. Units of the result
    are those of the amplitudes.
    """
    total = 0.0
    for power in sorted(table):
        terms = table[power]
        amplitude = terms[:, 0]
        phase = terms[:, 1]
        frequency = terms[:, 2]
        subtotal = float(np.sum(amplitude * np.cos(phase + frequency * t)))
        total += subtotal * t ** power
    return total
