# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Small numeric helpers shared by the ephemeris models."""
import math
from typing import Sequence

import numpy as np
from numpy.polynomial import polynomial as _poly


def horner(x: float, coefficients: Sequence[float]) -> float:
    """Evaluate c0 + c1*x + c2*x**2 + ... by Horner's rule.

    Coefficients are given in ascending order of power.
    """
    return float(_poly.polyval(x, np.asarray(coefficients, dtype=np.float64)))


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round to ``decimals`` places with ties going towards +infinity.

    Differs from the built-in ``round`` (ties to even): 2.5 -> 3.0 and
    -2.5 -> -2.0. The published Delta-T and horizon tables use this rule.
    """
    scale = 10.0 ** decimals
    return math.floor(value * scale + 0.5) / scale
