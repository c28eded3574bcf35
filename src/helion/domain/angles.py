# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Angle conversion and normalization.

All public helpers work in degrees; trigonometry is evaluated in radians
internally.
"""
import math

import numpy as np

_TWO_PI: float = 2.0 * math.pi


def normalize_degrees(angle_deg: float) -> float:
    """Reduce an angle to [0, 360)."""
    result = angle_deg % 360.0
    # Tiny negative inputs round up to exactly 360.0
    if result >= 360.0:
        return 0.0
    return result


def normalize_radians(angle_rad: float) -> float:
    """Reduce an angle to [0, 2*pi)."""
    result = angle_rad % _TWO_PI
    if result >= _TWO_PI:
        return 0.0
    return result


def sin_degrees(angle_deg: float) -> float:
    return float(np.sin(np.radians(angle_deg)))


def cos_degrees(angle_deg: float) -> float:
    return float(np.cos(np.radians(angle_deg)))


def tan_degrees(angle_deg: float) -> float:
    return float(np.tan(np.radians(angle_deg)))


def asin_degrees(value: float) -> float:
    return float(np.degrees(np.arcsin(value)))


def atan2_degrees(y: float, x: float) -> float:
    return float(np.degrees(np.arctan2(y, x)))
