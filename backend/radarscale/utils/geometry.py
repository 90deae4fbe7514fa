"""Leaf-node polar geometry helpers. No engine imports.

Angles grow counter-clockwise (mathematical convention) while screen y grows
downward, so every conversion here flips the sign of y.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


def normalize_radian(angle):
    """Map radian values (scalar or array) onto (-pi, pi]."""
    return np.arctan2(np.sin(angle), np.cos(angle))


def evenly_spaced_angles(start: float, count: int) -> NDArray[np.float64]:
    """``count`` spoke angles starting at ``start``, each normalized to (-pi, pi]."""
    if count <= 0:
        return np.empty(0)
    return normalize_radian(start + np.arange(count) * np.pi * 2 / count)


def polar_to_screen(cx: float, cy: float, radius: float, angle: float) -> tuple[float, float]:
    """Screen position at ``radius`` along ``angle`` from (cx, cy)."""
    return (cx + radius * math.cos(angle), cy - radius * math.sin(angle))


def screen_to_polar(cx: float, cy: float, x: float, y: float) -> tuple[float, float]:
    """Inverse of polar_to_screen: (radius, angle).

    The angle is nan at the center itself, where no direction exists.
    """
    dx = x - cx
    dy = y - cy
    radius = math.hypot(dx, dy)
    if radius == 0:
        return (0.0, math.nan)
    return (radius, math.atan2(-dy, dx))


def closest_angle_index(angle: float, angles: NDArray[np.float64]) -> int:
    """Index of the entry in ``angles`` nearest to ``angle`` by absolute difference.

    Exact ties go to the lowest index. Returns -1 for an empty array or a nan angle.
    """
    if len(angles) == 0 or math.isnan(angle):
        return -1
    return int(np.argmin(np.abs(angle - angles)))
