"""Angle and vector helpers shared by every chain solver.

The angle helpers work on raw radians and never lean on ``math.fmod`` or
trigonometric round trips, so values a few turns away from ``[0, 2π)`` come
back exact at the wrap boundary.
"""

from __future__ import annotations

import math

from ..config.constants import EPSILON

TWO_PI = 2.0 * math.pi


def normalize_angle(angle: float) -> float:
    """Normalize angle to range [0, 2π).

    Args:
        angle: Angle in radians

    Returns:
        Normalized angle in range [0, 2π)
    """
    while angle >= TWO_PI:
        angle -= TWO_PI
    while angle < 0:
        angle += TWO_PI
    return angle


def relative_angle_difference(angle: float, anchor: float) -> float:
    """Signed shortest angular distance between ``anchor`` and ``angle``.

    Both angles are rotated so that ``anchor`` lands on π, which keeps the
    measurement continuous across the ±π seam. The result is positive when
    ``angle`` lies clockwise of ``anchor`` (smaller angle) and negative when
    it lies counter-clockwise.

    Args:
        angle: Angle being measured, in radians
        anchor: Reference angle, in radians

    Returns:
        Difference in the range (-π, π]
    """
    rotated = normalize_angle(angle + math.pi - anchor)
    return math.pi - rotated


def constrain_angle(angle: float, anchor: float, constraint: float) -> float:
    """Clamp ``angle`` to within ``constraint`` radians of ``anchor``.

    Args:
        angle: Desired angle, in radians
        anchor: Angle the result may not stray too far from
        constraint: Maximum permitted deviation, in radians

    Returns:
        ``angle`` itself when inside the allowed cone, otherwise the cone edge
        closest to it; normalized to [0, 2π) either way
    """
    diff = relative_angle_difference(angle, anchor)
    if abs(diff) <= constraint:
        return normalize_angle(angle)
    return normalize_angle(anchor + (-constraint if diff > 0 else constraint))


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Calculate Euclidean distance between two points."""
    dx = x2 - x1
    dy = y2 - y1
    return math.sqrt(dx * dx + dy * dy)


def safe_length(x: float, y: float) -> float:
    """Vector length with zero replaced by :data:`EPSILON` for use as a divisor."""
    return math.sqrt(x * x + y * y) or EPSILON


def unit_from_angle(angle: float) -> tuple[float, float]:
    """Return the unit vector pointing along ``angle``."""
    return math.cos(angle), math.sin(angle)


__all__ = [
    "TWO_PI",
    "constrain_angle",
    "distance",
    "normalize_angle",
    "relative_angle_difference",
    "safe_length",
    "unit_from_angle",
]
