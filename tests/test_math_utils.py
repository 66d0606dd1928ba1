"""Tests for the angle helpers."""

from __future__ import annotations

import math

import pytest

from creature.utils.math_utils import (
    TWO_PI,
    constrain_angle,
    distance,
    normalize_angle,
    relative_angle_difference,
    safe_length,
    unit_from_angle,
)


def test_normalize_angle_wraps_into_range():
    assert normalize_angle(0.0) == 0.0
    assert normalize_angle(TWO_PI) == 0.0
    assert normalize_angle(-math.pi / 2) == pytest.approx(3 * math.pi / 2)
    assert normalize_angle(5 * math.pi) == pytest.approx(math.pi)
    assert 0.0 <= normalize_angle(-7.3) < TWO_PI


def test_relative_difference_sign():
    # Smaller angle (clockwise of the anchor) reads positive.
    assert relative_angle_difference(0.1, 0.3) == pytest.approx(0.2)
    assert relative_angle_difference(0.3, 0.1) == pytest.approx(-0.2)


def test_relative_difference_across_seam():
    assert relative_angle_difference(0.1, TWO_PI - 0.1) == pytest.approx(-0.2)
    assert relative_angle_difference(TWO_PI - 0.1, 0.1) == pytest.approx(0.2)


def test_constrain_angle_inside_cone_is_unchanged():
    assert constrain_angle(0.2, 0.0, 0.5) == pytest.approx(0.2)
    assert constrain_angle(-0.2, 0.0, 0.5) == pytest.approx(TWO_PI - 0.2)


def test_constrain_angle_clamps_to_nearest_edge():
    assert constrain_angle(1.0, 0.0, 0.5) == pytest.approx(0.5)
    assert constrain_angle(-1.0, 0.0, 0.5) == pytest.approx(TWO_PI - 0.5)


def test_constrain_angle_result_is_normalised():
    result = constrain_angle(3 * TWO_PI + 0.1, 0.0, 0.5)
    assert 0.0 <= result < TWO_PI
    assert result == pytest.approx(0.1)


def test_safe_length_never_returns_zero():
    assert safe_length(0.0, 0.0) > 0
    assert safe_length(3.0, 4.0) == pytest.approx(5.0)
    assert distance(0.0, 0.0, 3.0, 4.0) == pytest.approx(5.0)


def test_unit_from_angle_points_along_heading():
    x, y = unit_from_angle(math.pi / 2)
    assert x == pytest.approx(0.0, abs=1e-12)
    assert y == pytest.approx(1.0)
    assert unit_from_angle(math.pi) == pytest.approx((-1.0, 0.0))

