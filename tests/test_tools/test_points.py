"""Unit tests for the reward points schedule"""

import pytest
from rewards.tools.points import calculate_points


@pytest.mark.parametrize("amount", [-500, -0.01, 0, 1, 25.5, 49.99, 50, 50.99])
def test_no_points_at_or_below_fifty(amount):
    """Amounts up to $50 (and negatives) earn nothing"""
    assert calculate_points(amount) == 0


def test_lower_band_one_point_per_dollar():
    assert calculate_points(51) == 1
    assert calculate_points(75) == 25
    assert calculate_points(100) == 50


def test_upper_band_two_points_per_dollar():
    assert calculate_points(101) == 52
    assert calculate_points(120) == 90
    assert calculate_points(200) == 250
    assert calculate_points(500) == 850


def test_fractional_cents_are_truncated():
    """$100.99 scores like $100, not $101"""
    assert calculate_points(100.99) == 50
    assert calculate_points(75.50) == 25
    assert calculate_points(101.01) == 52


def test_points_are_integers():
    assert isinstance(calculate_points(150.75), int)


def test_monotonically_non_decreasing():
    """More spend never earns fewer points"""
    amounts = [x / 4 for x in range(-40, 1200)]
    points = [calculate_points(a) for a in amounts]
    assert all(a <= b for a, b in zip(points, points[1:]))
