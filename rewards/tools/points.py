"""Reward points schedule"""

import math

from rewards.constants import (
    POINTS_LOWER_THRESHOLD,
    POINTS_UPPER_THRESHOLD,
    POINTS_UPPER_MULTIPLIER
)


def calculate_points(amount: float) -> int:
    """
    Calculate reward points for a single purchase amount.

    Rules:
        - 2 points for every whole dollar spent over $100
        - 1 point for every whole dollar spent between $50 and $100

    Fractional cents never earn points, so $100.99 scores like $100.
    Zero and negative amounts earn nothing.

    Args:
        amount: Purchase amount in dollars

    Returns:
        Non-negative integer points
    """
    if amount <= 0:
        return 0

    dollars = math.floor(amount)
    points = 0

    if dollars > POINTS_UPPER_THRESHOLD:
        points += POINTS_UPPER_MULTIPLIER * (dollars - POINTS_UPPER_THRESHOLD)

    if dollars > POINTS_LOWER_THRESHOLD:
        points += min(dollars, POINTS_UPPER_THRESHOLD) - POINTS_LOWER_THRESHOLD

    return points
