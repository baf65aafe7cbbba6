"""Calendar month labels and keys"""

import datetime

from rewards.constants import MONTH_NAMES


def format_month_label(day: datetime.date) -> str:
    """'November 2024' regardless of the process locale"""
    return f"{MONTH_NAMES[day.month - 1]} {day.year:04d}"


def month_sort_key(day: datetime.date) -> str:
    """'2024-11': sorts chronologically as plain text"""
    return f"{day.year:04d}-{day.month:02d}"
