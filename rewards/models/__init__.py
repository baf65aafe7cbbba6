"""Data models for the rewards system"""

from .transaction import Transaction
from .summary import ScoredTransaction, MonthBucket, CustomerSummary
from .analytics import CustomerRanking, MonthlyTrend, AnalyticsSnapshot
from .table import ColumnSpec, SortState
from .customer import CustomerOption

__all__ = [
    "Transaction",
    "ScoredTransaction",
    "MonthBucket",
    "CustomerSummary",
    "CustomerRanking",
    "MonthlyTrend",
    "AnalyticsSnapshot",
    "ColumnSpec",
    "SortState",
    "CustomerOption",
]
