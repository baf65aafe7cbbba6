"""Cross-customer analytics models"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class CustomerRanking(BaseModel):
    """Lifetime totals for one customer"""

    model_config = ConfigDict(frozen=True)

    customer_id: int
    name: str
    total_points: int = 0
    total_spent: float = 0.0
    transaction_count: int = 0


class MonthlyTrend(BaseModel):
    """Totals across all customers for one calendar month"""

    model_config = ConfigDict(frozen=True)

    month: str
    sort_key: str
    transaction_count: int = 0
    total_spent: float = 0.0
    total_points: int = 0


class AnalyticsSnapshot(BaseModel):
    """Aggregate metrics for a transaction set"""

    model_config = ConfigDict(frozen=True)

    total_customers: int = 0
    total_transactions: int = 0
    total_points: int = 0
    total_spent: float = 0.0
    average_purchase: float = 0.0
    # Highest *points* customer; the name is kept from the dashboard it feeds
    highest_spender: Optional[CustomerRanking] = None
    monthly_trends: List[MonthlyTrend] = Field(default_factory=list)
    top_customers: List[CustomerRanking] = Field(default_factory=list)

    @classmethod
    def empty(cls) -> "AnalyticsSnapshot":
        return cls()
