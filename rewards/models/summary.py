"""Per-customer rollup models"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List

from .transaction import Transaction


class ScoredTransaction(Transaction):
    """Transaction with the reward points it earned"""

    points: int = Field(..., ge=0, description="Reward points earned")


class MonthBucket(BaseModel):
    """One customer's transactions in a single calendar month"""

    model_config = ConfigDict(frozen=True)

    month: str = Field(..., description="Display label, e.g. 'November 2024'")
    sort_key: str = Field(..., description="Chronological key, YYYY-MM")
    transactions: List[ScoredTransaction] = Field(default_factory=list)
    points: int = Field(0, ge=0, description="Point subtotal for the month")


class CustomerSummary(BaseModel):
    """Per-customer rollup grouped by month"""

    model_config = ConfigDict(frozen=True)

    customer_id: int
    name: str
    months: Dict[str, MonthBucket] = Field(
        default_factory=dict,
        description="Month label -> bucket, in first-seen order"
    )
    total_points: int = Field(0, ge=0)
