"""Per-customer, per-month points aggregation"""

from typing import Dict, Iterable, List, Optional

from rewards.models import Transaction, ScoredTransaction, MonthBucket, CustomerSummary
from rewards.tools.points import calculate_points
from rewards.tools.months import format_month_label, month_sort_key
from rewards.utils.logging import get_logger

logger = get_logger(__name__)


def aggregate_by_customer(transactions: Optional[Iterable[Transaction]]) -> List[CustomerSummary]:
    """
    Group transactions by customer and calendar month.

    Customers come back in the order their first transaction appears;
    months in the order first seen for that customer; transactions within a
    month in input order. Sorting for display is left to the caller.

    Args:
        transactions: Transactions to roll up (None is treated as empty)

    Returns:
        One CustomerSummary per distinct customer_id
    """
    if not transactions:
        return []

    grouped: Dict[int, dict] = {}

    for txn in transactions:
        customer = grouped.setdefault(txn.customer_id, {
            'name': txn.name,
            'months': {},
            'total_points': 0
        })

        label = format_month_label(txn.date)
        bucket = customer['months'].setdefault(label, {
            'sort_key': month_sort_key(txn.date),
            'transactions': [],
            'points': 0
        })

        points = calculate_points(txn.amount)
        bucket['transactions'].append(
            ScoredTransaction(**txn.model_dump(), points=points)
        )
        bucket['points'] += points
        customer['total_points'] += points

    summaries = [
        CustomerSummary(
            customer_id=customer_id,
            name=data['name'],
            months={
                label: MonthBucket(month=label, **bucket)
                for label, bucket in data['months'].items()
            },
            total_points=data['total_points']
        )
        for customer_id, data in grouped.items()
    ]

    logger.debug(
        "Aggregated transactions by customer",
        customer_count=len(summaries),
        total_points=sum(s.total_points for s in summaries)
    )
    return summaries
