"""Cross-customer analytics over a transaction set"""

from typing import Dict, Optional, Sequence

from rewards.models import Transaction, AnalyticsSnapshot, CustomerRanking, MonthlyTrend
from rewards.tools.points import calculate_points
from rewards.tools.months import format_month_label, month_sort_key
from rewards.utils.logging import get_logger

logger = get_logger(__name__)


def compute_analytics(transactions: Optional[Sequence[Transaction]]) -> AnalyticsSnapshot:
    """
    Compute dashboard metrics from a list of transactions.

    Metrics:
    - total customers, transactions, points and spend
    - average purchase amount
    - customers ranked by total points (stable for ties)
    - monthly trend series in chronological order

    ``highest_spender`` is the top entry of the points ranking, not the
    customer with the largest raw spend.

    Args:
        transactions: Transactions to analyze (None or empty gives the zero snapshot)

    Returns:
        AnalyticsSnapshot
    """
    if not transactions:
        return AnalyticsSnapshot.empty()

    transactions = list(transactions)
    total_transactions = len(transactions)
    total_spent = sum(txn.amount for txn in transactions)
    average_purchase = total_spent / total_transactions

    customer_map: Dict[int, dict] = {}
    month_map: Dict[str, dict] = {}

    for txn in transactions:
        points = calculate_points(txn.amount)

        customer = customer_map.setdefault(txn.customer_id, {
            'customer_id': txn.customer_id,
            'name': txn.name,
            'total_points': 0,
            'total_spent': 0.0,
            'transaction_count': 0
        })
        customer['total_points'] += points
        customer['total_spent'] += txn.amount
        customer['transaction_count'] += 1

        label = format_month_label(txn.date)
        month = month_map.setdefault(label, {
            'month': label,
            'sort_key': month_sort_key(txn.date),
            'transaction_count': 0,
            'total_spent': 0.0,
            'total_points': 0
        })
        month['transaction_count'] += 1
        month['total_spent'] += txn.amount
        month['total_points'] += points

    # sorted() is stable, ties keep first-seen order
    top_customers = [
        CustomerRanking(**data)
        for data in sorted(customer_map.values(), key=lambda c: c['total_points'], reverse=True)
    ]
    monthly_trends = [
        MonthlyTrend(**data)
        for data in sorted(month_map.values(), key=lambda m: m['sort_key'])
    ]

    snapshot = AnalyticsSnapshot(
        total_customers=len(top_customers),
        total_transactions=total_transactions,
        total_points=sum(c.total_points for c in top_customers),
        total_spent=total_spent,
        average_purchase=average_purchase,
        highest_spender=top_customers[0] if top_customers else None,
        monthly_trends=monthly_trends,
        top_customers=top_customers
    )

    logger.debug(
        "Computed analytics snapshot",
        total_customers=snapshot.total_customers,
        total_transactions=snapshot.total_transactions,
        total_points=snapshot.total_points
    )
    return snapshot
