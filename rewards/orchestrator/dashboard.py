"""Dashboard service - re-derives every view from the transaction store"""

import time
import uuid
from typing import Any, Dict, List, Optional

from rewards.constants import SortDirection
from rewards.models import (
    AnalyticsSnapshot,
    ColumnSpec,
    CustomerRanking,
    CustomerSummary,
    MonthlyTrend,
    ScoredTransaction,
    SortState
)
from rewards.orchestrator.transaction_store import TransactionStore
from rewards.tools.aggregation import aggregate_by_customer
from rewards.tools.analytics import compute_analytics
from rewards.tools.table_sorter import TableSorter, sort_rows
from rewards.utils.config_loader import load_config, get_section
from rewards.utils.errors import TransactionNotFoundError
from rewards.utils.logging import get_logger
from rewards.utils.metrics import recompute_latency, total_points_awarded, total_customers

logger = get_logger(__name__)

CUSTOMER_COLUMNS = [
    ColumnSpec(key="name", label="Customer"),
    ColumnSpec(key="transaction_count", label="Transactions", align="right"),
    ColumnSpec(key="total_spent", label="Total Spent", align="right"),
    ColumnSpec(key="total_points", label="Total Points", align="right"),
]

MONTHLY_TREND_COLUMNS = [
    ColumnSpec(key="month", label="Month", sortable=False),
    ColumnSpec(key="transaction_count", label="Transactions", align="right"),
    ColumnSpec(key="total_spent", label="Total Spent", align="right"),
    ColumnSpec(key="total_points", label="Total Points", align="right"),
]

MONTH_DETAIL_COLUMNS = [
    ColumnSpec(key="date", label="Date", sortable=False),
    ColumnSpec(key="amount", label="Amount", align="right"),
    ColumnSpec(key="points", label="Points", align="right"),
]


def _table_sorter(columns: List[ColumnSpec], table_config: Dict[str, Any], default_key: str, default_direction: str) -> TableSorter:
    return TableSorter(
        columns,
        default_sort_key=table_config.get('default_sort_key', default_key),
        default_sort_direction=table_config.get('default_sort_direction', default_direction)
    )


class RewardsDashboard:
    """Customer rewards dashboard over an in-memory transaction store"""

    def __init__(self, store: Optional[TransactionStore] = None, config: Optional[Dict[str, Any]] = None):
        self.session_id = str(uuid.uuid4())
        self.config = config if config is not None else load_config()
        self.store = store or TransactionStore(self.config)

        tables = get_section(self.config, 'tables')
        self.customer_sorter = _table_sorter(
            CUSTOMER_COLUMNS, tables.get('customers') or {}, 'total_points', SortDirection.DESC.value
        )
        self.monthly_trend_sorter = _table_sorter(
            MONTHLY_TREND_COLUMNS, tables.get('monthly_trends') or {}, 'sort_key', SortDirection.ASC.value
        )

    def load(self, force_refresh: bool = False) -> int:
        """Load the initial transaction list; returns the number of transactions"""
        return len(self.store.load(force_refresh=force_refresh))

    # Derived views

    def customer_summaries(self) -> List[CustomerSummary]:
        start = time.perf_counter()
        summaries = aggregate_by_customer(self.store.transactions)
        recompute_latency.labels(view='customer_summaries').observe(time.perf_counter() - start)
        return summaries

    def customer_summary(self, customer_id: int) -> CustomerSummary:
        for summary in self.customer_summaries():
            if summary.customer_id == customer_id:
                return summary
        raise TransactionNotFoundError(f"No transactions for customer {customer_id}")

    def analytics(self) -> AnalyticsSnapshot:
        start = time.perf_counter()
        snapshot = compute_analytics(self.store.transactions)
        recompute_latency.labels(view='analytics').observe(time.perf_counter() - start)

        total_points_awarded.set(snapshot.total_points)
        total_customers.set(snapshot.total_customers)
        return snapshot

    # Tables

    def customer_table(self, sort_state: Optional[SortState] = None) -> List[CustomerRanking]:
        """Customer rows, ordered by ``sort_state`` or else by the customer sorter's current state"""
        return self._sorted(self.customer_sorter, self.analytics().top_customers, sort_state)

    def monthly_trend_table(self, sort_state: Optional[SortState] = None) -> List[MonthlyTrend]:
        return self._sorted(self.monthly_trend_sorter, self.analytics().monthly_trends, sort_state)

    @staticmethod
    def _sorted(sorter: TableSorter, rows: List[Any], sort_state: Optional[SortState]) -> List[Any]:
        if sort_state is None:
            return sorter.apply(rows)
        return sort_rows(rows, sort_state.sort_key, sort_state.sort_direction)

    def month_detail_table(self, customer_id: int, month: str, sort_state: Optional[SortState] = None) -> List[ScoredTransaction]:
        """One customer's transactions for a month label, in input order unless a sort is given"""
        bucket = self.customer_summary(customer_id).months.get(month)
        if bucket is None:
            return []
        sorter = TableSorter(MONTH_DETAIL_COLUMNS)
        if sort_state is not None:
            sorter.state = sort_state
        return sorter.apply(bucket.transactions)

    def sort_customers(self, key: str) -> SortState:
        return self.customer_sorter.toggle(key)

    def sort_monthly_trends(self, key: str) -> SortState:
        return self.monthly_trend_sorter.toggle(key)

    def summary(self) -> Dict[str, Any]:
        """Plain-dict dashboard summary"""
        snapshot = self.analytics()
        highest = snapshot.highest_spender

        return {
            'session_id': self.session_id,
            'total_customers': snapshot.total_customers,
            'total_transactions': snapshot.total_transactions,
            'total_points': snapshot.total_points,
            'total_spent': round(snapshot.total_spent, 2),
            'average_purchase': round(snapshot.average_purchase, 2),
            'highest_spender': highest.name if highest else None,
            'highest_spender_points': highest.total_points if highest else 0,
            'monthly_trends': [
                {'month': t.month, 'transactions': t.transaction_count, 'points': t.total_points}
                for t in snapshot.monthly_trends
            ],
            'customers': [
                {'name': c.name, 'points': c.total_points, 'spent': round(c.total_spent, 2)}
                for c in self.customer_sorter.apply(snapshot.top_customers)
            ]
        }
