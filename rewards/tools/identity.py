"""Id allocation for manually entered transactions"""

from typing import Dict, Iterable, List, Sequence

from rewards.models import Transaction, CustomerOption


def _same_name(a: str, b: str) -> bool:
    return a.strip().casefold() == b.strip().casefold()


def next_transaction_id(transactions: Iterable[Transaction]) -> int:
    """One past the highest transaction id, or 1 for an empty set"""
    return max((txn.id for txn in transactions), default=0) + 1


def resolve_customer_id(transactions: Sequence[Transaction], name: str) -> int:
    """
    Customer id to attach to a new transaction for ``name``.

    Names match case-insensitively, ignoring surrounding whitespace. An
    unknown name gets one past the highest existing customer id.
    """
    for txn in transactions:
        if _same_name(txn.name, name):
            return txn.customer_id

    return max((txn.customer_id for txn in transactions), default=0) + 1


def list_customers(transactions: Iterable[Transaction]) -> List[CustomerOption]:
    """Distinct customers with their transaction counts, in first-seen order"""
    customers: Dict[int, dict] = {}
    for txn in transactions:
        entry = customers.setdefault(txn.customer_id, {
            'customer_id': txn.customer_id,
            'name': txn.name,
            'transaction_count': 0
        })
        entry['transaction_count'] += 1

    return [CustomerOption(**entry) for entry in customers.values()]


def find_customer(customers: Iterable[CustomerOption], name: str):
    """Existing customer whose name matches ``name``, or None"""
    if not name.strip():
        return None
    return next((c for c in customers if _same_name(c.name, name)), None)


def search_customers(customers: Sequence[CustomerOption], query: str) -> List[CustomerOption]:
    """Customers whose name contains ``query`` (case-insensitive); blank query returns all"""
    needle = query.strip().casefold()
    if not needle:
        return list(customers)
    return [c for c in customers if needle in c.name.casefold()]
