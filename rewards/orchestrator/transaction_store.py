"""In-memory transaction store with manual add / update / delete."""

import datetime
import math
from functools import partial
from typing import Any, Callable, Dict, List, Optional, Tuple

from rewards.constants import (
    ManualAction,
    DEFAULT_CACHE_TTL_SECONDS,
    DEFAULT_FETCH_MAX_RETRIES,
    DEFAULT_FETCH_BASE_DELAY,
    DEFAULT_FETCH_MAX_DELAY
)
from rewards.models import Transaction, CustomerOption
from rewards.orchestrator.retry_handler import retry_with_exponential_backoff
from rewards.tools.cache import TTLCache, cached_fetch
from rewards.tools.identity import next_transaction_id, resolve_customer_id, list_customers
from rewards.tools.transaction_client import fetch_transactions
from rewards.utils.config_loader import get_section
from rewards.utils.errors import TransactionValidationError, TransactionNotFoundError
from rewards.utils.logging import get_logger
from rewards.utils.metrics import (
    manual_transaction_writes,
    manual_transaction_rejections,
    store_transaction_count
)

logger = get_logger(__name__)


def validate_manual_input(name: Any, date: Any, amount: Any) -> Tuple[str, datetime.date, float]:
    """
    Validate manual-entry form values.

    Args:
        name: Customer name (required, surrounding whitespace ignored)
        date: ISO date string or date (required)
        amount: Number or numeric string, must be positive

    Returns:
        (name, date, amount) normalized

    Raises:
        TransactionValidationError: With a field -> message mapping
    """
    errors: Dict[str, str] = {}

    clean_name = name.strip() if isinstance(name, str) else ""
    if not clean_name:
        errors['name'] = "Name is required"

    clean_date = None
    if isinstance(date, datetime.datetime):
        clean_date = date.date()
    elif isinstance(date, datetime.date):
        clean_date = date
    elif not date:
        errors['date'] = "Date is required"
    else:
        try:
            clean_date = datetime.date.fromisoformat(str(date))
        except ValueError:
            errors['date'] = "Date must be YYYY-MM-DD"

    clean_amount = None
    try:
        clean_amount = float(amount)
    except (TypeError, ValueError):
        pass
    if clean_amount is None or not math.isfinite(clean_amount) or clean_amount <= 0:
        errors['amount'] = "Valid positive amount is required"

    if errors:
        manual_transaction_rejections.inc()
        raise TransactionValidationError(errors)

    return clean_name, clean_date, clean_amount


class TransactionStore:
    """
    Owner of the session's transaction list.

    The initial list comes from ``fetcher`` (read through a TTL cache when
    enabled); manual edits are applied in memory and invalidate the cache.
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        fetcher: Optional[Callable[..., List[Transaction]]] = None,
        cache: Optional[TTLCache] = None
    ):
        self.config = config or {}
        fetch_config = get_section(self.config, 'fetch')
        cache_config = get_section(self.config, 'cache', {'enabled': True})

        self._retry = {
            'max_retries': fetch_config.get('max_retries', DEFAULT_FETCH_MAX_RETRIES),
            'base_delay': fetch_config.get('base_delay_seconds', DEFAULT_FETCH_BASE_DELAY),
            'max_delay': fetch_config.get('max_delay_seconds', DEFAULT_FETCH_MAX_DELAY)
        }

        if fetcher is None:
            fetcher = partial(fetch_transactions, self.config)

        if cache is None and cache_config.get('enabled', True):
            cache = TTLCache(cache_config.get('ttl_seconds', DEFAULT_CACHE_TTL_SECONDS))

        self.cache = cache
        self._fetch = cached_fetch(cache)(fetcher) if cache is not None else fetcher
        self._transactions: List[Transaction] = []
        self.last_loaded: Optional[datetime.datetime] = None

    # Loading

    def load(self, force_refresh: bool = False) -> List[Transaction]:
        """Replace the store contents with a fresh fetch"""
        if self.cache is not None:
            data = retry_with_exponential_backoff(self._fetch, force_refresh=force_refresh, **self._retry)
        else:
            data = retry_with_exponential_backoff(self._fetch, **self._retry)

        self._transactions = list(data)
        self.last_loaded = datetime.datetime.now()
        store_transaction_count.set(len(self._transactions))
        logger.info("Transaction store loaded", count=len(self._transactions), force_refresh=force_refresh)
        return list(self._transactions)

    # Reads

    @property
    def transactions(self) -> Tuple[Transaction, ...]:
        return tuple(self._transactions)

    def __len__(self) -> int:
        return len(self._transactions)

    def get(self, txn_id: int) -> Transaction:
        for txn in self._transactions:
            if txn.id == txn_id:
                return txn
        raise TransactionNotFoundError(f"Transaction {txn_id} not found")

    def manual_transactions(self) -> List[Transaction]:
        """Manually entered transactions, newest date first"""
        manual = [txn for txn in self._transactions if txn.is_manual]
        return sorted(manual, key=lambda txn: txn.date, reverse=True)

    def customers(self) -> List[CustomerOption]:
        return list_customers(self._transactions)

    # Writes

    def add_manual(self, name: Any, date: Any, amount: Any) -> Transaction:
        """Validate form input and append a new manual transaction"""
        name, date, amount = validate_manual_input(name, date, amount)

        txn = Transaction(
            id=next_transaction_id(self._transactions),
            customer_id=resolve_customer_id(self._transactions, name),
            name=name,
            date=date,
            amount=amount,
            is_manual=True
        )
        self._transactions.append(txn)
        self._after_write(ManualAction.ADD, txn)
        return txn

    def update_manual(self, txn_id: int, name: Any, date: Any, amount: Any) -> Transaction:
        """Replace a transaction's fields, keeping its id, position and origin"""
        index = self._index_of(txn_id)
        name, date, amount = validate_manual_input(name, date, amount)

        current = self._transactions[index]
        txn = current.model_copy(update={
            'customer_id': resolve_customer_id(self._transactions, name),
            'name': name,
            'date': date,
            'amount': amount
        })
        self._transactions[index] = txn
        self._after_write(ManualAction.UPDATE, txn)
        return txn

    def delete(self, txn_id: int) -> Transaction:
        index = self._index_of(txn_id)
        txn = self._transactions.pop(index)
        self._after_write(ManualAction.DELETE, txn)
        return txn

    def _index_of(self, txn_id: int) -> int:
        for index, txn in enumerate(self._transactions):
            if txn.id == txn_id:
                return index
        raise TransactionNotFoundError(f"Transaction {txn_id} not found")

    def _after_write(self, action: ManualAction, txn: Transaction) -> None:
        if self.cache is not None:
            self.cache.invalidate()
        manual_transaction_writes.labels(action=action.value).inc()
        store_transaction_count.set(len(self._transactions))
        logger.info(
            f"Manual transaction {action.value}",
            txn_id=txn.id,
            customer_id=txn.customer_id
        )
