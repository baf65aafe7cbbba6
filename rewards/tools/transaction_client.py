"""Transaction source: bundled JSON fixture or a CSV export, loaded with pandas."""

import json
import os
import random
import time
import pandas as pd
from pathlib import Path
from typing import Any, Dict, List, Optional
from pydantic import ValidationError

from rewards.constants import TransactionSourceType
from rewards.models import Transaction
from rewards.utils.config_loader import PROJECT_ROOT, get_section
from rewards.utils.errors import TransactionFetchError, TransactionSourceError
from rewards.utils.logging import get_logger
from rewards.utils.metrics import (
    transactions_loaded,
    transaction_fetch_failures,
    transaction_fetch_latency
)

logger = get_logger(__name__)

FIXTURE_PATH = Path(__file__).resolve().parent.parent / "fixtures" / "transactions.json"

TRANSACTION_COLUMNS = ['id', 'customerId', 'name', 'date', 'amount']


def _records_to_transactions(df: pd.DataFrame, origin: str) -> List[Transaction]:
    """Validate DataFrame rows into Transaction models"""
    if df.empty:
        return []

    missing = [col for col in TRANSACTION_COLUMNS if col not in df.columns]
    if missing:
        raise TransactionSourceError(f"{origin} is missing columns: {missing}")

    # Round-trip through JSON so numpy scalars become plain Python values
    records = json.loads(df.to_json(orient='records'))

    try:
        return [Transaction.model_validate(record) for record in records]
    except ValidationError as e:
        raise TransactionSourceError(f"Invalid transaction record in {origin}: {e}")


def load_fixture_transactions(fixture_path: Optional[Path] = None) -> List[Transaction]:
    """
    Load transactions from a JSON fixture.

    Args:
        fixture_path: JSON file (array of records); defaults to the bundled fixture

    Returns:
        List of Transaction

    Raises:
        TransactionSourceError: If the file is missing or malformed
    """
    fixture_path = Path(fixture_path or FIXTURE_PATH)
    if not fixture_path.exists():
        raise TransactionSourceError(f"Fixture not found: {fixture_path}")

    try:
        df = pd.read_json(fixture_path, convert_dates=False, dtype={'date': str})
    except ValueError as e:
        raise TransactionSourceError(f"Invalid JSON fixture {fixture_path}: {e}")

    logger.info(f"Loaded {len(df)} records from {fixture_path.name}")
    return _records_to_transactions(df, fixture_path.name)


def load_csv_transactions(csv_path: str) -> List[Transaction]:
    """
    Load transactions from a CSV export with columns id, customerId, name, date, amount
    (and optionally isManual).

    Raises:
        TransactionSourceError: If the file is missing or malformed
    """
    filepath = Path(csv_path)
    if not filepath.is_absolute() and not filepath.exists():
        filepath = PROJECT_ROOT / filepath

    if not filepath.exists():
        raise TransactionSourceError(f"CSV file not found: {csv_path}")

    try:
        df = pd.read_csv(filepath, dtype={'date': str, 'name': str})
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise TransactionSourceError(f"Error loading {filepath.name}: {e}")

    logger.info(f"Loaded {len(df)} records from {filepath.name}")
    return _records_to_transactions(df, filepath.name)


def _simulate_latency(max_delay: float) -> None:
    if max_delay and max_delay > 0:
        time.sleep(random.uniform(0, max_delay))


def fetch_transactions(config: Optional[Dict[str, Any]] = None) -> List[Transaction]:
    """
    Fetch the initial transaction list from the configured source.

    The source comes from TRANSACTIONS_SOURCE, then ``fetch.source`` in the
    config, and defaults to the bundled fixture. A CSV source reads the path
    from TRANSACTIONS_CSV or ``fetch.csv_path``.

    Args:
        config: Loaded configuration (optional)

    Returns:
        List of Transaction in source order

    Raises:
        TransactionFetchError: If the source cannot be read
    """
    fetch_config = get_section(config or {}, 'fetch')
    source = os.getenv("TRANSACTIONS_SOURCE") or fetch_config.get('source') or TransactionSourceType.FIXTURE.value

    try:
        source = TransactionSourceType(source)
    except ValueError:
        raise TransactionSourceError(f"Unknown transaction source: {source}")

    start = time.time()
    try:
        _simulate_latency(fetch_config.get('simulated_delay_seconds', 0))

        if source is TransactionSourceType.CSV:
            csv_path = os.getenv("TRANSACTIONS_CSV") or fetch_config.get('csv_path')
            if not csv_path:
                raise TransactionSourceError("CSV source selected but no csv_path configured")
            transactions = load_csv_transactions(csv_path)
        else:
            transactions = load_fixture_transactions(fetch_config.get('fixture_path'))

    except TransactionFetchError:
        transaction_fetch_failures.labels(source=source.value).inc()
        raise

    transaction_fetch_latency.observe(time.time() - start)
    transactions_loaded.labels(source=source.value).inc(len(transactions))
    logger.info("Fetched transactions", source=source.value, count=len(transactions))
    return transactions
