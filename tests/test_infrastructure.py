"""Unit tests for core infrastructure components."""

import json
import logging
import pytest
import pandas as pd

from rewards.utils.config_loader import load_config, save_config, get_section
from rewards.utils.errors import ConfigurationError, TransactionFetchError, CacheError
from rewards.utils.logging import get_logger, JSONFormatter


# Configuration

def test_load_default_config():
    config = load_config()
    assert config['version'] == 1
    assert config['fetch']['source'] == 'fixture'
    assert config['cache']['ttl_seconds'] == 300
    assert config['tables']['customers']['default_sort_direction'] == 'desc'


def test_load_config_from_env(tmp_path, monkeypatch):
    path = tmp_path / "rules.yaml"
    save_config(str(path), {'version': 2, 'fetch': {}, 'cache': {}, 'tables': {}})
    monkeypatch.setenv("REWARDS_CONFIG", str(path))

    assert load_config()['version'] == 2


def test_load_config_missing_file(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        load_config(str(tmp_path / "nope.yaml"))


def test_load_config_invalid_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("version: [1, 2\n")
    with pytest.raises(ConfigurationError, match="Invalid YAML"):
        load_config(str(path))


def test_load_config_missing_keys(tmp_path):
    path = tmp_path / "partial.yaml"
    path.write_text("version: 1\nfetch: {}\n")
    with pytest.raises(ConfigurationError, match="Missing required configuration keys"):
        load_config(str(path))


def test_get_section():
    config = {'cache': {'ttl_seconds': 60}, 'fetch': 'oops'}
    assert get_section(config, 'cache') == {'ttl_seconds': 60}
    assert get_section(config, 'tables') == {}
    assert get_section(config, 'tables', {'a': 1}) == {'a': 1}
    with pytest.raises(ConfigurationError):
        get_section(config, 'fetch')


# Logging

def test_json_formatter_includes_fields():
    record = logging.LogRecord("rewards.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    record.fields = {'count': 3}

    payload = json.loads(JSONFormatter().format(record))
    assert payload['message'] == "hello world"
    assert payload['level'] == "INFO"
    assert payload['count'] == 3


def test_get_logger_attaches_single_handler():
    first = get_logger("rewards.single_handler")
    second = get_logger("rewards.single_handler")
    assert first.logger is second.logger
    json_handlers = [h for h in second.logger.handlers if isinstance(h.formatter, JSONFormatter)]
    assert len(json_handlers) == 1


# Transaction source

def test_fixture_transactions():
    from rewards.tools.transaction_client import load_fixture_transactions

    transactions = load_fixture_transactions()
    assert len(transactions) == 30
    assert transactions[0].name == "Alice Johnson"
    assert transactions[0].customer_id == 1
    assert str(transactions[0].date) == "2024-10-05"
    assert all(not t.is_manual for t in transactions)


def test_missing_fixture(tmp_path):
    from rewards.tools.transaction_client import load_fixture_transactions

    with pytest.raises(TransactionFetchError):
        load_fixture_transactions(tmp_path / "missing.json")


def test_csv_transactions(tmp_path):
    from rewards.tools.transaction_client import load_csv_transactions

    path = tmp_path / "transactions.csv"
    pd.DataFrame({
        'id': [1, 2],
        'customerId': [1, 2],
        'name': ["Alice Johnson", "Bob Smith"],
        'date': ["2024-10-05", "2024-10-12"],
        'amount': [120.0, 50.0],
    }).to_csv(path, index=False)

    transactions = load_csv_transactions(str(path))
    assert [t.name for t in transactions] == ["Alice Johnson", "Bob Smith"]
    assert transactions[0].amount == 120.0


def test_csv_missing_columns(tmp_path):
    from rewards.tools.transaction_client import load_csv_transactions

    path = tmp_path / "transactions.csv"
    pd.DataFrame({'id': [1], 'amount': [10.0]}).to_csv(path, index=False)

    with pytest.raises(TransactionFetchError, match="missing columns"):
        load_csv_transactions(str(path))


def test_fetch_transactions_source_from_env(tmp_path, monkeypatch):
    from rewards.tools.transaction_client import fetch_transactions

    path = tmp_path / "transactions.csv"
    path.write_text("id,customerId,name,date,amount\n1,1,Dana Lee,2024-11-01,80\n")
    monkeypatch.setenv("TRANSACTIONS_SOURCE", "csv")
    monkeypatch.setenv("TRANSACTIONS_CSV", str(path))

    transactions = fetch_transactions({'fetch': {'source': 'fixture'}})
    assert len(transactions) == 1
    assert transactions[0].name == "Dana Lee"


def test_fetch_transactions_unknown_source(monkeypatch):
    from rewards.tools.transaction_client import fetch_transactions

    monkeypatch.delenv("TRANSACTIONS_SOURCE", raising=False)
    with pytest.raises(TransactionFetchError, match="Unknown transaction source"):
        fetch_transactions({'fetch': {'source': 'ftp'}})


# Cache

class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def test_cache_expires_after_ttl():
    from rewards.tools.cache import TTLCache

    clock = FakeClock()
    cache = TTLCache(ttl_seconds=300, clock=clock)
    cache.set("key", [1, 2])

    clock.now += 299
    assert cache.get("key") == [1, 2]

    clock.now += 1
    assert cache.get("key") is None


def test_cache_rejects_non_positive_ttl():
    from rewards.tools.cache import TTLCache

    with pytest.raises(CacheError):
        TTLCache(ttl_seconds=0)


def test_cached_fetch_reads_through():
    from rewards.tools.cache import TTLCache, cached_fetch

    calls = []

    def fetch():
        calls.append(1)
        return ["txn"]

    cache = TTLCache(ttl_seconds=60, clock=FakeClock())
    cached = cached_fetch(cache)(fetch)

    assert cached() == ["txn"]
    assert cached() == ["txn"]
    assert len(calls) == 1

    cached(force_refresh=True)
    assert len(calls) == 2

    cache.invalidate()
    cached()
    assert len(calls) == 3


def test_cached_fetch_does_not_serve_empty_results():
    from rewards.tools.cache import TTLCache, cached_fetch

    calls = []

    def fetch():
        calls.append(1)
        return []

    cached = cached_fetch(TTLCache(ttl_seconds=60))(fetch)
    cached()
    cached()
    assert len(calls) == 2


# Synthetic dataset script

def test_generated_csv_round_trips_through_csv_source(tmp_path):
    from scripts.generate_transactions import main as generate_main
    from rewards.tools.transaction_client import load_csv_transactions
    from rewards.tools.analytics import compute_analytics

    output = tmp_path / "transactions.csv"
    metadata = generate_main(["--customers", "4", "--months", "3", "--per-month", "2", "--output", str(output)])

    transactions = load_csv_transactions(str(output))
    snapshot = compute_analytics(transactions)

    assert metadata['transaction_count'] == 24
    assert snapshot.total_transactions == 24
    assert snapshot.total_customers == 4
    assert len(snapshot.monthly_trends) == 3
    assert snapshot.total_points == metadata['expected_total_points']
    assert (tmp_path / "metadata.json").exists()
