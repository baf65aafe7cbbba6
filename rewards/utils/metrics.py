"""Prometheus metrics definitions"""

from prometheus_client import Counter, Histogram, Gauge


# Transaction source
transactions_loaded = Counter(
    'rewards_transactions_loaded_total',
    'Transactions delivered by the transaction source',
    labelnames=['source']  # fixture, csv
)

transaction_fetch_failures = Counter(
    'rewards_transaction_fetch_failures_total',
    'Failed attempts to load the transaction list',
    labelnames=['source']
)

transaction_fetch_latency = Histogram(
    'rewards_transaction_fetch_latency_seconds',
    'Latency of loading the transaction list',
    buckets=[0.01, 0.1, 0.5, 1, 3, 5]
)

# Fetch cache
cache_lookups = Counter(
    'rewards_cache_lookups_total',
    'Transaction cache lookups',
    labelnames=['result']  # hit, miss
)

cache_invalidations = Counter(
    'rewards_cache_invalidations_total',
    'Transaction cache invalidations'
)

# Manual entry
manual_transaction_writes = Counter(
    'rewards_manual_transaction_writes_total',
    'Manual transaction edits applied to the store',
    labelnames=['action']  # add, update, delete
)

manual_transaction_rejections = Counter(
    'rewards_manual_transaction_rejections_total',
    'Manual transaction inputs rejected by validation'
)

# Derived views
recompute_latency = Histogram(
    'rewards_recompute_latency_seconds',
    'Time to re-derive a dashboard view from the transaction list',
    labelnames=['view'],  # customer_summaries, analytics
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5]
)

store_transaction_count = Gauge(
    'rewards_store_transaction_count',
    'Transactions currently held in the store'
)

total_points_awarded = Gauge(
    'rewards_total_points_awarded',
    'Total loyalty points across all customers in the last analytics pass'
)

total_customers = Gauge(
    'rewards_total_customers',
    'Distinct customers in the last analytics pass'
)
