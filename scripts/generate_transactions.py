#!/usr/bin/env python3
"""
Generate a synthetic transaction CSV for the rewards dashboard.

The CSV matches the columns the ``csv`` transaction source expects
(id, customerId, name, date, amount). Amounts are drawn so every branch of the
points schedule is exercised: at or below $50, the $50-$100 band, and above $100.
A metadata.json with the expected totals is written next to the CSV.

Usage:
    python scripts/generate_transactions.py --customers 20 --months 3 --output data/transactions.csv
"""

import sys
import json
import argparse
from pathlib import Path
from datetime import date, datetime

import pandas as pd
import numpy as np

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from rewards.tools.points import calculate_points

RANDOM_SEED = 42
DEFAULT_OUTPUT = Path(__file__).parent.parent / "data" / "transactions.csv"

FIRST_NAMES = [
    "Alice", "Bob", "Carol", "David", "Eva", "Frank", "Grace", "Henry",
    "Irene", "Jack", "Karen", "Liam", "Maria", "Noah", "Olivia", "Peter"
]
LAST_NAMES = [
    "Johnson", "Smith", "Davis", "Wilson", "Martinez", "Brown", "Lee",
    "Taylor", "Anderson", "Thomas", "Moore", "Clark", "Lewis", "Walker"
]

# Amount bands: (low, high, weight)
AMOUNT_BANDS = [
    (5.0, 50.0, 0.25),
    (50.01, 100.0, 0.35),
    (100.01, 600.0, 0.40),
]


def _month_starts(end: date, months: int):
    year, month = end.year, end.month
    starts = []
    for _ in range(months):
        starts.append(date(year, month, 1))
        month -= 1
        if month == 0:
            year, month = year - 1, 12
    return list(reversed(starts))


def generate_transactions(
    customers: int = 5,
    months: int = 3,
    per_month: int = 2,
    end: date = date(2024, 12, 31),
    seed: int = RANDOM_SEED
) -> pd.DataFrame:
    """
    Build a DataFrame of synthetic transactions.

    Args:
        customers: Number of distinct customers
        months: Number of calendar months ending at ``end``
        per_month: Transactions per customer per month
        end: Last day of the generated range
        seed: Random seed

    Returns:
        DataFrame with id, customerId, name, date, amount
    """
    rng = np.random.default_rng(seed)

    names = []
    while len(names) < customers:
        name = f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}"
        if name not in names:
            names.append(name)

    weights = np.array([band[2] for band in AMOUNT_BANDS])
    rows = []
    for customer_id, name in enumerate(names, start=1):
        for month_start in _month_starts(end, months):
            days = pd.Timestamp(month_start).days_in_month
            for day in sorted(rng.integers(1, days + 1, size=per_month)):
                low, high, _ = AMOUNT_BANDS[rng.choice(len(AMOUNT_BANDS), p=weights / weights.sum())]
                rows.append({
                    'customerId': customer_id,
                    'name': name,
                    'date': month_start.replace(day=int(day)).isoformat(),
                    'amount': round(float(rng.uniform(low, high)), 2)
                })

    df = pd.DataFrame(rows)
    df.insert(0, 'id', range(1, len(df) + 1))
    return df


def build_metadata(df: pd.DataFrame, seed: int) -> dict:
    points = df['amount'].apply(calculate_points)
    return {
        "created_at": datetime.now().isoformat(),
        "seed": seed,
        "transaction_count": int(len(df)),
        "customer_count": int(df['customerId'].nunique()),
        "total_spent": round(float(df['amount'].sum()), 2),
        "expected_total_points": int(points.sum())
    }


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate synthetic reward transactions")
    parser.add_argument("--customers", type=int, default=5)
    parser.add_argument("--months", type=int, default=3)
    parser.add_argument("--per-month", type=int, default=2)
    parser.add_argument("--seed", type=int, default=RANDOM_SEED)
    parser.add_argument("--output", type=Path, default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)

    df = generate_transactions(args.customers, args.months, args.per_month, seed=args.seed)

    args.output.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(args.output, index=False)

    metadata = build_metadata(df, args.seed)
    metadata_path = args.output.with_name("metadata.json")
    with open(metadata_path, 'w') as f:
        json.dump(metadata, f, indent=2)

    print(f"✅ Wrote {metadata['transaction_count']} transactions to {args.output}")
    print(f"   Expected total points: {metadata['expected_total_points']}")
    return metadata


if __name__ == "__main__":
    main()
