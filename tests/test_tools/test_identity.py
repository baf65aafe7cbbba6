"""Unit tests for manual-entry id allocation and customer lookup"""

import pytest
from rewards.models import Transaction
from rewards.tools.identity import (
    next_transaction_id,
    resolve_customer_id,
    list_customers,
    find_customer,
    search_customers
)


@pytest.fixture
def transactions():
    return [
        Transaction(id=3, customer_id=1, name="Alice Smith", date="2024-10-01", amount=60),
        Transaction(id=8, customer_id=4, name="Bob Jones", date="2024-10-02", amount=120),
        Transaction(id=5, customer_id=1, name="Alice Smith", date="2024-11-01", amount=30),
    ]


def test_next_transaction_id(transactions):
    assert next_transaction_id(transactions) == 9


def test_next_transaction_id_empty():
    assert next_transaction_id([]) == 1


def test_resolve_existing_customer_case_insensitive(transactions):
    assert resolve_customer_id(transactions, "Alice Smith") == 1
    assert resolve_customer_id(transactions, "alice smith") == 1
    assert resolve_customer_id(transactions, "  ALICE SMITH ") == 1


def test_resolve_new_customer_gets_fresh_id(transactions):
    assert resolve_customer_id(transactions, "Carol Davis") == 5


def test_resolve_customer_empty_set():
    assert resolve_customer_id([], "Anyone") == 1


def test_allocator_does_not_mutate(transactions):
    before = list(transactions)
    next_transaction_id(transactions)
    resolve_customer_id(transactions, "Someone New")
    assert transactions == before


def test_list_customers(transactions):
    customers = list_customers(transactions)
    assert [(c.customer_id, c.name, c.transaction_count) for c in customers] == [
        (1, "Alice Smith", 2),
        (4, "Bob Jones", 1),
    ]


def test_find_customer(transactions):
    customers = list_customers(transactions)
    assert find_customer(customers, "bob jones").customer_id == 4
    assert find_customer(customers, "Nobody") is None
    assert find_customer(customers, "   ") is None


def test_search_customers(transactions):
    customers = list_customers(transactions)
    assert [c.name for c in search_customers(customers, "SMI")] == ["Alice Smith"]
    assert [c.name for c in search_customers(customers, "o")] == ["Bob Jones"]
    assert len(search_customers(customers, "")) == 2
