"""Unit tests for the generic table sorter"""

import pytest
from rewards.constants import SortDirection
from rewards.models import ColumnSpec, SortState, CustomerRanking
from rewards.tools.table_sorter import compare_values, sort_rows, next_sort_state, TableSorter


@pytest.fixture
def name_rows():
    return [{'name': "Charlie Brown"}, {'name': "Alice Smith"}, {'name': "Bob Johnson"}]


@pytest.fixture
def columns():
    return [
        ColumnSpec(key="name", label="Customer"),
        ColumnSpec(key="total_points", label="Points", align="right"),
        ColumnSpec(key="month", label="Month", sortable=False),
    ]


def test_compare_text_by_last_name():
    assert compare_values("Mary Anne Wilson", "Zack Adams") > 0
    assert compare_values("Zack Adams", "Mary Anne Wilson") < 0


def test_compare_text_falls_back_to_full_name():
    assert compare_values("Alice Smith", "Bob Smith") < 0
    assert compare_values("Bob Smith", "Bob Smith") == 0


def test_compare_numbers():
    assert compare_values(3, 10) < 0
    assert compare_values(10.5, 3) > 0
    assert compare_values(7, 7) == 0


def test_sort_by_last_name_ascending(name_rows):
    result = sort_rows(name_rows, 'name', 'asc')
    assert [r['name'] for r in result] == ["Charlie Brown", "Bob Johnson", "Alice Smith"]


def test_sort_descending_reverses_order(name_rows):
    result = sort_rows(name_rows, 'name', SortDirection.DESC)
    assert [r['name'] for r in result] == ["Alice Smith", "Bob Johnson", "Charlie Brown"]


def test_sort_numeric_column():
    rows = [{'points': 90}, {'points': 5}, {'points': 250}]
    assert [r['points'] for r in sort_rows(rows, 'points', 'asc')] == [5, 90, 250]
    assert [r['points'] for r in sort_rows(rows, 'points', 'desc')] == [250, 90, 5]


def test_sort_does_not_mutate_input(name_rows):
    original = list(name_rows)
    result = sort_rows(name_rows, 'name', 'asc')
    assert name_rows == original
    assert result is not name_rows


def test_sort_without_key_keeps_order(name_rows):
    assert sort_rows(name_rows, None) == name_rows


def test_sort_model_rows_by_attribute():
    rows = [
        CustomerRanking(customer_id=1, name="Alice Johnson", total_points=115),
        CustomerRanking(customer_id=2, name="Bob Smith", total_points=250),
    ]
    result = sort_rows(rows, 'total_points', 'desc')
    assert [r.customer_id for r in result] == [2, 1]


def test_sort_is_stable_for_equal_values():
    rows = [{'id': 1, 'points': 10}, {'id': 2, 'points': 10}, {'id': 3, 'points': 5}]
    assert [r['id'] for r in sort_rows(rows, 'points', 'asc')] == [3, 1, 2]
    assert [r['id'] for r in sort_rows(rows, 'points', 'desc')] == [1, 2, 3]


def test_same_key_toggles_direction(columns):
    state = SortState(sort_key="name", sort_direction=SortDirection.ASC)

    state = next_sort_state(state, "name", columns)
    assert state.sort_direction == SortDirection.DESC

    state = next_sort_state(state, "name", columns)
    assert state.sort_direction == SortDirection.ASC


def test_different_key_resets_to_ascending(columns):
    state = SortState(sort_key="name", sort_direction=SortDirection.DESC)
    state = next_sort_state(state, "total_points", columns)
    assert state == SortState(sort_key="total_points", sort_direction=SortDirection.ASC)


def test_non_sortable_column_is_a_no_op(columns):
    state = SortState(sort_key="name", sort_direction=SortDirection.DESC)
    assert next_sort_state(state, "month", columns) == state
    assert next_sort_state(state, "unknown", columns) == state


def test_table_sorter_defaults_and_toggle(columns):
    rows = [
        {'name': "Bob Smith", 'total_points': 250, 'month': "October 2024"},
        {'name': "Alice Johnson", 'total_points': 115, 'month': "November 2024"},
    ]
    sorter = TableSorter(columns, default_sort_key="total_points", default_sort_direction="desc")
    assert [r['total_points'] for r in sorter.apply(rows)] == [250, 115]

    sorter.toggle("total_points")
    assert [r['total_points'] for r in sorter.apply(rows)] == [115, 250]

    sorter.toggle("name")
    assert sorter.state.sort_direction == SortDirection.ASC
    assert [r['name'] for r in sorter.apply(rows)] == ["Alice Johnson", "Bob Smith"]

    sorter.toggle("month")
    assert sorter.state.sort_key == "name"
