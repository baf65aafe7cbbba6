"""Column-driven sorting for tabular results"""

from functools import cmp_to_key
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Sequence, Union

from rewards.constants import SortDirection
from rewards.models import ColumnSpec, SortState


def _last_token(value: str) -> str:
    tokens = value.split()
    return tokens[-1] if tokens else ""


def _compare_text(a: str, b: str) -> int:
    # Case-insensitive first, exact text breaks the remaining ties
    left, right = (a.casefold(), a), (b.casefold(), b)
    return (left > right) - (left < right)


def compare_values(a: Any, b: Any) -> int:
    """
    Compare two cell values.

    Text compares by its last whitespace-separated word first, so
    "Mary Anne Wilson" files under "Wilson", then by the full text.
    Anything else compares numerically.

    Returns:
        Negative, zero or positive, like a classic cmp()
    """
    if isinstance(a, str) or isinstance(b, str):
        a, b = str(a), str(b)
        return _compare_text(_last_token(a), _last_token(b)) or _compare_text(a, b)

    diff = a - b
    return (diff > 0) - (diff < 0)


def _cell(row: Any, key: str) -> Any:
    if isinstance(row, Mapping):
        return row[key]
    return getattr(row, key)


def sort_rows(
    rows: Iterable[Any],
    key: Optional[str],
    direction: Union[SortDirection, str] = SortDirection.ASC
) -> List[Any]:
    """
    Return a new list of rows ordered by one column.

    Rows may be mappings or objects with attributes. The input is never
    modified; equal rows keep their relative order in either direction.

    Args:
        rows: Rows to order
        key: Column key, or None to keep the input order
        direction: 'asc' or 'desc'

    Returns:
        Sorted copy of the rows
    """
    rows = list(rows)
    if key is None:
        return rows

    sign = -1 if SortDirection(direction) is SortDirection.DESC else 1

    def _compare(left, right):
        return sign * compare_values(_cell(left, key), _cell(right, key))

    return sorted(rows, key=cmp_to_key(_compare))


def next_sort_state(
    state: SortState,
    key: str,
    columns: Optional[Sequence[ColumnSpec]] = None
) -> SortState:
    """
    Sort state after a header click on ``key``.

    Clicking the active column flips its direction, clicking another column
    selects it ascending. Non-sortable or unknown columns leave the state as is.
    """
    if columns is not None:
        column = next((c for c in columns if c.key == key), None)
        if column is None or not column.sortable:
            return state

    if state.sort_key == key:
        return SortState(sort_key=key, sort_direction=state.sort_direction.flipped())

    return SortState(sort_key=key, sort_direction=SortDirection.ASC)


class TableSorter:
    """Sort state for one table, driven by header clicks"""

    def __init__(
        self,
        columns: Sequence[ColumnSpec],
        default_sort_key: Optional[str] = None,
        default_sort_direction: Union[SortDirection, str] = SortDirection.ASC
    ):
        self.columns = list(columns)
        self.state = SortState(
            sort_key=default_sort_key,
            sort_direction=SortDirection(default_sort_direction)
        )

    def toggle(self, key: str) -> SortState:
        self.state = next_sort_state(self.state, key, self.columns)
        return self.state

    def apply(self, rows: Iterable[Any]) -> List[Any]:
        return sort_rows(rows, self.state.sort_key, self.state.sort_direction)
