"""Single-column sorting for the product table."""

from __future__ import annotations

import math
from enum import Enum
from functools import cmp_to_key
from typing import Any, Callable, List, Tuple

import pandas as pd

from utils.helpers import fold_text, is_missing


class SortField(str, Enum):
    NONE = "none"
    TITLE = "title"
    PRICE = "price"


class SortDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


def parse_sort_field(value: object) -> SortField:
    """Accept a SortField, its value, or an empty value for no sorting."""
    if isinstance(value, SortField):
        return value
    if value is None or value == "":
        return SortField.NONE
    try:
        return SortField(str(value).lower())
    except ValueError:
        raise ValueError(f"Unsupported sort field: {value!r}") from None


def toggle_direction(direction: SortDirection) -> SortDirection:
    """Flip ascending and descending."""
    if direction == SortDirection.ASCENDING:
        return SortDirection.DESCENDING
    return SortDirection.ASCENDING


def _price_key(value: object) -> Tuple[bool, float]:
    if is_missing(value):
        return True, 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return True, 0.0
    if math.isnan(number):
        return True, 0.0
    return False, number


def _title_key(value: object) -> Tuple[bool, str]:
    return False, fold_text(value)


def sort_key_for(field: SortField) -> Callable[[Any], Tuple[bool, Any]]:
    """Return the per-value ``(is_missing, key)`` used to compare rows on ``field``."""
    if field == SortField.PRICE:
        return _price_key
    return _title_key


def compare_values(left: Any, right: Any, direction: SortDirection) -> int:
    """Three-way compare two keys, inverting the outcome for descending."""
    if direction == SortDirection.ASCENDING:
        if left > right:
            return 1
        if left < right:
            return -1
        return 0
    if left < right:
        return 1
    if left > right:
        return -1
    return 0


def compare_keys(left: Tuple[bool, Any], right: Tuple[bool, Any], direction: SortDirection) -> int:
    """Compare ``(is_missing, key)`` pairs; missing keys sort last in both directions."""
    left_missing, left_value = left
    right_missing, right_value = right
    if left_missing or right_missing:
        return int(left_missing) - int(right_missing)
    return compare_values(left_value, right_value, direction)


def sort_records(dataframe: pd.DataFrame, field: SortField, direction: SortDirection) -> pd.DataFrame:
    """Order rows by one column, or return them untouched for ``SortField.NONE``."""
    field = parse_sort_field(field)
    if field == SortField.NONE or dataframe.empty or field.value not in dataframe.columns:
        return dataframe

    key = sort_key_for(field)
    keys: List[Tuple[bool, Any]] = [key(value) for value in dataframe[field.value]]
    order = sorted(
        range(len(keys)),
        key=cmp_to_key(lambda i, j: compare_keys(keys[i], keys[j], direction)),
    )
    return dataframe.iloc[order]
