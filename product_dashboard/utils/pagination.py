"""Pagination helpers for client-side table slicing."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

import pandas as pd


@dataclass(frozen=True)
class Page:
    """One page of rows plus the offsets it was cut from."""

    items: pd.DataFrame
    total_pages: int
    start_index: int
    end_index: int


def compute_total_pages(total_rows: int, page_size: int) -> int:
    """Compute the total number of pages for the provided page size."""
    if page_size <= 0:
        return 1
    return max(1, math.ceil(total_rows / page_size))


def clamp_page_number(page_number: int, total_pages: int) -> int:
    """Clamp page number to valid bounds."""
    return min(max(page_number, 1), max(total_pages, 1))


def page_slice(page_number: int, page_size: int) -> Tuple[int, int]:
    """Return start/end row offsets for the selected page."""
    start = (page_number - 1) * page_size
    end = start + page_size
    return start, end


def paginate(dataframe: pd.DataFrame, page_number: int, page_size: int) -> Page:
    """Cut one page out of the rows.

    The page number is used as given; callers clamp it beforehand with
    ``clamp_page_number``. A page starting past the last row is empty.
    """
    total_rows = len(dataframe)
    start, end = page_slice(page_number, page_size)
    end = min(end, total_rows)
    if start >= total_rows:
        items = dataframe.iloc[0:0]
    else:
        items = dataframe.iloc[start:end]
    return Page(
        items=items,
        total_pages=compute_total_pages(total_rows, page_size),
        start_index=start,
        end_index=end,
    )
