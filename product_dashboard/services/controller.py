"""Table controller: view state, mutation intents and the derivation pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

import pandas as pd

from config import DEFAULT_PAGE_SIZE, PRODUCT_COLUMNS
from services.data_loader import LoadFailure, RecordStore
from services.filter_service import apply_title_filter, filter_signature
from services.sort_service import (
    SortDirection,
    SortField,
    parse_sort_field,
    sort_records,
    toggle_direction,
)
from utils.pagination import clamp_page_number, compute_total_pages, paginate

logger = logging.getLogger(__name__)


class ControllerStatus(str, Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass
class ViewState:
    query: str = ""
    sort_field: SortField = SortField.NONE
    sort_direction: SortDirection = SortDirection.ASCENDING
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE


@dataclass(frozen=True)
class TableView:
    """Everything the presentation layer needs for one render pass."""

    status: ControllerStatus
    items: pd.DataFrame = field(default_factory=lambda: pd.DataFrame(columns=PRODUCT_COLUMNS))
    current_page: int = 1
    total_pages: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    range_start: int = 0
    range_end: int = 0
    total_matching: int = 0
    error: Optional[str] = None

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages


class TableController:
    """Turns raw products plus ViewState into the visible page.

    Every mutation intent only edits ViewState; ``view()`` re-derives
    filter -> sort -> paginate from scratch, reusing the filtered and sorted
    rows while their signature is unchanged.
    """

    def __init__(self, store: Optional[RecordStore] = None, state: Optional[ViewState] = None):
        self.store = store or RecordStore()
        self.state = state or ViewState()
        self.status = ControllerStatus.LOADING
        self.error: Optional[str] = None
        self._ordered_cache: Optional[Tuple[tuple, pd.DataFrame]] = None

    def load(self) -> ControllerStatus:
        """Fetch products and move to READY or ERROR."""
        self.status = ControllerStatus.LOADING
        self.error = None
        try:
            products = self.store.load()
        except LoadFailure as exc:
            self.status = ControllerStatus.ERROR
            self.error = exc.message
            self._ordered_cache = None
            logger.warning("Products unavailable: %s", exc.message)
            return self.status

        if products is None:
            # Overlapping load; the in-flight one settles the state.
            return self.status

        self._ordered_cache = None
        self.status = ControllerStatus.READY
        return self.status

    def set_query(self, text: str) -> None:
        self.state.query = text or ""
        self.state.page = 1

    def set_sort(self, sort_field: object) -> None:
        """Select a sort column; reselecting the active column flips direction."""
        selected = parse_sort_field(sort_field)
        if selected == self.state.sort_field:
            self.state.sort_direction = toggle_direction(self.state.sort_direction)
        else:
            self.state.sort_field = selected
            self.state.sort_direction = SortDirection.ASCENDING
        self.state.page = 1

    def set_page(self, page: int) -> None:
        self.state.page = int(page)

    def set_page_size(self, page_size: int) -> None:
        page_size = int(page_size)
        if page_size <= 0:
            raise ValueError(f"Page size must be positive, got {page_size}")
        self.state.page_size = page_size
        self.state.page = 1

    def _ordered_products(self) -> pd.DataFrame:
        products = self.store.products
        if products is None:
            products = pd.DataFrame(columns=PRODUCT_COLUMNS)

        signature = filter_signature(
            self.state.query, self.state.sort_field, self.state.sort_direction
        )
        if self._ordered_cache is not None and self._ordered_cache[0] == signature:
            return self._ordered_cache[1]

        filtered = apply_title_filter(products, self.state.query)
        ordered = sort_records(filtered, self.state.sort_field, self.state.sort_direction)
        self._ordered_cache = (signature, ordered)
        return ordered

    def view(self) -> TableView:
        """Run the derivation pipeline for the current ViewState."""
        if self.status != ControllerStatus.READY:
            return TableView(
                status=self.status,
                current_page=self.state.page,
                page_size=self.state.page_size,
                error=self.error,
            )

        ordered = self._ordered_products()
        total_matching = len(ordered)
        total_pages = compute_total_pages(total_matching, self.state.page_size)
        self.state.page = clamp_page_number(self.state.page, total_pages)

        page = paginate(ordered, self.state.page, self.state.page_size)
        range_start = page.start_index + 1 if total_matching else 0
        range_end = page.end_index if total_matching else 0
        return TableView(
            status=self.status,
            items=page.items,
            current_page=self.state.page,
            total_pages=page.total_pages,
            page_size=self.state.page_size,
            range_start=range_start,
            range_end=range_end,
            total_matching=total_matching,
        )
