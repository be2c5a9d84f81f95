"""Product table component with sortable headers and page navigation."""

from __future__ import annotations

from typing import Callable

import streamlit as st

from config import TABLE_COLUMNS
from services.controller import TableView
from services.sort_service import SortDirection, SortField
from utils.helpers import build_display_frame

ASCENDING_ICON = "▲"
DESCENDING_ICON = "▼"
UNSORTED_ICON = "⇅"


def sort_indicator(column: SortField, active_field: SortField, direction: SortDirection) -> str:
    """Return the header arrow for ``column`` given the active sort."""
    if column != active_field:
        return UNSORTED_ICON
    return ASCENDING_ICON if direction == SortDirection.ASCENDING else DESCENDING_ICON


def render_sort_buttons(
    active_field: SortField,
    direction: SortDirection,
    on_sort: Callable[[SortField], None],
) -> None:
    """Render one sort toggle per sortable column."""
    title_col, price_col, _ = st.columns([1, 1, 4])
    with title_col:
        st.button(
            f"Title {sort_indicator(SortField.TITLE, active_field, direction)}",
            key="sort_title",
            help="Sort by title",
            on_click=on_sort,
            args=(SortField.TITLE,),
        )
    with price_col:
        st.button(
            f"Price {sort_indicator(SortField.PRICE, active_field, direction)}",
            key="sort_price",
            help="Sort by price",
            on_click=on_sort,
            args=(SortField.PRICE,),
        )


def render_table(view: TableView) -> None:
    """Render the current page of products."""
    if view.items.empty:
        st.info("No products match your search.")
        return

    display_df = build_display_frame(view.items)
    display_columns = [column for column in TABLE_COLUMNS if column in display_df.columns]

    st.dataframe(
        display_df[display_columns],
        hide_index=True,
        width="stretch",
        column_order=display_columns,
        column_config={
            "id": st.column_config.NumberColumn("ID", format="%d", width="small"),
            "image": st.column_config.ImageColumn("Image", width="small"),
            "title": st.column_config.TextColumn("Title"),
            "price": st.column_config.TextColumn("Price", width="small"),
            "category": st.column_config.TextColumn("Category"),
            "description": st.column_config.TextColumn("Description", width="large"),
        },
    )


def render_pagination(view: TableView, on_page: Callable[[int], None]) -> None:
    """Render Previous/Next buttons, the page label and the results summary."""
    previous_col, label_col, next_col = st.columns([1, 2, 1])
    with previous_col:
        st.button(
            "Previous",
            key="page_previous",
            disabled=not view.has_previous,
            on_click=on_page,
            args=(view.current_page - 1,),
        )
    with label_col:
        st.markdown(
            f'<div class="page-info">Page {view.current_page} of {view.total_pages}</div>',
            unsafe_allow_html=True,
        )
    with next_col:
        st.button(
            "Next",
            key="page_next",
            disabled=not view.has_next,
            on_click=on_page,
            args=(view.current_page + 1,),
        )

    st.caption(
        f"Showing {view.range_start} to {view.range_end} of {view.total_matching} products"
    )
