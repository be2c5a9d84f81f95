"""Search and page-size controls above the table."""

from __future__ import annotations

from typing import Callable, List

import streamlit as st


def render_search_bar(query: str, on_change: Callable[[str], None]) -> None:
    """Render the title search input and forward edits to ``on_change``."""

    def _handle_change() -> None:
        on_change(st.session_state["product_search"])

    st.session_state.setdefault("product_search", query)
    st.text_input(
        "Search by product title",
        key="product_search",
        placeholder="Search by product title...",
        on_change=_handle_change,
        label_visibility="collapsed",
    )


def render_page_size_select(
    page_size: int,
    options: List[int],
    on_change: Callable[[int], None],
) -> None:
    """Render the items-per-page select box."""

    def _handle_change() -> None:
        on_change(int(st.session_state["items_per_page"]))

    choices = list(options)
    if page_size not in choices:
        choices = sorted([*choices, page_size])

    st.selectbox(
        "Items per page",
        options=choices,
        index=choices.index(page_size),
        key="items_per_page",
        on_change=_handle_change,
    )
