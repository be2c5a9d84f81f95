"""Streamlit app entrypoint for the Product Dashboard."""

from __future__ import annotations

import streamlit as st

from components.filters import render_page_size_select, render_search_bar
from components.navbar import render_navbar
from components.table import render_pagination, render_sort_buttons, render_table
from config import ASSETS_DIR, LOG_LEVEL, PAGE_SIZE_OPTIONS
from services.controller import ControllerStatus, TableController
from utils.logging_config import configure_logging


st.set_page_config(page_title="Product Dashboard", layout="wide")


def load_css() -> None:
    """Load app-level CSS styling from the assets directory."""
    css_path = ASSETS_DIR / "styles.css"
    if css_path.exists():
        with css_path.open("r", encoding="utf-8") as css_file:
            st.markdown(f"<style>{css_file.read()}</style>", unsafe_allow_html=True)


@st.cache_resource(show_spinner=False)
def init_logging() -> bool:
    """Configure logging once per server process."""
    configure_logging(LOG_LEVEL)
    return True


def init_session_state() -> TableController:
    """Create the per-session controller with default view state."""
    if "controller" not in st.session_state:
        st.session_state["controller"] = TableController()
    return st.session_state["controller"]


def reload_products(controller: TableController) -> None:
    """Trigger a fresh load, e.g. after a failure."""
    with st.spinner("Loading products..."):
        controller.load()


def main() -> None:
    """Render and run the Product Dashboard."""
    init_logging()
    load_css()
    controller = init_session_state()

    if controller.status == ControllerStatus.LOADING:
        reload_products(controller)

    view = controller.view()
    if view.status == ControllerStatus.LOADING:
        st.markdown("Loading products...")
        st.stop()
    if view.status == ControllerStatus.ERROR:
        st.error(f"Error: {view.error}")
        st.button("Reload", on_click=reload_products, args=(controller,))
        st.stop()

    total_products = None if controller.store.products is None else len(controller.store.products)
    render_navbar("Product Dashboard", total_products)

    search_col, size_col = st.columns([3, 1])
    with search_col:
        render_search_bar(controller.state.query, controller.set_query)
    with size_col:
        render_page_size_select(view.page_size, PAGE_SIZE_OPTIONS, controller.set_page_size)

    render_sort_buttons(
        controller.state.sort_field,
        controller.state.sort_direction,
        controller.set_sort,
    )
    render_table(view)
    render_pagination(view, controller.set_page)


if __name__ == "__main__":
    main()
