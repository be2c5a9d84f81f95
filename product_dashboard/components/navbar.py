"""Top navigation bar component."""

from __future__ import annotations

from datetime import datetime

import streamlit as st


def render_navbar(title: str, total_products: int | None = None) -> None:
    """Render dashboard header with product count and timestamp."""
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    count_label = "" if total_products is None else f"Products: {total_products} | "
    st.markdown(
        f"""
        <div class="navbar">
            <div class="navbar-title">{title}</div>
            <div class="navbar-meta">{count_label}{timestamp}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )
