"""Helper utilities for record normalization and display formatting."""

from __future__ import annotations

from typing import Any, List, Optional

import pandas as pd

from config import CATEGORY_FALLBACK, TABLE_COLUMNS


def is_missing(value: object) -> bool:
    """Return True for None and pandas/numpy null scalars."""
    if value is None:
        return True
    if isinstance(value, (list, tuple, dict, set)):
        return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def normalize_text(value: object) -> str:
    """Normalize a value into a stripped string, or empty string for nulls."""
    if is_missing(value):
        return ""
    return str(value).strip()


def fold_text(value: object) -> str:
    """Case-fold a value for comparisons; nulls fold to the empty string."""
    if is_missing(value):
        return ""
    return str(value).casefold()


def normalize_images(value: object) -> List[str]:
    """Coerce an images field into a list of non-empty references."""
    if isinstance(value, str):
        return [value] if value.strip() else []
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if not is_missing(item) and str(item).strip()]
    return []


def normalize_category(value: object) -> Optional[dict]:
    """Keep a category only when it is a mapping."""
    if isinstance(value, dict):
        return value
    return None


def category_label(category: object) -> str:
    """Return the category name, or the fallback label when absent."""
    if isinstance(category, dict):
        name = normalize_text(category.get("name"))
        if name:
            return name
    return CATEGORY_FALLBACK


def first_image(images: object) -> Optional[str]:
    """Return the first image reference, if any."""
    normalized = normalize_images(images)
    return normalized[0] if normalized else None


def format_price(price: Any) -> str:
    """Render a price as ``$<value>``; whole numbers lose their decimals."""
    if is_missing(price):
        return "$"
    if isinstance(price, float) and price.is_integer():
        return f"${int(price)}"
    return f"${price}"


def build_display_frame(page_df: pd.DataFrame) -> pd.DataFrame:
    """Shape one page of product rows into the table's display columns."""
    rows = []
    for _, product in page_df.iterrows():
        image = first_image(product.get("images"))
        rows.append(
            {
                "id": product.get("id"),
                "image": image,
                "title": normalize_text(product.get("title")),
                "price": format_price(product.get("price")),
                "category": category_label(product.get("category")),
                "description": normalize_text(product.get("description")),
            }
        )
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)
