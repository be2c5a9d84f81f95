import math

import pandas as pd

from components.table import sort_indicator
from config import TABLE_COLUMNS
from services.data_loader import products_to_frame
from services.sort_service import SortDirection, SortField
from utils.helpers import (
    build_display_frame,
    category_label,
    first_image,
    fold_text,
    format_price,
    normalize_images,
    normalize_text,
)

from conftest import make_product


def test_category_label_falls_back_to_na():
    assert category_label({"name": "Shoes"}) == "Shoes"
    assert category_label({"name": ""}) == "N/A"
    assert category_label({}) == "N/A"
    assert category_label(None) == "N/A"
    assert category_label(math.nan) == "N/A"


def test_first_image_and_normalize_images():
    assert first_image(["a.png", "b.png"]) == "a.png"
    assert first_image([]) is None
    assert first_image(None) is None
    assert normalize_images(["", None, "c.png"]) == ["c.png"]
    assert normalize_images("d.png") == ["d.png"]


def test_format_price():
    assert format_price(12) == "$12"
    assert format_price(12.0) == "$12"
    assert format_price(9.99) == "$9.99"


def test_text_normalization_handles_nulls():
    assert normalize_text(None) == ""
    assert normalize_text(math.nan) == ""
    assert normalize_text("  Hat ") == "Hat"
    assert fold_text("ÉCHARPE") == "écharpe"
    assert fold_text("Straße") == "strasse"
    assert fold_text(None) == ""


def test_build_display_frame_shapes_rows():
    frame = products_to_frame(
        [
            make_product(1, "Hat", price=15, category=None, images=[]),
            make_product(2, "Shoes", price=49.5),
        ]
    )

    display = build_display_frame(frame)

    assert display["category"].tolist() == ["N/A", "Clothes"]
    assert display["price"].tolist() == ["$15", "$49.5"]
    assert pd.isna(display.iloc[0]["image"])
    assert display.iloc[1]["image"] == "https://img.example.com/2.png"


def test_build_display_frame_on_empty_page():
    display = build_display_frame(products_to_frame([]))

    assert display.empty
    assert list(display.columns) == TABLE_COLUMNS


def test_sort_indicator():
    assert sort_indicator(SortField.TITLE, SortField.NONE, SortDirection.ASCENDING) == "⇅"
    assert sort_indicator(SortField.TITLE, SortField.TITLE, SortDirection.ASCENDING) == "▲"
    assert sort_indicator(SortField.PRICE, SortField.PRICE, SortDirection.DESCENDING) == "▼"
    assert sort_indicator(SortField.PRICE, SortField.TITLE, SortDirection.DESCENDING) == "⇅"
