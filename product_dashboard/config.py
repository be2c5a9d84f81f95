"""Application configuration constants."""

import os
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent
ASSETS_DIR = ROOT_DIR / "assets"

PRODUCTS_API_URL = os.getenv("PRODUCTS_API_URL", "https://api.escuelajs.co/api/v1/products")
REQUEST_TIMEOUT_SECONDS = float(os.getenv("REQUEST_TIMEOUT_SECONDS", "15"))
LOG_LEVEL = os.getenv("DASHBOARD_LOG_LEVEL", "INFO")

DEFAULT_PAGE_SIZE = 5
PAGE_SIZE_OPTIONS = [5, 10, 20]

CATEGORY_FALLBACK = "N/A"

FETCH_ERROR_MESSAGE = "Failed to fetch products"
INVALID_PAYLOAD_MESSAGE = "Product listing response is not a JSON array"

PRODUCT_COLUMNS = [
    "id",
    "title",
    "price",
    "category",
    "images",
    "description",
]

TABLE_COLUMNS = [
    "id",
    "image",
    "title",
    "price",
    "category",
    "description",
]
