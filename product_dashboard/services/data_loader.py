"""Product loading from the remote listing endpoint."""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Dict, List, Optional

import pandas as pd
import requests

from config import (
    FETCH_ERROR_MESSAGE,
    INVALID_PAYLOAD_MESSAGE,
    PRODUCT_COLUMNS,
    PRODUCTS_API_URL,
    REQUEST_TIMEOUT_SECONDS,
)
from utils.helpers import normalize_category, normalize_images, normalize_text

logger = logging.getLogger(__name__)


class LoadFailure(Exception):
    """The product listing could not be retrieved."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class StoreStatus(str, Enum):
    PENDING = "pending"
    READY = "ready"
    FAILED = "failed"


def fetch_products(
    url: str = PRODUCTS_API_URL,
    session: Optional[requests.Session] = None,
    timeout: float = REQUEST_TIMEOUT_SECONDS,
) -> List[Dict]:
    """GET the product listing and return the decoded JSON array."""
    http = session or requests
    try:
        response = http.get(url, timeout=timeout, headers={"Accept": "application/json"})
    except requests.RequestException as exc:
        raise LoadFailure(str(exc)) from exc

    if not response.ok:
        raise LoadFailure(
            f"{FETCH_ERROR_MESSAGE} (HTTP {response.status_code})",
            status_code=response.status_code,
        )

    try:
        payload = response.json()
    except ValueError as exc:
        raise LoadFailure(INVALID_PAYLOAD_MESSAGE, status_code=response.status_code) from exc

    if not isinstance(payload, list):
        raise LoadFailure(INVALID_PAYLOAD_MESSAGE, status_code=response.status_code)
    return payload


def products_to_frame(records: List[Dict]) -> pd.DataFrame:
    """Normalize product dicts into the table schema, keeping listing order."""
    rows = []
    for record in records:
        if not isinstance(record, dict):
            continue
        rows.append(
            {
                "id": record.get("id"),
                "title": normalize_text(record.get("title")),
                "price": record.get("price"),
                "category": normalize_category(record.get("category")),
                "images": normalize_images(record.get("images")),
                "description": normalize_text(record.get("description")),
            }
        )
    return pd.DataFrame(rows, columns=PRODUCT_COLUMNS)


class RecordStore:
    """Holds the last fetched product collection and its fetch lifecycle."""

    def __init__(
        self,
        url: str = PRODUCTS_API_URL,
        session: Optional[requests.Session] = None,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ):
        self.url = url
        self.session = session
        self.timeout = timeout
        self.status = StoreStatus.PENDING
        self.products: Optional[pd.DataFrame] = None
        self.error: Optional[str] = None
        self._load_lock = threading.Lock()

    def load(self) -> Optional[pd.DataFrame]:
        """Fetch the full collection, replacing whatever was held before.

        Returns the new frame, or None when another load is still in flight.
        Raises LoadFailure after moving to FAILED and dropping the old data.
        """
        if not self._load_lock.acquire(blocking=False):
            logger.warning("Ignoring product load while another load is in flight")
            return None

        try:
            self.status = StoreStatus.PENDING
            self.error = None
            logger.info("Loading products from %s", self.url)
            try:
                records = fetch_products(self.url, session=self.session, timeout=self.timeout)
            except LoadFailure as exc:
                self.status = StoreStatus.FAILED
                self.products = None
                self.error = exc.message
                logger.error("Product load failed: %s", exc.message)
                raise

            self.products = products_to_frame(records)
            self.status = StoreStatus.READY
            logger.info("Loaded %d products", len(self.products))
            return self.products
        finally:
            self._load_lock.release()
