"""Pytest configuration and fixtures."""

import pytest
import requests

from services.data_loader import RecordStore, products_to_frame


class FakeResponse:
    def __init__(self, payload=None, status_code=200, json_error=False):
        self._payload = payload
        self.status_code = status_code
        self._json_error = json_error

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._json_error:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class FakeSession:
    """Stands in for requests.Session; records every GET."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


def make_product(product_id, title, price=10, category="Clothes", images=None):
    return {
        "id": product_id,
        "title": title,
        "price": price,
        "description": f"{title} description",
        "category": {"id": 1, "name": category} if category else None,
        "images": images if images is not None else [f"https://img.example.com/{product_id}.png"],
    }


@pytest.fixture
def products():
    """Twelve products with distinct prices and mixed-case titles."""
    titles = [
        "Classic Shirt", "Running Shoes", "Wool Hat", "silk scarf",
        "Denim Jacket", "Leather Belt", "Canvas Sneakers", "Summer Dress",
        "Rain Coat", "Cotton Socks", "Sun Glasses", "Beach Shorts",
    ]
    return [make_product(index + 1, title, price=(index * 7) % 13 + 1) for index, title in enumerate(titles)]


@pytest.fixture
def products_df(products):
    return products_to_frame(products)


@pytest.fixture
def ready_store(products):
    """A RecordStore wired to a fake session that returns the fixture products."""
    return RecordStore(url="https://api.example.com/products", session=FakeSession(FakeResponse(products)))


@pytest.fixture
def failing_store():
    error = requests.ConnectionError("Connection refused")
    return RecordStore(url="https://api.example.com/products", session=FakeSession(error=error))
