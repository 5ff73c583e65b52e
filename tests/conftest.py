# tests/conftest.py
import os
import sys

import pytest

# ensure project root is importable
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from mart.models.cart import add_item, empty_cart, make_item  # noqa: E402
from mart.services.actions import ShoppingSession  # noqa: E402


@pytest.fixture
def cart():
    return empty_cart()


@pytest.fixture
def sword_cart(cart):
    """Cart holding a single sword priced 12."""
    return add_item(cart, make_item("sword", 12))


@pytest.fixture
def three_item_cart(sword_cart):
    """Cart with items priced 12, 22 and 3 (total 37)."""
    c = add_item(sword_cart, make_item("shield", 22))
    return add_item(c, make_item("potion", 3))


@pytest.fixture
def make_cart():
    """
    Return a callable building a cart from (name, price) pairs.
    Usage: c = make_cart(("a", 1), ("b", 2))
    """
    def _fn(*pairs):
        c = empty_cart()
        for name, price in pairs:
            c = add_item(c, make_item(name, price))
        return c
    return _fn


@pytest.fixture
def session():
    return ShoppingSession()
