"""Shared pytest fixtures for store tests."""

import pytest
import structlog

from store import Item, Register

BEANS = "Beans (8oz Can)"


@pytest.fixture
def register():
    """A fresh register with no scans."""
    return Register()


@pytest.fixture
def beans():
    """Factory for cans of beans at $1.99."""

    def make(price_each: int = 199) -> Item:
        return Item(BEANS, price_each)

    return make


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration a test applied."""
    yield
    structlog.reset_defaults()
