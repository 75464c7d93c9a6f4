"""Shared fixtures: seed catalog and stock, engine, customers."""
import os
import sys
from decimal import Decimal

import pytest

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from checkout_tool.config.settings import Settings
from checkout_tool.data.load_store import load_store
from checkout_tool.engine import PriceEngine, Customer, LineItem


@pytest.fixture(scope="function")
def store():
    """Fresh catalog, inventory and load report from the bundled seed CSVs."""
    return load_store(Settings.load())


@pytest.fixture
def catalog(store):
    return store[0]


@pytest.fixture
def inventory(store):
    return store[1]


@pytest.fixture
def engine(catalog):
    return PriceEngine(catalog)


@pytest.fixture
def vip():
    return Customer(customer_id="C1", name="Ana", customer_type="VIP")


@pytest.fixture
def regular():
    return Customer(customer_id="C2", name="Bruno", customer_type="REGULAR")


@pytest.fixture
def apparel_items():
    """CAMISETA x2 @30, MEIA x1 @10, CALCA x1 @120 (subtotal 190.00)."""
    return [
        LineItem(sku="CAMISETA", quantity=2, unit_price=Decimal("30.00")),
        LineItem(sku="MEIA", quantity=1, unit_price=Decimal("10.00")),
        LineItem(sku="CALCA", quantity=1, unit_price=Decimal("120.00")),
    ]
