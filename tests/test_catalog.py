"""
Catalog, product and inventory behavior, plus seed loading.
"""
from decimal import Decimal

import pandas as pd
import pytest

from checkout_tool.catalog import Catalog, Category, Inventory, Product, TAX_RATES
from checkout_tool.errors import InsufficientStockError, UnknownSkuError


def make_product(**overrides):
    data = dict(sku="X1", name="Test", price="10.00", manufacturer="ACME", category="decor", max_installments=3)
    data.update(overrides)
    return Product(**data)


def test_seed_catalog_loaded(catalog, store):
    report = store[2]
    assert len(catalog) == 10
    assert catalog.get_product("MICRO").price == Decimal("499.90")
    assert catalog.get_category("CIMENTO") == Category.CONSTRUCTION_MATERIALS
    assert report["metrics"]["products_by_category"]["apparel"] == 3
    assert report["input_files"]["catalog"]["hash"]
    assert report["warnings"] == []


def test_tax_table_food_is_reduced():
    assert TAX_RATES[Category.FOOD] == Decimal("0.06")
    assert all(TAX_RATES[c] == Decimal("0.23") for c in Category if c != Category.FOOD)


def test_unknown_sku(catalog):
    with pytest.raises(UnknownSkuError) as exc:
        catalog.get_category("GHOST")
    assert exc.value.sku == "GHOST"
    assert "GHOST" not in catalog


def test_duplicate_sku_rejected():
    catalog = Catalog([make_product()])
    with pytest.raises(ValueError):
        catalog.add_product(make_product())


def test_list_by_category(catalog):
    skus = [p.sku for p in catalog.list_by_category("apparel")]
    assert skus == ["CAMISETA", "CALCA", "MEIA"]
    with pytest.raises(ValueError, match="Invalid category"):
        catalog.list_by_category("toys")


def test_update_price(catalog):
    catalog.update_price("ARROZ", 6.5)
    assert catalog.get_product("ARROZ").price == Decimal("6.5")
    with pytest.raises(ValueError):
        catalog.update_price("ARROZ", 0)


@pytest.mark.parametrize("overrides", [
    {"price": "0"},
    {"price": "-1"},
    {"max_installments": 0},
    {"max_installments": 25},
    {"category": "toys"},
    {"sku": ""},
])
def test_invalid_products(overrides):
    with pytest.raises(ValueError):
        make_product(**overrides)


def test_installment_value(catalog):
    micro = catalog.get_product("MICRO")
    assert micro.installment_value(12) == Decimal("41.66")
    assert micro.installment_value(1) == Decimal("499.90")
    with pytest.raises(ValueError):
        micro.installment_value(13)
    with pytest.raises(ValueError):
        micro.installment_value(0)


def test_catalog_frame_roundtrip(catalog):
    frame = catalog.to_frame()
    assert frame.index.name == 'sku'
    assert frame.loc["VASO", "category"] == "decor"

    rebuilt = Catalog.from_frame(frame.reset_index())
    assert rebuilt.get_product("VASO").price == Decimal("89.90")


def test_from_frame_requires_columns():
    with pytest.raises(ValueError, match="missing columns"):
        Catalog.from_frame(pd.DataFrame([{"sku": "A", "name": "B"}]))


def test_inventory_operations(inventory):
    assert inventory.get_quantity("MICRO") == 5
    assert inventory.get_quantity("UNKNOWN") == 0

    inventory.add("MICRO", 2)
    inventory.remove("MICRO", 3)
    assert inventory.get_quantity("MICRO") == 4

    with pytest.raises(InsufficientStockError) as exc:
        inventory.remove("MICRO", 10)
    assert exc.value.available == 4
    assert exc.value.requested == 10
    assert inventory.get_quantity("MICRO") == 4


@pytest.mark.parametrize("quantity", [-1, 1.5, "2"])
def test_inventory_rejects_bad_quantities(quantity):
    inventory = Inventory()
    with pytest.raises(ValueError):
        inventory.set_quantity("A", quantity)
