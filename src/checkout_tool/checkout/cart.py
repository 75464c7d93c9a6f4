"""
Shopping Cart - consolidates cart lines per SKU and freezes unit prices.
"""
from dataclasses import replace
from decimal import Decimal

from ..catalog import Catalog, Inventory
from ..errors import ItemNotInCartError
from ..engine.models import LineItem
from ..money import ZERO, round2


class ShoppingCart:
    """
    A customer's cart. Unit prices are frozen at the time a SKU is first
    added; later catalog price changes do not affect lines already in the cart.
    """

    def __init__(self, catalog: Catalog, inventory: Inventory):
        self.catalog = catalog
        self.inventory = inventory
        self._items: dict[str, LineItem] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, sku) -> bool:
        return str(sku) in self._items

    def add_item(self, sku: str, quantity: int) -> LineItem:
        """
        Add `quantity` units of `sku`, merging with an existing line.

        Stock is checked for the consolidated quantity.
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise ValueError("quantity must be an integer >= 1.")
        product = self.catalog.get_product(sku)
        existing = self._items.get(product.sku)

        if existing:
            new_quantity = existing.quantity + quantity
            self.inventory.ensure_available(product.sku, new_quantity)
            item = replace(existing, quantity=new_quantity)
        else:
            self.inventory.ensure_available(product.sku, quantity)
            item = LineItem(sku=product.sku, quantity=quantity, unit_price=product.price)

        self._items[product.sku] = item
        return item

    def remove_item(self, sku: str):
        if str(sku) not in self._items:
            raise ItemNotInCartError(str(sku))
        del self._items[str(sku)]

    def change_quantity(self, sku: str, new_quantity: int) -> LineItem:
        """Replace the quantity of a line, keeping its frozen price."""
        if str(sku) not in self._items:
            raise ItemNotInCartError(str(sku))
        if isinstance(new_quantity, bool) or not isinstance(new_quantity, int) or new_quantity < 1:
            raise ValueError("new_quantity must be an integer >= 1.")
        self.inventory.ensure_available(sku, new_quantity)
        item = replace(self._items[str(sku)], quantity=new_quantity)
        self._items[str(sku)] = item
        return item

    def list_items(self) -> list[LineItem]:
        """Cart lines in the order SKUs were first added."""
        return list(self._items.values())

    def subtotal(self) -> Decimal:
        return round2(sum((item.total for item in self._items.values()), ZERO))

    def clear(self):
        self._items.clear()
