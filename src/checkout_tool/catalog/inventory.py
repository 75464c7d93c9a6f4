"""
Inventory - on-hand quantity per SKU.
"""
import logging
from pathlib import Path

import pandas as pd

from ..errors import InsufficientStockError

logger = logging.getLogger(__name__)


def _check_non_negative_int(value, label: str):
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{label} must be an integer >= 0.")


class Inventory:
    """Tracks stock levels. Unknown SKUs have zero units."""

    def __init__(self):
        self._items: dict[str, int] = {}

    def set_quantity(self, sku: str, quantity: int):
        """Set the stock level directly (initial load or manual adjustment)."""
        _check_non_negative_int(quantity, "Quantity")
        self._items[str(sku)] = quantity

    def add(self, sku: str, quantity: int):
        """Restock `quantity` units."""
        _check_non_negative_int(quantity, "Quantity to add")
        self._items[str(sku)] = self.get_quantity(sku) + quantity

    def remove(self, sku: str, quantity: int):
        """Take `quantity` units out of stock, failing if not enough are on hand."""
        _check_non_negative_int(quantity, "Quantity to remove")
        self.ensure_available(sku, quantity)
        self._items[str(sku)] = self.get_quantity(sku) - quantity
        logger.debug("Removed %d x %s, %d left", quantity, sku, self._items[str(sku)])

    def get_quantity(self, sku: str) -> int:
        return self._items.get(str(sku), 0)

    def ensure_available(self, sku: str, quantity: int):
        """Raise InsufficientStockError unless `quantity` units of `sku` are on hand."""
        available = self.get_quantity(sku)
        if available < quantity:
            raise InsufficientStockError(str(sku), available, quantity)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            [{'sku': sku, 'quantity': qty} for sku, qty in self._items.items()],
            columns=['sku', 'quantity'],
        )

    @classmethod
    def from_csv(cls, path: Path) -> 'Inventory':
        """Load stock levels from a `sku,quantity` CSV."""
        if not path.exists():
            raise FileNotFoundError(f"Stock file not found at {path}.")
        df = pd.read_csv(path, dtype={'sku': str})
        inventory = cls()
        for row in df.itertuples(index=False):
            inventory.set_quantity(str(row.sku).strip(), int(row.quantity))
        return inventory
