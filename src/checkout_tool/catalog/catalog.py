"""
Catalog - in-memory product registry keyed by SKU.

Provides the read-only `get_category` lookup the pricing engine consumes,
plus pandas views for the API and UI.
"""
import logging
from decimal import Decimal
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd

from ..errors import UnknownSkuError
from ..money import to_decimal
from .models import Category, Product

logger = logging.getLogger(__name__)

CATALOG_COLUMNS = ['sku', 'name', 'price', 'manufacturer', 'category', 'max_installments']


class Catalog:
    """Registry of products. Lookups never mutate; only add/update do."""

    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._products: dict[str, Product] = {}
        for product in products or []:
            self.add_product(product)

    def __contains__(self, sku) -> bool:
        return str(sku) in self._products

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self):
        return iter(self._products.values())

    def skus(self) -> list[str]:
        return list(self._products)

    def add_product(self, product: Product):
        """Register a product. SKUs are unique."""
        if not isinstance(product, Product):
            raise TypeError("product must be a Product instance.")
        if product.sku in self._products:
            raise ValueError(f"Product with SKU {product.sku} already exists in catalog.")
        self._products[product.sku] = product

    def get_product(self, sku: str) -> Product:
        """Return the product for `sku`, raising UnknownSkuError if unregistered."""
        product = self._products.get(str(sku))
        if product is None:
            raise UnknownSkuError(str(sku))
        return product

    def get_category(self, sku: str) -> Category:
        return self.get_product(sku).category

    def list_by_category(self, category) -> list[Product]:
        """All products in `category`, in registration order."""
        category = Category.parse(category)
        return [p for p in self._products.values() if p.category == category]

    def update_price(self, sku: str, new_price) -> Product:
        """Change the list price. Prices already frozen in carts are unaffected."""
        product = self.get_product(sku)
        new_price = to_decimal(new_price)
        if new_price <= 0:
            raise ValueError("New price must be a positive number.")
        logger.info("Price update for %s: %s -> %s", sku, product.price, new_price)
        product.price = new_price
        return product

    def to_frame(self) -> pd.DataFrame:
        """Catalog as a DataFrame indexed by SKU (prices kept as Decimal)."""
        rows = [
            {
                'sku': p.sku,
                'name': p.name,
                'price': p.price,
                'manufacturer': p.manufacturer,
                'category': p.category.value,
                'max_installments': p.max_installments,
            }
            for p in self._products.values()
        ]
        return pd.DataFrame(rows, columns=CATALOG_COLUMNS).set_index('sku')

    @classmethod
    def from_frame(cls, df: pd.DataFrame) -> 'Catalog':
        """Build a catalog from a DataFrame with CATALOG_COLUMNS."""
        missing = [c for c in CATALOG_COLUMNS if c not in df.columns]
        if missing:
            raise ValueError(f"Catalog data is missing columns: {', '.join(missing)}")

        catalog = cls()
        for row in df.to_dict(orient='records'):
            catalog.add_product(Product(
                sku=str(row['sku']).strip(),
                name=str(row['name']).strip(),
                price=to_decimal(str(row['price']).strip()),
                manufacturer=str(row['manufacturer']).strip() if pd.notna(row['manufacturer']) else "",
                category=row['category'],
                max_installments=int(row['max_installments']),
            ))
        return catalog

    @classmethod
    def from_csv(cls, path: Path) -> 'Catalog':
        """Load a catalog CSV. Prices are parsed straight to Decimal."""
        if not path.exists():
            raise FileNotFoundError(f"Catalog file not found at {path}.")
        df = pd.read_csv(path, dtype={'sku': str}, converters={'price': Decimal})
        return cls.from_frame(df)
