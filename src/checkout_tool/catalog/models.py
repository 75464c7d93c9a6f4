"""
Product data model and the category tax table.
"""
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from ..money import round2, to_decimal


class Category(str, Enum):
    """Product categories recognized by the store."""
    APPLIANCE = "appliance"
    DECOR = "decor"
    CONSTRUCTION_MATERIALS = "construction-materials"
    APPAREL = "apparel"
    FOOD = "food"

    @classmethod
    def parse(cls, value) -> 'Category':
        """Resolve a category from its value, raising ValueError with the accepted list."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip())
        except ValueError:
            accepted = ", ".join(c.value for c in cls)
            raise ValueError(f"Invalid category: {value}. Accepted: {accepted}") from None


# VAT rate per category, food is reduced-rate
TAX_RATES: dict[Category, Decimal] = {
    Category.APPLIANCE: Decimal("0.23"),
    Category.DECOR: Decimal("0.23"),
    Category.CONSTRUCTION_MATERIALS: Decimal("0.23"),
    Category.APPAREL: Decimal("0.23"),
    Category.FOOD: Decimal("0.06"),
}

MAX_INSTALLMENTS_LIMIT = 24


@dataclass
class Product:
    """A catalog product. Price is the current list price, not a frozen cart price."""
    sku: str
    name: str
    price: Decimal
    manufacturer: str
    category: Category
    max_installments: int = 1

    def __post_init__(self):
        if not self.sku or not self.name:
            raise ValueError("SKU and name are required.")
        self.sku = str(self.sku)
        self.price = to_decimal(self.price)
        if self.price <= 0:
            raise ValueError("price must be a positive number.")
        if (
            not isinstance(self.max_installments, int)
            or not 1 <= self.max_installments <= MAX_INSTALLMENTS_LIMIT
        ):
            raise ValueError(
                f"max_installments must be an integer between 1 and {MAX_INSTALLMENTS_LIMIT}."
            )
        self.category = Category.parse(self.category)

    def installment_value(self, installments: int) -> Decimal:
        """
        Value of each installment when paying the list price in `installments` parts.

        Raises ValueError if the count is below 1 or above what the product allows.
        """
        if not isinstance(installments, int) or installments < 1:
            raise ValueError("installments must be an integer >= 1.")
        if installments > self.max_installments:
            raise ValueError(
                f"Invalid number of installments for {self.sku}. "
                f"Must be between 1 and {self.max_installments}."
            )
        return round2(self.price / installments)
