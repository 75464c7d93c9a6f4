"""
Data models for the pricing engine.

Uses dataclasses for structured, type-safe data representation.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional, Protocol

from ..catalog.models import Category
from ..money import round2, to_decimal


class CustomerType(str, Enum):
    REGULAR = "REGULAR"
    VIP = "VIP"


class ProductLookup(Protocol):
    """Read-only catalog access the engine depends on."""

    def get_category(self, sku: str) -> Category:
        """Return the category for `sku`, raising UnknownSkuError if unregistered."""
        ...


@dataclass
class Customer:
    """A store customer with a loyalty points balance."""
    customer_id: str
    name: str
    customer_type: CustomerType = CustomerType.REGULAR
    points_balance: int = 0

    def __post_init__(self):
        self.customer_id = str(self.customer_id)
        self.name = str(self.name)
        # Anything other than "VIP" is a regular customer
        if str(getattr(self.customer_type, 'value', self.customer_type)).upper() == "VIP":
            self.customer_type = CustomerType.VIP
        else:
            self.customer_type = CustomerType.REGULAR
        if isinstance(self.points_balance, bool) or not isinstance(self.points_balance, int) \
                or self.points_balance < 0:
            raise ValueError("points_balance must be an integer >= 0.")

    @property
    def is_vip(self) -> bool:
        return self.customer_type == CustomerType.VIP

    def add_points(self, points: int):
        """Credit loyalty points (e.g. after a purchase)."""
        if isinstance(points, bool) or not isinstance(points, int) or points < 0:
            raise ValueError("Points to add must be an integer >= 0.")
        self.points_balance += points

    def redeem_points(self, points: int):
        """Debit loyalty points, failing if the balance is too low."""
        if isinstance(points, bool) or not isinstance(points, int) or points < 0:
            raise ValueError("Points to redeem must be an integer >= 0.")
        if points > self.points_balance:
            raise ValueError(
                f"Insufficient balance. Customer has only {self.points_balance} points."
            )
        self.points_balance -= points


@dataclass(frozen=True)
class LineItem:
    """A cart line at checkout time. The unit price is frozen when added to the cart."""
    sku: str
    quantity: int
    unit_price: Decimal

    def __post_init__(self):
        if not self.sku:
            raise ValueError("Line item SKU is required.")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int) or self.quantity < 1:
            raise ValueError("Line item quantity must be an integer >= 1.")
        price = to_decimal(self.unit_price)
        if not price.is_finite() or price <= 0:
            raise ValueError("Line item unit_price must be a positive number.")
        object.__setattr__(self, 'sku', str(self.sku))
        object.__setattr__(self, 'unit_price', price)

    @property
    def total(self) -> Decimal:
        return round2(self.quantity * self.unit_price)


@dataclass(frozen=True)
class UnitRecord:
    """One physical unit of a line item, used by unit-granular promotions."""
    sku: str
    unit_price: Decimal
    category: Category


@dataclass(frozen=True)
class DiscountLine:
    """A discount applied to an order."""
    code: str
    description: str
    amount: Decimal


@dataclass
class TraceStep:
    """A single step in the pricing resolution trace."""
    step: str
    description: str
    value: Optional[str] = None


@dataclass
class Breakdown:
    """Complete, itemized result of a price calculation."""
    subtotal: Decimal
    discounts: list[DiscountLine]
    total_discount: Decimal
    taxable_base: Decimal
    tax_by_category: dict[str, Decimal]
    total_tax: Decimal
    shipping: Decimal
    grand_total: Decimal
    trace: list[TraceStep] = field(default_factory=list)

    def add_trace(self, step: str, description: str, value: str = None):
        """Add a step to the breakdown trace."""
        self.trace.append(TraceStep(step=step, description=description, value=value))

    def get_trace_text(self) -> str:
        """Get human-readable trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"• {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"• {t.step}: {t.description}")
        return "\n".join(lines)

    def discount_codes(self) -> list[str]:
        return [d.code for d in self.discounts]

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dict; money is rendered as 2-digit strings."""
        return {
            "subtotal": str(self.subtotal),
            "discounts": [
                {"code": d.code, "description": d.description, "amount": str(d.amount)}
                for d in self.discounts
            ],
            "total_discount": str(self.total_discount),
            "taxable_base": str(self.taxable_base),
            "tax_by_category": {k: str(v) for k, v in self.tax_by_category.items()},
            "total_tax": str(self.total_tax),
            "shipping": str(self.shipping),
            "grand_total": str(self.grand_total),
            "trace": [
                {"step": t.step, "description": t.description, "value": t.value}
                for t in self.trace
            ],
        }
