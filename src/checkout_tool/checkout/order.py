"""
Order - the result of a successful checkout and its status lifecycle.
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum

from ..engine.models import Breakdown, LineItem
from ..errors import OrderStateError


class OrderStatus(str, Enum):
    OPEN = "OPEN"
    PAID = "PAID"
    CANCELLED = "CANCELLED"


@dataclass
class Order:
    """
    A placed order. Starts OPEN; can be paid (OPEN → PAID) or cancelled
    (OPEN → CANCELLED). Paid orders cannot be cancelled here, that would be a
    refund.
    """
    order_id: str
    customer_id: str
    items: list[LineItem]
    breakdown: Breakdown
    status: OrderStatus = OrderStatus.OPEN
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def total(self) -> Decimal:
        return self.breakdown.grand_total

    def pay(self):
        if self.status != OrderStatus.OPEN:
            raise OrderStateError(
                f"Order {self.order_id} cannot be paid. Current status: {self.status.value}"
            )
        self.status = OrderStatus.PAID

    def cancel(self):
        if self.status == OrderStatus.PAID:
            raise OrderStateError(f"Order {self.order_id} is already PAID and cannot be cancelled.")
        if self.status == OrderStatus.CANCELLED:
            raise OrderStateError(f"Order {self.order_id} is already cancelled.")
        self.status = OrderStatus.CANCELLED

    def summary(self) -> dict:
        """Short view of the order: id, total, status and ISO creation time."""
        return {
            "id": self.order_id,
            "total": self.total,
            "status": self.status.value,
            "created_at": self.created_at.isoformat(),
        }
