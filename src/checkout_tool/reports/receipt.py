"""
Receipt rendering for placed orders.
"""
from typing import Iterable, Optional

from ..checkout.order import Order
from ..money import round2


def format_brl(value) -> str:
    """Format as Brazilian currency text, e.g. 'R$ 230,33'."""
    return f"R$ {round2(value):.2f}".replace(".", ",")


class Receipt:
    """Text receipt for an order, one string per printed line."""

    def __init__(self, order: Order):
        self.order = order

    def lines(self) -> list[str]:
        order = self.order
        b = order.breakdown
        lines = [
            "=== RECEIPT ===",
            f"Order: {order.order_id}",
            f"Customer: {order.customer_id}",
            "--- Items ---",
        ]
        for item in order.items:
            lines.append(
                f"{item.sku} | Qty: {item.quantity} | Unit: {format_brl(item.unit_price)} "
                f"| Total: {format_brl(item.total)}"
            )

        lines.append("--- Totals ---")
        lines.append(f"Subtotal: {format_brl(b.subtotal)}")
        if b.discounts:
            lines.append("Discounts:")
            for discount in b.discounts:
                lines.append(f"- {discount.code} ({discount.description}): -{format_brl(discount.amount)}")
        else:
            lines.append("Discounts: none")
        lines.append(f"Total Discounts: -{format_brl(b.total_discount)}")
        lines.append("Tax by category:")
        for category, amount in b.tax_by_category.items():
            lines.append(f"- {category}: {format_brl(amount)}")
        lines.append(f"Total Tax: {format_brl(b.total_tax)}")
        lines.append(f"Shipping: {format_brl(b.shipping)}")
        lines.append(f"Grand Total: {format_brl(b.grand_total)}")
        lines.append(f"Status: {order.status.value}")
        return lines

    def text(self) -> str:
        return "\n".join(self.lines())


def print_lines(lines: Optional[Iterable[str]]):
    """Print receipt lines to stdout."""
    for line in lines or []:
        print(line)
