"""
Sales Report - aggregates paid orders.

Only PAID orders are registered; open or cancelled orders are ignored.
"""
from decimal import Decimal

import pandas as pd

from ..catalog import Catalog
from ..checkout.order import Order, OrderStatus
from ..money import ZERO, round2


def _sum_money(values) -> Decimal:
    return sum(values, ZERO)


class SalesReport:
    """Revenue, tax, discount and product rankings over paid orders."""

    def __init__(self, catalog: Catalog):
        if catalog is None:
            raise ValueError("catalog is required for SalesReport.")
        self.catalog = catalog
        self.orders: list[Order] = []

    def register_order(self, order: Order) -> bool:
        """Record `order` if it is PAID. Returns whether it was recorded."""
        if order.status != OrderStatus.PAID:
            return False
        self.orders.append(order)
        return True

    def total_revenue(self) -> Decimal:
        return round2(_sum_money(o.breakdown.grand_total for o in self.orders))

    def total_tax(self) -> Decimal:
        return round2(_sum_money(o.breakdown.total_tax for o in self.orders))

    def total_discount(self) -> Decimal:
        return round2(_sum_money(o.breakdown.total_discount for o in self.orders))

    def items_frame(self) -> pd.DataFrame:
        """One row per sold line: order, sku, category, quantity, line total."""
        rows = [
            {
                'order_id': order.order_id,
                'sku': item.sku,
                'category': self.catalog.get_category(item.sku).value,
                'quantity': item.quantity,
                'line_total': item.total,
            }
            for order in self.orders
            for item in order.items
        ]
        return pd.DataFrame(rows, columns=['order_id', 'sku', 'category', 'quantity', 'line_total'])

    def top_products(self, top_n: int = 5) -> list[dict]:
        """
        Best sellers by units sold, highest first.

        Ties keep the order in which SKUs were first sold.
        """
        if isinstance(top_n, bool) or not isinstance(top_n, int) or top_n < 1:
            raise ValueError("top_n must be an integer >= 1.")
        df = self.items_frame()
        if df.empty:
            return []

        totals = (
            df.groupby('sku', sort=False)['quantity']
            .sum()
            .sort_values(ascending=False, kind='stable')
            .head(top_n)
        )
        return [{"sku": sku, "quantity": int(qty)} for sku, qty in totals.items()]

    def revenue_by_category(self) -> dict[str, Decimal]:
        """Sum of line totals (pre-discount) per product category."""
        df = self.items_frame()
        if df.empty:
            return {}

        totals = df.groupby('category', sort=False)['line_total'].agg(_sum_money)
        return {category: round2(amount) for category, amount in totals.items()}
