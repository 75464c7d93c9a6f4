"""
Cash Register - closes a purchase: validates, prices, takes stock and opens
an order.
"""
import logging
import uuid
from typing import Optional

from ..catalog import Catalog, Inventory
from ..engine import Customer, PriceEngine
from ..errors import EmptyCartError
from .cart import ShoppingCart
from .order import Order

logger = logging.getLogger(__name__)


def new_order_id() -> str:
    return f"PED-{uuid.uuid4().hex[:12].upper()}"


class CashRegister:
    """Checkout counter wiring catalog, inventory and the price engine together."""

    def __init__(self, catalog: Catalog, inventory: Inventory, engine: PriceEngine):
        self.catalog = catalog
        self.inventory = inventory
        self.engine = engine

    def checkout(
        self,
        customer: Customer,
        cart: ShoppingCart,
        coupon_code: Optional[str] = None,
        installments: int = 1,
    ) -> Order:
        """
        Close the purchase and return an OPEN order.

        Every check and the price calculation happen before any stock is
        removed, so a failure leaves inventory untouched.
        """
        items = cart.list_items()
        if not items:
            raise EmptyCartError("The cart is empty. Add items before checking out.")
        if isinstance(installments, bool) or not isinstance(installments, int) or installments < 1:
            raise ValueError("installments must be an integer >= 1.")

        for item in items:
            self.catalog.get_product(item.sku).installment_value(installments)
            self.inventory.ensure_available(item.sku, item.quantity)

        breakdown = self.engine.calculate(customer, items, coupon_code)

        for item in items:
            self.inventory.remove(item.sku, item.quantity)

        order = Order(
            order_id=new_order_id(),
            customer_id=customer.customer_id,
            items=items,
            breakdown=breakdown,
        )
        logger.info(
            "Order %s opened for customer %s: %s in %d installment(s)",
            order.order_id, customer.customer_id, order.total, installments,
        )
        return order
