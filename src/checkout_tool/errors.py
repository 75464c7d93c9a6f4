"""
Error hierarchy for the checkout tool.

Every error carries enough context (SKU, coupon, quantities) to render a
user-facing message. Nothing here is retried internally.
"""


class CheckoutError(ValueError):
    """Base class for all checkout errors."""


class PricingError(CheckoutError):
    """A price calculation could not be completed."""


class EmptyCartError(PricingError):
    """Pricing was requested for a cart with no line items."""

    def __init__(self, message: str = "Cannot price an empty cart."):
        super().__init__(message)


class InvalidCouponError(PricingError):
    """A coupon code was supplied but is not recognized."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Invalid coupon: {code}")


class UnknownSkuError(CheckoutError):
    """A SKU is not registered in the catalog."""

    def __init__(self, sku: str):
        self.sku = sku
        super().__init__(f"Product with SKU {sku} not found in catalog.")


class InsufficientStockError(CheckoutError):
    """Not enough units on hand to satisfy a request."""

    def __init__(self, sku: str, available: int, requested: int):
        self.sku = sku
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient stock for SKU {sku}. "
            f"Available: {available}, requested: {requested}."
        )


class ItemNotInCartError(CheckoutError):
    def __init__(self, sku: str):
        self.sku = sku
        super().__init__(f"Item with SKU {sku} not found in cart.")


class OrderStateError(CheckoutError):
    """An order status transition is not allowed from its current status."""
