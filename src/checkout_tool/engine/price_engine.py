"""
Price Engine - turns a customer, cart line items and an optional coupon into
a fully itemized Breakdown.

Calculation order:
1. Reject empty carts, validate the coupon
2. Subtotal from frozen unit prices; expand lines into unit records
3. Fold the discount pipeline (L3P2 → VIP5 → coupon → FIXO30)
4. Clamp the discount, allocate tax per line item proportionally
5. Assemble the breakdown (shipping, grand total) with a trace of every step

The engine holds no mutable state and never writes to the catalog, so one
instance can be shared across callers.
"""
import logging
from collections.abc import Mapping, Sequence
from decimal import ROUND_DOWN, Decimal
from typing import Optional

from ..catalog.models import TAX_RATES, Category
from ..errors import EmptyCartError
from ..money import CENT, ZERO, round2
from .coupons import parse_coupon
from .discount_rules import PricingState, run_pipeline
from .models import Breakdown, Customer, LineItem, ProductLookup, UnitRecord

logger = logging.getLogger(__name__)


class PriceEngine:
    """
    Deterministic pricing and discount engine.

    Only depends on a read-only `ProductLookup` for SKU → category and on the
    category tax table.
    """

    def __init__(self, catalog: ProductLookup, tax_rates: Optional[Mapping[Category, Decimal]] = None):
        self.catalog = catalog
        self.tax_rates = dict(tax_rates) if tax_rates is not None else dict(TAX_RATES)

    def calculate(
        self,
        customer: Customer,
        line_items: Sequence[LineItem],
        coupon_code: Optional[str] = None,
    ) -> Breakdown:
        """
        Price a checkout attempt.

        Args:
            customer: Customer whose classification drives the VIP rule
            line_items: Ordered cart lines with frozen unit prices
            coupon_code: Optional coupon string

        Returns:
            Breakdown with discounts in application order

        Raises:
            EmptyCartError: no line items
            InvalidCouponError: unrecognized coupon code
            UnknownSkuError: a line references a SKU the catalog cannot resolve
        """
        items = list(line_items)
        if not items:
            raise EmptyCartError()

        coupon = parse_coupon(coupon_code)

        # Subtotal and unit expansion
        subtotal = round2(sum((item.total for item in items), ZERO))
        categories = [self.catalog.get_category(item.sku) for item in items]
        units = self._expand_units(items, categories)

        # Discount pipeline
        state = run_pipeline(PricingState(
            subtotal=subtotal,
            customer_type=customer.customer_type,
            coupon=coupon,
            units=units,
        ))

        # Clamp so stacked discounts never push the taxable base below zero.
        # subtotal is on the cent grid, so rounding after the clamp keeps the bound.
        total_discount = round2(min(state.running_discount, subtotal))
        taxable_base = subtotal - total_discount

        tax_by_category, total_tax = self._allocate_tax(items, categories, subtotal, taxable_base)

        breakdown = Breakdown(
            subtotal=subtotal,
            discounts=list(state.discounts),
            total_discount=total_discount,
            taxable_base=taxable_base,
            tax_by_category=tax_by_category,
            total_tax=total_tax,
            shipping=round2(state.shipping),
            grand_total=ZERO,
        )
        breakdown.grand_total = round2(breakdown.taxable_base + breakdown.total_tax + breakdown.shipping)

        self._record_trace(breakdown, customer, coupon_code, items, units)
        logger.debug(
            "Priced %d line(s) for customer %s: total %s",
            len(items), customer.customer_id, breakdown.grand_total,
        )
        return breakdown

    def _expand_units(self, items: list[LineItem], categories: list[Category]) -> tuple[UnitRecord, ...]:
        """One UnitRecord per physical unit, in line order."""
        units = []
        for item, category in zip(items, categories):
            units.extend(
                UnitRecord(sku=item.sku, unit_price=item.unit_price, category=category)
                for _ in range(item.quantity)
            )
        return tuple(units)

    def _allocate_tax(
        self,
        items: list[LineItem],
        categories: list[Category],
        subtotal: Decimal,
        taxable_base: Decimal,
    ) -> tuple[dict[str, Decimal], Decimal]:
        """
        Allocate tax per line item by its share of the pre-discount subtotal.

        Per-category sums stay unrounded while accumulating. The total is
        rounded once, and the category amounts are then rounded to cents by
        largest remainder so they add up to exactly that total.
        """
        running: dict[str, Decimal] = {}
        total_tax = ZERO

        for item, category in zip(items, categories):
            rate = self.tax_rates.get(category, ZERO)
            share = item.total / subtotal
            item_tax = taxable_base * share * rate

            running[category.value] = running.get(category.value, ZERO) + item_tax
            total_tax += item_tax

        total_tax = round2(total_tax)
        return _reconcile_cents(running, total_tax), total_tax

    def _record_trace(self, breakdown: Breakdown, customer: Customer, coupon_code, items, units):
        breakdown.add_trace("Customer", f"Customer {customer.customer_id}", customer.customer_type.value)
        breakdown.add_trace("Coupon", "Coupon code", coupon_code or None)
        breakdown.add_trace(
            "Subtotal",
            f"{len(items)} line(s), {len(units)} unit(s) at frozen prices",
            f"{breakdown.subtotal:.2f}",
        )
        for line in breakdown.discounts:
            breakdown.add_trace("Discount", f"{line.code} ({line.description})", f"-{line.amount:.2f}")
        breakdown.add_trace("Taxable Base", "Subtotal minus clamped discounts", f"{breakdown.taxable_base:.2f}")
        for category, amount in breakdown.tax_by_category.items():
            breakdown.add_trace("Tax", f"Category {category}", f"{amount:.2f}")
        breakdown.add_trace("Shipping", "Shipping fee", f"{breakdown.shipping:.2f}")
        breakdown.add_trace("Total", "Grand total", f"{breakdown.grand_total:.2f}")


def _reconcile_cents(amounts: dict[str, Decimal], total: Decimal) -> dict[str, Decimal]:
    """
    Round each amount down to the cent, then hand the cents still missing
    from `total` to the amounts with the largest remainders (ties keep
    insertion order).
    """
    floored = {key: value.quantize(CENT, rounding=ROUND_DOWN) for key, value in amounts.items()}
    missing = int((total - sum(floored.values(), ZERO)) / CENT)

    by_remainder = sorted(amounts, key=lambda key: amounts[key] - floored[key], reverse=True)
    for key in by_remainder[:missing]:
        floored[key] += CENT
    return floored
