"""
Discount Rules - the fixed, ordered promotion pipeline.

Each rule is a pure function `(PricingState) -> (PricingState, DiscountLine | None)`.
`run_pipeline` folds the state through DISCOUNT_PIPELINE in order. Every rule
works on the amount left after the rules before it (compounding, not
independent percentages of the original subtotal), so the order is part of
the pricing contract.
"""
from dataclasses import dataclass, replace
from decimal import Decimal
from functools import reduce
from typing import Callable, Optional

from ..catalog.models import Category
from ..money import ZERO, round2
from .coupons import Coupon
from .models import CustomerType, DiscountLine, UnitRecord

DEFAULT_SHIPPING = Decimal("20.00")
VIP_RATE = Decimal("0.05")
ETIC10_RATE = Decimal("0.10")
FIXED_DISCOUNT_THRESHOLD = Decimal("500")
FIXED_DISCOUNT_AMOUNT = Decimal("30.00")
BUNDLE_SIZE = 3


@dataclass(frozen=True)
class PricingState:
    """
    Accumulator threaded through the pipeline.

    `running_discount` keeps full precision; only the emitted DiscountLine
    amounts are rounded.
    """
    subtotal: Decimal
    customer_type: CustomerType
    coupon: Optional[Coupon]
    units: tuple[UnitRecord, ...]
    running_discount: Decimal = ZERO
    shipping: Decimal = DEFAULT_SHIPPING
    discounts: tuple[DiscountLine, ...] = ()

    @property
    def remaining(self) -> Decimal:
        """Subtotal minus everything discounted so far."""
        return self.subtotal - self.running_discount

    def with_discount(self, amount: Decimal) -> 'PricingState':
        return replace(self, running_discount=self.running_discount + amount)


RuleResult = tuple[PricingState, Optional[DiscountLine]]
Rule = Callable[[PricingState], RuleResult]


def apply_buy_three_pay_two(state: PricingState) -> RuleResult:
    """
    L3P2: for every 3 apparel units the cheapest one is free.

    All apparel units are pooled across SKUs and sorted by price (sorted() is
    stable, so equal prices keep line order); the floor(n/3) cheapest are free.
    """
    apparel = sorted(
        (u for u in state.units if u.category == Category.APPAREL),
        key=lambda u: u.unit_price,
    )
    free_units = len(apparel) // BUNDLE_SIZE
    if free_units == 0:
        return state, None

    amount = sum((u.unit_price for u in apparel[:free_units]), ZERO)
    line = DiscountLine(code="L3P2", description="Buy 3 pay 2 (apparel)", amount=round2(amount))
    return state.with_discount(amount), line


def apply_vip_discount(state: PricingState) -> RuleResult:
    """VIP5: 5% for VIP customers unless the SEM-VIP coupon is present."""
    if state.customer_type != CustomerType.VIP or state.coupon == Coupon.SEM_VIP:
        return state, None

    amount = state.remaining * VIP_RATE
    line = DiscountLine(code="VIP5", description="VIP customer discount", amount=round2(amount))
    return state.with_discount(amount), line


def apply_coupon_effect(state: PricingState) -> RuleResult:
    """
    ETIC10 takes 10% of what is left; FRETEGRATIS zeroes shipping and emits a
    zero-amount line so the benefit shows on the receipt. SEM-VIP has no line.
    """
    if state.coupon == Coupon.ETIC10:
        amount = state.remaining * ETIC10_RATE
        line = DiscountLine(code="ETIC10", description="10% off coupon", amount=round2(amount))
        return state.with_discount(amount), line

    if state.coupon == Coupon.FRETEGRATIS:
        line = DiscountLine(code="FRETEGRATIS", description="Free shipping", amount=round2(ZERO))
        return replace(state, shipping=ZERO), line

    return state, None


def apply_threshold_discount(state: PricingState) -> RuleResult:
    """FIXO30: flat 30.00 off when at least 500 remains after the percentage discounts."""
    if state.remaining < FIXED_DISCOUNT_THRESHOLD:
        return state, None

    line = DiscountLine(
        code="FIXO30",
        description="Fixed discount on orders of 500 or more",
        amount=FIXED_DISCOUNT_AMOUNT,
    )
    return state.with_discount(FIXED_DISCOUNT_AMOUNT), line


DISCOUNT_PIPELINE: tuple[Rule, ...] = (
    apply_buy_three_pay_two,
    apply_vip_discount,
    apply_coupon_effect,
    apply_threshold_discount,
)


def _apply_rule(state: PricingState, rule: Rule) -> PricingState:
    new_state, line = rule(state)
    if line is None:
        return new_state
    return replace(new_state, discounts=new_state.discounts + (line,))


def run_pipeline(state: PricingState) -> PricingState:
    """Fold `state` through DISCOUNT_PIPELINE in order, collecting triggered discount lines."""
    return reduce(_apply_rule, DISCOUNT_PIPELINE, state)
