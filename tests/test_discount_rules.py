"""
Each pipeline rule tested against a hand-built prior state.
"""
from decimal import Decimal

import pytest

from checkout_tool.catalog import Category
from checkout_tool.engine.coupons import Coupon, parse_coupon, recognized_codes
from checkout_tool.engine.discount_rules import (
    DISCOUNT_PIPELINE,
    PricingState,
    apply_buy_three_pay_two,
    apply_coupon_effect,
    apply_threshold_discount,
    apply_vip_discount,
    run_pipeline,
)
from checkout_tool.engine.models import CustomerType, UnitRecord
from checkout_tool.errors import InvalidCouponError


def units(*specs):
    """Build unit records from (sku, price, category) tuples."""
    return tuple(UnitRecord(sku=s, unit_price=Decimal(p), category=c) for s, p, c in specs)


def state(subtotal="100.00", customer_type=CustomerType.REGULAR, coupon=None, unit_records=(), discount="0"):
    return PricingState(
        subtotal=Decimal(subtotal),
        customer_type=customer_type,
        coupon=coupon,
        units=unit_records,
        running_discount=Decimal(discount),
    )


APPAREL = Category.APPAREL


def test_pipeline_order_is_fixed():
    assert DISCOUNT_PIPELINE == (
        apply_buy_three_pay_two,
        apply_vip_discount,
        apply_coupon_effect,
        apply_threshold_discount,
    )


def test_buy_three_pay_two_frees_cheapest_unit():
    records = units(
        ("CAMISETA", "30", APPAREL),
        ("CAMISETA", "30", APPAREL),
        ("MEIA", "10", APPAREL),
        ("CALCA", "120", APPAREL),
    )
    new_state, line = apply_buy_three_pay_two(state("190.00", unit_records=records))

    assert line.code == "L3P2"
    assert line.amount == Decimal("10.00")
    assert new_state.running_discount == Decimal("10")
    assert new_state.remaining == Decimal("180.00")


def test_buy_three_pay_two_pools_across_skus_and_counts_groups():
    # 6 apparel units -> 2 free: the two cheapest (5 and 8)
    records = units(
        ("A", "50", APPAREL), ("B", "8", APPAREL), ("C", "40", APPAREL),
        ("D", "5", APPAREL), ("E", "60", APPAREL), ("F", "20", APPAREL),
    )
    _, line = apply_buy_three_pay_two(state("183.00", unit_records=records))
    assert line.amount == Decimal("13.00")


def test_buy_three_pay_two_ignores_other_categories():
    records = units(
        ("MEIA", "10", APPAREL),
        ("MEIA", "10", APPAREL),
        ("ARROZ", "6", Category.FOOD),
    )
    new_state, line = apply_buy_three_pay_two(state("26.00", unit_records=records))
    assert line is None
    assert new_state.running_discount == 0


def test_vip_discount_applies_to_remaining_amount():
    new_state, line = apply_vip_discount(state("190.00", CustomerType.VIP, discount="10"))
    assert line.code == "VIP5"
    assert line.amount == Decimal("9.00")
    assert new_state.running_discount == Decimal("19.00")


def test_vip_discount_skipped_for_regular_and_sem_vip():
    _, line = apply_vip_discount(state(customer_type=CustomerType.REGULAR))
    assert line is None
    _, line = apply_vip_discount(state(customer_type=CustomerType.VIP, coupon=Coupon.SEM_VIP))
    assert line is None


def test_vip_running_discount_keeps_full_precision():
    new_state, line = apply_vip_discount(state("95.90", CustomerType.VIP))
    assert line.amount == Decimal("4.80")
    assert new_state.running_discount == Decimal("4.795")


def test_etic10_coupon_effect():
    new_state, line = apply_coupon_effect(state("190.00", coupon=Coupon.ETIC10, discount="19"))
    assert line.code == "ETIC10"
    assert line.amount == Decimal("17.10")
    assert new_state.shipping == Decimal("20.00")


def test_free_shipping_coupon_effect():
    new_state, line = apply_coupon_effect(state(coupon=Coupon.FRETEGRATIS))
    assert line.code == "FRETEGRATIS"
    assert line.amount == Decimal("0.00")
    assert new_state.shipping == 0
    assert new_state.running_discount == 0


@pytest.mark.parametrize("coupon", [None, Coupon.SEM_VIP])
def test_no_coupon_line_without_effect(coupon):
    new_state, line = apply_coupon_effect(state(coupon=coupon))
    assert line is None
    assert new_state.shipping == Decimal("20.00")


def test_threshold_discount():
    new_state, line = apply_threshold_discount(state("520.00"))
    assert line.code == "FIXO30"
    assert line.amount == Decimal("30.00")
    assert new_state.remaining == Decimal("490.00")

    _, line = apply_threshold_discount(state("520.00", discount="20.01"))
    assert line is None


def test_run_pipeline_collects_lines_in_application_order():
    records = units(("A", "200", APPAREL), ("B", "200", APPAREL), ("C", "200", APPAREL))
    result = run_pipeline(state("600.00", CustomerType.VIP, Coupon.ETIC10, records))

    # 600 - 200 = 400; VIP 20 -> 380; ETIC10 38 -> 342; below threshold
    assert [d.code for d in result.discounts] == ["L3P2", "VIP5", "ETIC10"]
    assert [d.amount for d in result.discounts] == [Decimal("200.00"), Decimal("20.00"), Decimal("38.00")]
    assert result.remaining == Decimal("342.00")


def test_parse_coupon():
    assert parse_coupon(None) is None
    assert parse_coupon("") is None
    assert parse_coupon("ETIC10") is Coupon.ETIC10
    assert parse_coupon("SEM-VIP") is Coupon.SEM_VIP
    assert recognized_codes() == ["ETIC10", "FRETEGRATIS", "SEM-VIP"]

    with pytest.raises(InvalidCouponError) as exc:
        parse_coupon("FRETE")
    assert exc.value.code == "FRETE"
