#!/usr/bin/env python
"""
Walk through the checkout scenarios end to end and print receipts and the
sales report.

Usage:
    python scripts/run_demo.py
"""
import logging

from checkout_tool.checkout import CashRegister, ShoppingCart
from checkout_tool.data.load_store import load_store
from checkout_tool.engine import Customer, PriceEngine
from checkout_tool.errors import CheckoutError
from checkout_tool.reports import Receipt, SalesReport, format_brl, print_lines


def main():
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    catalog, inventory, _ = load_store(verbose=True)
    engine = PriceEngine(catalog)
    register = CashRegister(catalog, inventory, engine)
    report = SalesReport(catalog)

    vip = Customer(customer_id="C1", name="Ana", customer_type="VIP")
    regular = Customer(customer_id="C2", name="Bruno", customer_type="REGULAR")

    print()
    print("[A] VIP apparel order")
    cart = ShoppingCart(catalog, inventory)
    cart.add_item("CAMISETA", 2)
    cart.add_item("MEIA", 1)
    cart.add_item("CALCA", 1)
    order = register.checkout(vip, cart, coupon_code=None, installments=3)
    order.pay()
    report.register_order(order)
    print_lines(Receipt(order).lines())

    print()
    print("[B] Regular order with ETIC10")
    cart = ShoppingCart(catalog, inventory)
    cart.add_item("MICRO", 1)
    cart.add_item("VASO", 1)
    order = register.checkout(regular, cart, coupon_code="ETIC10", installments=5)
    order.pay()
    report.register_order(order)
    print_lines(Receipt(order).lines())

    print()
    print("[C] Invalid coupon")
    cart = ShoppingCart(catalog, inventory)
    cart.add_item("ARROZ", 1)
    try:
        register.checkout(regular, cart, coupon_code="INVALIDO")
    except CheckoutError as e:
        print(f"(OK) Invalid coupon rejected: {e}")

    print()
    print("[D] Insufficient stock")
    cart = ShoppingCart(catalog, inventory)
    try:
        cart.add_item("MICRO", 999)
    except CheckoutError as e:
        print(f"(OK) Insufficient stock rejected: {e}")

    print()
    print("=" * 60)
    print("SALES REPORT")
    print("=" * 60)
    print(f"Total revenue:   {format_brl(report.total_revenue())}")
    print(f"Total tax:       {format_brl(report.total_tax())}")
    print(f"Total discounts: {format_brl(report.total_discount())}")
    print(f"Top products:    {report.top_products(3)}")
    print("By category:")
    for category, amount in report.revenue_by_category().items():
        print(f"  {category}: {format_brl(amount)}")


if __name__ == "__main__":
    main()
