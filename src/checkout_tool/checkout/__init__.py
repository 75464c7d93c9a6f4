"""Checkout subpackage - cart, orders and the cash register."""
from .cart import ShoppingCart
from .order import Order, OrderStatus
from .register import CashRegister

__all__ = ['ShoppingCart', 'Order', 'OrderStatus', 'CashRegister']
