"""Engine subpackage - core pricing and discount logic."""
from .price_engine import PriceEngine
from .models import Breakdown, Customer, CustomerType, DiscountLine, LineItem
from .coupons import Coupon, parse_coupon

__all__ = [
    'PriceEngine', 'Breakdown', 'Customer', 'CustomerType', 'DiscountLine',
    'LineItem', 'Coupon', 'parse_coupon',
]
