"""
Coupon codes recognized at checkout.

A coupon string is validated once, at the start of a calculation; the rest of
the engine only ever sees a `Coupon` member or None.
"""
from enum import Enum
from typing import Optional

from ..errors import InvalidCouponError


class Coupon(str, Enum):
    ETIC10 = "ETIC10"            # 10% off
    FRETEGRATIS = "FRETEGRATIS"  # free shipping
    SEM_VIP = "SEM-VIP"          # suppresses the VIP discount


def parse_coupon(code: Optional[str]) -> Optional[Coupon]:
    """
    Resolve a coupon string.

    None and "" mean no coupon. Codes are matched exactly (case-sensitive);
    anything unrecognized raises InvalidCouponError.
    """
    if code is None or code == "":
        return None
    if isinstance(code, Coupon):
        return code
    try:
        return Coupon(code)
    except ValueError:
        raise InvalidCouponError(str(code)) from None


def recognized_codes() -> list[str]:
    return [c.value for c in Coupon]
