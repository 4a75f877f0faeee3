"""Domain service: Pricing Engine.

Turns order lines and an optional discount code into a total. Every
step uses Decimal arithmetic; rounding to cents happens exactly once,
on the final amount.
"""

from __future__ import annotations

from collections.abc import Iterable

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import OrderLine
from storefront.domain.model.value_objects import Money

# Percentage off the subtotal, keyed by code. Codes are case-sensitive.
DISCOUNT_CODES: dict[str, int] = {
    "SAVE10": 10,
    "SAVE20": 20,
}


class PricingEngine:
    """Stateless; one instance can be shared by every request."""

    def __init__(self, discount_codes: dict[str, int] | None = None) -> None:
        codes = dict(DISCOUNT_CODES if discount_codes is None else discount_codes)
        for code, percent in codes.items():
            if isinstance(percent, bool) or not isinstance(percent, int) or not 0 <= percent <= 100:
                raise ValidationError(
                    f"Discount for {code!r} must be a whole percentage between 0 and 100, got {percent!r}"
                )
        self._discount_codes = codes

    def compute_subtotal(self, lines: Iterable[OrderLine]) -> Money:
        subtotal = Money.zero()
        for line in lines:
            subtotal = subtotal + line.line_total
        return subtotal

    def compute_discount(self, subtotal: Money, discount_code: str | None) -> Money:
        """Deduction for ``discount_code``; unknown or missing codes give zero."""
        percent = self._discount_codes.get(discount_code) if discount_code else None
        if percent is None:
            return Money.zero()
        return subtotal.percentage(percent)

    def compute_total(self, subtotal: Money, discount: Money) -> Money:
        return (subtotal - discount).rounded()

    def price(self, lines: Iterable[OrderLine], discount_code: str | None) -> Money:
        subtotal = self.compute_subtotal(lines)
        discount = self.compute_discount(subtotal, discount_code)
        return self.compute_total(subtotal, discount)

    def is_known_code(self, discount_code: str | None) -> bool:
        return bool(discount_code) and discount_code in self._discount_codes
