"""Price reconciliation between the catalogue and client price snapshots."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from marketplace.shared.numbers import is_finite, round_half_up


class PricingError(Exception):
    """The cart cannot be priced."""


@dataclass(frozen=True)
class PricedLine:
    product_id: str
    quantity: int
    unit_price: float

    @property
    def line_total(self) -> float:
        return self.unit_price * self.quantity


def effective_quantity(quantity) -> int:
    """Normalized quantity when it is a finite positive whole number, else 1."""
    if is_finite(quantity) and quantity > 0 and float(quantity).is_integer():
        return int(quantity)
    return 1


def charged_unit_price(product_id: str, price_snapshot, catalogue_prices: Mapping) -> float:
    """Catalogue price wins; a finite snapshot is next; otherwise zero.

    Negative snapshots are charged as sent. Only the order total is floored.
    """
    catalogue_price = catalogue_prices.get(product_id) if product_id else None
    if is_finite(catalogue_price):
        return float(catalogue_price)
    if is_finite(price_snapshot):
        return float(price_snapshot)
    return 0.0


def resolve_lines(items: Iterable, catalogue_prices: Mapping) -> list[PricedLine]:
    return [
        PricedLine(
            product_id=item.product_id,
            quantity=effective_quantity(item.quantity),
            unit_price=charged_unit_price(item.product_id, item.price_snapshot, catalogue_prices),
        )
        for item in items
    ]


def order_total(line_totals: Iterable[float]) -> int:
    """Sum of line totals rounded half-up to an integer, never below zero.

    Raises:
        PricingError: the sum is not a finite number.
    """
    total = sum(line_totals)
    if not is_finite(total):
        raise PricingError("Order total is out of range")
    return max(0, round_half_up(total))
