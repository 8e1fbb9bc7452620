"""Product aggregate.

Products live independently of carts and orders. They have their own
lifecycle: prices change, products are added and removed from the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.value_objects import MAX_PRICE, Money


def _clean_name(name: object) -> str:
    trimmed = name.strip() if isinstance(name, str) else ""
    if not trimmed:
        raise ValidationError("Product name is required")
    return trimmed


def _clean_price(price: str | float | int) -> Money:
    money = Money.of(price)
    if money.amount > MAX_PRICE:
        raise ValidationError(f"Product price cannot exceed {MAX_PRICE}")
    return money


@dataclass
class Product:
    """A product in the catalog.

    The catalog is the source of truth for pricing. Carts price against it
    on every read; orders copy the price out of it at checkout.
    """

    id: int | None
    name: str
    price: Money

    @staticmethod
    def create(name: str, price: str | float | int) -> Product:
        """Build a new, not yet persisted product."""
        return Product(id=None, name=_clean_name(name), price=_clean_price(price))

    def update(
        self,
        name: str | None = None,
        price: str | float | int | None = None,
    ) -> None:
        """Apply a partial update; omitted fields keep their value.

        Both fields are validated before either is assigned. Existing
        orders are unaffected because they froze their own copy.
        """
        new_name = self.name if name is None else _clean_name(name)
        new_price = self.price if price is None else _clean_price(price)
        self.name = new_name
        self.price = new_price
